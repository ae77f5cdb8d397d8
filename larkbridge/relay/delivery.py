"""Lark custom bot webhook client."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

import httpx

from ..models import LarkMessage

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Sent:
    """Lark answered; ``status_code`` may still be an error."""

    status_code: int
    body: str
    lark_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def rejected(self) -> bool:
        """Lark accepted the request but refused the message (bad card, rate limit)."""
        return self.ok and self.lark_code not in (None, 0)


@dataclass(frozen=True)
class Failed:
    """The request never produced a response."""

    error: str


DeliveryOutcome = Union[Sent, Failed]


class LarkClient:
    """Posts card messages to one Lark webhook URL.

    Each call is a single attempt with no retry. Errors are reported through
    the returned outcome and logged, never raised.
    """

    def __init__(
        self,
        webhook_url: str,
        http_client: httpx.AsyncClient,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        self.webhook_url = webhook_url
        self.http_client = http_client
        self.timeout = timeout

    async def deliver(self, message: LarkMessage) -> DeliveryOutcome:
        """Send ``message`` to the configured webhook URL."""
        if not self.webhook_url:
            logger.error("Lark webhook URL is not configured, dropping notification")
            return Failed(error="Lark webhook URL is not configured")

        try:
            response = await self.http_client.post(
                self.webhook_url,
                json=message.to_payload(),
                timeout=self.timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to send Lark notification: {e!r}")
            return Failed(error=str(e) or type(e).__name__)

        outcome = Sent(
            status_code=response.status_code,
            body=response.text,
            lark_code=_lark_error_code(response),
        )
        if not outcome.ok:
            logger.error(f"Lark returned {outcome.status_code}: {outcome.body}")
        elif outcome.rejected:
            # Lark reports bot errors inside a 200 body
            logger.error(f"Lark rejected notification (code {outcome.lark_code}): {outcome.body}")
        else:
            logger.info(f"Lark notification sent: {outcome.body}")
        return outcome


def _lark_error_code(response: httpx.Response) -> Optional[int]:
    try:
        data = response.json()
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    code = data.get("code", data.get("StatusCode"))
    return code if isinstance(code, int) else None
