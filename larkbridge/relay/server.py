"""FastAPI server relaying Linear webhooks to Lark."""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Dict, Optional

import httpx
from fastapi import FastAPI, HTTPException, Request

from ..common import (
    MalformedPayloadError,
    log_error,
    log_server_message,
    verify_hmac_signature,
)
from ..models import parse_event
from .config import RelayConfig
from .delivery import Failed, LarkClient, Sent
from .transform import Skip, classify

SIGNATURE_HEADER = "linear-signature"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayContext:
    """Process-wide state shared by every request."""

    config: RelayConfig
    lark: LarkClient


def create_app(config: RelayConfig, http_client: Optional[httpx.AsyncClient] = None) -> FastAPI:
    """Build the relay application.

    A client created here is closed on shutdown; a client passed in belongs
    to the caller.
    """
    owns_client = http_client is None
    if http_client is None:
        http_client = httpx.AsyncClient(timeout=config.delivery_timeout)

    context = RelayContext(
        config=config,
        lark=LarkClient(config.lark_webhook_url, http_client, timeout=config.delivery_timeout),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_server_message("Server starting up")
        log_server_message(f"Webhook endpoint: {config.webhook_endpoint}")
        log_server_message("Health check: /health")
        if not config.lark_webhook_url:
            logger.warning("LARK_WEBHOOK_URL not set - Lark notifications will fail")
        log_server_message("Server ready")
        try:
            yield
        finally:
            log_server_message("Server shutting down")
            if owns_client:
                await http_client.aclose()

    app = FastAPI(title="Linear Lark Bridge", version="1.0.0", lifespan=lifespan)

    @app.get("/health")
    async def health_check() -> Dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    @app.post(config.webhook_endpoint)
    async def linear_webhook(request: Request) -> Dict[str, str]:
        """Authenticate, filter and relay one Linear webhook."""
        # Signature is computed over the raw bytes, before any parsing
        body = await request.body()

        signature = request.headers.get(SIGNATURE_HEADER)
        if not signature:
            logger.warning(f"Missing {SIGNATURE_HEADER} header")
            raise HTTPException(status_code=401, detail="Missing signature")

        if not verify_hmac_signature(body, signature, context.config.webhook_secret):
            logger.warning("Invalid webhook signature")
            raise HTTPException(status_code=401, detail="Invalid signature")

        try:
            event = parse_event(body)
        except MalformedPayloadError as e:
            logger.error(f"Failed to parse payload: {e}")
            raise HTTPException(status_code=400, detail="Malformed payload")

        result = classify(event)
        if isinstance(result, Skip):
            logger.info(
                f"Ignoring event: type={event.kind}, action={event.action} ({result.reason})"
            )
            return {"status": "ignored"}

        logger.info(f"Processing {event.action} {event.identifier} - {event.issue.title}")

        outcome = await context.lark.deliver(result.message)
        if isinstance(outcome, Failed):
            log_error(
                f"Delivery failed for {event.identifier} ({event.action}): {outcome.error}",
                log_dir=context.config.log_dir,
            )
        elif isinstance(outcome, Sent) and not outcome.ok:
            log_error(
                f"Delivery rejected for {event.identifier} ({event.action}): "
                f"HTTP {outcome.status_code}",
                outcome.body,
                log_dir=context.config.log_dir,
            )
        elif isinstance(outcome, Sent) and outcome.rejected:
            log_error(
                f"Delivery rejected for {event.identifier} ({event.action}): "
                f"Lark code {outcome.lark_code}",
                outcome.body,
                log_dir=context.config.log_dir,
            )

        return {"status": "accepted"}

    return app


def create_app_from_env() -> FastAPI:
    """Application factory for ``uvicorn --factory``."""
    return create_app(RelayConfig.from_env())
