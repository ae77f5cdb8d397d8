"""Configuration for the Linear to Lark relay."""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

from ..common.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class RelayConfig:
    """Configuration for the relay. Read-only once the server starts."""

    # Webhook settings
    webhook_secret: str = field(repr=False)
    lark_webhook_url: str = ""
    webhook_endpoint: str = "/webhook"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000

    # Delivery
    delivery_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """Create configuration from environment variables.

        Raises:
            ConfigurationError: ``LINEAR_WEBHOOK_SECRET`` is unset or a
                numeric setting cannot be parsed.
        """
        webhook_secret = os.getenv("LINEAR_WEBHOOK_SECRET", "")
        if not webhook_secret:
            raise ConfigurationError("LINEAR_WEBHOOK_SECRET must be set")

        try:
            port = int(os.getenv("PORT", "3000"))
            delivery_timeout = float(os.getenv("LARKBRIDGE_DELIVERY_TIMEOUT", "10"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        if delivery_timeout <= 0:
            raise ConfigurationError("LARKBRIDGE_DELIVERY_TIMEOUT must be positive")

        return cls(
            webhook_secret=webhook_secret,
            lark_webhook_url=os.getenv("LARK_WEBHOOK_URL", ""),
            webhook_endpoint=os.getenv("LARKBRIDGE_WEBHOOK_ENDPOINT", "/webhook"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
            delivery_timeout=delivery_timeout,
            log_level=os.getenv("LARKBRIDGE_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LARKBRIDGE_LOG_DIR") or None,
        )
