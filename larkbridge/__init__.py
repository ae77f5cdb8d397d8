"""Linear Lark Bridge - relays Linear issue webhooks to Lark as interactive cards.

- larkbridge.relay: Webhook reception, filtering and delivery
- larkbridge.models: Linear payload and Lark card models
- larkbridge.common: Shared utilities and common functionality
"""

__version__ = "1.0.0"

from . import common
from . import models
from . import relay

__all__ = [
    "common",
    "models",
    "relay",
]
