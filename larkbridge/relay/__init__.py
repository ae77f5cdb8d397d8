"""Linear webhook relay.

This module handles:
- Receiving Linear webhooks
- Validating webhook signatures
- Filtering and transforming Issue events into Lark cards
- Delivering cards to the Lark bot webhook
"""

from .config import RelayConfig
from .delivery import Failed, LarkClient, Sent
from .server import RelayContext, create_app
from .transform import Notify, Skip, classify

__all__ = [
    "RelayConfig",
    "RelayContext",
    "create_app",
    "classify",
    "Skip",
    "Notify",
    "LarkClient",
    "Sent",
    "Failed",
]
