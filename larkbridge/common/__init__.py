"""Common utilities and shared functionality."""

from .exceptions import (
    LarkBridgeError,
    ConfigurationError,
    MalformedPayloadError,
)

from .hmac_utils import (
    compute_hmac_sha256,
    verify_hmac_signature,
)

from .logging_utils import (
    setup_logging,
    log_server_message,
    log_error,
)

__all__ = [
    # Exceptions
    "LarkBridgeError",
    "ConfigurationError",
    "MalformedPayloadError",
    # HMAC utilities
    "compute_hmac_sha256",
    "verify_hmac_signature",
    # Logging utilities
    "setup_logging",
    "log_server_message",
    "log_error",
]
