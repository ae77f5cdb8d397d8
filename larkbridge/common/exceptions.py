"""Exceptions shared across the relay."""


class LarkBridgeError(Exception):
    """Base class for relay errors."""


class ConfigurationError(LarkBridgeError):
    """Required configuration is missing or invalid; the relay must not start."""


class MalformedPayloadError(LarkBridgeError):
    """The webhook body is not valid JSON or lacks required fields."""
