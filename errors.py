"""Error hierarchy for slackhook.

Every error raised by the notifier derives from SlackHookError, so callers
can catch one type around send()/post() and decide on retries themselves.
"""

from __future__ import annotations

from typing import Any, Optional


class SlackHookError(Exception):
    """Base error. All typed errors inherit from this."""

    error_code: str = "slackhook_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(SlackHookError, ValueError):
    """Empty or malformed webhook URL."""

    error_code = "configuration_error"

    def __init__(self, message: str, *, value: Optional[str] = None) -> None:
        super().__init__(message, details={"value": value} if value is not None else None)
        self.value = value


class InvalidCallbackError(SlackHookError, TypeError):
    error_code = "invalid_callback"


class NoDeliveryMechanismError(SlackHookError):
    error_code = "no_delivery_mechanism"


class TransportError(SlackHookError):
    error_code = "transport_error"


class SubprocessError(SlackHookError):
    error_code = "subprocess_error"
