"""Base protocol for SMS providers."""

from __future__ import annotations

from typing import Protocol

from smsgate.types import SendResult, SMSMessage


class SMSProvider(Protocol):
    """Interface that all SMS providers must implement."""

    name: str

    def send(self, message: SMSMessage) -> SendResult:
        """Send an SMS and return the result.

        ``message.to`` is already normalized. Implementations report
        failures through the result rather than raising.
        """
        ...


class SMSTransportError(RuntimeError):
    """Error raised when a provider's API rejects or fails a request."""

    def __init__(self, message: str, *, provider: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
