"""Core types for the SMS gateway library."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_SMS_CHARS = 1600
SMS_SEGMENT_CHARS = 160
DEFAULT_SENDER_ID = "CyberWatch"


class ProviderName(str, Enum):
    """Names of the SMS transports, in no particular order.

    Priority lives in :mod:`smsgate.selector`.
    """

    ARKESEL = "Arkesel"
    TWILIO = "Twilio"
    SIMULATED = "Mock SMS"


@dataclass(frozen=True, slots=True)
class SMSMessage:
    """A plain text SMS to a single destination."""

    to: str
    body: str


@dataclass(frozen=True, slots=True)
class SendResult:
    """Outcome of a single send attempt."""

    success: bool
    provider: str
    message_id: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, provider: str, message_id: str | None = None) -> SendResult:
        return cls(success=True, provider=provider, message_id=message_id)

    @classmethod
    def fail(cls, provider: str, error: str) -> SendResult:
        return cls(success=False, provider=provider, error=error)


@dataclass(frozen=True, slots=True)
class BulkSendResult:
    """Aggregate of a bulk send.

    ``results`` is ordered like the recipient list it was built from.
    """

    success: int = 0
    failed: int = 0
    results: list[SendResult] = field(default_factory=list)

    @classmethod
    def from_results(cls, results: list[SendResult]) -> BulkSendResult:
        succeeded = sum(1 for r in results if r.success)
        return cls(success=succeeded, failed=len(results) - succeeded, results=list(results))


# ── Provider configuration ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ArkeselConfig:
    """Configuration for the Arkesel SMS provider."""

    api_key: str
    sender_id: str = DEFAULT_SENDER_ID
    sandbox: bool = False


@dataclass(frozen=True, slots=True)
class TwilioSMSConfig:
    """Configuration for the Twilio SMS provider."""

    account_sid: str
    auth_token: str
    from_number: str  # E.164, e.g. +14155238886
    status_callback: str | None = None


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Credentials for every live transport.

    A ``None`` entry means the transport is not configured and is left out
    of provider selection.
    """

    arkesel: ArkeselConfig | None = None
    twilio: TwilioSMSConfig | None = None

    @property
    def has_live_provider(self) -> bool:
        return self.arkesel is not None or self.twilio is not None
