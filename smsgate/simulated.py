"""Simulated SMS provider.

Stands in for a live transport when no credentials are configured or every
live transport failed. Nothing is delivered: it waits a moment to mimic
network latency, logs the message and reports success.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass

from .types import ProviderName, SendResult, SMSMessage

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 1.0


@dataclass
class SentMessage:
    """Record of a message sent through the SimulatedSMSProvider."""

    message: SMSMessage
    result: SendResult


class SimulatedSMSProvider:
    """No-network provider that always succeeds.

    Usage::

        provider = SimulatedSMSProvider(delay_seconds=0, record=True)
        result = provider.send(SMSMessage(to="+233241234567", body="hi"))
        assert result.success
        assert result.message_id.startswith("sim_")
        assert provider.sent[0].message.body == "hi"

    Messages are only kept in ``sent`` when ``record=True``; the dispatcher's
    default backstop does not record.
    """

    name = ProviderName.SIMULATED.value

    def __init__(self, *, delay_seconds: float = DEFAULT_DELAY_SECONDS, record: bool = False) -> None:
        self.delay_seconds = delay_seconds
        self.record = record
        self.sent: list[SentMessage] = []

    def send(self, message: SMSMessage) -> SendResult:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)

        logger.info("[SIMULATED] SMS to %s: %s", message.to, message.body)
        result = SendResult.ok(self.name, f"sim_{uuid.uuid4().hex[:12]}")
        if self.record:
            self.sent.append(SentMessage(message=message, result=result))
        return result

    def reset(self) -> None:
        """Clear all recorded messages."""
        self.sent.clear()
