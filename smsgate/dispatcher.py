"""SMS dispatcher: the main entry point for sending messages.

The dispatcher normalizes the destination, walks the configured transports
in priority order and falls back to the simulated provider when no live
transport delivers.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from typing import Any

from .phone import is_valid_phone, normalize_phone
from .selector import available_providers
from .simulated import SimulatedSMSProvider
from .sms.arkesel import ArkeselSMSProvider
from .sms.base import SMSProvider
from .sms.twilio import TwilioSMSProvider
from .types import BulkSendResult, ProviderConfig, ProviderName, SendResult, SMSMessage

logger = logging.getLogger(__name__)

INVALID_PHONE_ERROR = "Invalid phone number format"
DEFAULT_PACING_SECONDS = 0.1


def build_live_providers(config: ProviderConfig) -> list[SMSProvider]:
    """Instantiate the live transports the config has credentials for, in priority order."""
    providers: list[SMSProvider] = []
    if not config.has_live_provider:
        logger.info("No live SMS credentials configured; only the simulated provider is available")
        return providers
    for name in available_providers(config):
        if name is ProviderName.ARKESEL and config.arkesel is not None:
            providers.append(ArkeselSMSProvider(config.arkesel))
        elif name is ProviderName.TWILIO and config.twilio is not None:
            providers.append(TwilioSMSProvider(config.twilio))
    return providers


class SMSDispatcher:
    """Sends SMS through the first transport that delivers.

    Usage::

        from smsgate import SMSDispatcher, load_provider_config

        dispatcher = SMSDispatcher(load_provider_config())
        result = dispatcher.send_sms("0241234567", "Hello")
        if result.success:
            print(f"Sent via {result.provider}: {result.message_id}")

    With ``fallback_to_simulated=True`` (the default) a message that no live
    transport delivered is handed to the simulated provider, so the caller
    sees a success. Pass ``False`` to get the last live failure instead.
    Without any live transport the simulated provider is always used.
    """

    def __init__(
        self,
        config: ProviderConfig,
        *,
        live_providers: Sequence[SMSProvider] | None = None,
        simulated: SimulatedSMSProvider | None = None,
        fallback_to_simulated: bool = True,
        pacing_seconds: float = DEFAULT_PACING_SECONDS,
    ) -> None:
        self.config = config
        self._live = list(live_providers) if live_providers is not None else build_live_providers(config)
        self._simulated = simulated if simulated is not None else SimulatedSMSProvider()
        self.fallback_to_simulated = fallback_to_simulated
        self.pacing_seconds = pacing_seconds

        logger.info(
            "SMS dispatcher initialized: available=%s primary=%s",
            [p.name for p in self._live] + [self._simulated.name],
            self.get_provider_name(),
        )

    def get_provider_name(self) -> str:
        """Name of the primary provider, for display."""
        return self._live[0].name if self._live else self._simulated.name

    def close(self) -> None:
        """Close any transports that hold network clients."""
        for provider in self._live:
            close = getattr(provider, "close", None)
            if callable(close):
                close()

    def __enter__(self) -> SMSDispatcher:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ── Single send ───────────────────────────────────────────────

    def send_sms(self, to: str, message: str) -> SendResult:
        """Send one SMS, failing over across transports.

        Never raises; every outcome comes back as a :class:`SendResult`.
        """
        phone = normalize_phone(to)
        if not is_valid_phone(phone):
            logger.warning("Rejected SMS to invalid phone number %r", to)
            return SendResult.fail(self.get_provider_name(), INVALID_PHONE_ERROR)

        sms = SMSMessage(to=phone, body=message)
        last_failure: SendResult | None = None

        for provider in self._live:
            logger.info("Sending SMS via %s to %s", provider.name, phone)
            try:
                result = provider.send(sms)
            except Exception as exc:
                logger.exception("SMS provider %s raised while sending to %s", provider.name, phone)
                result = SendResult.fail(provider.name, str(exc))

            if result.success:
                return result

            logger.warning("SMS via %s to %s failed: %s", provider.name, phone, result.error)
            last_failure = result

        if last_failure is not None and not self.fallback_to_simulated:
            return last_failure

        if last_failure is not None:
            logger.warning("All live SMS providers failed for %s; using simulated provider", phone)
        return self._simulated.send(sms)

    async def send_sms_async(self, to: str, message: str) -> SendResult:
        """Send one SMS asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send_sms, to, message)

    # ── Bulk send ─────────────────────────────────────────────────

    def send_bulk_sms(self, recipients: Sequence[str], message: str) -> BulkSendResult:
        """Send the same message to each recipient, one at a time, in order.

        Waits ``pacing_seconds`` between sends. A failure for one recipient
        never stops the batch.
        """
        results: list[SendResult] = []
        for index, recipient in enumerate(recipients):
            if index and self.pacing_seconds > 0:
                time.sleep(self.pacing_seconds)
            results.append(self._send_one(recipient, message))
        return self._summarize(results)

    async def send_bulk_sms_async(self, recipients: Sequence[str], message: str) -> BulkSendResult:
        """Async variant of :meth:`send_bulk_sms`; still strictly sequential."""
        results: list[SendResult] = []
        for index, recipient in enumerate(recipients):
            if index and self.pacing_seconds > 0:
                await asyncio.sleep(self.pacing_seconds)
            try:
                result = await self.send_sms_async(recipient, message)
            except Exception as exc:
                logger.exception("Bulk SMS to %s raised", recipient)
                result = SendResult.fail(self.get_provider_name(), str(exc))
            results.append(result)
        return self._summarize(results)

    def _send_one(self, recipient: str, message: str) -> SendResult:
        try:
            return self.send_sms(recipient, message)
        except Exception as exc:
            logger.exception("Bulk SMS to %s raised", recipient)
            return SendResult.fail(self.get_provider_name(), str(exc))

    @staticmethod
    def _summarize(results: list[SendResult]) -> BulkSendResult:
        bulk = BulkSendResult.from_results(results)
        logger.info("Bulk SMS finished: %d sent, %d failed", bulk.success, bulk.failed)
        return bulk
