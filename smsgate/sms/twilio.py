"""Twilio SMS provider."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from twilio.base.exceptions import TwilioRestException  # type: ignore[import-untyped]
from twilio.http.http_client import TwilioHttpClient  # type: ignore[import-untyped]
from twilio.rest import Client  # type: ignore[import-untyped]

from smsgate.types import MAX_SMS_CHARS, ProviderName, SendResult, SMSMessage, TwilioSMSConfig

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

_FAILED_STATUSES = {"failed", "undelivered"}


class TwilioSMSProvider:
    """Sends SMS messages via Twilio REST API."""

    name = ProviderName.TWILIO.value

    def __init__(self, config: TwilioSMSConfig) -> None:
        if not config.from_number:
            raise ValueError("TwilioSMSConfig.from_number is required for SMS delivery")
        self._config = config
        http_client = TwilioHttpClient(timeout=DEFAULT_TIMEOUT_SECONDS)
        self._client = Client(config.account_sid, config.auth_token, http_client=http_client)

    def send(self, message: SMSMessage) -> SendResult:
        """Send an SMS synchronously."""
        body = message.body.strip()
        if not body:
            return SendResult.fail(self.name, "No message body provided")

        if len(body) > MAX_SMS_CHARS:
            body = body[:MAX_SMS_CHARS]

        params: dict[str, Any] = {
            "to": message.to,
            "from_": self._config.from_number,
            "body": body,
        }
        if self._config.status_callback:
            params["status_callback"] = self._config.status_callback

        return self._create_message(params)

    async def send_async(self, message: SMSMessage) -> SendResult:
        """Send an SMS asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send, message)

    def _create_message(self, params: dict[str, Any]) -> SendResult:
        try:
            msg = self._client.messages.create(**params)
        except TwilioRestException as exc:
            logger.error("Twilio SMS API error: code=%s msg=%s", exc.code, exc.msg)
            return SendResult.fail(self.name, str(exc.msg))
        except Exception as exc:
            logger.error("Twilio SMS send failed: %s", exc)
            return SendResult.fail(self.name, str(exc))

        status = (getattr(msg, "status", None) or "").lower()
        if status in _FAILED_STATUSES:
            error = getattr(msg, "error_message", None) or f"Twilio reported status {status}"
            logger.error("Twilio SMS %s to %s: %s", status, params["to"], error)
            return SendResult.fail(self.name, error)

        logger.info("SMS sent via Twilio to %s", params["to"])
        return SendResult.ok(self.name, getattr(msg, "sid", None))
