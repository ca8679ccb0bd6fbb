"""Arkesel SMS provider."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from smsgate.types import MAX_SMS_CHARS, ArkeselConfig, ProviderName, SendResult, SMSMessage

from .base import SMSTransportError

logger = logging.getLogger(__name__)

ARKESEL_API_URL = "https://sms.arkesel.com/api/v2/sms/send"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ArkeselSMSProvider:
    """Sends SMS messages via the Arkesel v2 REST API."""

    name = ProviderName.ARKESEL.value

    def __init__(self, config: ArkeselConfig) -> None:
        if not config.api_key:
            raise ValueError("ArkeselConfig.api_key is required for SMS delivery")
        self._config = config
        self._client = httpx.Client(timeout=DEFAULT_TIMEOUT_SECONDS)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> ArkeselSMSProvider:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(self, message: SMSMessage) -> SendResult:
        """Send an SMS synchronously."""
        body = message.body.strip()
        if not body:
            return SendResult.fail(self.name, "No message body provided")

        if len(body) > MAX_SMS_CHARS:
            body = body[:MAX_SMS_CHARS]

        payload = {
            "sender": self._config.sender_id,
            "message": body,
            # Arkesel wants bare digits, no "+"
            "recipients": [message.to.replace("+", "")],
            "sandbox": self._config.sandbox,
        }
        try:
            message_id = self._post(payload)
        except SMSTransportError as exc:
            logger.error("Arkesel SMS API error: status=%s msg=%s", exc.status_code, exc)
            return SendResult.fail(self.name, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error sending SMS via Arkesel")
            return SendResult.fail(self.name, str(exc))

        logger.info("SMS sent via Arkesel to %s", message.to)
        return SendResult.ok(self.name, message_id)

    async def send_async(self, message: SMSMessage) -> SendResult:
        """Send an SMS asynchronously (runs sync send in a thread)."""
        return await asyncio.to_thread(self.send, message)

    def _post(self, payload: dict[str, Any]) -> str:
        """POST to Arkesel and return the message id, or raise SMSTransportError."""
        response = self._client.post(
            ARKESEL_API_URL,
            json=payload,
            headers={"api-key": self._config.api_key},
        )
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if 200 <= response.status_code < 300 and data.get("code") == "ok":
            return _extract_message_id(data.get("data"))

        raise SMSTransportError(
            data.get("message") or f"HTTP {response.status_code}",
            provider=self.name,
            status_code=response.status_code,
        )


def _extract_message_id(data: Any) -> str:
    if isinstance(data, list) and data:
        data = data[0]
    if isinstance(data, dict) and data.get("id"):
        return str(data["id"])
    return f"arkesel_{int(time.time() * 1000)}"
