"""Load provider credentials from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from .types import DEFAULT_SENDER_ID, ArkeselConfig, ProviderConfig, TwilioSMSConfig

logger = logging.getLogger(__name__)


def load_provider_config(environ: Mapping[str, str] | None = None) -> ProviderConfig:
    """Build a :class:`ProviderConfig` from environment variables.

    Recognized variables:

    - ``ARKESEL_API_KEY`` activates Arkesel; ``ARKESEL_SENDER_ID`` overrides
      the sender id. Arkesel runs in sandbox mode unless ``APP_ENV`` is
      ``production``.
    - ``TWILIO_ACCOUNT_SID``, ``TWILIO_AUTH_TOKEN`` and ``TWILIO_PHONE_NUMBER``
      together activate Twilio. ``TWILIO_STATUS_CALLBACK`` is optional.

    Empty values count as absent. Call once at startup and pass the result
    to :class:`smsgate.SMSDispatcher`.
    """
    env = os.environ if environ is None else environ

    arkesel: ArkeselConfig | None = None
    api_key = _get(env, "ARKESEL_API_KEY")
    if api_key:
        arkesel = ArkeselConfig(
            api_key=api_key,
            sender_id=_get(env, "ARKESEL_SENDER_ID") or DEFAULT_SENDER_ID,
            sandbox=_get(env, "APP_ENV").lower() != "production",
        )

    twilio: TwilioSMSConfig | None = None
    sid = _get(env, "TWILIO_ACCOUNT_SID")
    token = _get(env, "TWILIO_AUTH_TOKEN")
    from_number = _get(env, "TWILIO_PHONE_NUMBER")
    if sid and token and from_number:
        twilio = TwilioSMSConfig(
            account_sid=sid,
            auth_token=token,
            from_number=from_number,
            status_callback=_get(env, "TWILIO_STATUS_CALLBACK") or None,
        )
    elif sid or token or from_number:
        logger.warning(
            "Incomplete Twilio credentials; TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN "
            "and TWILIO_PHONE_NUMBER are all required"
        )

    return ProviderConfig(arkesel=arkesel, twilio=twilio)


def _get(env: Mapping[str, str], key: str) -> str:
    return (env.get(key) or "").strip()
