"""
smsgate — Outbound SMS delivery with provider failover.

Owns everything from "I have a phone number and a message" to "here's what
happened." The consuming app keeps everything else: who to notify, where
the numbers come from, and what the message says.

Installation::

    pip install -e .

Quick start — configured from the environment::

    from smsgate import SMSDispatcher, load_provider_config

    dispatcher = SMSDispatcher(load_provider_config())
    result = dispatcher.send_sms("0241234567", "Your vehicle has been registered")
    if result.success:
        print(f"Sent via {result.provider}: {result.message_id}")
    else:
        print(f"Failed: {result.error}")

Explicit configuration::

    from smsgate import ArkeselConfig, ProviderConfig, SMSDispatcher, TwilioSMSConfig

    config = ProviderConfig(
        arkesel=ArkeselConfig(api_key="...", sender_id="CyberWatch"),
        twilio=TwilioSMSConfig(account_sid="AC...", auth_token="...", from_number="+14155238886"),
    )
    dispatcher = SMSDispatcher(config)

Bulk send (sequential, paced)::

    bulk = dispatcher.send_bulk_sms(["0241234567", "0201234567"], "Gate closes at 10pm")
    print(f"{bulk.success} sent, {bulk.failed} failed")

Templates::

    from smsgate import render_template

    body = render_template("detection", "urgent", {"vehicleLicense": "GR-1234-24", "cameraLocation": "Gate A"})

Provider priority: Arkesel, then Twilio, then the simulated provider. The
simulated provider never touches the network and always succeeds. It is
used when no credentials are configured and, by default, when every live
provider failed.

Module overview
---------------
- ``types``          — Dataclasses: SMSMessage, SendResult, BulkSendResult, configs
- ``config``         — ProviderConfig from environment variables
- ``phone/``         — Normalization (Ghana local numbers → +233) and validation
- ``selector``       — Provider priority and selection
- ``sms/``           — ArkeselSMSProvider, TwilioSMSProvider
- ``simulated``      — SimulatedSMSProvider
- ``dispatcher``     — SMSDispatcher: single and bulk sends with failover
- ``templates``      — Message templates and length checks
- ``notifications``  — Registration, welcome and detection-alert messages
"""

from .config import load_provider_config
from .dispatcher import INVALID_PHONE_ERROR, SMSDispatcher, build_live_providers
from .notifications import send_car_registration_sms, send_detection_alert, send_welcome_sms
from .phone import is_valid_phone, normalize_phone, phones_match
from .selector import available_providers, select_provider
from .simulated import SimulatedSMSProvider
from .sms import ArkeselSMSProvider, SMSProvider, SMSTransportError, TwilioSMSProvider
from .templates import (
    MESSAGE_TEMPLATES,
    MessageLength,
    get_message_preview,
    get_template,
    quick_detection_alert,
    recipient_welcome_message,
    render_template,
    replace_placeholders,
    template_variations,
    validate_message_length,
    welcome_message_for_owner,
)
from .types import (
    DEFAULT_SENDER_ID,
    MAX_SMS_CHARS,
    SMS_SEGMENT_CHARS,
    ArkeselConfig,
    BulkSendResult,
    ProviderConfig,
    ProviderName,
    SendResult,
    SMSMessage,
    TwilioSMSConfig,
)

__all__ = [
    # Dispatcher
    "SMSDispatcher",
    "INVALID_PHONE_ERROR",
    "build_live_providers",
    # Providers
    "SMSProvider",
    "SMSTransportError",
    "ArkeselSMSProvider",
    "TwilioSMSProvider",
    "SimulatedSMSProvider",
    # Selection & config
    "available_providers",
    "select_provider",
    "load_provider_config",
    # Types
    "ArkeselConfig",
    "BulkSendResult",
    "ProviderConfig",
    "ProviderName",
    "SendResult",
    "SMSMessage",
    "TwilioSMSConfig",
    "DEFAULT_SENDER_ID",
    "MAX_SMS_CHARS",
    "SMS_SEGMENT_CHARS",
    # Phone
    "is_valid_phone",
    "normalize_phone",
    "phones_match",
    # Templates
    "MESSAGE_TEMPLATES",
    "MessageLength",
    "get_message_preview",
    "get_template",
    "quick_detection_alert",
    "recipient_welcome_message",
    "render_template",
    "replace_placeholders",
    "template_variations",
    "validate_message_length",
    "welcome_message_for_owner",
    # Notifications
    "send_car_registration_sms",
    "send_detection_alert",
    "send_welcome_sms",
]
