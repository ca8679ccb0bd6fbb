"""SMS channel — multi-provider SMS delivery."""

from .arkesel import ArkeselSMSProvider
from .base import SMSProvider, SMSTransportError
from .twilio import TwilioSMSProvider

__all__ = ["ArkeselSMSProvider", "SMSProvider", "SMSTransportError", "TwilioSMSProvider"]
