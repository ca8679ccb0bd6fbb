"""Ready-made notifications sent through an :class:`SMSDispatcher`."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from .templates import car_registration_message, detection_alert_message, welcome_message

if TYPE_CHECKING:
    from .dispatcher import SMSDispatcher
    from .types import SendResult


def send_car_registration_sms(
    dispatcher: SMSDispatcher,
    owner_name: str,
    owner_phone: str,
    license_plate: str,
    make: str,
    model: str,
) -> SendResult:
    """Tell an owner their vehicle was registered."""
    message = car_registration_message(owner_name, license_plate, make, model)
    return dispatcher.send_sms(owner_phone, message)


def send_welcome_sms(dispatcher: SMSDispatcher, recipient_name: str, recipient_phone: str) -> SendResult:
    """Greet a recipient newly added to SMS notifications."""
    return dispatcher.send_sms(recipient_phone, welcome_message(recipient_name))


def send_detection_alert(
    dispatcher: SMSDispatcher,
    recipient_phone: str,
    license_plate: str,
    location: str,
    confidence: float,
    *,
    detected_at: datetime | None = None,
) -> SendResult:
    """Alert a recipient that a camera detected a vehicle.

    ``detected_at`` defaults to the current local time.
    """
    message = detection_alert_message(license_plate, location, confidence, detected_at or datetime.now())
    return dispatcher.send_sms(recipient_phone, message)
