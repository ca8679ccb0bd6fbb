"""SMS message templates and length checks.

Templates use ``{placeholder}`` markers, e.g. ``{vehicleLicense}``. Fill
them with :func:`replace_placeholders` or render in one go with
:func:`render_template`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .types import MAX_SMS_CHARS, SMS_SEGMENT_CHARS

MESSAGE_TEMPLATES: dict[str, dict[str, str]] = {
    "detection": {
        "professional": (
            "Vehicle detection alert: {vehicleLicense} detected at {cameraLocation} on {detectionTime}. "
            "Confidence: {confidenceScore}%. Contact security if unauthorized."
        ),
        "friendly": "Hi! We spotted vehicle {vehicleLicense} at {cameraLocation} just now. Everything looks good! 🚗",
        "urgent": (
            "🚨 URGENT: Unauthorized vehicle {vehicleLicense} detected at {cameraLocation}. "
            "Immediate attention required!"
        ),
        "casual": "Hey! {vehicleLicense} just rolled through {cameraLocation}. All good! 👍",
    },
    "alert": {
        "professional": (
            "Security Alert: {vehicleLicense} ({vehicleMake} {vehicleModel}) requires attention at "
            "{cameraLocation}. Please investigate."
        ),
        "friendly": "Heads up! {ownerName}'s {vehicleMake} {vehicleModel} needs some attention at {cameraLocation}. 🔍",
        "urgent": "🚨 CRITICAL ALERT: {vehicleLicense} flagged for immediate response at {cameraLocation}!",
        "casual": "Alert! {vehicleLicense} needs a quick check at {cameraLocation}. NBD! 😊",
    },
    "welcome": {
        "professional": "Welcome to CyberWatch, {ownerName}. Your vehicle {vehicleLicense} has been registered successfully.",
        "friendly": "Welcome aboard, {ownerName}! 🎉 Your {vehicleMake} {vehicleModel} is now in our system. Drive safe!",
        "urgent": "IMPORTANT: {ownerName}, your vehicle registration for {vehicleLicense} is now active.",
        "casual": "Hey {ownerName}! Your ride {vehicleLicense} is all set up. Welcome to the family! 🚗✨",
    },
    "reminder": {
        "professional": "Reminder: Vehicle {vehicleLicense} registration expires soon. Please renew to maintain access.",
        "friendly": (
            "Hi {ownerName}! Just a friendly reminder that your {vehicleMake} {vehicleModel} registration "
            "needs renewal soon. 📅"
        ),
        "urgent": "⚠️ URGENT: {vehicleLicense} registration expires in 3 days. Renew immediately to avoid access issues.",
        "casual": "Yo {ownerName}! Time to renew {vehicleLicense}. Don't let it expire! 🔄",
    },
    "system": {
        "professional": "System notification: CyberWatch maintenance scheduled. Camera {cameraName} will be offline briefly.",
        "friendly": "Quick update! We're doing some maintenance on {cameraName}. Should be back online soon! 🔧",
        "urgent": "🚨 SYSTEM ALERT: {cameraName} is currently offline. Technical team notified.",
        "casual": "FYI: {cameraName} is taking a little break for maintenance. Back soon! 💤",
    },
}

DEFAULT_TEMPLATE = "System notification: {systemName} alert."
SYSTEM_NAME = "CyberWatch"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Tones offered as alternatives when drafting a message
VARIATION_TONES = ("professional", "friendly", "casual")
MISSING_PLACEHOLDER = "[N/A]"

_PLACEHOLDER = re.compile(r"\{[^}]+\}")


@dataclass(frozen=True, slots=True)
class MessageLength:
    """Length check for an SMS body."""

    is_valid: bool
    length: int
    segments: int


def get_template(message_type: str, tone: str = "professional") -> str:
    """Look up a template, falling back to the type's professional tone.

    Unknown message types get :data:`DEFAULT_TEMPLATE`.
    """
    by_tone = MESSAGE_TEMPLATES.get(message_type.lower())
    if not by_tone:
        return DEFAULT_TEMPLATE
    return by_tone.get(tone.lower()) or by_tone["professional"]


def replace_placeholders(message: str, placeholders: Mapping[str, Any]) -> str:
    """Fill ``{key}`` markers; anything left unfilled becomes ``[N/A]``."""
    result = message
    for key, value in placeholders.items():
        if value is None or value == "":
            continue
        result = result.replace(f"{{{key}}}", str(value))
    return _PLACEHOLDER.sub(MISSING_PLACEHOLDER, result)


def render_template(message_type: str, tone: str, placeholders: Mapping[str, Any]) -> str:
    return replace_placeholders(get_template(message_type, tone), placeholders)


def validate_message_length(message: str) -> MessageLength:
    """Count characters and 160-char segments; more than 1600 chars is invalid."""
    length = len(message)
    return MessageLength(
        is_valid=length <= MAX_SMS_CHARS,
        length=length,
        segments=math.ceil(length / SMS_SEGMENT_CHARS),
    )


def get_message_preview(message: str, placeholders: Mapping[str, Any]) -> str:
    """Show a draft the way the recipient will see it."""
    return replace_placeholders(message, placeholders)


def template_variations(message_type: str, placeholders: Mapping[str, Any], count: int = 3) -> list[str]:
    """Render up to ``count`` alternatives, one per tone in :data:`VARIATION_TONES`."""
    return [render_template(message_type, tone, placeholders) for tone in VARIATION_TONES[: max(count, 0)]]


# ── Fixed messages ────────────────────────────────────────────────────


def car_registration_message(owner_name: str, license_plate: str, make: str, model: str) -> str:
    return (
        f"🚗 Hi {owner_name}! Your {make} {model} ({license_plate}) has been successfully registered "
        f"with {SYSTEM_NAME} Security System. Welcome aboard! 🎉"
    )


def welcome_message(recipient_name: str) -> str:
    return (
        f"👋 Welcome {recipient_name}! You've been added to {SYSTEM_NAME} SMS notifications. "
        "Stay secure with Arkesel! 🔒✨"
    )


def detection_alert_message(
    license_plate: str,
    location: str,
    confidence: float,
    detected_at: datetime,
) -> str:
    return (
        f"🚨 ALERT: Vehicle {license_plate} detected at {location} with {confidence:g}% confidence. "
        f"Time: {detected_at.strftime(TIMESTAMP_FORMAT)}"
    )


# ── Rendered messages ─────────────────────────────────────────────────


def quick_detection_alert(
    license_plate: str,
    location: str,
    confidence: float,
    *,
    detected_at: datetime | None = None,
) -> str:
    """Render the professional detection template.

    Confidence is shown with one decimal; ``detected_at`` defaults to now.
    """
    placeholders = {
        "vehicleLicense": license_plate,
        "cameraLocation": location,
        "confidenceScore": f"{confidence:.1f}",
        "detectionTime": (detected_at or datetime.now()).strftime(TIMESTAMP_FORMAT),
        "systemName": SYSTEM_NAME,
    }
    return render_template("detection", "professional", placeholders)


def welcome_message_for_owner(owner_name: str, license_plate: str, make: str, model: str) -> str:
    """Render the friendly welcome for a newly registered vehicle.

    Falls back to :func:`car_registration_message` when a detail the
    template needs is missing.
    """
    placeholders = {
        "ownerName": owner_name,
        "vehicleLicense": license_plate,
        "vehicleMake": make,
        "vehicleModel": model,
        "systemName": SYSTEM_NAME,
    }
    message = render_template("welcome", "friendly", placeholders)
    if MISSING_PLACEHOLDER in message:
        return car_registration_message(owner_name, license_plate, make, model)
    return message


def recipient_welcome_message(recipient_name: str, **vehicle: str) -> str:
    """Render the friendly welcome for a new notification recipient.

    The template mentions the recipient's vehicle; pass ``vehicleMake`` and
    ``vehicleModel`` when known. Without them the result is
    :func:`welcome_message`.
    """
    placeholders = {"ownerName": recipient_name, "systemName": SYSTEM_NAME, **vehicle}
    message = render_template("welcome", "friendly", placeholders)
    if MISSING_PLACEHOLDER in message:
        return welcome_message(recipient_name)
    return message
