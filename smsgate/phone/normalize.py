"""Phone normalization and validation.

Numbers are normalized to an E.164-like ``+<country><subscriber>`` form
before every send. Regional rewriting currently follows the Ghana
convention (see :mod:`smsgate.phone.ghana`).
"""

from __future__ import annotations

import re

from .ghana import apply_ghana_rules, is_ghana_number

# Leading "+", a non-zero digit, then 8-14 more digits
_INTERNATIONAL = re.compile(r"\+[1-9]\d{8,14}")


def normalize_phone(phone: str | None) -> str:
    """Normalize a raw phone number.

    - Keeps a ``+`` only when it is the first character; every other
      non-digit is dropped.
    - Applies the Ghana local-number rules.
    - Prepends ``+`` when missing.

    Returns ``""`` when the input holds no digits. Never raises, and
    ``normalize_phone(normalize_phone(x)) == normalize_phone(x)``.

    Examples:
        >>> normalize_phone("024 123 4567")
        '+233241234567'
        >>> normalize_phone("+233241234567")
        '+233241234567'
    """
    if not phone:
        return ""

    phone = str(phone).strip()
    has_plus = phone.startswith("+")
    digits = re.sub(r"\D", "", phone)
    if not digits:
        return ""

    cleaned = apply_ghana_rules(f"+{digits}" if has_plus else digits)
    return cleaned if cleaned.startswith("+") else f"+{cleaned}"


def is_valid_phone(phone: str | None) -> bool:
    """Check that a normalized number is dialable.

    Accepts the loose international pattern (``+`` then 9-15 digits, no
    leading zero) or a strict ``+233`` Ghana number.
    """
    if not phone:
        return False
    return bool(_INTERNATIONAL.fullmatch(phone)) or is_ghana_number(phone)


def phones_match(phone1: str | None, phone2: str | None) -> bool:
    """Check if two phone numbers match after normalization."""
    norm1 = normalize_phone(phone1)
    norm2 = normalize_phone(phone2)
    return norm1 == norm2 if norm1 and norm2 else False
