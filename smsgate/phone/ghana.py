"""Ghanaian phone number rules.

Local Ghana numbers are written either with a trunk ``0`` (``0241234567``)
or as the bare 9-digit subscriber number (``241234567``). Both are rewritten
to the international form ``233241234567``.
"""

from __future__ import annotations

import re

GHANA_COUNTRY_CODE = "233"

# Trunk prefix + 9-digit subscriber number
GHANA_LOCAL_LENGTH = 10
GHANA_SUBSCRIBER_LENGTH = 9

_GHANA_E164 = re.compile(r"\+233\d{9}")


def apply_ghana_rules(cleaned: str) -> str:
    """Rewrite a cleaned number (digits, optional leading ``+``) to Ghana form.

    Numbers that already carry a ``+`` are left alone, as is anything that
    doesn't look like a local Ghana number.

    Examples:
        >>> apply_ghana_rules("0241234567")
        '233241234567'
        >>> apply_ghana_rules("241234567")
        '233241234567'
        >>> apply_ghana_rules("+14155238886")
        '+14155238886'
    """
    if cleaned.startswith("+"):
        return cleaned

    if len(cleaned) == GHANA_LOCAL_LENGTH and cleaned.startswith("0"):
        return GHANA_COUNTRY_CODE + cleaned[1:]

    if len(cleaned) == GHANA_SUBSCRIBER_LENGTH:
        return GHANA_COUNTRY_CODE + cleaned

    return cleaned


def is_ghana_number(phone: str | None) -> bool:
    """Check whether a normalized number is a full ``+233`` Ghana number."""
    if not phone:
        return False
    return bool(_GHANA_E164.fullmatch(phone))
