"""Phone normalization utilities."""

from .ghana import GHANA_COUNTRY_CODE, apply_ghana_rules, is_ghana_number
from .normalize import is_valid_phone, normalize_phone, phones_match

__all__ = [
    "GHANA_COUNTRY_CODE",
    "apply_ghana_rules",
    "is_ghana_number",
    "is_valid_phone",
    "normalize_phone",
    "phones_match",
]
