from __future__ import annotations

import re

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_HHMM = re.compile(r"^([01]?\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    try:
        parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None
    return value


def require_hhmm(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _HHMM.match(value):
        raise ValidationError(f"{field_name} must be a HH:MM time")
    return value
