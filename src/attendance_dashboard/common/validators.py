from __future__ import annotations

import math
from numbers import Real

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_int(value, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{field_name} must be a whole number")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be a whole number")
    return int(value)


def require_number(value, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a number")
    return float(value)


def require_non_negative(value, field_name: str):
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_attendance_bound(days_attended: int, total_working_days: int) -> None:
    if total_working_days <= 0:
        raise ValidationError("total working days must be greater than zero")
    if days_attended > total_working_days:
        raise ValidationError("attendance exceeds total working days")
