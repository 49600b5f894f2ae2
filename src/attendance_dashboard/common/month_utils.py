from __future__ import annotations

from ..core.constants import MONTHS
from ..core.exceptions import ValidationError

_MONTH_INDEX = {name.lower(): i for i, name in enumerate(MONTHS, start=1)}


def month_index(month: str) -> int:
    """Calendar position of a month name (January=1 ... December=12).

    Unknown names sort after December.
    """
    return _MONTH_INDEX.get(str(month).strip().lower(), len(MONTHS) + 1)


def canonical_month(value: str) -> str:
    """Normalize a month name to its canonical title-case spelling."""
    idx = _MONTH_INDEX.get(str(value).strip().lower()) if isinstance(value, str) else None
    if idx is None:
        raise ValidationError(f"month must be one of {', '.join(MONTHS)}")
    return MONTHS[idx - 1]
