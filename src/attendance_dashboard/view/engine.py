from __future__ import annotations

from typing import Callable, Iterable, Sequence

from ..common.month_utils import month_index
from ..core.constants import ALL
from ..core.enums import SortColumn, SortDirection
from ..core.exceptions import ValidationError
from ..records.model import Record
from .model import FilterOptions, FilterSpec

_SORT_KEYS: dict[SortColumn, Callable[[Record], object]] = {
    SortColumn.NAME: lambda r: r.name.casefold(),
    SortColumn.DEPARTMENT: lambda r: r.department.casefold(),
    SortColumn.MONTH: lambda r: month_index(r.month),
    SortColumn.ATTENDANCE: lambda r: r.attendance_pct,
    SortColumn.PERFORMANCE: lambda r: r.performance_score,
    SortColumn.OVERTIME: lambda r: r.overtime_hours,
    SortColumn.DAYS_ATTENDED: lambda r: r.days_attended,
    SortColumn.TOTAL_WORKING_DAYS: lambda r: r.total_working_days,
}


def parse_sort_column(value: str | SortColumn) -> SortColumn:
    try:
        return SortColumn(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        raise ValidationError(f"Cannot sort by column '{value}'") from None


class ViewEngine:
    """Derives the displayed subset and ordering from the canonical collection.

    Holds the per-column sort direction flags; they persist across calls
    and across recomputes, one flag per column.
    """

    def __init__(self):
        self._directions: dict[SortColumn, SortDirection] = {}

    def direction_for(self, column: str | SortColumn) -> SortDirection | None:
        return self._directions.get(parse_sort_column(column))

    def apply_filter(self, collection: Iterable[Record], spec: FilterSpec) -> list[Record]:
        needle = spec.search_text.casefold()
        return [
            r
            for r in collection
            if (spec.department == ALL or r.department == spec.department)
            and (spec.month == ALL or r.month == spec.month)
            and (not needle or needle in r.name.casefold())
        ]

    def order_by_month(self, view: Iterable[Record]) -> list[Record]:
        """Baseline display order: calendar month, stable within a month."""
        return sorted(view, key=_SORT_KEYS[SortColumn.MONTH])

    def sort_by(self, view: Sequence[Record], column: str | SortColumn) -> list[Record]:
        col = parse_sort_column(column)
        current = self._directions.get(col)
        direction = SortDirection.ASC if current is None else current.flipped()
        self._directions[col] = direction

        ordered = sorted(view, key=_SORT_KEYS[col])
        if direction is SortDirection.DESC:
            # Mirror of ascending, so two toggles in a row reverse each other exactly.
            ordered.reverse()
        return ordered

    def filter_options(self, collection: Iterable[Record]) -> FilterOptions:
        records = list(collection)
        departments = sorted({r.department for r in records})
        months = sorted({r.month for r in records}, key=month_index)
        return FilterOptions(departments=tuple(departments), months=tuple(months))
