from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..core.constants import CHART_SERIES_LABEL
from ..records.model import Record


@dataclass(frozen=True)
class ChartProjection:
    labels: tuple[str, ...] = ()
    values: tuple[float, ...] = ()
    series_label: str = field(default=CHART_SERIES_LABEL)


class ChartProjector:
    """Average attendance per employee name, in first-occurrence order of the view."""

    def project(self, view: Sequence[Record]) -> ChartProjection:
        totals: dict[str, list[float]] = {}
        for r in view:
            bucket = totals.setdefault(r.name, [0.0, 0])
            bucket[0] += r.attendance_pct
            bucket[1] += 1

        labels = tuple(totals)
        values = tuple(total / count for total, count in totals.values())
        return ChartProjection(labels=labels, values=values)
