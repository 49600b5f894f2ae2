from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..records.model import Record


@dataclass(frozen=True)
class MetricsSummary:
    count: int = 0
    avg_attendance_pct: float = 0.0
    avg_performance: float = 0.0
    total_overtime: float = 0.0


class MetricsCalculator:
    """Aggregate summary of a view. Empty views give all-zero metrics."""

    def summarize(self, view: Sequence[Record]) -> MetricsSummary:
        count = len(view)
        if not count:
            return MetricsSummary()
        return MetricsSummary(
            count=count,
            avg_attendance_pct=sum(r.attendance_pct for r in view) / count,
            avg_performance=sum(r.performance_score for r in view) / count,
            total_overtime=sum(r.overtime_hours for r in view),
        )
