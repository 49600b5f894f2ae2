from __future__ import annotations

import logging
from typing import Optional

from ..chart.projector import ChartProjection, ChartProjector
from ..common.month_utils import canonical_month
from ..core.constants import ALL
from ..core.enums import LoadState, MutationAction, RecordStatus, SortColumn
from ..core.exceptions import DomainError, LoadError, ValidationError
from ..metrics.calculator import MetricsCalculator, MetricsSummary
from ..records.loader import RecordLoader
from ..records.model import Record, RecordFields
from ..records.repository import RecordRepository
from ..records.status import classify, status_label
from ..view.engine import ViewEngine
from ..view.model import FilterOptions, FilterSpec
from .model import DashboardSnapshot, MutationResult

logger = logging.getLogger(__name__)


class DashboardService:
    """Keeps view, metrics and chart consistent with the record store.

    Every mutation and every filter or sort change finishes with a refresh
    of the derived data before the method returns.
    """

    def __init__(
        self,
        store: RecordRepository,
        *,
        engine: ViewEngine | None = None,
        metrics: MetricsCalculator | None = None,
        chart: ChartProjector | None = None,
    ):
        self._store = store
        self._engine = engine or ViewEngine()
        self._metrics_calc = metrics or MetricsCalculator()
        self._chart_projector = chart or ChartProjector()

        self._load_state = LoadState.PENDING
        self._load_error: Optional[str] = None
        self._filter = FilterSpec()
        self._view: list[Record] = []
        self._metrics = MetricsSummary()
        self._chart = ChartProjection()
        self._options = FilterOptions(departments=(), months=())
        self.recompute()

    @property
    def load_state(self) -> LoadState:
        return self._load_state

    @property
    def filter(self) -> FilterSpec:
        return self._filter

    @property
    def view(self) -> tuple[Record, ...]:
        return tuple(self._view)

    @property
    def metrics(self) -> MetricsSummary:
        return self._metrics

    @property
    def chart(self) -> ChartProjection:
        return self._chart

    @property
    def options(self) -> FilterOptions:
        return self._options

    def load(self, loader: RecordLoader) -> LoadState:
        """One-shot initial load. Failures leave an empty, usable dashboard."""
        if self._load_state is not LoadState.PENDING:
            raise DomainError("Initial record set has already been loaded")

        try:
            count = self._store.bulk_load(loader.load())
        except LoadError as exc:
            self._load_state = LoadState.DEGRADED
            self._load_error = str(exc)
            logger.error("Initial load failed: %s", exc)
            return self._load_state

        self._load_state = LoadState.READY
        logger.info("Loaded %d records", count)
        self.recompute()
        return self._load_state

    def set_filter(self, *, department: str = ALL, month: str = ALL, search_text: str = "") -> DashboardSnapshot:
        self._filter = FilterSpec(
            department=department or ALL,
            month=self._filter_month(month),
            search_text=search_text or "",
        )
        self.recompute()
        return self.snapshot()

    def reset_filters(self) -> DashboardSnapshot:
        return self.set_filter()

    def sort(self, column: str | SortColumn) -> DashboardSnapshot:
        self._view = self._engine.sort_by(self._view, column)
        self._derive()
        return self.snapshot()

    def create(self, fields: RecordFields) -> MutationResult:
        record = self._store.create(fields)
        self.recompute()
        return MutationResult(MutationAction.CREATED, record, f"Record for {record.name} added")

    def update(self, record_id: int, fields: RecordFields) -> MutationResult:
        record = self._store.update(record_id, fields)
        self.recompute()
        return MutationResult(MutationAction.UPDATED, record, f"Record for {record.name} updated")

    def delete(self, record_id: int) -> MutationResult:
        record = self._store.delete(record_id)
        self.recompute()
        return MutationResult(MutationAction.DELETED, record, f"Record for {record.name} deleted")

    def recompute(self) -> None:
        """filter -> month order -> metrics -> chart, plus fresh filter options."""
        records = self._store.list()
        self._options = self._engine.filter_options(records)
        self._view = self._engine.order_by_month(self._engine.apply_filter(records, self._filter))
        self._derive()

    def snapshot(self) -> DashboardSnapshot:
        return DashboardSnapshot(
            load_state=self._load_state,
            filter=self._filter,
            view=tuple(self._view),
            metrics=self._metrics,
            chart=self._chart,
            options=self._options,
            load_error=self._load_error,
        )

    def snapshot_ui(self) -> dict:
        n = len(self._view)
        return {
            "load_state": self._load_state.value,
            "load_error": self._load_error,
            "filter": {
                "department": self._filter.department,
                "month": self._filter.month,
                "search": self._filter.search_text,
            },
            "options": {
                "departments": list(self._options.departments),
                "months": list(self._options.months),
            },
            "metrics": {
                "count": self._metrics.count,
                "avg_attendance": f"{self._metrics.avg_attendance_pct:.1f}%",
                "avg_performance": f"{self._metrics.avg_performance:.1f}",
                "total_overtime": f"{self._metrics.total_overtime:g} hrs",
            },
            "chart": {
                "label": self._chart.series_label,
                "labels": list(self._chart.labels),
                "values": [round(v, 1) for v in self._chart.values],
            },
            "caption": f"Showing {n} record{'' if n == 1 else 's'}",
            "rows": [self._to_ui(r) for r in self._view],
        }

    @staticmethod
    def _filter_month(month: str) -> str:
        if not month or month == ALL:
            return ALL
        try:
            return canonical_month(month)
        except ValidationError:
            # Unknown month: keep it so the view comes out empty.
            return month

    def _derive(self) -> None:
        self._metrics = self._metrics_calc.summarize(self._view)
        self._chart = self._chart_projector.project(self._view)

    def _to_ui(self, r: Record) -> dict:
        status = classify(r)
        return {
            "id": r.id,
            "name": r.name,
            "department": r.department,
            "month": r.month,
            "attendance": f"{r.attendance_pct:.1f}%",
            "performance": r.performance_score,
            "overtime": r.overtime_hours,
            "status": status.value,
            "status_label": status_label(r),
            "css_class": "low" if status is RecordStatus.LOW else "good",
        }
