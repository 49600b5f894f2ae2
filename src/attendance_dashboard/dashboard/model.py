from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..chart.projector import ChartProjection
from ..core.enums import LoadState, MutationAction
from ..metrics.calculator import MetricsSummary
from ..records.model import Record
from ..view.model import FilterOptions, FilterSpec


@dataclass(frozen=True)
class MutationResult:
    """Kết quả thao tác thêm/sửa/xoá, để tầng giao diện tự hiển thị."""

    action: MutationAction
    record: Record
    message: str


@dataclass(frozen=True)
class DashboardSnapshot:
    """Read-model: view, metrics and chart from the same recompute."""

    load_state: LoadState
    filter: FilterSpec
    view: tuple[Record, ...]
    metrics: MetricsSummary
    chart: ChartProjection
    options: FilterOptions
    load_error: Optional[str] = None
