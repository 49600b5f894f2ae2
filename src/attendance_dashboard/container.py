from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .chart.projector import ChartProjector
from .dashboard.service import DashboardService
from .metrics.calculator import MetricsCalculator
from .records.loader import FileRecordLoader
from .records.memory_record_store import RecordStore
from .view.engine import ViewEngine


@dataclass(frozen=True)
class Container:
    store: RecordStore
    loader: FileRecordLoader
    engine: ViewEngine

    dashboard_service: DashboardService


def build_container(*, data_path: str | Path, id_seed: int = 0) -> Container:
    store = RecordStore(id_seed=id_seed)
    loader = FileRecordLoader(data_path)
    engine = ViewEngine()

    dashboard_service = DashboardService(
        store,
        engine=engine,
        metrics=MetricsCalculator(),
        chart=ChartProjector(),
    )

    return Container(
        store=store,
        loader=loader,
        engine=engine,
        dashboard_service=dashboard_service,
    )
