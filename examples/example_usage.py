"""Example: use the service layer directly (without Flask).

Controllers are only a thin layer; the dashboard logic lives in services.
"""

import importlib

from attendance_dashboard.config import get_settings_module
from attendance_dashboard.container import build_container
from attendance_dashboard.records.model import RecordFields


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_path=settings.DATA_PATH)
    service = container.dashboard_service
    service.load(container.loader)

    service.set_filter(department="Engineering")
    service.sort("attendance")
    print(service.snapshot_ui()["rows"])

    result = service.create(
        RecordFields(
            name="Eve Vo",
            department="Engineering",
            month="April",
            days_attended=19,
            total_working_days=22,
            performance_score=81,
            overtime_hours=3,
        )
    )
    print(result.message, service.metrics)


if __name__ == "__main__":
    main()
