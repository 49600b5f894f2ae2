import pytest

from attendance_dashboard.chart.projector import ChartProjector
from attendance_dashboard.records.model import Record


def test_groups_by_name_in_first_occurrence_order():
    view = [
        Record(1, "Bob", "Eng", "January", 10, 20, 60, 0),
        Record(2, "Alice", "Eng", "January", 20, 20, 90, 0),
        Record(3, "Bob", "Eng", "February", 20, 20, 70, 0),
    ]

    chart = ChartProjector().project(view)

    assert chart.labels == ("Bob", "Alice")
    assert chart.values == pytest.approx((75.0, 100.0))
    assert chart.series_label == "Average Attendance %"


def test_empty_view_projects_nothing():
    chart = ChartProjector().project([])
    assert chart.labels == ()
    assert chart.values == ()
