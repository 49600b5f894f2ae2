from __future__ import annotations

import json

import pytest

from attendance_dashboard.core.exceptions import LoadError
from attendance_dashboard.records.loader import FileRecordLoader

ROWS = [
    {"id": 1, "name": "Alice", "department": "Eng", "month": "March",
     "attendance": 18, "total_days": 20, "performance": 85, "overtime": 2},
    {"id": 2, "name": "Bob", "department": "Eng", "month": "March",
     "attendance": 10, "total_days": 20, "performance": 60, "overtime": 0},
]


def test_loads_json_array(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(ROWS), encoding="utf-8")

    rows = FileRecordLoader(path).load()

    assert [r["name"] for r in rows] == ["Alice", "Bob"]
    assert rows[0]["attendance"] == 18
    assert rows[1]["total_days"] == 20


def test_loads_csv(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "id,name,department,month,attendance,total_days,performance,overtime\n"
        "1,Alice,Eng,March,18,20,85,2\n",
        encoding="utf-8",
    )

    rows = FileRecordLoader(path).load()

    assert len(rows) == 1
    assert rows[0]["month"] == "March"


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(LoadError, match="not found"):
        FileRecordLoader(tmp_path / "nope.json").load()


def test_malformed_json_raises_load_error(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LoadError):
        FileRecordLoader(path).load()


def test_missing_columns_raise_load_error(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([{"name": "Alice", "month": "March"}]), encoding="utf-8")

    with pytest.raises(LoadError, match="missing columns"):
        FileRecordLoader(path).load()


def test_empty_array_loads_nothing(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[]", encoding="utf-8")

    assert FileRecordLoader(path).load() == []


@pytest.mark.parametrize("payload", ['{"records": []}', '{"a": 1}', '"hello"'])
def test_non_array_json_raises_load_error(tmp_path, payload):
    path = tmp_path / "data.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(LoadError, match="JSON array"):
        FileRecordLoader(path).load()
