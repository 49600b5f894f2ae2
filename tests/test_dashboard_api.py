from __future__ import annotations

import json

import pytest

from attendance_dashboard.main import create_app

ROWS = [
    {"id": 1, "name": "Alice", "department": "Eng", "month": "March",
     "attendance": 18, "total_days": 20, "performance": 85, "overtime": 2},
    {"id": 2, "name": "Bob", "department": "Eng", "month": "March",
     "attendance": 10, "total_days": 20, "performance": 60, "overtime": 0},
]


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    path = tmp_path / "data.json"
    path.write_text(json.dumps(ROWS), encoding="utf-8")
    app = create_app(data_path=str(path))
    return app.test_client()


def test_dashboard_returns_loaded_state(client):
    data = client.get("/api/dashboard").get_json()

    assert data["load_state"] == "READY"
    assert data["metrics"]["count"] == 2
    assert data["chart"]["labels"] == ["Alice", "Bob"]


def test_missing_data_file_degrades(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(data_path=str(tmp_path / "missing.json"))

    data = app.test_client().get("/api/dashboard").get_json()

    assert data["load_state"] == "DEGRADED"
    assert data["rows"] == []


def test_create_update_delete_flow(client):
    payload = {"name": "Carol", "department": "Sales", "month": "January",
               "attendance": 19, "total_days": 20, "performance": 90, "overtime": 4}

    resp = client.post("/api/records", json=payload)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["record"]["id"] == 3
    assert body["dashboard"]["options"]["departments"] == ["Eng", "Sales"]

    resp = client.put("/api/records/3", json={**payload, "attendance": 10})
    assert resp.status_code == 200
    assert resp.get_json()["record"]["attendance_pct"] == pytest.approx(50.0)

    resp = client.delete("/api/records/3")
    assert resp.status_code == 200
    assert resp.get_json()["dashboard"]["metrics"]["count"] == 2


def test_validation_error_is_400(client):
    payload = {"name": "Carol", "department": "Sales", "month": "January",
               "attendance": 25, "total_days": 20, "performance": 90}

    resp = client.post("/api/records", json=payload)

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "attendance exceeds total working days"}


def test_unknown_id_is_404(client):
    assert client.delete("/api/records/99").status_code == 404


def test_filter_and_sort_routes(client):
    data = client.post("/api/view/filter", json={"search": "ali"}).get_json()
    assert [r["name"] for r in data["rows"]] == ["Alice"]

    client.post("/api/view/reset")
    data = client.post("/api/view/sort", json={"column": "attendance"}).get_json()
    assert [r["name"] for r in data["rows"]] == ["Bob", "Alice"]

    assert client.post("/api/view/sort", json={"column": "salary"}).status_code == 400


def test_export_csv(client):
    resp = client.get("/api/export.csv")

    assert resp.mimetype == "text/csv"
    text = resp.data.decode("utf-8-sig")
    assert text.splitlines()[0] == "id,name,department,month,attendance_pct,performance_score,overtime_hours,status"
    assert "Bob" in text


def test_nan_overtime_is_400(client):
    body = ('{"name": "Carol", "department": "Sales", "month": "January", '
            '"attendance": 10, "total_days": 20, "performance": 80, "overtime": NaN}')

    resp = client.post("/api/records", data=body, content_type="application/json")

    assert resp.status_code == 400
    assert client.get("/api/dashboard").get_json()["metrics"]["count"] == 2
