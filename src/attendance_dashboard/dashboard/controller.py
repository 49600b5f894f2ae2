from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..records.model import RecordFields
from ..container import Container
from .export import frame_to_csv_bytes, view_to_frame



def register(app: Flask, container: Container) -> None:
    service = container.dashboard_service

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _record_json(record) -> dict:
        return {
            "id": record.id,
            "name": record.name,
            "department": record.department,
            "month": record.month,
            "attendance": record.days_attended,
            "total_days": record.total_working_days,
            "attendance_pct": record.attendance_pct,
            "performance": record.performance_score,
            "overtime": record.overtime_hours,
        }

    def _mutation_json(result, status_code: int = 200):
        return jsonify({
            "success": True,
            "action": result.action.value,
            "message": result.message,
            "record": _record_json(result.record),
            "dashboard": service.snapshot_ui(),
        }), status_code

    @app.errorhandler(ValidationError)
    def _validation_failed(exc):
        return jsonify({"success": False, "message": str(exc)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(exc):
        return jsonify({"success": False, "message": str(exc)}), 404

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        return jsonify(service.snapshot_ui())

    @app.route("/api/filters", methods=["GET"], endpoint="filters")
    def filters():
        opts = service.options
        return jsonify({"departments": list(opts.departments), "months": list(opts.months)})

    @app.route("/api/view/filter", methods=["POST"], endpoint="view_filter")
    def view_filter():
        data = _json_body()
        service.set_filter(
            department=str(data.get("department") or "all"),
            month=str(data.get("month") or "all"),
            search_text=str(data.get("search") or ""),
        )
        return jsonify(service.snapshot_ui())

    @app.route("/api/view/reset", methods=["POST"], endpoint="view_reset")
    def view_reset():
        service.reset_filters()
        return jsonify(service.snapshot_ui())

    @app.route("/api/view/sort", methods=["POST"], endpoint="view_sort")
    def view_sort():
        column = _json_body().get("column")
        if not column:
            raise ValidationError("column is required")
        service.sort(str(column))
        return jsonify(service.snapshot_ui())

    @app.route("/api/records", methods=["POST"], endpoint="record_create")
    def record_create():
        result = service.create(RecordFields.from_payload(_json_body()))
        return _mutation_json(result, 201)

    @app.route("/api/records/<int:record_id>", methods=["PUT"], endpoint="record_update")
    def record_update(record_id: int):
        result = service.update(record_id, RecordFields.from_payload(_json_body()))
        return _mutation_json(result)

    @app.route("/api/records/<int:record_id>", methods=["DELETE"], endpoint="record_delete")
    def record_delete(record_id: int):
        return _mutation_json(service.delete(record_id))

    @app.route("/api/export.csv", methods=["GET"], endpoint="export_csv")
    def export_csv():
        csv_bytes = frame_to_csv_bytes(view_to_frame(service.view))
        filename = f"attendance_{date.today().strftime('%Y%m%d')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
