from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.month_utils import canonical_month
from ..common.validators import (
    require_attendance_bound,
    require_int,
    require_non_empty,
    require_non_negative,
    require_number,
)
from ..core.exceptions import ValidationError

# Raw payload name -> RecordFields attribute.
PAYLOAD_FIELDS = {
    "name": "name",
    "department": "department",
    "month": "month",
    "attendance": "days_attended",
    "total_days": "total_working_days",
    "performance": "performance_score",
    "overtime": "overtime_hours",
}


@dataclass(frozen=True)
class RecordFields:
    """Dữ liệu nhập khi tạo/sửa bản ghi (không có id)."""

    name: str
    department: str
    month: str
    days_attended: int
    total_working_days: int
    performance_score: float
    overtime_hours: float = 0.0

    @classmethod
    def from_payload(cls, raw: Mapping[str, Any]) -> "RecordFields":
        """Build from the raw field names used by the bulk payload and the API."""
        missing = [k for k in PAYLOAD_FIELDS if k not in raw and k != "overtime"]
        if missing:
            raise ValidationError(f"missing fields: {', '.join(missing)}")
        values = {attr: raw[key] for key, attr in PAYLOAD_FIELDS.items() if key in raw}
        return cls(**values)

    def validated(self) -> "RecordFields":
        """Return a normalized copy; raise ValidationError on any broken invariant."""
        days = require_non_negative(require_int(self.days_attended, "days attended"), "days attended")
        total = require_int(self.total_working_days, "total working days")
        require_attendance_bound(days, total)
        return RecordFields(
            name=require_non_empty(self.name, "name"),
            department=require_non_empty(self.department, "department"),
            month=canonical_month(self.month),
            days_attended=days,
            total_working_days=total,
            performance_score=require_number(self.performance_score, "performance score"),
            overtime_hours=require_non_negative(require_number(self.overtime_hours, "overtime hours"), "overtime hours"),
        )


@dataclass(frozen=True)
class Record:
    """Thực thể miền (domain): một bản ghi chấm công/hiệu suất theo tháng."""

    id: int
    name: str
    department: str
    month: str
    days_attended: int
    total_working_days: int
    performance_score: float
    overtime_hours: float

    @property
    def attendance_pct(self) -> float:
        return self.days_attended / self.total_working_days * 100

    @classmethod
    def from_fields(cls, record_id: int, fields: RecordFields) -> "Record":
        return cls(
            id=int(record_id),
            name=fields.name,
            department=fields.department,
            month=fields.month,
            days_attended=fields.days_attended,
            total_working_days=fields.total_working_days,
            performance_score=fields.performance_score,
            overtime_hours=fields.overtime_hours,
        )

    def to_fields(self) -> RecordFields:
        return RecordFields(
            name=self.name,
            department=self.department,
            month=self.month,
            days_attended=self.days_attended,
            total_working_days=self.total_working_days,
            performance_score=self.performance_score,
            overtime_hours=self.overtime_hours,
        )
