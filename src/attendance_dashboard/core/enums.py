from __future__ import annotations

from enum import Enum


class RecordStatus(str, Enum):
    """Phân loại bản ghi hiển thị trên bảng."""

    GOOD = "good"
    LOW = "low"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortColumn(str, Enum):
    """Cột có thể sắp xếp. `attendance` là cột ảo (attendance_pct)."""

    NAME = "name"
    DEPARTMENT = "department"
    MONTH = "month"
    ATTENDANCE = "attendance"
    PERFORMANCE = "performance"
    OVERTIME = "overtime"
    DAYS_ATTENDED = "days_attended"
    TOTAL_WORKING_DAYS = "total_working_days"


class LoadState(str, Enum):
    """Trạng thái nạp dữ liệu ban đầu."""

    PENDING = "PENDING"
    READY = "READY"
    DEGRADED = "DEGRADED"


class MutationAction(str, Enum):
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"
