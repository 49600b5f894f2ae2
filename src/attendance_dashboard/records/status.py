from __future__ import annotations

from ..core.constants import LOW_ATTENDANCE_PCT, LOW_PERFORMANCE_SCORE
from ..core.enums import RecordStatus
from .model import Record


def status_reasons(record: Record) -> list[str]:
    reasons = []
    if record.attendance_pct < LOW_ATTENDANCE_PCT:
        reasons.append("Low Attendance")
    if record.performance_score < LOW_PERFORMANCE_SCORE:
        reasons.append("Low Performance")
    return reasons


def classify(record: Record) -> RecordStatus:
    """Low if attendance < 75% or performance < 70, otherwise good."""
    return RecordStatus.LOW if status_reasons(record) else RecordStatus.GOOD


def status_label(record: Record) -> str:
    reasons = status_reasons(record)
    return " ".join(reasons) if reasons else "Good"
