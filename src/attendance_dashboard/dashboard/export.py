from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..records.model import Record
from ..records.status import classify

EXPORT_COLUMNS = [
    "id",
    "name",
    "department",
    "month",
    "attendance_pct",
    "performance_score",
    "overtime_hours",
    "status",
]


def view_to_frame(rows: Sequence[Record]) -> pd.DataFrame:
    data = [
        {
            "id": r.id,
            "name": r.name,
            "department": r.department,
            "month": r.month,
            "attendance_pct": round(r.attendance_pct, 1),
            "performance_score": r.performance_score,
            "overtime_hours": r.overtime_hours,
            "status": classify(r).value,
        }
        for r in rows
    ]
    return pd.DataFrame(data, columns=EXPORT_COLUMNS)


def frame_to_csv_bytes(df: pd.DataFrame) -> bytes:
    # BOM so spreadsheet apps pick up UTF-8 names.
    return df.to_csv(index=False).encode("utf-8-sig")
