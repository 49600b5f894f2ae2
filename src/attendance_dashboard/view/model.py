from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import ALL


@dataclass(frozen=True)
class FilterSpec:
    """Bộ lọc hiện tại: phòng ban, tháng, chuỗi tìm kiếm theo tên."""

    department: str = ALL
    month: str = ALL
    search_text: str = ""


@dataclass(frozen=True)
class FilterOptions:
    departments: tuple[str, ...]
    months: tuple[str, ...]
