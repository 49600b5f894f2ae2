from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence

from .model import Record, RecordFields


class RecordRepository(Protocol):
    def list(self) -> Sequence[Record]:
        raise NotImplementedError

    def get(self, record_id: int) -> Optional[Record]:
        raise NotImplementedError

    def create(self, fields: RecordFields) -> Record:
        raise NotImplementedError

    def update(self, record_id: int, fields: RecordFields) -> Record:
        raise NotImplementedError

    def delete(self, record_id: int) -> Record:
        raise NotImplementedError

    def bulk_load(self, rows: Iterable[Mapping[str, Any]]) -> int:
        """Adopt the initial record set; all-or-nothing."""

        raise NotImplementedError
