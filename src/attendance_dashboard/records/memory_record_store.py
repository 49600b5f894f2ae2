from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from ..common.validators import require_int
from ..core.constants import DEFAULT_ID_SEED
from ..core.exceptions import LoadError, NotFoundError, ValidationError
from .model import Record, RecordFields

logger = logging.getLogger(__name__)


class RecordStore:
    """Canonical in-memory record collection, kept in insertion order.

    Ids come from a high-water mark so a deleted id is never handed out again.
    The store does not recompute any view; callers do that after mutating.
    """

    def __init__(self, *, id_seed: int = DEFAULT_ID_SEED):
        self._records: list[Record] = []
        self._last_id = int(id_seed)

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def get(self, record_id: int) -> Optional[Record]:
        idx = self._index_of(record_id)
        return None if idx is None else self._records[idx]

    def create(self, fields: RecordFields) -> Record:
        clean = fields.validated()
        record = Record.from_fields(self._next_id(), clean)
        self._records.append(record)
        self._last_id = record.id
        logger.info("Created record id=%s name=%s", record.id, record.name)
        return record

    def update(self, record_id: int, fields: RecordFields) -> Record:
        idx = self._require_index(record_id)
        clean = fields.validated()
        record = Record.from_fields(self._records[idx].id, clean)
        self._records[idx] = record
        logger.info("Updated record id=%s", record.id)
        return record

    def delete(self, record_id: int) -> Record:
        idx = self._require_index(record_id)
        record = self._records.pop(idx)
        logger.info("Deleted record id=%s", record.id)
        return record

    def bulk_load(self, rows: Iterable[Mapping[str, Any]]) -> int:
        if self._records:
            raise LoadError("Record store already holds data")

        loaded: list[Record] = []
        seen: set[int] = set()
        last_id = self._last_id
        pending_ids: list[int] = []

        for pos, raw in enumerate(rows, start=1):
            try:
                fields = RecordFields.from_payload(raw).validated()
                raw_id = raw.get("id")
                record_id = None if raw_id is None else require_int(raw_id, "id")
            except ValidationError as exc:
                raise LoadError(f"Row {pos}: {exc}") from exc

            if record_id is not None:
                if record_id in seen:
                    raise LoadError(f"Row {pos}: duplicate id {record_id}")
                seen.add(record_id)
                last_id = max(last_id, record_id)
            else:
                pending_ids.append(len(loaded))
            loaded.append(Record.from_fields(record_id or 0, fields))

        # Rows without an id are numbered after the highest id in the payload.
        for idx in pending_ids:
            last_id += 1
            loaded[idx] = Record.from_fields(last_id, loaded[idx].to_fields())

        self._records = loaded
        self._last_id = last_id
        return len(loaded)

    def _next_id(self) -> int:
        existing = max((r.id for r in self._records), default=self._last_id)
        return max(existing, self._last_id) + 1

    def _index_of(self, record_id: int) -> Optional[int]:
        for i, r in enumerate(self._records):
            if r.id == record_id:
                return i
        return None

    def _require_index(self, record_id: int) -> int:
        idx = self._index_of(record_id)
        if idx is None:
            raise NotFoundError(f"Record {record_id} not found")
        return idx
