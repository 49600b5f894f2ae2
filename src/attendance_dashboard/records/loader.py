from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Protocol

import pandas as pd

from ..core.exceptions import LoadError
from .model import PAYLOAD_FIELDS

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [k for k in PAYLOAD_FIELDS if k != "overtime"]


class RecordLoader(Protocol):
    def load(self) -> list[dict[str, Any]]:
        raise NotImplementedError


class FileRecordLoader:
    """Read the initial record set from a JSON array (or a CSV file).

    Returns raw rows keyed by payload names; the store turns them into
    Records. Any problem reading or shaping the file raises LoadError.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[dict[str, Any]]:
        if not self._path.is_file():
            raise LoadError(f"Data file not found: {self._path}")

        try:
            df = self._read_frame()
        except (ValueError, OSError) as exc:
            raise LoadError(f"Failed to read {self._path.name}: {exc}") from exc

        if df.empty:
            return []

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise LoadError(f"Data file is missing columns: {', '.join(missing)}")
        if df[REQUIRED_COLUMNS].isna().any().any():
            raise LoadError("Data file has rows with empty required fields")

        if "overtime" in df.columns:
            df["overtime"] = df["overtime"].fillna(0)

        rows = []
        for raw in df.to_dict(orient="records"):
            if "id" in raw and pd.isna(raw["id"]):
                raw["id"] = None
            rows.append(raw)
        logger.info("Read %d rows from %s", len(rows), self._path)
        return rows

    def _read_frame(self) -> pd.DataFrame:
        if self._path.suffix.lower() == ".csv":
            return pd.read_csv(self._path)

        text = self._path.read_text(encoding="utf-8")
        if not text.lstrip().startswith("["):
            raise LoadError("expected a JSON array of objects")

        df = pd.read_json(io.StringIO(text), orient="records", dtype=False, convert_dates=False)
        if not isinstance(df, pd.DataFrame):
            raise LoadError("expected a JSON array of objects")
        return df
