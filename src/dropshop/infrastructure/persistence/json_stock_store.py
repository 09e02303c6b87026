"""JSON-file-backed implementation of StockStore (local variant).

The file is a flat key-value object, so the stock level sits under one
key next to anything else a caller chooses to keep there.  Clearing the
level removes the key; the rest of the file is left alone.

A file that does not parse, or a stored value that is not a
non-negative integer, reads as "nothing stored" so the default applies.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dropshop.domain.model.stock import DEFAULT_STOCK
from dropshop.domain.repository.stock_store import StockStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "single-item-stock-v1"


class JsonStockStore(StockStore):

    def __init__(
        self,
        file_path: Path,
        default: int = DEFAULT_STOCK,
        key: str = STORAGE_KEY,
    ) -> None:
        super().__init__(default)
        self._file_path = file_path
        self._key = key

    # --- StockStore hooks -----------------------------------------------------

    def _load(self) -> int | None:
        records = self._load_raw()
        if records is None:
            return None
        raw = records.get(self._key)
        if raw is None or isinstance(raw, bool):
            return None
        try:
            units = int(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid stored stock %r in %s", raw, self._file_path)
            return None
        if units < 0:
            logger.warning("Ignoring negative stored stock %d in %s", units, self._file_path)
            return None
        return units

    def _save(self, units: int) -> None:
        records = self._load_raw() or {}
        records[self._key] = units
        self._persist_raw(records)

    def _clear(self) -> None:
        records = self._load_raw()
        if records is None:
            self._persist_raw({})
        elif self._key in records:
            del records[self._key]
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict | None:
        """Return the stored records, or None when the file is unreadable."""
        if not self._file_path.exists():
            return {}
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Cannot read stock file %s: %s", self._file_path, exc)
            return None
        if not isinstance(records, dict):
            logger.warning("Stock file %s does not hold a JSON object", self._file_path)
            return None
        return records

    def _persist_raw(self, records: dict) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )
