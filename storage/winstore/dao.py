"""In-memory win record store with optional JSON persistence."""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Iterable, List, Optional

from .models import WinRecord

logger = logging.getLogger(__name__)


class WinStoreError(RuntimeError):
    """Raised when the store cannot read its backing snapshot."""


class WinStore:
    """Insertion-ordered record store; every read returns an independent snapshot."""

    def __init__(self, persist_path: Optional[Path] = None):
        self.records: List[WinRecord] = []
        self.persist_path = persist_path
        self._lock = threading.Lock()
        self._dirty: bool = False
        if self.persist_path:
            self._load_from_disk()

    def clear(self) -> None:
        """Drop every stored record and rewrite the snapshot."""
        with self._lock:
            self.records.clear()
            self._dirty = True
        self._persist(force=True)

    def add_many(self, records: Iterable[WinRecord]) -> int:
        """Append records in the order given and return how many were stored."""
        batch = list(records)
        with self._lock:
            self.records.extend(batch)
            if batch:
                self._dirty = True
        return len(batch)

    def count(self) -> int:
        with self._lock:
            return len(self.records)

    def list_records(self) -> List[WinRecord]:
        """Return all records in insertion order."""
        with self._lock:
            return list(self.records)

    def ordered_winners(self) -> List[WinRecord]:
        """Return winning records sorted by year; equal years keep insertion order."""
        with self._lock:
            winners = [record for record in self.records if record.winner]
        return sorted(winners, key=lambda record: record.year)

    # persistence helpers
    def flush(self, force: bool = False) -> None:
        """Persist current state to disk when dirty or when force=True."""
        self._persist(force=force)

    def _persist(self, force: bool = False) -> None:
        if not self.persist_path:
            return
        with self._lock:
            if not self._dirty and not force:
                return
            snapshot = {"records": [record.to_dict() for record in self.records]}
            self._dirty = False
        self.persist_path.parent.mkdir(parents=True, exist_ok=True)
        # staged beside the target; os.replace swaps the whole file in
        staging = self.persist_path.with_name(self.persist_path.name + ".tmp")
        staging.write_text(json.dumps(snapshot), encoding="utf-8")
        os.replace(staging, self.persist_path)

    def _load_from_disk(self) -> None:
        """Initialise from an on-disk snapshot; a corrupt snapshot is fatal."""
        if not self.persist_path or not self.persist_path.exists():
            return
        try:
            payload = json.loads(self.persist_path.read_text(encoding="utf-8"))
            records = [WinRecord.from_dict(item) for item in payload.get("records", [])]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.exception("Failed to load win store snapshot from %s", self.persist_path)
            raise WinStoreError(f"unreadable snapshot: {self.persist_path}") from exc
        self.records = records
        logger.info("Loaded %d records from %s", len(records), self.persist_path)
