"""Load movie-list CSV files or inline CSV text into the win store.

Files that do not exist or cannot be opened, and rows that fail normalisation, are
reported in the summary rather than raised; everything that parses is stored.
Bytes that are not valid UTF-8 are replaced rather than aborting the file.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from app.deps import get_win_store
from app.utils.tracing import traced_span
from core.prize.normalizer import DEFAULT_DELIMITER, read_movie_csv
from storage.winstore import WinStore

logger = logging.getLogger(__name__)


@dataclass
class SkippedRow:
    source: str
    line: int
    reason: str


@dataclass
class ImportSummary:
    imported: int = 0
    skipped: List[SkippedRow] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "imported": self.imported,
            "skipped": [vars(row) for row in self.skipped],
        }


def import_movies(
    paths: List[str],
    csv_text: List[str],
    delimiter: str = DEFAULT_DELIMITER,
    store: Optional[WinStore] = None,
) -> ImportSummary:
    """Entry-point for CLI/API imports."""
    store = store or get_win_store()
    summary = ImportSummary()
    with traced_span("movies.import", paths=len(paths), blobs=len(csv_text)):
        for item in paths:
            path = Path(item)
            if not path.exists():
                logger.warning("Import file %s not found", path)
                summary.skipped.append(SkippedRow(source=str(path), line=0, reason="file not found"))
                continue
            try:
                with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
                    _import_stream(handle, str(path), delimiter, store, summary)
            except OSError as exc:
                logger.warning("Import file %s unreadable: %s", path, exc)
                summary.skipped.append(SkippedRow(source=str(path), line=0, reason=f"unreadable file: {exc.strerror or exc}"))

        for offset, text in enumerate(csv_text):
            _import_stream(io.StringIO(text, newline=""), f"inline:{offset}", delimiter, store, summary)

        store.flush()
    logger.info("Imported %d movies, skipped %d rows", summary.imported, len(summary.skipped))
    return summary


def _import_stream(handle, source: str, delimiter: str, store: WinStore, summary: ImportSummary) -> None:
    records, errors = read_movie_csv(handle, delimiter)
    summary.imported += store.add_many(records)
    summary.skipped.extend(SkippedRow(source=source, line=err.line, reason=err.reason) for err in errors)
