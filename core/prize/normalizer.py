"""Row normalisation for the semicolon-delimited movie list.

Each CSV row is turned into an immutable WinRecord: the producers column is split
on commas and trimmed, the winner column collapses to a boolean, and the year must
be an integer.  Rows that cannot be coerced are reported back as RowError entries
instead of aborting the import, so a single bad line never loses the rest of the file.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from storage.winstore.models import WinRecord

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"
WINNER_TRUE = "yes"


class RowRejected(ValueError):
    """A row whose fields cannot be coerced into a WinRecord."""


@dataclass
class RowError:
    line: int
    reason: str
    raw: Dict[str, Optional[str]] = field(default_factory=dict)


def split_producers(value: Optional[str]) -> Tuple[str, ...]:
    """Split a multi-producer credit on commas, dropping blank entries."""
    if not value:
        return ()
    names = (name.strip() for name in value.split(","))
    return tuple(name for name in names if name)


def parse_winner(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() == WINNER_TRUE


def parse_year(value: Optional[str]) -> int:
    """Plain ASCII integer years only; ``1_990`` and non-ASCII digits are rejected."""
    text = (value or "").strip()
    if not (text.isascii() and text.lstrip("+-").isdigit()):
        raise RowRejected(f"invalid year: {value!r}")
    try:
        return int(text)
    except ValueError as exc:
        raise RowRejected(f"invalid year: {value!r}") from exc


def normalize_row(row: Mapping[str, Optional[str]]) -> WinRecord:
    """Build a WinRecord from one raw row; raises RowRejected on a bad year."""
    return WinRecord(
        title=(row.get("title") or "").strip(),
        year=parse_year(row.get("year")),
        studios=(row.get("studios") or "").strip(),
        producers=split_producers(row.get("producers")),
        winner=parse_winner(row.get("winner")),
    )


def read_movie_csv(
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> Tuple[List[WinRecord], List[RowError]]:
    """Parse a headed CSV stream into records plus per-row errors.

    Line numbers are physical lines in the source, the header being line 1.
    A row the csv module cannot tokenise is reported and skipped; a stream
    that stops decoding ends the parse but keeps the rows read so far.
    """
    records: List[WinRecord] = []
    errors: List[RowError] = []
    reader = csv.DictReader(lines, delimiter=delimiter)
    try:
        fieldnames = reader.fieldnames
    except (csv.Error, UnicodeDecodeError) as exc:
        logger.warning("Unreadable header: %s", exc)
        errors.append(RowError(line=1, reason=f"unreadable header: {exc}"))
        return records, errors
    if fieldnames:
        reader.fieldnames = [name.strip().lower() for name in fieldnames]

    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            line = reader.reader.line_num
            logger.warning("Skipping unreadable line %d: %s", line, exc)
            errors.append(RowError(line=line, reason=f"unreadable row: {exc}"))
            continue
        except UnicodeDecodeError as exc:
            line = reader.reader.line_num + 1
            logger.warning("Stopping at line %d, stream is not valid text: %s", line, exc)
            errors.append(RowError(line=line, reason=f"undecodable text: {exc.reason}"))
            break
        line = reader.line_num
        raw = {key: value for key, value in row.items() if key is not None}
        try:
            records.append(normalize_row(raw))
        except RowRejected as exc:
            logger.warning("Skipping line %d: %s", line, exc)
            errors.append(RowError(line=line, reason=str(exc), raw=raw))
    return records, errors
