from __future__ import annotations

from typing import Dict, Iterable, List

from storage.winstore.models import WinRecord

ProducerYearMap = Dict[str, List[int]]


def group_by_producer(records: Iterable[WinRecord]) -> ProducerYearMap:
    """Map each credited producer to the years of the records crediting them.

    Producers keep first-seen order and years keep read order; repeated years
    are preserved.
    """
    producer_years: ProducerYearMap = {}
    for record in records:
        for producer in record.producers:
            producer_years.setdefault(producer, []).append(record.year)
    return producer_years
