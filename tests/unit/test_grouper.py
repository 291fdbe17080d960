from __future__ import annotations

from core.prize.grouper import group_by_producer
from storage.winstore.models import WinRecord


def _record(year, *producers):
    return WinRecord(title=f"Movie {year}", year=year, producers=tuple(producers), winner=True)


def test_group_by_producer_splits_credits_and_keeps_read_order():
    grouped = group_by_producer(
        [
            _record(1990, "Joel Silver", "Steven Perry"),
            _record(1991, "Joel Silver"),
            _record(1985, "Buzz Feitshans"),
        ]
    )
    assert list(grouped) == ["Joel Silver", "Steven Perry", "Buzz Feitshans"]
    assert grouped["Joel Silver"] == [1990, 1991]
    assert grouped["Steven Perry"] == [1990]


def test_group_by_producer_preserves_duplicate_years():
    grouped = group_by_producer([_record(1990, "X"), _record(1990, "X"), _record(1995, "X")])
    assert grouped == {"X": [1990, 1990, 1995]}


def test_group_by_producer_ignores_records_without_credits():
    assert group_by_producer([_record(2000)]) == {}
    assert group_by_producer([]) == {}


def test_group_by_producer_is_case_sensitive():
    grouped = group_by_producer([_record(1990, "Joel Silver"), _record(1991, "joel silver")])
    assert set(grouped) == {"Joel Silver", "joel silver"}
