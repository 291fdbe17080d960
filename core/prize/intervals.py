"""Minimum and maximum gaps between consecutive wins per producer.

Every producer with at least two win-years is reduced to the smallest and the
largest positive gap between consecutive years in sorted order.  Those per-producer
extremes are then folded into global tie sets: a strictly better value resets the
set, an equal value joins it.  Gaps of zero (two wins in the same year) are ignored
entirely, so a producer whose wins all share one year never qualifies.

Producers are visited in the order the grouper first saw them, which keeps the tie
sets and their witnessing pairs reproducible for the same input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from core.prize.grouper import ProducerYearMap


@dataclass(frozen=True)
class IntervalDetail:
    interval: int
    previous_win: int
    following_win: int


@dataclass
class IntervalResult:
    """Global extremes plus the producers (and witnessing pairs) that reach them.

    Producer sets are insertion-ordered dict keys.  Sentinels stay at +/-inf when
    nothing qualifies; check ``has_result`` rather than the numbers.
    """

    min_interval: float = math.inf
    max_interval: float = -math.inf
    min_interval_details: Dict[str, IntervalDetail] = field(default_factory=dict)
    max_interval_details: Dict[str, IntervalDetail] = field(default_factory=dict)

    @property
    def min_interval_producers(self) -> List[str]:
        return list(self.min_interval_details)

    @property
    def max_interval_producers(self) -> List[str]:
        return list(self.max_interval_details)

    @property
    def interval_details(self) -> Dict[str, IntervalDetail]:
        """Single producer -> detail view; a max detail replaces a min detail."""
        merged = dict(self.min_interval_details)
        merged.update(self.max_interval_details)
        return merged

    @property
    def has_result(self) -> bool:
        return bool(self.min_interval_details or self.max_interval_details)


@dataclass
class _ProducerExtremes:
    minimum: Optional[IntervalDetail] = None
    maximum: Optional[IntervalDetail] = None


def producer_extremes(years: Sequence[int]) -> _ProducerExtremes:
    """Smallest and largest positive consecutive gap; first-seen pair wins ties."""
    extremes = _ProducerExtremes()
    ordered = sorted(years)
    for previous, following in zip(ordered, ordered[1:]):
        gap = following - previous
        if gap <= 0:
            continue
        if extremes.minimum is None or gap < extremes.minimum.interval:
            extremes.minimum = IntervalDetail(gap, previous, following)
        if extremes.maximum is None or gap > extremes.maximum.interval:
            extremes.maximum = IntervalDetail(gap, previous, following)
    return extremes


def calculate_intervals(producer_years: ProducerYearMap) -> IntervalResult:
    result = IntervalResult()
    for producer, years in producer_years.items():
        if len(years) < 2:
            continue
        extremes = producer_extremes(years)

        minimum = extremes.minimum
        if minimum is not None:
            if minimum.interval < result.min_interval:
                result.min_interval = minimum.interval
                result.min_interval_details = {producer: minimum}
            elif minimum.interval == result.min_interval:
                result.min_interval_details[producer] = minimum

        maximum = extremes.maximum
        if maximum is not None:
            if maximum.interval > result.max_interval:
                result.max_interval = maximum.interval
                result.max_interval_details = {producer: maximum}
            elif maximum.interval == result.max_interval:
                result.max_interval_details[producer] = maximum
    return result
