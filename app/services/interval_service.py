from __future__ import annotations

import logging
from typing import Dict, List, Optional

from app.deps import get_win_store
from app.utils.tracing import traced_span
from core.prize.formatter import format_results
from core.prize.grouper import group_by_producer
from core.prize.intervals import calculate_intervals
from storage.winstore import WinStore

logger = logging.getLogger(__name__)


def get_prize_intervals(store: Optional[WinStore] = None) -> Dict[str, List[Dict]]:
    """Compute the min/max producer win intervals from the current winners."""
    store = store or get_win_store()
    with traced_span("movies.prize_intervals"):
        winners = store.ordered_winners()
        result = calculate_intervals(group_by_producer(winners))
    logger.debug(
        "Computed prize intervals over %d winners: min=%s max=%s",
        len(winners),
        result.min_interval_producers,
        result.max_interval_producers,
    )
    return format_results(result)
