from __future__ import annotations

from typing import Dict, List

from core.prize.intervals import IntervalDetail, IntervalResult


def _entries(details: Dict[str, IntervalDetail]) -> List[Dict]:
    return [
        {
            "producer": producer,
            "interval": detail.interval,
            "previousWin": detail.previous_win,
            "followingWin": detail.following_win,
        }
        for producer, detail in sorted(details.items())
    ]


def format_results(result: IntervalResult) -> Dict[str, List[Dict]]:
    """Render the tie sets as the ``{min, max}`` payload, sorted by producer."""
    return {
        "min": _entries(result.min_interval_details),
        "max": _entries(result.max_interval_details),
    }
