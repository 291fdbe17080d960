from __future__ import annotations

import os


def seed_on_startup_enabled() -> bool:
    """
    Return True when the seed movie list should be imported at startup.

    Defaults to True except while tests are running (detected via PYTEST_CURRENT_TEST),
    unless explicitly set via MOVIES_SEED=0/false/no or 1/true/yes.
    """
    val = os.getenv("MOVIES_SEED", "").strip().lower()
    if val in ("0", "false", "no"):
        return False
    if val in ("1", "true", "yes"):
        return True
    return os.getenv("PYTEST_CURRENT_TEST") is None
