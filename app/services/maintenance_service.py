"""Maintenance helpers for clearing the win store."""

from __future__ import annotations

from typing import Dict

from app.deps import get_win_store


def purge_system() -> Dict[str, str]:
    """Remove every stored movie record, including the persisted snapshot."""
    store = get_win_store()
    store.clear()
    return {"status": "ok", "store": "cleared"}
