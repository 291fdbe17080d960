from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv

from app.seed_mode import seed_on_startup_enabled
from core.prize.normalizer import DEFAULT_DELIMITER, read_movie_csv
from storage.winstore import WinStore

ROOT = Path(__file__).resolve().parent.parent

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _resolve_path(value: Optional[str]) -> Optional[Path]:
    if not value:
        return None
    path = Path(value)
    return path if path.is_absolute() else ROOT / path


@dataclass
class Settings:
    seed_path: Optional[Path]
    delimiter: str
    persist_path: Optional[Path]
    host: str
    port: int


@dataclass
class AppState:
    store: WinStore
    settings: Settings
    config: Dict


def load_settings(config: Dict) -> Settings:
    seed_cfg = config.get("seed") or {}
    store_cfg = config.get("store") or {}
    server_cfg = config.get("server") or {}
    return Settings(
        seed_path=_resolve_path(os.getenv("MOVIES_SEED_PATH") or seed_cfg.get("path")),
        delimiter=seed_cfg.get("delimiter") or DEFAULT_DELIMITER,
        persist_path=_resolve_path(os.getenv("MOVIES_STORE_PATH") or store_cfg.get("persist_path")),
        host=os.getenv("MOVIES_HOST") or server_cfg.get("host", "127.0.0.1"),
        port=int(os.getenv("MOVIES_PORT") or server_cfg.get("port", 8000)),
    )


def _seed_store(store: WinStore, settings: Settings) -> None:
    """Import the configured movie list into an empty store."""
    if store.count() or settings.seed_path is None:
        return
    if not settings.seed_path.exists():
        logger.warning("Seed file %s not found; starting with an empty store", settings.seed_path)
        return
    with settings.seed_path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
        records, errors = read_movie_csv(handle, settings.delimiter)
    stored = store.add_many(records)
    store.flush()
    logger.info("Seeded %d movies from %s (%d rows skipped)", stored, settings.seed_path, len(errors))


@lru_cache(maxsize=1)
def get_app_state() -> AppState:
    load_dotenv(ROOT / ".env")
    config = _load_yaml(ROOT / "config" / "movies.yaml")
    settings = load_settings(config)
    store = WinStore(persist_path=settings.persist_path)
    if seed_on_startup_enabled():
        _seed_store(store, settings)
    return AppState(store=store, settings=settings, config=config)


def get_settings() -> Settings:
    return get_app_state().settings


def get_win_store() -> WinStore:
    return get_app_state().store
