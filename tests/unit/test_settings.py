from __future__ import annotations

from app.deps import ROOT, load_settings
from app.seed_mode import seed_on_startup_enabled


def test_seed_disabled_under_pytest_by_default(monkeypatch):
    monkeypatch.delenv("MOVIES_SEED", raising=False)
    assert not seed_on_startup_enabled()


def test_seed_env_override(monkeypatch):
    monkeypatch.setenv("MOVIES_SEED", "yes")
    assert seed_on_startup_enabled()
    monkeypatch.setenv("MOVIES_SEED", "0")
    assert not seed_on_startup_enabled()


def test_load_settings_resolves_relative_paths_and_env(monkeypatch):
    monkeypatch.delenv("MOVIES_SEED_PATH", raising=False)
    monkeypatch.delenv("MOVIES_STORE_PATH", raising=False)
    monkeypatch.delenv("MOVIES_HOST", raising=False)
    monkeypatch.setenv("MOVIES_PORT", "9001")
    settings = load_settings({"seed": {"path": "data/seed/movielist.csv"}, "server": {"host": "0.0.0.0"}})
    assert settings.seed_path == ROOT / "data" / "seed" / "movielist.csv"
    assert settings.persist_path is None
    assert settings.delimiter == ";"
    assert settings.host == "0.0.0.0"
    assert settings.port == 9001
