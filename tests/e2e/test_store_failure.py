from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.deps import get_app_state
from app.main import app

client = TestClient(app)


@pytest.fixture
def corrupt_snapshot(tmp_path, monkeypatch):
    path = tmp_path / "records.json"
    path.write_text('{"records": [{"title": "cut off', encoding="utf-8")
    monkeypatch.setenv("MOVIES_STORE_PATH", str(path))
    monkeypatch.setenv("MOVIES_SEED", "0")
    get_app_state.cache_clear()
    yield path
    get_app_state.cache_clear()


def test_prize_intervals_returns_503_on_corrupt_snapshot(corrupt_snapshot):
    response = client.get("/movies/prize-intervals")
    assert response.status_code == 503
    assert response.json()["detail"] == "WIN_STORE_UNAVAILABLE"


def test_list_returns_503_on_corrupt_snapshot(corrupt_snapshot):
    response = client.get("/movies")
    assert response.status_code == 503
    assert response.json()["detail"] == "WIN_STORE_UNAVAILABLE"


def test_import_returns_503_on_corrupt_snapshot(corrupt_snapshot):
    response = client.post(
        "/movies/import",
        json={"csv_text": ["year;title;studios;producers;winner\n1990;A;S;P;yes\n"]},
    )
    assert response.status_code == 503
    assert response.json()["detail"] == "WIN_STORE_UNAVAILABLE"
    assert corrupt_snapshot.read_text(encoding="utf-8").startswith('{"records": [{"title"')
