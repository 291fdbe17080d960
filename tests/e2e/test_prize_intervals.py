from __future__ import annotations

from fastapi.testclient import TestClient

from app.deps import get_app_state
from app.main import app
from app.services.import_service import import_movies

CSV = (
    "year;title;studios;producers;winner\n"
    "1980;Movie A;Studio;Jerry Weintraub;yes\n"
    "1986;Movie B;Studio;Yoram Globus and Menahem Golan;yes\n"
    "1987;Movie C;Studio;Yoram Globus and Menahem Golan;yes\n"
    "1990;Movie D;Studio;Steven Perry, Joel Silver;yes\n"
    "1991;Movie E;Studio;Joel Silver;yes\n"
    "1998;Movie F;Studio;Jerry Weintraub;yes\n"
    "2000;Nominee;Studio;Joel Silver;\n"
    "bad;Broken;Studio;Someone;yes\n"
)

client = TestClient(app)


def setup_module(_module):
    state = get_app_state()
    state.store.clear()
    import_movies([], [CSV])


def test_prize_intervals_endpoint_reports_ties_and_max():
    response = client.get("/movies/prize-intervals")
    assert response.status_code == 200
    assert response.json() == {
        "min": [
            {"producer": "Joel Silver", "interval": 1, "previousWin": 1990, "followingWin": 1991},
            {"producer": "Yoram Globus and Menahem Golan", "interval": 1, "previousWin": 1986, "followingWin": 1987},
        ],
        "max": [
            {"producer": "Jerry Weintraub", "interval": 18, "previousWin": 1980, "followingWin": 1998},
        ],
    }


def test_prize_intervals_is_stable_across_calls():
    first = client.get("/movies/prize-intervals").json()
    second = client.get("/movies/prize-intervals").json()
    assert first == second


def test_list_movies_filters_winners():
    everything = client.get("/movies").json()
    winners = client.get("/movies", params={"winner": "true"}).json()
    assert len(everything) == 7
    assert len(winners) == 6
    assert all(item["winner"] for item in winners)
    assert everything[3]["producers"] == ["Steven Perry", "Joel Silver"]
