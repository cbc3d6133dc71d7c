# tests/test_api.py

import pytest
from fastapi.testclient import TestClient

from api import main
from longspan.settings import SettingsStore

LONG = (
    "This is a considerably longer sentence that exceeds "
    "the configured word threshold easily."
)
TEXT = f"This is a short sentence. {LONG}"


@pytest.fixture
def client(tmp_path, monkeypatch):
    store = SettingsStore(str(tmp_path / "settings.yaml"))
    store.load()
    monkeypatch.setattr(main, "store", store)
    return TestClient(main.app)


def test_highlight_returns_ranges(client):
    resp = client.post("/highlight", json={"text": TEXT})
    assert resp.status_code == 200

    body = resp.json()
    assert body["max_words"] == 10
    assert body["highlight_color"] == "rgba(255,182,193,0.5)"
    assert body["ranges"] == [{"start": 26, "end": 26 + len(LONG), "text": LONG}]


def test_highlight_overrides(client):
    resp = client.post(
        "/highlight",
        json={"text": TEXT, "max_words": 3, "highlight_color": "#abcdef"},
    )
    body = resp.json()
    assert len(body["ranges"]) == 2
    assert body["highlight_color"] == "#abcdef"


def test_highlight_rejects_non_positive_threshold(client):
    resp = client.post("/highlight", json={"text": TEXT, "max_words": 0})
    assert resp.status_code == 422


def test_highlight_empty_document(client):
    resp = client.post("/highlight", json={"text": ""})
    assert resp.status_code == 200
    assert resp.json()["ranges"] == []


def test_mark(client):
    resp = client.post("/mark", json={"text": TEXT})
    assert resp.json()["marked_text"] == f"This is a short sentence. =={LONG}=="


def test_report(client):
    resp = client.post("/report", json={"text": f"Short.\n{LONG}"})
    spans = resp.json()["spans"]
    assert len(spans) == 1
    assert spans[0]["line"] == 2
    assert spans[0]["column"] == 0
    assert spans[0]["words"] == 13


def test_settings_update_and_validation(client, tmp_path):
    resp = client.put("/settings", json={"max_words": "lots"})
    assert resp.status_code == 422
    assert client.get("/settings").json()["max_words"] == 10

    resp = client.put("/settings", json={"max_words": 4, "highlight_color": "#000000"})
    assert resp.status_code == 200
    assert client.get("/settings").json() == {"max_words": 4, "highlight_color": "#000000"}
    assert (tmp_path / "settings.yaml").exists()

    resp = client.post("/highlight", json={"text": TEXT})
    assert len(resp.json()["ranges"]) == 2
