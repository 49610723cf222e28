from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from assistant.main import app

EXAMPLE_CONTENT = Path(__file__).resolve().parents[1] / "content" / "company.example.json"


@pytest.fixture
def client(env_settings):
    with TestClient(app) as c:
        yield c


def start(client):
    r = client.post("/live/start")
    assert r.status_code == 200
    return r.json()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_start(client):
    data = start(client)
    assert data["session_id"].startswith("live_")
    assert data["bot_reply"].startswith("Welcome to")
    assert len(data["suggestions"]) == 4


def test_message_round(client):
    session_id = start(client)["session_id"]
    r = client.post(
        "/live/message",
        json={"session_id": session_id, "user_message": "What is the price for a website?"},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["intent"] == "get_quote"
    assert data["bot_reply"].startswith("Thanks for reaching out!")
    assert data["delay_ms"] == 0
    assert data["suggestions"] == ["Schedule consultation", "View pricing details", "Custom quote"]
    assert {"type": "service", "value": "website", "confidence": 0.95} in data["entities"]
    assert data["sentiment"] in ("positive", "negative", "neutral")

    r = client.get(f"/live/session/{session_id}")
    assert r.status_code == 200
    body = r.json()
    assert body["context"]["turn_count"] == 1
    assert [m["sender"] for m in body["messages"]] == ["system", "user", "system"]

    r = client.get(f"/live/session/{session_id}/summary")
    assert r.status_code == 200
    assert r.json()["intents"] == ["get_quote"]


@pytest.mark.parametrize(
    "body",
    [
        {"user_message": "hello"},
        {"session_id": "live_x", "user_message": "   "},
    ],
)
def test_bad_message_requests(client, body):
    assert client.post("/live/message", json=body).status_code == 400


def test_unknown_session(client):
    r = client.post("/live/message", json={"session_id": "live_missing", "user_message": "hi"})
    assert r.status_code == 404
    assert client.get("/live/session/live_missing").status_code == 404
    assert client.get("/live/session/live_missing/summary").status_code == 404


def test_content_file_from_env(env_settings):
    env_settings.setenv("ASSISTANT_CONTENT_PATH", str(EXAMPLE_CONTENT))
    with TestClient(app) as c:
        assert start(c)["bot_reply"].startswith("Welcome to Toiral Web Development!")
