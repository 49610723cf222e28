"""
Quick end-to-end check against a running server: health → start → a few turns → session → summary.
Run with: from project root, server must be running (uvicorn assistant.main:app).
  python scripts/chat_smoke.py
"""
import os

import requests

BASE = os.environ.get("ASSISTANT_BASE_URL", "http://127.0.0.1:8000")
TIMEOUT = 15

TURNS = [
    "Hi, we're a startup looking for a new website",
    "What is the price for a website?",
    "We need it ASAP, it's urgent!",
    "Can we schedule a call?",
]


def main():
    # 1. Health
    r = requests.get(f"{BASE}/health", timeout=TIMEOUT)
    assert r.status_code == 200, f"Health failed: {r.status_code}"
    print("OK /health")

    # 2. Start session
    r = requests.post(f"{BASE}/live/start", timeout=TIMEOUT)
    assert r.status_code == 200, f"Start failed: {r.status_code} {r.text}"
    data = r.json()
    sid = data["session_id"]
    print(f"OK POST /live/start -> session_id = {sid}")
    print(f"  bot: {data['bot_reply'][:80]}...")

    # 3. Conversation turns (each waits out the typing delay)
    for text in TURNS:
        r = requests.post(
            f"{BASE}/live/message",
            json={"session_id": sid, "user_message": text},
            timeout=TIMEOUT,
        )
        assert r.status_code == 200, f"Message failed: {r.status_code} {r.text}"
        reply = r.json()
        assert not reply.get("superseded"), "reply unexpectedly superseded"
        print(f"OK POST /live/message: {text!r}")
        print(f"  intent: {reply['intent']} ({reply['confidence']:.2f}), mood: {reply['mood']}, delay: {reply['delay_ms']} ms")
        print(f"  bot: {reply['bot_reply'][:100]}")
        print(f"  suggestions: {reply['suggestions']}")

    # 4. Session state
    r = requests.get(f"{BASE}/live/session/{sid}", timeout=TIMEOUT)
    assert r.status_code == 200, f"Get session failed: {r.status_code}"
    session = r.json()
    assert session["context"]["turn_count"] == len(TURNS)
    print("OK GET /live/session/{id}")
    print(f"  preferences: {session['context']['user_preferences']}")

    # 5. Summary
    r = requests.get(f"{BASE}/live/session/{sid}/summary", timeout=TIMEOUT)
    assert r.status_code == 200, f"Summary failed: {r.status_code}"
    print("OK GET /live/session/{id}/summary")
    print(f"  {r.json()['summary']}")

    # 6. Unknown session is a 404
    r = requests.get(f"{BASE}/live/session/live_missing", timeout=TIMEOUT)
    assert r.status_code == 404
    print("OK unknown session -> 404")

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
