from pathlib import Path

import pytest

from assistant.config import EngineSettings, get_settings
from assistant.live import session
from assistant.live.content import load_content

ROOT = Path(__file__).resolve().parents[1]
EXAMPLE_CONTENT = ROOT / "content" / "company.example.json"


@pytest.fixture
def settings():
    """Default tunables with the typing delay switched off."""
    return EngineSettings(typing_delay_enabled=False)


@pytest.fixture
def company_content():
    return load_content(EXAMPLE_CONTENT)


@pytest.fixture(autouse=True)
def fresh_sessions():
    session.clear_sessions()
    session.set_content(None)
    yield
    session.clear_sessions()
    session.set_content(None)


@pytest.fixture
def env_settings(monkeypatch):
    """Process-wide settings from env: no typing delay, no content file."""
    monkeypatch.setenv("ASSISTANT_TYPING_DELAY_ENABLED", "false")
    monkeypatch.delenv("ASSISTANT_CONTENT_PATH", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
