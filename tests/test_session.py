import asyncio

import pytest

from assistant.config import EngineSettings
from assistant.live import session
from assistant.live.responses import CLOSING_OFFER, FIRST_TURNS_GREETING, WELCOME_SUGGESTIONS
from assistant.schemas import Intent, Sender


def test_start_session_welcomes_first():
    session_id, welcome = session.start_session()
    data = session.get_session(session_id)
    assert welcome.sender == Sender.SYSTEM
    assert welcome.suggestions == WELCOME_SUGGESTIONS
    assert data["messages"] == [welcome]
    assert data["context"].turn_count == 0


def test_turn_logs_user_and_system_messages(settings):
    session_id, _ = session.start_session()
    pending, reply = session.turn(session_id, "  What is the   price for a website?  ", settings)

    messages = session.get_session(session_id)["messages"]
    assert [m.sender for m in messages] == [Sender.SYSTEM, Sender.USER, Sender.SYSTEM]
    user = messages[1]
    assert user.text == "What is the price for a website?"
    assert user.intent == Intent.GET_QUOTE
    assert user.confidence == pending.analysis.intent.confidence
    assert user.sentiment is not None
    assert reply.text.startswith(FIRST_TURNS_GREETING)
    assert reply.suggestions == pending.reply.suggestions
    assert session.get_session(session_id)["context"].turn_count == 1


def test_fourth_turn_offers_closing(settings):
    session_id, _ = session.start_session()
    for text in ["Hello", "What services do you offer?", "Tell me about your team"]:
        session.turn(session_id, text, settings)
    _, reply = session.turn(session_id, "Can I see your portfolio?", settings)
    assert reply.text.endswith(CLOSING_OFFER)


def test_unknown_session():
    with pytest.raises(KeyError):
        session.turn("live_missing", "hello")
    assert session.get_session("live_missing") is None


def test_blank_message_rejected(settings):
    session_id, _ = session.start_session()
    with pytest.raises(ValueError):
        session.submit_turn(session_id, "   \n ", settings)
    assert len(session.get_session(session_id)["messages"]) == 1


def test_replies_use_loaded_content(settings, company_content):
    session.set_content(company_content)
    session_id, welcome = session.start_session()
    assert welcome.text.startswith("Welcome to Toiral Web Development!")
    _, reply = session.turn(session_id, "Tell me about your team", settings)
    assert "Nadia Islam - UI/UX Designer" in reply.text


def test_summarize_session(settings):
    session_id, _ = session.start_session()
    session.turn(session_id, "What is the price for a website?", settings)
    session.turn(session_id, "Can I see your portfolio?", settings)
    summary = session.summarize_session(session_id)
    assert summary.intents == [Intent.GET_QUOTE, Intent.PORTFOLIO]


def test_newer_turn_supersedes_pending_reply():
    settings = EngineSettings(typing_min_ms=50, typing_max_ms=50)
    session_id, _ = session.start_session()

    async def run():
        first = asyncio.create_task(session.turn_with_delay(session_id, "Hello", settings))
        await asyncio.sleep(0)
        second = await session.turn_with_delay(session_id, "Can I see your portfolio?", settings)
        return await first, second

    (first_pending, first_reply), (second_pending, second_reply) = asyncio.run(run())

    assert first_reply is None
    assert second_reply is not None
    assert second_pending.delay_ms == 50
    messages = session.get_session(session_id)["messages"]
    assert [m.sender for m in messages] == [Sender.SYSTEM, Sender.USER, Sender.USER, Sender.SYSTEM]
    assert session.get_session(session_id)["context"].turn_count == 2


def test_typing_delay_follows_user_message():
    session_id, _ = session.start_session()
    short = session.submit_turn(session_id, "price?", EngineSettings())
    assert short.delay_ms == 1000
    longer = session.submit_turn(session_id, "x" * 40, EngineSettings())
    assert longer.delay_ms == 2400
