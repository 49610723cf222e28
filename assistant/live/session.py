"""
Live conversation session, in-memory (localhost). Welcome first, then every user turn is
analyzed, folded into the context and answered. Context and message log live only here.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from assistant.config import EngineSettings, get_settings
from assistant.live.content import CompanyContent
from assistant.live.responses import WELCOME_SUGGESTIONS, build_company_responses
from assistant.live.synthesizer import synthesize_reply
from assistant.live.typing import ReplyScheduler, typing_delay_ms
from assistant.nlp.pipeline import TurnAnalysis, run_nlp_pipeline
from assistant.nlp.preprocessing import normalize_text
from assistant.schemas import GeneratedReply, Message, Sender
from assistant.state import ConversationSummary, initial_context, summarize_conversation, update_context

logger = logging.getLogger(__name__)

# In-memory sessions (localhost only)
_sessions: dict[str, dict[str, Any]] = {}
_content: CompanyContent | None = None


def set_content(content: CompanyContent | None) -> None:
    """Company content used to template replies for every session."""
    global _content
    _content = content


@dataclass(frozen=True)
class PendingReply:
    """A synthesized reply waiting out its typing delay."""

    session_id: str
    analysis: TurnAnalysis
    reply: GeneratedReply
    delay_ms: int


def start_session() -> tuple[str, Message]:
    """Returns (session_id, welcome message). The assistant speaks first."""
    session_id = f"live_{uuid.uuid4().hex[:12]}"
    welcome = Message(
        text=build_company_responses(_content).welcome,
        sender=Sender.SYSTEM,
        suggestions=list(WELCOME_SUGGESTIONS),
    )
    _sessions[session_id] = {
        "context": initial_context(),
        "messages": [welcome],
        "scheduler": ReplyScheduler(),
    }
    logger.info("session %s started", session_id)
    return session_id, welcome


def _require(session_id: str) -> dict[str, Any]:
    data = _sessions.get(session_id)
    if data is None:
        logger.warning("unknown session id %s", session_id)
        raise KeyError(session_id)
    return data


def submit_turn(session_id: str, text: str, settings: EngineSettings | None = None) -> PendingReply:
    """
    Record the user message and fold it into the context, then synthesize the reply.
    Analysis sees the context from before this turn; the reply sees the updated one.
    Raises KeyError for an unknown session, ValueError for blank text.
    """
    settings = settings or get_settings()
    data = _require(session_id)
    text = normalize_text(text)
    if not text:
        raise ValueError("user message is empty")

    context = data["context"]
    analysis = run_nlp_pipeline(text, context, settings)
    data["messages"].append(
        Message(
            text=text,
            sender=Sender.USER,
            entities=analysis.entities,
            intent=analysis.intent.intent,
            confidence=analysis.intent.confidence,
            sentiment=analysis.emotion.sentiment,
        )
    )
    context = update_context(context, analysis, settings)
    data["context"] = context

    reply = synthesize_reply(analysis, context, _content)
    return PendingReply(
        session_id=session_id,
        analysis=analysis,
        reply=reply,
        delay_ms=typing_delay_ms(text, settings),
    )


def deliver_reply(pending: PendingReply) -> Message:
    """Append the system message for a reply whose delay has elapsed."""
    data = _require(pending.session_id)
    message = Message(
        text=pending.reply.response,
        sender=Sender.SYSTEM,
        entities=pending.reply.entities,
        suggestions=pending.reply.suggestions,
    )
    data["messages"].append(message)
    return message


def turn(session_id: str, text: str, settings: EngineSettings | None = None) -> tuple[PendingReply, Message]:
    """Submit and deliver immediately, without the typing delay."""
    pending = submit_turn(session_id, text, settings)
    return pending, deliver_reply(pending)


async def turn_with_delay(
    session_id: str, text: str, settings: EngineSettings | None = None
) -> tuple[PendingReply, Message | None]:
    """
    Submit, then deliver after the typing delay. A later turn on the same session
    supersedes this one: its reply is dropped and None comes back instead of a message.
    """
    pending = submit_turn(session_id, text, settings)
    scheduler: ReplyScheduler = _sessions[session_id]["scheduler"]
    if scheduler.pending:
        logger.info("session %s: pending reply superseded by a newer turn", session_id)
    message = await scheduler.schedule(pending.delay_ms, deliver_reply, pending)
    return pending, message


def get_session(session_id: str) -> dict[str, Any] | None:
    return _sessions.get(session_id)


def summarize_session(session_id: str) -> ConversationSummary:
    return summarize_conversation(_require(session_id)["messages"])


def clear_sessions() -> None:
    _sessions.clear()
