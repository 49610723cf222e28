"""
Context updater. Runs once per user turn, after analysis and before the reply.
Folds entities, intent and mood into a new context; the input context is left untouched.
"""

import logging
from datetime import datetime

from assistant.config import EngineSettings, get_settings
from assistant.nlp.entities import merge_entities
from assistant.nlp.pipeline import TurnAnalysis
from assistant.schemas import EntityType
from assistant.schemas.contract import utcnow
from assistant.state.models import ConversationContext, MoodEntry, MoodState, UserPreferences

logger = logging.getLogger(__name__)


def initial_context() -> ConversationContext:
    """Fresh context for a new conversation."""
    return ConversationContext()


def _first_value(analysis: TurnAnalysis, entity_type: EntityType) -> str | None:
    """First entity of a type found this turn."""
    for e in analysis.entities:
        if e.type == entity_type:
            return e.value
    return None


def _keep_newest(items: list, limit: int, label: str) -> list:
    if len(items) <= limit:
        return items
    logger.debug("%s truncated to newest %d of %d", label, limit, len(items))
    return items[-limit:]


def update_preferences(prefs: UserPreferences, analysis: TurnAnalysis) -> UserPreferences:
    """Later turns overwrite earlier ones; technologies merge without duplicates."""
    update: dict = {}
    for field, entity_type in (
        ("business_type", EntityType.BUSINESS_TYPE),
        ("urgency_level", EntityType.URGENCY),
        ("industry", EntityType.INDUSTRY),
        ("budget", EntityType.PRICE),
        ("timeline", EntityType.TIMELINE),
    ):
        value = _first_value(analysis, entity_type)
        if value:
            update[field] = value

    techs = [e.value for e in analysis.entities if e.type == EntityType.TECHNOLOGY]
    if techs:
        merged = list(prefs.preferred_technologies)
        for t in techs:
            if t not in merged:
                merged.append(t)
        update["preferred_technologies"] = merged

    return prefs.model_copy(update=update) if update else prefs


def update_context(
    context: ConversationContext,
    analysis: TurnAnalysis,
    settings: EngineSettings | None = None,
    now: datetime | None = None,
) -> ConversationContext:
    settings = settings or get_settings()
    now = now or utcnow()
    intent = analysis.intent.intent
    mood = analysis.emotion.mood

    history = _keep_newest(
        [*context.conversation_history, analysis.text], settings.history_limit, "conversation history"
    )
    mood_history = _keep_newest(
        [*context.mood.history, MoodEntry(mood=mood, timestamp=now)],
        settings.mood_history_limit,
        "mood history",
    )

    return context.model_copy(
        update={
            "turn_count": context.turn_count + 1,
            "last_topic": intent,
            "conversation_history": history,
            "recent_topics": [intent, *context.recent_topics][: settings.recent_topics_limit],
            "entities": merge_entities(context.entities, analysis.entities),
            "user_preferences": update_preferences(context.user_preferences, analysis),
            "mood": MoodState(current=mood, intensity=analysis.emotion.intensity, history=mood_history),
            "updated_at": now,
        }
    )
