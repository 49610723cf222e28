"""
Post-hoc conversation summary over the full message log. Reporting only, not per-turn.
"""

from typing import Any

from pydantic import BaseModel, Field

from assistant.schemas import Entity, EntityType, Intent, Message, Sender, Sentiment
from assistant.state.models import UserPreferences

# Entity type → preference field it projects into
PREFERENCE_FIELDS = {
    EntityType.BUSINESS_TYPE: "business_type",
    EntityType.URGENCY: "urgency_level",
    EntityType.INDUSTRY: "industry",
    EntityType.PRICE: "budget",
    EntityType.TIMELINE: "timeline",
}


class ConversationSummary(BaseModel):
    summary: str
    topics: list[str] = Field(default_factory=list)
    intents: list[Intent] = Field(default_factory=list)
    entities: list[Entity] = Field(default_factory=list)
    sentiment: Sentiment = Sentiment.NEUTRAL
    user_preferences: UserPreferences = Field(default_factory=UserPreferences)


def _humanize(name: str) -> str:
    return name.replace("_", " ")


def _overall_sentiment(positive: int, negative: int) -> Sentiment:
    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def _summary_text(topics: list[str], intents: list[Intent], prefs: UserPreferences, sentiment: Sentiment) -> str:
    parts = []
    if topics:
        parts.append(f"Conversation focused on {', '.join(topics)}.")
    if intents:
        parts.append(f"User showed interest in {', '.join(_humanize(i.value) for i in intents)}.")
    if prefs.preferred_technologies:
        parts.append(f"User mentioned technologies: {', '.join(prefs.preferred_technologies)}.")
    if prefs.business_type:
        parts.append(f"User appears to be from a {_humanize(prefs.business_type)}.")
    if prefs.urgency_level:
        parts.append(f"Project urgency seems {prefs.urgency_level}.")
    parts.append(f"Overall sentiment: {sentiment.value}.")
    return " ".join(parts)


def summarize_conversation(messages: list[Message]) -> ConversationSummary:
    """
    Intents and entities come from user messages only; sentiment counts every message.
    For duplicate (type, value) entities the highest confidence is kept.
    """
    topics: list[str] = []
    intents: list[Intent] = []
    key_entities: dict[str, Entity] = {}
    techs: list[str] = []
    prefs: dict[str, Any] = {}
    positive = negative = 0

    for msg in messages:
        if msg.sender == Sender.USER:
            if msg.intent is not None and msg.intent not in intents:
                intents.append(msg.intent)
                topics.append(_humanize(msg.intent.value))
            for e in msg.entities or []:
                current = key_entities.get(e.key)
                if current is None or current.confidence < e.confidence:
                    key_entities[e.key] = e
                if e.type == EntityType.TECHNOLOGY and e.value not in techs:
                    techs.append(e.value)
                elif e.type in PREFERENCE_FIELDS:
                    prefs[PREFERENCE_FIELDS[e.type]] = e.value

        if msg.sentiment == Sentiment.POSITIVE:
            positive += 1
        elif msg.sentiment == Sentiment.NEGATIVE:
            negative += 1

    sentiment = _overall_sentiment(positive, negative)
    user_preferences = UserPreferences(preferred_technologies=techs, **prefs)
    return ConversationSummary(
        summary=_summary_text(topics, intents, user_preferences, sentiment),
        topics=topics,
        intents=intents,
        entities=list(key_entities.values()),
        sentiment=sentiment,
        user_preferences=user_preferences,
    )
