"""
Per-turn contracts for the assistant engine.
Extraction, classification and emotion analysis all produce these shapes; the caller renders and stores them.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntityType(str, Enum):
    SERVICE = "service"
    TECHNOLOGY = "technology"
    PRICE = "price"
    TIMELINE = "timeline"
    LOCATION = "location"
    CONTACT = "contact"
    BUSINESS_TYPE = "business_type"
    URGENCY = "urgency"
    INDUSTRY = "industry"
    QUESTION = "question"


class Intent(str, Enum):
    GET_QUOTE = "get_quote"
    SCHEDULE_MEETING = "schedule_meeting"
    TECHNICAL_INFO = "technical_info"
    PORTFOLIO = "portfolio"
    SUPPORT = "support"
    TIMELINE = "timeline"
    PROCESS = "process"
    GENERAL_INQUIRY = "general_inquiry"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Mood(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    CONFUSED = "confused"
    IMPATIENT = "impatient"
    INTERESTED = "interested"


class Sender(str, Enum):
    USER = "user"
    SYSTEM = "system"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Engine outputs ---


class Entity(BaseModel):
    """Typed, confidence-scored fact pulled from one message. Immutable."""

    model_config = ConfigDict(frozen=True)

    type: EntityType
    value: str
    confidence: float = Field(ge=0.0, le=1.0)

    @property
    def key(self) -> str:
        return f"{self.type.value}:{self.value}"


class IntentResult(BaseModel):
    intent: Intent
    confidence: float
    sub_intent: str | None = None


class EmotionResult(BaseModel):
    sentiment: Sentiment = Sentiment.NEUTRAL
    emotions: list[str] = Field(default_factory=list)  # ranked, strongest first
    intensity: float = Field(default=0.0, ge=0.0, le=1.0)
    mood: Mood = Mood.NEUTRAL


class GeneratedReply(BaseModel):
    response: str
    suggestions: list[str] = Field(default_factory=list)
    entities: list[Entity] = Field(default_factory=list)


# --- Message log ---


class Message(BaseModel):
    """One chat message. Created once per turn and appended to the log; never edited."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    text: str
    sender: Sender
    timestamp: datetime = Field(default_factory=utcnow)
    entities: list[Entity] | None = None
    intent: Intent | None = None
    confidence: float | None = None
    sentiment: Sentiment | None = None
    suggestions: list[str] | None = None
