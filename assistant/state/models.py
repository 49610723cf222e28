"""
Conversation context. Session-scoped, caller-owned.
Each user turn produces a new snapshot; snapshots are never edited in place.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from assistant.schemas import Entity, Intent, Mood
from assistant.schemas.contract import utcnow


class UserPreferences(BaseModel):
    """Projection of what the user has told us so far."""

    preferred_technologies: list[str] = Field(default_factory=list)
    business_type: str | None = None
    urgency_level: str | None = None
    industry: str | None = None
    budget: str | None = None
    timeline: str | None = None
    communication_style: Literal["formal", "casual"] = "casual"


class MoodEntry(BaseModel):
    mood: Mood
    timestamp: datetime = Field(default_factory=utcnow)


class MoodState(BaseModel):
    current: Mood = Mood.NEUTRAL
    intensity: float = 0.0
    history: list[MoodEntry] = Field(default_factory=list)


class ConversationContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    turn_count: int = 0
    last_topic: Intent | None = None
    conversation_history: list[str] = Field(default_factory=list)  # raw user texts, oldest first
    recent_topics: list[Intent] = Field(default_factory=list)  # newest first
    entities: list[Entity] = Field(default_factory=list)
    user_preferences: UserPreferences = Field(default_factory=UserPreferences)
    mood: MoodState = Field(default_factory=MoodState)
    started_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime | None = None
