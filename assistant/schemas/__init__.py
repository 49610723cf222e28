from .contract import (
    EmotionResult,
    Entity,
    EntityType,
    GeneratedReply,
    Intent,
    IntentResult,
    Message,
    Mood,
    Sender,
    Sentiment,
)

__all__ = [
    "EmotionResult",
    "Entity",
    "EntityType",
    "GeneratedReply",
    "Intent",
    "IntentResult",
    "Message",
    "Mood",
    "Sender",
    "Sentiment",
]
