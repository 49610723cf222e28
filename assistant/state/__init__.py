from assistant.state.context import initial_context, update_context, update_preferences
from assistant.state.models import (
    ConversationContext,
    MoodEntry,
    MoodState,
    UserPreferences,
)
from assistant.state.summary import ConversationSummary, summarize_conversation

__all__ = [
    "initial_context",
    "update_context",
    "update_preferences",
    "ConversationContext",
    "MoodEntry",
    "MoodState",
    "UserPreferences",
    "ConversationSummary",
    "summarize_conversation",
]
