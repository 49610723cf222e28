"""
Per-turn NLP pipeline: entities + emotion (independent, pure) → intent (reads prior context).
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from assistant.config import EngineSettings
from assistant.nlp.emotion import analyze_emotion
from assistant.nlp.entities import extract_entities
from assistant.nlp.intent import classify_intent
from assistant.schemas import EmotionResult, Entity, IntentResult

if TYPE_CHECKING:
    from assistant.state.models import ConversationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnAnalysis:
    text: str
    entities: list[Entity]
    intent: IntentResult
    emotion: EmotionResult


def run_nlp_pipeline(
    text: str,
    context: "ConversationContext | None" = None,
    settings: EngineSettings | None = None,
) -> TurnAnalysis:
    """Analyze one user message against the context as it stood before this turn."""
    entities = extract_entities(text)
    emotion = analyze_emotion(text, settings)
    intent = classify_intent(text, context, settings)
    logger.debug(
        "turn analysis: intent=%s sub=%s mood=%s entities=%d",
        intent.intent.value,
        intent.sub_intent,
        emotion.mood.value,
        len(entities),
    )
    return TurnAnalysis(text=text, entities=entities, intent=intent, emotion=emotion)
