"""
Intent detection. One intent wins per turn; a sub-intent may refine it.
Below the confidence floor the answer is always general_inquiry.
"""

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from assistant.config import EngineSettings, get_settings
from assistant.nlp.lexicon import IntentDefinition, intent_definitions
from assistant.schemas import Intent, IntentResult

if TYPE_CHECKING:
    from assistant.state.models import ConversationContext

logger = logging.getLogger(__name__)

EXACT_WEIGHT = 1.0
PART_WEIGHT = 0.5
STEM_WEIGHT = 0.3

_WORD_SPLIT = re.compile(r"\W+")


@dataclass
class IntentScore:
    intent: Intent
    confidence: float
    sub_intent: str | None = None


def _intent_words(text: str) -> list[str]:
    return [w for w in _WORD_SPLIT.split(text) if len(w) > 1]


def _pattern_weight(pattern: str, text: str, words: list[str]) -> float:
    if pattern in text:
        return EXACT_WEIGHT
    if " " in pattern:
        return PART_WEIGHT if any(part in text for part in pattern.split(" ")) else 0.0
    if any(w.startswith(pattern) or pattern.startswith(w) for w in words):
        return STEM_WEIGHT
    return 0.0


def _best_sub_intent(text: str, definition: IntentDefinition, threshold: float) -> str | None:
    best, best_score = None, 0.0
    for name, patterns in definition.sub_intents.items():
        if not patterns:
            continue
        score = sum(1 for p in patterns if p in text) / len(patterns)
        if score > threshold and score > best_score:
            best, best_score = name, score
    return best


def score_intent(
    text: str,
    definition: IntentDefinition,
    history: list[str],
    last_topic: Intent | None,
    settings: EngineSettings,
) -> IntentScore:
    lowered = text.lower()
    words = _intent_words(lowered)
    weight = sum(_pattern_weight(p, lowered, words) for p in definition.patterns)
    confidence = weight / len(definition.patterns) if definition.patterns else 0.0

    name = definition.intent.value
    if any(name in h.lower() for h in history):
        confidence *= settings.history_boost
    if last_topic == definition.intent:
        confidence *= settings.last_topic_boost

    return IntentScore(
        intent=definition.intent,
        confidence=confidence,
        sub_intent=_best_sub_intent(lowered, definition, settings.sub_intent_threshold),
    )


def classify_intent(
    text: str,
    context: "ConversationContext | None" = None,
    settings: EngineSettings | None = None,
) -> IntentResult:
    """
    Score every intent against text; context (read-only) supplies history and last topic boosts.
    """
    settings = settings or get_settings()
    history = list(context.conversation_history) if context is not None else []
    last_topic = context.last_topic if context is not None else None

    scores = [score_intent(text or "", d, history, last_topic, settings) for d in intent_definitions()]
    # Stable: ties keep table order
    scores.sort(key=lambda s: s.confidence, reverse=True)
    top = scores[0] if scores else None

    if top is None or top.confidence < settings.intent_floor:
        logger.debug("intent below floor (%.3f); general_inquiry", top.confidence if top else 0.0)
        return IntentResult(intent=Intent.GENERAL_INQUIRY, confidence=settings.fallback_confidence)

    logger.debug("intent=%s confidence=%.3f sub=%s", top.intent.value, top.confidence, top.sub_intent)
    return IntentResult(intent=top.intent, confidence=top.confidence, sub_intent=top.sub_intent)
