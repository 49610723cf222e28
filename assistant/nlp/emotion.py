"""
Emotion & sentiment analysis over one message.
Lexicon scoring → intensifier → negation remap → sentiment → single mood label.
"""

import logging
import re
from functools import lru_cache

from assistant.config import EngineSettings, get_settings
from assistant.nlp.lexicon import emotion_lexicon
from assistant.schemas import EmotionResult, Mood, Sentiment

logger = logging.getLogger(__name__)

EXACT_WEIGHT = 0.3
PARTIAL_WEIGHT = 0.1
PHRASE_WEIGHT = 0.2
DOMINANT_MIN_SCORE = 0.1
SENTIMENT_MIN_INTENSITY = 0.2
NEUTRAL_BUCKET = "neutral"

# First dominant emotion in this order decides the mood before sentiment is consulted
MOOD_PRIORITY = [
    ("confused", Mood.CONFUSED),
    ("impatient", Mood.IMPATIENT),
    ("interested", Mood.INTERESTED),
]


@lru_cache(maxsize=1)
def _negation_pattern() -> re.Pattern:
    words = "|".join(re.escape(w) for w in emotion_lexicon().negations)
    return re.compile(rf"\b(?:{words})\b", re.IGNORECASE)


def build_phrases(words: list[str]) -> list[str]:
    """All 2- and 3-word sliding windows."""
    phrases = []
    for i in range(len(words) - 1):
        phrases.append(f"{words[i]} {words[i + 1]}")
        if i < len(words) - 2:
            phrases.append(f"{words[i]} {words[i + 1]} {words[i + 2]}")
    return phrases


def has_negation(text: str) -> bool:
    return _negation_pattern().search(text) is not None


def _keyword_score(keyword: str, words: list[str], phrases: list[str]) -> float:
    exact = sum(1 for w in words if w == keyword)
    partial = sum(1 for w in words if keyword in w and w != keyword)
    in_phrases = sum(1 for p in phrases if keyword in p)
    return exact * EXACT_WEIGHT + partial * PARTIAL_WEIGHT + in_phrases * PHRASE_WEIGHT


def score_emotions(text: str, settings: EngineSettings | None = None) -> dict[str, float]:
    """Post-adjustment score per category (plus the synthetic neutral bucket under negation)."""
    settings = settings or get_settings()
    lex = emotion_lexicon()
    lowered = text.lower()
    words = lowered.split()
    phrases = build_phrases(words)

    multiplier = 1.0
    if any(i in lowered for i in lex.intensifiers):
        multiplier = settings.intensifier_multiplier

    raw = {
        emotion: sum(_keyword_score(k, words, phrases) for k in keywords) * multiplier
        for emotion, keywords in lex.categories.items()
    }
    if not has_negation(lowered):
        return raw

    scores = {emotion: 0.0 if emotion in lex.positive | lex.negative else score for emotion, score in raw.items()}
    scores["frustrated"] = scores.get("frustrated", 0.0) + sum(raw[e] for e in lex.positive if e in raw)
    neutral = sum(raw[e] for e in lex.negative if e in raw) * 0.5
    if neutral > 0:
        scores[NEUTRAL_BUCKET] = neutral
    return scores


def _sentiment(scores: dict[str, float], dominant: list[str], total: float) -> Sentiment:
    if total <= SENTIMENT_MIN_INTENSITY:
        return Sentiment.NEUTRAL
    lex = emotion_lexicon()
    has_pos = any(e in lex.sentiment_positive for e in dominant)
    has_neg = any(e in lex.sentiment_negative for e in dominant)
    if has_pos and not has_neg:
        return Sentiment.POSITIVE
    if has_neg and not has_pos:
        return Sentiment.NEGATIVE
    if has_pos and has_neg:
        pos = sum(scores.get(e, 0.0) for e in lex.sentiment_positive)
        neg = sum(scores.get(e, 0.0) for e in lex.sentiment_negative)
        return Sentiment.POSITIVE if pos > neg else Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def _mood(dominant: list[str], sentiment: Sentiment) -> Mood:
    for emotion, mood in MOOD_PRIORITY:
        if emotion in dominant:
            return mood
    if sentiment == Sentiment.POSITIVE:
        return Mood.POSITIVE
    if sentiment == Sentiment.NEGATIVE:
        return Mood.NEGATIVE
    return Mood.NEUTRAL


def analyze_emotion(text: str, settings: EngineSettings | None = None) -> EmotionResult:
    if not text or not text.strip():
        return EmotionResult()
    scores = score_emotions(text, settings)
    total = sum(scores.values())
    ranked = sorted(
        ((e, s) for e, s in scores.items() if s > DOMINANT_MIN_SCORE),
        key=lambda x: x[1],
        reverse=True,
    )
    dominant = [e for e, _ in ranked]
    sentiment = _sentiment(scores, dominant, total)
    mood = _mood(dominant, sentiment)
    logger.debug("emotion: sentiment=%s mood=%s total=%.2f dominant=%s", sentiment.value, mood.value, total, dominant)
    return EmotionResult(
        sentiment=sentiment,
        emotions=dominant,
        intensity=min(total, 1.0),
        mood=mood,
    )
