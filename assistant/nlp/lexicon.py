"""
Lexicon tables — declarative data in lexicons/*.json, loaded once.
Canonical concept → trigger phrases. Order in the files is significant (tie-breaks, dedup).
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from assistant.schemas import Intent

LEXICON_DIR = Path(__file__).resolve().parent / "lexicons"

# Concept families scanned by the entity extractor
SERVICES = "services"
TECHNOLOGIES = "technologies"
BUSINESS_TYPES = "business_types"
URGENCY = "urgency"
INDUSTRIES = "industries"


@dataclass(frozen=True)
class IntentDefinition:
    intent: Intent
    patterns: tuple[str, ...]
    sub_intents: dict[str, tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class EmotionLexicon:
    categories: dict[str, tuple[str, ...]]
    positive: frozenset[str]  # flipped to frustrated under negation
    negative: frozenset[str]  # flipped to neutral under negation
    sentiment_positive: tuple[str, ...]
    sentiment_negative: tuple[str, ...]
    intensifiers: tuple[str, ...]
    negations: tuple[str, ...]


def _read(name: str) -> Any:
    path = LEXICON_DIR / f"{name}.json"
    with path.open(encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=None)
def concept_table(name: str) -> dict[str, tuple[str, ...]]:
    """Canonical concept → lowercase synonyms, in file order."""
    raw = _read(name)
    return {concept: tuple(s.lower() for s in synonyms) for concept, synonyms in raw.items()}


@lru_cache(maxsize=1)
def intent_definitions() -> tuple[IntentDefinition, ...]:
    """Ordered intent table. Unknown intent names raise ValueError."""
    out = []
    for entry in _read("intents"):
        out.append(
            IntentDefinition(
                intent=Intent(entry["name"]),
                patterns=tuple(p.lower() for p in entry["patterns"]),
                sub_intents={
                    name: tuple(p.lower() for p in patterns)
                    for name, patterns in (entry.get("sub_intents") or {}).items()
                },
            )
        )
    return tuple(out)


@lru_cache(maxsize=1)
def emotion_lexicon() -> EmotionLexicon:
    raw = _read("emotions")
    return EmotionLexicon(
        categories={k: tuple(v) for k, v in raw["categories"].items()},
        positive=frozenset(raw["positive"]),
        negative=frozenset(raw["negative"]),
        sentiment_positive=tuple(raw["sentiment_positive"]),
        sentiment_negative=tuple(raw["sentiment_negative"]),
        intensifiers=tuple(raw["intensifiers"]),
        negations=tuple(raw["negations"]),
    )
