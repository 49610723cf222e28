"""
Entity & detail extraction.
Free text → typed, confidence-scored entities. Never raises; empty text gives [].
"""

import re
from functools import lru_cache
from typing import NamedTuple

from assistant.nlp.lexicon import (
    BUSINESS_TYPES,
    INDUSTRIES,
    SERVICES,
    TECHNOLOGIES,
    URGENCY,
    concept_table,
)
from assistant.nlp.matching import boundary_match, fuzzy_match, phrase_match
from assistant.schemas import Entity, EntityType


class PassConfidence(NamedTuple):
    exact: float
    phrase: float
    fuzzy: float | None  # None → family skips the fuzzy pass
    partial: float


# Lexicon families, scanned in this order
CONCEPT_FAMILIES: list[tuple[str, EntityType, PassConfidence]] = [
    (SERVICES, EntityType.SERVICE, PassConfidence(0.95, 0.90, 0.80, 0.70)),
    (TECHNOLOGIES, EntityType.TECHNOLOGY, PassConfidence(0.95, 0.90, 0.85, 0.80)),
    (BUSINESS_TYPES, EntityType.BUSINESS_TYPE, PassConfidence(0.90, 0.85, None, 0.75)),
    (URGENCY, EntityType.URGENCY, PassConfidence(0.90, 0.85, None, 0.75)),
    (INDUSTRIES, EntityType.INDUSTRY, PassConfidence(0.90, 0.85, None, 0.75)),
]

FUZZY_THRESHOLD = 0.85
FUZZY_MIN_LENGTH = 4

_AMOUNT = r"\d+(?:,\d{3})*(?:\.\d{2})?"

# Price: (pattern, confidence). Every match is one entity.
PRICE_PATTERNS = [
    (re.compile(rf"\${_AMOUNT}"), 0.9),
    (re.compile(rf"{_AMOUNT}\s*(?:dollars?|usd)\b", re.I), 0.9),
    (re.compile(
        rf"(?:budget|cost|price|quote|charge|fee|rate)\s+"
        rf"(?:of|around|about|approximately|roughly|in the range of)?\s*\$?{_AMOUNT}",
        re.I,
    ), 0.9),
    (re.compile(rf"\${_AMOUNT}\s*(?:to|-)\s*\$?{_AMOUNT}"), 0.9),
    (re.compile(
        rf"(?:budget|cost|price)\s+(?:limit|cap|ceiling|maximum|constraint|restriction)\s+"
        rf"(?:of|is|at)?\s*\$?{_AMOUNT}",
        re.I,
    ), 0.9),
    (re.compile(
        r"\b(?:affordable|cheap|inexpensive|budget-friendly|cost-effective|economical|"
        r"expensive|premium|high-end|luxury)\b",
        re.I,
    ), 0.7),
]

_UNIT = r"(?:days?|weeks?|months?|years?)"
_WEEKDAY = r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)"
_MONTH = r"(?:january|february|march|april|may|june|july|august|september|october|november|december)"

TIMELINE_PATTERNS = [
    (re.compile(rf"\b\d+\s*{_UNIT}\b", re.I), 0.85),
    (re.compile(
        r"\b(?:asap|urgent|urgently|immediately|right away|as soon as possible|quickly|"
        r"promptly|without delay|expedite)\b",
        re.I,
    ), 0.85),
    (re.compile(
        r"\b(?:today|tomorrow|this week|next week|this month|next month|this year|next year)\b",
        re.I,
    ), 0.85),
    (re.compile(
        rf"\b(?:by|before|after|on)\s+(?:{_WEEKDAY}|tomorrow|today|next week|next month)\b",
        re.I,
    ), 0.85),
    (re.compile(rf"\b(?:by|before|after|on)\s+{_MONTH}\s+\d{{1,2}}(?:st|nd|rd|th)?\b", re.I), 0.85),
    (re.compile(
        r"\b(?:deadline|due date|due by|must be completed by|need it by|finish by|"
        r"deliver by|launch by|go live by)\b",
        re.I,
    ), 0.85),
    (re.compile(
        rf"\b(?:project|work|development)\s+(?:duration|timeframe|period|timeline)\s+"
        rf"(?:of|is)?\s*\d+\s*{_UNIT}\b",
        re.I,
    ), 0.85),
    (re.compile(
        r"\b(?:no rush|take your time|whenever|no hurry|not urgent|flexible timeline|"
        r"flexible deadline|at your convenience|when you can)\b",
        re.I,
    ), 0.85),
]

EMAIL_PATTERN = re.compile(r"\b[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}\b", re.I)
PHONE_PATTERN = re.compile(r"(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
CONTACT_VERB_PATTERN = re.compile(
    r"\b(?:contact|call|email|reach|get in touch|connect|talk|speak|message)\b", re.I
)
CONTACT_ADDRESSEE = ("you", "me", "call", "email")

# Preposition matched case-insensitively; the place keeps its capitalization
PLACE_PATTERN = re.compile(r"\b(?i:in|from|at|near|around)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)")
REMOTE_PATTERN = re.compile(
    r"\b(?:remote|remotely|work from home|wfh|virtual|online|anywhere|globally|worldwide)\b", re.I
)
LOCAL_PATTERN = re.compile(
    r"\b(?:local|locally|in-person|on-site|on site|in the area|nearby|in our area|in my area)\b", re.I
)

QUESTION_PATTERN = re.compile(
    r"^\s*(?:what|who|where|when|why|how|can|could|would|will|is|are|do|does|did|should|have|has|had)\b",
    re.I,
)


def _match_concept(text: str, synonyms: tuple[str, ...], conf: PassConfidence) -> float | None:
    """Confidence of the first pass that hits, or None. Exact → phrase → fuzzy → partial."""
    if any(boundary_match(text, s) for s in synonyms):
        return conf.exact
    if any(phrase_match(text, s) for s in synonyms):
        return conf.phrase
    if conf.fuzzy is not None and any(
        len(s) >= FUZZY_MIN_LENGTH and fuzzy_match(text, s, FUZZY_THRESHOLD) for s in synonyms
    ):
        return conf.fuzzy
    if any(s in text for s in synonyms):
        return conf.partial
    return None


def _concept_entities(text: str, table: str, entity_type: EntityType, conf: PassConfidence) -> list[Entity]:
    out = []
    for concept, synonyms in concept_table(table).items():
        confidence = _match_concept(text, synonyms, conf)
        if confidence is not None:
            out.append(Entity(type=entity_type, value=concept, confidence=confidence))
    return out


def _pattern_entities(text: str, patterns: list, entity_type: EntityType) -> list[Entity]:
    return [
        Entity(type=entity_type, value=m.group(0).strip(), confidence=confidence)
        for pat, confidence in patterns
        for m in pat.finditer(text)
    ]


def _contact_entities(text: str) -> list[Entity]:
    out = [
        Entity(type=EntityType.CONTACT, value=m.group(0), confidence=0.95)
        for pat in (EMAIL_PATTERN, PHONE_PATTERN)
        for m in pat.finditer(text)
    ]
    if CONTACT_VERB_PATTERN.search(text) and any(w in text for w in CONTACT_ADDRESSEE):
        out.append(Entity(type=EntityType.CONTACT, value="contact_request", confidence=0.85))
    return out


@lru_cache(maxsize=1)
def _lexicon_terms() -> frozenset[str]:
    """Technology and service names, which are never places (in React)."""
    terms = set()
    for table in (TECHNOLOGIES, SERVICES):
        for concept, synonyms in concept_table(table).items():
            terms.add(concept.lower())
            terms.update(synonyms)
    return frozenset(terms)


def _location_entities(original: str, lowered: str) -> list[Entity]:
    out = [
        Entity(type=EntityType.LOCATION, value=m.group(1), confidence=0.8)
        for m in PLACE_PATTERN.finditer(original)
        if m.group(1).lower() not in _lexicon_terms()
    ]
    if REMOTE_PATTERN.search(lowered):
        out.append(Entity(type=EntityType.LOCATION, value="remote", confidence=0.85))
    if LOCAL_PATTERN.search(lowered):
        out.append(Entity(type=EntityType.LOCATION, value="local", confidence=0.85))
    return out


def is_question(text: str) -> bool:
    return "?" in text or QUESTION_PATTERN.search(text) is not None


def dedupe_entities(entities: list[Entity]) -> list[Entity]:
    """First occurrence of each (type, value) wins."""
    seen: set[str] = set()
    out = []
    for e in entities:
        if e.key not in seen:
            seen.add(e.key)
            out.append(e)
    return out


def extract_entities(text: str) -> list[Entity]:
    """
    Scan text against every lexicon family and regex family.
    Returns entities deduplicated by (type, value), in scan order.
    """
    if not text or not text.strip():
        return []
    lowered = text.lower()
    entities: list[Entity] = []

    for table, entity_type, conf in CONCEPT_FAMILIES[:2]:
        entities.extend(_concept_entities(lowered, table, entity_type, conf))
    entities.extend(_pattern_entities(lowered, PRICE_PATTERNS, EntityType.PRICE))
    entities.extend(_pattern_entities(lowered, TIMELINE_PATTERNS, EntityType.TIMELINE))
    for table, entity_type, conf in CONCEPT_FAMILIES[2:]:
        entities.extend(_concept_entities(lowered, table, entity_type, conf))
    entities.extend(_contact_entities(lowered))
    entities.extend(_location_entities(text, lowered))

    if is_question(lowered):
        entities.append(Entity(type=EntityType.QUESTION, value="question", confidence=0.9))

    return dedupe_entities(entities)


def merge_entities(existing: list[Entity], new: list[Entity]) -> list[Entity]:
    """Append new entities whose (type, value) is not already present. Nothing replaced."""
    known = {e.key for e in existing}
    out = list(existing)
    for e in new:
        if e.key not in known:
            known.add(e.key)
            out.append(e)
    return out
