"""
Matcher primitives shared by all extractors. Pure and deterministic.
Phrases are always escaped, so nothing in user text or lexicon data is read as a pattern.
"""

import re
from functools import lru_cache

import Levenshtein


@lru_cache(maxsize=4096)
def _boundary_pattern(phrase: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


def boundary_match(text: str, phrase: str) -> bool:
    """True if phrase occurs in text with word boundaries on both sides."""
    if not phrase:
        return False
    return _boundary_pattern(phrase).search(text) is not None


def phrase_match(text: str, phrase: str) -> bool:
    """Multi-word phrase that appears literally in text."""
    return " " in phrase and phrase in text


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance on lowercased strings."""
    return Levenshtein.distance(a.lower(), b.lower())


def similarity(word: str, term: str) -> float:
    max_len = max(len(word), len(term))
    if max_len == 0:
        return 1.0
    return (max_len - edit_distance(word, term)) / max_len


def fuzzy_match(text: str, term: str, threshold: float = 0.8) -> bool:
    """
    Literal containment wins immediately; otherwise any whitespace token (3+ chars)
    whose similarity to term reaches threshold.
    """
    if term in text:
        return True
    for word in text.split():
        if len(word) < 3:
            continue
        if similarity(word, term) >= threshold:
            return True
    return False
