"""Input normalization before any analysis. Re-runnable."""

import re
from unicodedata import normalize as unicode_normalize


def normalize_text(text: str) -> str:
    """
    NFC, collapse whitespace, strip.
    No case folding here; extractors lowercase their own copy.
    """
    if not text:
        return ""
    t = unicode_normalize("NFC", text)
    t = re.sub(r"\s+", " ", t)
    return t.strip()
