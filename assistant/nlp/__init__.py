from .emotion import analyze_emotion
from .entities import extract_entities, merge_entities
from .intent import classify_intent
from .matching import boundary_match, edit_distance, fuzzy_match, phrase_match
from .pipeline import TurnAnalysis, run_nlp_pipeline
from .preprocessing import normalize_text

__all__ = [
    "analyze_emotion",
    "extract_entities",
    "merge_entities",
    "classify_intent",
    "boundary_match",
    "edit_distance",
    "fuzzy_match",
    "phrase_match",
    "TurnAnalysis",
    "run_nlp_pipeline",
    "normalize_text",
]
