"""
Engine configuration. Read from environment (main.py loads .env first).
Scoring multipliers and thresholds are tunables.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

ENV_PREFIX = "ASSISTANT_"


class EngineSettings(BaseModel):
    # Intent classification
    intent_floor: float = 0.15
    fallback_confidence: float = 0.1
    sub_intent_threshold: float = 0.3
    history_boost: float = 1.2
    last_topic_boost: float = 1.3

    # Emotion analysis
    intensifier_multiplier: float = 1.5

    # Context retention (newest kept)
    recent_topics_limit: int = Field(default=5, ge=1)
    history_limit: int = Field(default=50, ge=1)
    mood_history_limit: int = Field(default=50, ge=1)

    # Artificial typing delay
    typing_wpm: int = Field(default=200, gt=0)
    avg_word_length: int = Field(default=5, gt=0)
    typing_min_ms: int = 1000
    typing_max_ms: int = 3000
    typing_delay_enabled: bool = True

    content_path: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from ASSISTANT_* variables; unset ones keep defaults."""
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = os.environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip() != "":
                values[name] = raw.strip()
        log_level = os.environ.get("LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.strip().upper()
        return cls.model_validate(values)


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    return EngineSettings.from_env()
