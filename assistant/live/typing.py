"""
Artificial typing delay between a user turn and its reply.
At most one reply is pending per session; a newer turn supersedes the pending one.
"""

import asyncio
import logging
from typing import Any

from assistant.config import EngineSettings, get_settings

logger = logging.getLogger(__name__)


def per_char_ms(settings: EngineSettings) -> float:
    """Milliseconds per character at the configured reading speed (200 wpm × 5 chars → 60 ms)."""
    return 60_000 / (settings.typing_wpm * settings.avg_word_length)


def typing_delay_ms(text: str, settings: EngineSettings | None = None) -> int:
    """clamp(len(text) × per-char time, min, max). Zero when the delay is disabled."""
    settings = settings or get_settings()
    if not settings.typing_delay_enabled:
        return 0
    raw = len(text) * per_char_ms(settings)
    return round(min(max(raw, settings.typing_min_ms), settings.typing_max_ms))


class ReplyScheduler:
    """
    Single-slot deferred delivery on the running event loop.

    schedule() returns a future that resolves to the delivered value, or to None
    when a later schedule() call replaced it before the timer fired.
    """

    def __init__(self) -> None:
        self._handle: asyncio.TimerHandle | None = None
        self._future: asyncio.Future | None = None

    @property
    def pending(self) -> bool:
        return self._future is not None and not self._future.done()

    def schedule(self, delay_ms: int, deliver, *args: Any) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        self.cancel()
        future = loop.create_future()

        def fire() -> None:
            if future.done():
                return
            self._handle = None
            try:
                future.set_result(deliver(*args))
            except Exception as exc:
                future.set_exception(exc)

        self._future = future
        self._handle = loop.call_later(delay_ms / 1000, fire)
        return future

    def cancel(self) -> bool:
        """Drop the pending reply, if any. Its waiter receives None."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._future is not None and not self._future.done():
            self._future.set_result(None)
            self._future = None
            logger.debug("pending reply superseded")
            return True
        self._future = None
        return False
