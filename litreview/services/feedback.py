"""Single-slot "copied!" indicator with automatic expiry."""

import asyncio
import time
from typing import Callable, Optional

COPY_FEEDBACK_SECONDS = 2.0


class CopyFeedback:
    """Remembers which copy target was used most recently, for a short while.

    Only one target can be "copied" at a time: marking a new target replaces
    the previous one and its pending expiry.  Expiry is checked against the
    clock on every read, and when an asyncio loop is running an expiry task
    is also scheduled so :attr:`active_target` clears on its own.
    """

    def __init__(
        self,
        duration: float = COPY_FEEDBACK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.duration = duration
        self._clock = clock
        self._target: Optional[str] = None
        self._expires_at: float = 0.0
        self._handle: Optional[asyncio.TimerHandle] = None

    def mark(self, target: str) -> None:
        """Show *target* as copied, replacing whatever was shown before."""
        self._cancel_pending()
        self._target = target
        self._expires_at = self._clock() + self.duration

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._handle = loop.call_later(self.duration, self._expire, target)

    def _expire(self, target: str) -> None:
        if self._target == target:
            self.clear()

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def clear(self) -> None:
        """Revert to neutral immediately."""
        self._cancel_pending()
        self._target = None
        self._expires_at = 0.0

    @property
    def active_target(self) -> Optional[str]:
        """The target currently showing feedback, or None."""
        if self._target is not None and self._clock() >= self._expires_at:
            self.clear()
        return self._target

    def is_copied(self, target: str) -> bool:
        return self.active_target == target
