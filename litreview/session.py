"""Analysis session: the one owner of all mutable workbench state.

State (material registry, current result, busy flag, error banner, copy
feedback) only changes through the named transitions below.  Each
transition runs to completion on the event loop before the next one
starts; the engine call in :meth:`AnalysisSession.submit` is the only
suspension point.
"""

import logging
from typing import Any, Optional, Protocol

from litreview.errors import LitReviewError, ValidationError
from litreview.models.material import MaterialRecord
from litreview.models.result import CanonicalResult
from litreview.services.classifier import classify
from litreview.services.feedback import CopyFeedback
from litreview.services.registry import MaterialRegistry
from litreview.services.submission import build_request
from litreview.services.validator import validate_response
from litreview.services.views import copy_text

logger = logging.getLogger(__name__)


class AnalysisEngine(Protocol):
    async def analyze(self, payload: dict[str, Any]) -> Any: ...


def decode_upload(data: bytes | str) -> str:
    """Read an upload as UTF-8 text (undecodable bytes are replaced)."""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")


class AnalysisSession:
    """Registry, current result and UI flags for one user session."""

    def __init__(
        self,
        registry: Optional[MaterialRegistry] = None,
        feedback: Optional[CopyFeedback] = None,
    ):
        self.registry = registry or MaterialRegistry()
        self.feedback = feedback or CopyFeedback()
        self.result: Optional[CanonicalResult] = None
        self.error: Optional[LitReviewError] = None
        self.busy: bool = False

    # ── Error banner ──────────────────────────────────────────────────

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def _fail(self, error: LitReviewError) -> None:
        logger.warning("%s: %s", type(error).__name__, error.message)
        self.error = error

    def dismiss_error(self) -> None:
        self.error = None

    # ── Materials ─────────────────────────────────────────────────────

    def add_upload(
        self,
        filename: Optional[str],
        data: bytes | str,
        content_type: Optional[str] = None,
    ) -> MaterialRecord:
        """Classify an uploaded file and append it to the registry."""
        content = decode_upload(data)
        category = classify(content, filename=filename, content_type=content_type)
        return self.registry.add(name=filename or "Untitled", category=category, content=content)

    def set_url_input(self, value: str) -> None:
        self.registry.url_buffer = value

    def add_url(self, raw: Optional[str] = None) -> Optional[MaterialRecord]:
        """Admit a typed URL; malformed input is dropped silently."""
        return self.registry.add_from_url(raw)

    def remove(self, record_id: str) -> bool:
        return self.registry.remove(record_id)

    # ── Analysis ──────────────────────────────────────────────────────

    def apply_response(self, envelope: Any) -> Optional[CanonicalResult]:
        """Validate an engine reply and, if valid, make it the current result.

        On failure the error banner is set and the previous result stays.
        """
        try:
            result = validate_response(envelope)
        except LitReviewError as e:
            self._fail(e)
            return None
        self.result = result
        logger.info("Analysis result accepted (%d papers)", result.total_papers)
        return result

    async def submit(self, engine: AnalysisEngine, agent_id: str) -> Optional[CanonicalResult]:
        """Send every registered material to *engine* as one request.

        The payload is captured before the call, so edits made while the
        request is in flight do not affect it.  A second submit while busy
        is rejected.

        Returns:
            The new current result, or None if anything failed
        """
        if self.busy:
            self._fail(ValidationError("An analysis is already running"))
            return None
        try:
            payload = build_request(self.registry.records, agent_id)
        except ValidationError as e:
            self._fail(e)
            return None

        self.busy = True
        self.error = None
        try:
            envelope = await engine.analyze(payload)
            return self.apply_response(envelope)
        except LitReviewError as e:
            self._fail(e)
            return None
        except Exception as e:
            logger.exception("Unexpected error during analysis")
            self._fail(LitReviewError(str(e) or "An unexpected error occurred"))
            return None
        finally:
            self.busy = False

    # ── Copy feedback ─────────────────────────────────────────────────

    def mark_copied(self, target: str) -> Optional[str]:
        """Record a copy of *target*; returns the copied text.

        Nothing happens (None is returned) when the target has no text.
        """
        text = copy_text(self.result, target)
        if text is None:
            return None
        self.feedback.mark(target)
        return text

    # ── Reset ─────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start a new analysis: forget materials, result and flags."""
        self.registry.clear()
        self.result = None
        self.error = None
        self.feedback.clear()
        logger.info("Session reset")
