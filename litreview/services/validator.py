"""Validation of the engine's response envelope into a CanonicalResult.

The envelope is untrusted and loosely typed::

    {"success": bool, "error": str | None, "response": str | object}

``response`` may arrive pre-serialized (a JSON string) or already decoded.
:func:`resolve_payload` turns it into a tagged :data:`Payload` first, then
:func:`validate_response` runs the structural checks in order and stops at
the first failure.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from litreview.errors import ContractError, EngineError
from litreview.models.result import CanonicalResult

logger = logging.getLogger(__name__)

GENERIC_ENGINE_ERROR = "Failed to generate review"
NO_RESPONSE_ERROR = "No response from agent"
PARSE_ERROR = "Failed to parse agent response"
FORMAT_ERROR = "Invalid response format - missing metadata"


@dataclass(frozen=True)
class TextPayload:
    """Response delivered as serialized JSON text."""

    text: str


@dataclass(frozen=True)
class StructuredPayload:
    """Response delivered as an already-decoded value."""

    value: Any


Payload = Union[TextPayload, StructuredPayload]


@dataclass(frozen=True)
class ResponseEnvelope:
    """Typed view of the engine's reply."""

    success: bool
    error: str | None = None
    response: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> "ResponseEnvelope":
        if not isinstance(data, Mapping):
            raise ContractError(
                "Invalid response envelope",
                details={"received_type": type(data).__name__},
            )
        error = data.get("error")
        return cls(
            success=bool(data.get("success")),
            error=str(error) if error else None,
            response=data.get("response"),
        )


def resolve_payload(raw: Any) -> Payload:
    """Tag a non-null payload as text or structured."""
    if isinstance(raw, str):
        return TextPayload(raw)
    if isinstance(raw, (bytes, bytearray)):
        return TextPayload(raw.decode("utf-8", errors="replace"))
    return StructuredPayload(raw)


def decode_payload(payload: Payload) -> Any:
    """Return the structured value carried by *payload*.

    Raises:
        ContractError: If a text payload is not valid JSON
    """
    if isinstance(payload, StructuredPayload):
        return payload.value
    try:
        return json.loads(payload.text)
    except json.JSONDecodeError as e:
        logger.debug("Unparsable engine payload: %r", payload.text)
        raise ContractError(
            PARSE_ERROR,
            details={"reason": str(e), "raw_response": payload.text},
        ) from e


def validate_response(envelope: ResponseEnvelope | Mapping[str, Any]) -> CanonicalResult:
    """Validate an engine reply and build the canonical result.

    Steps (first failure wins):
        1. ``success`` false → :class:`EngineError` with the engine's text
        2. missing, null or empty ``response`` → :class:`ContractError`
        3. text payload not valid JSON → :class:`ContractError`
        4. value null or with missing/null ``metadata`` → :class:`ContractError`

    Returns:
        A fresh :class:`CanonicalResult`
    """
    if not isinstance(envelope, ResponseEnvelope):
        envelope = ResponseEnvelope.from_dict(envelope)

    if not envelope.success:
        raise EngineError(envelope.error or GENERIC_ENGINE_ERROR)

    if envelope.response is None or envelope.response == "":
        raise ContractError(NO_RESPONSE_ERROR)

    value = decode_payload(resolve_payload(envelope.response))

    if not isinstance(value, Mapping) or value.get("metadata") is None:
        raise ContractError(
            FORMAT_ERROR,
            details={"received_type": type(value).__name__},
        )

    return CanonicalResult(value)
