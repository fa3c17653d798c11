"""Build the request payload sent to the literature-analysis engine."""

from typing import Any, Iterable

from litreview.errors import ValidationError
from litreview.models.material import MaterialRecord

TASK_DESCRIPTION = (
    "Process these research materials and generate a comprehensive literature "
    "review with standardized metadata extraction, 150-word summaries per paper, "
    "and a comparative analysis table:"
)

MATERIAL_SEPARATOR = "\n\n"


def format_material(record: MaterialRecord) -> str:
    """Render one record as ``[CATEGORY]: content``."""
    return f"[{record.label}]: {record.content}"


def format_materials(records: Iterable[MaterialRecord]) -> str:
    """Join every record, in the given order, separated by a blank line.

    Raises:
        ValidationError: If there is nothing to submit
    """
    records = list(records)
    if not records:
        raise ValidationError("Nothing to submit: add at least one research material")
    return MATERIAL_SEPARATOR.join(format_material(r) for r in records)


def build_message(records: Iterable[MaterialRecord]) -> str:
    """Task description followed by the formatted materials."""
    return f"{TASK_DESCRIPTION}{MATERIAL_SEPARATOR}{format_materials(records)}"


def build_request(records: Iterable[MaterialRecord], agent_id: str) -> dict[str, Any]:
    """Build the complete JSON body for one engine call.

    Args:
        records: Materials in submission order
        agent_id: Engine selector identifier

    Returns:
        ``{"message": ..., "agent_id": ...}``
    """
    return {"message": build_message(records), "agent_id": agent_id}
