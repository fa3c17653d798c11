"""Read-only projections of the current CanonicalResult.

Every function here is pure: same result in, same text/rows out.  The
exports in :mod:`litreview.services.export_service` reuse these exact
serializations.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from litreview.models.result import CanonicalResult, ComparativeRow

PROSE_PLACEHOLDER = "No markdown output available"
JSON_INDENT = 2
BADGE_LIMIT = 3

TABLE_COLUMNS = ("Paper", "Theme", "Methodology", "Key Findings", "Research Gaps", "Year")


def prose_view(result: Optional[CanonicalResult]) -> str:
    """Markdown output verbatim, or a placeholder when absent."""
    if result is None or result.markdown_output is None:
        return PROSE_PLACEHOLDER
    return result.markdown_output


def has_markdown(result: Optional[CanonicalResult]) -> bool:
    """True when there is non-empty markdown to export or copy."""
    return result is not None and bool(result.markdown_output)


def serialize_structured(value: Any) -> str:
    """2-space indented JSON, unicode kept as-is."""
    return json.dumps(value, indent=JSON_INDENT, ensure_ascii=False)


def structured_view(result: Optional[CanonicalResult]) -> str:
    """Pretty-printed ``json_output`` (``{}`` when absent)."""
    output = result.json_output if result is not None else None
    return serialize_structured(output if output is not None else {})


def _row_cells(row: ComparativeRow) -> tuple[str, str, str, str, str, str]:
    return (
        row.paper,
        row.research_theme,
        row.methodology,
        row.key_findings,
        row.research_gaps,
        "" if row.year is None else str(row.year),
    )


def table_rows(result: Optional[CanonicalResult]) -> list[tuple[str, str, str, str, str, str]]:
    """One tuple per comparative-table entry, in :data:`TABLE_COLUMNS` order."""
    if result is None:
        return []
    return [_row_cells(row) for row in result.comparative_table]


@dataclass(frozen=True)
class SummaryBadges:
    """Top entries of each statistics list, for the summary cards."""

    themes: list[str] = field(default_factory=list)
    methodologies: list[str] = field(default_factory=list)


def summary_badges(result: Optional[CanonicalResult], limit: int = BADGE_LIMIT) -> SummaryBadges:
    """First *limit* themes and methodologies (empty lists render nothing)."""
    if result is None:
        return SummaryBadges()
    stats = result.summary_statistics
    return SummaryBadges(
        themes=stats.research_themes[:limit],
        methodologies=stats.methodologies[:limit],
    )


def copy_text(result: Optional[CanonicalResult], target: str) -> Optional[str]:
    """Text placed on the clipboard for a copy *target*.

    Targets: ``markdown``, ``json`` or ``paper-{index}`` (the paper's
    150-word summary).  Returns None when there is nothing to copy.
    """
    if result is None:
        return None
    if target == "markdown":
        return result.markdown_output if has_markdown(result) else None
    if target == "json":
        return structured_view(result) if result.json_output is not None else None
    if target.startswith("paper-"):
        try:
            index = int(target.split("-", 1)[1])
        except ValueError:
            return None
        papers = result.papers
        if 0 <= index < len(papers):
            return papers[index].summary_150_words
    return None
