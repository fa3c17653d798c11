"""Template context builders shared by the routers."""

from typing import Any

from litreview.services.classifier import ACCEPTED_EXTENSIONS
from litreview.services.views import (
    TABLE_COLUMNS,
    has_markdown,
    prose_view,
    structured_view,
    summary_badges,
    table_rows,
)
from litreview.session import AnalysisSession

COPY_TARGETS = ("markdown", "json")


def materials_context(session: AnalysisSession) -> dict[str, Any]:
    """Context for the upload panel (material list + URL form)."""
    return {
        "materials": session.registry.records,
        "url_input": session.registry.url_buffer,
        "busy": session.busy,
        "accept": ",".join(ACCEPTED_EXTENSIONS),
    }


def result_context(session: AnalysisSession) -> dict[str, Any]:
    """Context for the result panel.

    Every value is computed from ``session.result`` right here, so the
    prose, JSON and table tabs always show the same result.
    """
    result = session.result
    if result is None:
        return {"result": None}
    return {
        "result": result,
        "stats": result.summary_statistics,
        "badges": summary_badges(result),
        "prose": prose_view(result),
        "structured": structured_view(result),
        "table_columns": TABLE_COLUMNS,
        "table_rows": table_rows(result),
        "papers": result.papers,
        "has_markdown": has_markdown(result),
        "has_json": result.json_output is not None,
        "copied": session.feedback.active_target,
    }


def workspace_context(session: AnalysisSession) -> dict[str, Any]:
    """Context for the whole workspace (error banner + upload or result)."""
    return {
        "error": session.error_message,
        **materials_context(session),
        **result_context(session),
    }
