"""Export downloads and copy-to-clipboard feedback."""

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from litreview.gui.helpers import COPY_TARGETS
from litreview.gui.state import state, templates
from litreview.services.export_service import ExportArtifact, export_json, export_markdown
from litreview.services.views import copy_text

router = APIRouter()


# ============================================================================
# Export
# ============================================================================


def _download(artifact: Optional[ExportArtifact]) -> Response:
    if artifact is None:
        return JSONResponse({"error": "Nothing to export"}, status_code=404)
    return Response(
        content=artifact.data,
        media_type=artifact.media_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )


@router.get("/export/markdown")
async def download_markdown():
    """Download the markdown review (404 when there is none)."""
    return _download(export_markdown(state.session.result))


@router.get("/export/json")
async def download_json():
    """Download the structured review (404 when there is none)."""
    return _download(export_json(state.session.result))


# ============================================================================
# Copy Feedback
# ============================================================================


def _valid_target(target: str) -> bool:
    if target in COPY_TARGETS:
        return True
    prefix, _, index = target.partition("-")
    return prefix == "paper" and index.isdigit()


def _copy_button(request: Request, target: str) -> HTMLResponse:
    session = state.session
    return templates.TemplateResponse(
        request,
        "partials/copy_button.html",
        {
            "target": target,
            "copied": session.feedback.is_copied(target),
            "enabled": copy_text(session.result, target) is not None,
        },
    )


@router.post("/copy/{target}", response_class=HTMLResponse)
async def mark_copied(request: Request, target: str):
    """Record a copy action; the returned button shows "Copied" for 2 s."""
    if not _valid_target(target):
        return JSONResponse({"error": "Unknown copy target"}, status_code=404)
    state.session.mark_copied(target)
    response = _copy_button(request, target)
    response.headers["HX-Trigger"] = "copyChanged"
    return response


@router.get("/copy/{target}", response_class=HTMLResponse)
async def copy_button(request: Request, target: str):
    """Current state of a copy button (polled to revert the feedback)."""
    if not _valid_target(target):
        return JSONResponse({"error": "Unknown copy target"}, status_code=404)
    return _copy_button(request, target)
