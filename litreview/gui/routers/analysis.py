"""Analysis routes: submit to the engine, show result, start over."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from litreview.gui.helpers import result_context, workspace_context
from litreview.gui.state import state, templates

router = APIRouter(prefix="/analysis")


def _workspace_response(request: Request) -> HTMLResponse:
    response = templates.TemplateResponse(
        request,
        "partials/workspace.html",
        workspace_context(state.session),
    )
    response.headers["HX-Trigger"] = "resultUpdated"
    return response


@router.post("", response_class=HTMLResponse)
async def generate_review(request: Request):
    """Submit all materials and render the resulting workspace.

    Errors end up in the session's banner; the previous result (if any)
    keeps being shown.
    """
    await state.session.submit(state.engine, state.settings.engine.agent_id)
    return _workspace_response(request)


@router.get("", response_class=HTMLResponse)
async def show_result(request: Request):
    """Result panel partial."""
    return templates.TemplateResponse(
        request,
        "partials/result.html",
        result_context(state.session),
    )


@router.post("/reset", response_class=HTMLResponse)
async def new_analysis(request: Request):
    """Clear materials and result ("New Analysis")."""
    state.session.reset()
    return _workspace_response(request)
