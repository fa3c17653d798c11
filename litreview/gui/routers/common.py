"""Common routes: index page, error banner, engine settings."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from litreview.config import save_engine
from litreview.gui.helpers import workspace_context
from litreview.gui.state import state, templates

router = APIRouter()


# ============================================================================
# Main Page
# ============================================================================


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Main workbench page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        workspace_context(state.session),
    )


@router.get("/workspace", response_class=HTMLResponse)
async def workspace(request: Request):
    """Whole workspace partial (error banner + upload or result panel)."""
    return templates.TemplateResponse(
        request,
        "partials/workspace.html",
        workspace_context(state.session),
    )


# ============================================================================
# Error Banner
# ============================================================================


@router.post("/error/dismiss", response_class=HTMLResponse)
async def dismiss_error(request: Request):
    """Hide the error banner."""
    state.session.dismiss_error()
    return templates.TemplateResponse(
        request,
        "partials/error.html",
        {"error": None},
    )


# ============================================================================
# Engine Settings
# ============================================================================


class EnginePayload(BaseModel):
    """Request body for updating the engine connection."""
    base_url: str
    agent_id: str
    api_key: str | None = None
    timeout: float | None = None


def _engine_json() -> dict:
    engine = state.settings.engine
    return {
        "base_url": engine.base_url,
        "agent_id": engine.agent_id,
        "has_api_key": bool(engine.api_key),
        "timeout": engine.timeout,
    }


@router.get("/api/engine")
async def get_engine():
    """Return the current engine settings (API key redacted)."""
    return JSONResponse(_engine_json())


@router.put("/api/engine")
async def update_engine(body: EnginePayload):
    """Update the engine settings and persist to ``engine.yaml``."""
    engine = state.settings.engine
    engine.base_url = body.base_url.strip()
    engine.agent_id = body.agent_id.strip()
    if body.api_key is not None:
        engine.api_key = body.api_key.strip() or None
    engine.timeout = body.timeout
    save_engine(state.settings.metadata_dir / "engine.yaml", engine)
    return JSONResponse(_engine_json())
