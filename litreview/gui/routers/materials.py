"""Material routes: file upload, URL input, removal (HTMX partials)."""

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse

from litreview.gui.helpers import materials_context
from litreview.gui.state import state, templates

router = APIRouter(prefix="/materials")


def _materials_response(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "partials/materials.html",
        materials_context(state.session),
    )


@router.get("", response_class=HTMLResponse)
async def list_materials(request: Request):
    """Material list partial."""
    return _materials_response(request)


@router.post("/upload", response_class=HTMLResponse)
async def upload_materials(request: Request, files: list[UploadFile] = File(...)):
    """Ingest one or more dropped / selected files."""
    for upload in files:
        data = await upload.read()
        state.session.add_upload(upload.filename, data, upload.content_type)
    return _materials_response(request)


@router.post("/url", response_class=HTMLResponse)
async def add_url(request: Request, url: str = Form("")):
    """Add a web URL; malformed URLs are dropped and the input cleared."""
    state.session.set_url_input(url)
    state.session.add_url()
    return _materials_response(request)


@router.delete("/{record_id}", response_class=HTMLResponse)
async def remove_material(request: Request, record_id: str):
    """Remove one material (no-op for unknown ids)."""
    state.session.remove(record_id)
    return _materials_response(request)
