"""FastAPI + HTMX GUI for litreview."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from litreview.gui.routers import analysis, common, exports, materials
from litreview.gui.state import state


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize services on startup."""
    state.init()
    yield


def create_app() -> FastAPI:
    """Build the FastAPI application with all routers mounted."""
    application = FastAPI(title="Literature Analysis", lifespan=lifespan)
    application.include_router(common.router)
    application.include_router(materials.router)
    application.include_router(analysis.router)
    application.include_router(exports.router)
    return application


app = create_app()
