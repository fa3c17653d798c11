"""Application state and templates."""

import os
from typing import Optional

from fastapi.templating import Jinja2Templates

from litreview import __version__
from litreview.config import Settings
from litreview.services.agent_service import AgentService
from litreview.session import AnalysisSession


# ============================================================================
# Global State
# ============================================================================


class AppState:
    """Mutable singleton holding runtime services and the analysis session."""

    settings: Settings
    engine: AgentService
    session: AnalysisSession

    def init(self, settings: Optional[Settings] = None) -> None:
        """(Re)initialize services from *settings* with a fresh session."""
        self.settings = settings or Settings.load()
        self.engine = AgentService(self.settings.engine)
        self.session = AnalysisSession()


state = AppState()


# ============================================================================
# Templates & Filters
# ============================================================================

base_dir = os.path.dirname(__file__)
templates = Jinja2Templates(directory=os.path.join(base_dir, "templates"))
templates.env.globals["version"] = __version__


def join_authors(authors: list[str]) -> str:
    """["A", "B"] → "A, B"."""
    return ", ".join(a for a in authors if a)


def doi_link(doi: str) -> str:
    """Resolver URL for a bare DOI (URLs are passed through)."""
    if not doi:
        return ""
    if doi.startswith("http"):
        return doi
    return f"https://doi.org/{doi}"


templates.env.filters["join_authors"] = join_authors
templates.env.filters["doi_link"] = doi_link
