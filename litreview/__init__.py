"""litreview - research materials to structured literature review.

Collects PDFs, BibTeX, DOIs and URLs, sends them to a literature-analysis
engine, and renders / exports the structured review it returns.
"""

__version__ = "1.0.0"

from litreview.config import Settings
from litreview.models.material import MaterialRecord
from litreview.models.result import CanonicalResult
from litreview.session import AnalysisSession

__all__ = ["AnalysisSession", "CanonicalResult", "MaterialRecord", "Settings", "__version__"]
