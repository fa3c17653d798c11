"""Markdown / JSON export of the current analysis result."""

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from litreview.models.result import CanonicalResult
from litreview.services.views import has_markdown, structured_view

logger = logging.getLogger(__name__)

EXPORT_BASENAME = "literature-review"


@dataclass(frozen=True)
class ExportArtifact:
    """A ready-to-download export file."""

    filename: str
    media_type: str
    content: str

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


def export_filename(extension: str, on: Optional[date] = None) -> str:
    """``literature-review-YYYY-MM-DD.{extension}``."""
    today = (on or date.today()).isoformat()
    return f"{EXPORT_BASENAME}-{today}.{extension}"


def export_markdown(
    result: Optional[CanonicalResult], on: Optional[date] = None
) -> Optional[ExportArtifact]:
    """Prose export; None when the markdown output is missing or empty."""
    if not has_markdown(result):
        return None
    return ExportArtifact(
        filename=export_filename("md", on),
        media_type="text/markdown",
        content=result.markdown_output,
    )


def export_json(
    result: Optional[CanonicalResult], on: Optional[date] = None
) -> Optional[ExportArtifact]:
    """Structured export; None when there is no structured output."""
    if result is None or result.json_output is None:
        return None
    return ExportArtifact(
        filename=export_filename("json", on),
        media_type="application/json",
        content=structured_view(result),
    )


class ResultExporter:
    """Service for writing result exports to a directory."""

    def __init__(self, export_dir: Path):
        """Initialize exporter.

        Args:
            export_dir: Directory to save exported files
        """
        self.export_dir = export_dir
        self.export_dir.mkdir(parents=True, exist_ok=True)

    def write(self, artifact: ExportArtifact) -> Path:
        """Write *artifact* to the export directory (overwrites if exists)."""
        filepath = self.export_dir / artifact.filename
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(artifact.content)
        logger.info("Exported %s", filepath)
        return filepath

    def export(self, result: CanonicalResult) -> list[Path]:
        """Write every available export of *result*.

        Returns:
            Paths of the created files (markdown first, then JSON)
        """
        paths = []
        for artifact in (export_markdown(result), export_json(result)):
            if artifact is not None:
                paths.append(self.write(artifact))
        return paths
