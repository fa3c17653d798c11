"""Service layer."""

from litreview.services.agent_service import AgentService
from litreview.services.classifier import classify
from litreview.services.export_service import ExportArtifact, ResultExporter
from litreview.services.feedback import CopyFeedback
from litreview.services.registry import MaterialRegistry
from litreview.services.validator import validate_response

__all__ = [
    "AgentService",
    "CopyFeedback",
    "ExportArtifact",
    "MaterialRegistry",
    "ResultExporter",
    "classify",
    "validate_response",
]
