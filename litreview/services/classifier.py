"""Heuristic classification of raw uploads into material categories.

Rules are evaluated top to bottom; the first predicate that matches
decides the category.  Only cheap string checks are made: no content
sniffing beyond a prefix test, no network access.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from litreview.models.material import MaterialCategory

BIBLIOGRAPHY_EXTENSIONS = (".bib",)
PLAIN_TEXT_TYPES = ("text/plain",)
PDF_TYPES = ("application/pdf",)

# Extensions offered by the upload picker; anything else is still accepted
ACCEPTED_EXTENSIONS = (".pdf", ".bib", ".txt")

DOI_PREFIX_RE = re.compile(r"^10\.\d+")

DEFAULT_CATEGORY: MaterialCategory = "pdf"


@dataclass(frozen=True)
class ClassifierInput:
    """What the classifier gets to look at for one upload."""

    content: str
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @property
    def stripped(self) -> str:
        return (self.content or "").strip()

    @property
    def mime(self) -> str:
        # "text/plain; charset=utf-8" → "text/plain"
        return (self.content_type or "").split(";", 1)[0].strip().lower()


@dataclass(frozen=True)
class Rule:
    """A named predicate → category pair."""

    name: str
    matches: Callable[[ClassifierInput], bool]
    category: MaterialCategory


def _is_bibliography(item: ClassifierInput) -> bool:
    filename = (item.filename or "").lower()
    return filename.endswith(BIBLIOGRAPHY_EXTENSIONS) or item.mime in PLAIN_TEXT_TYPES


def _is_pdf_type(item: ClassifierInput) -> bool:
    return item.mime in PDF_TYPES


def _looks_like_url(item: ClassifierInput) -> bool:
    return item.stripped.startswith("http")


def _looks_like_doi(item: ClassifierInput) -> bool:
    return DOI_PREFIX_RE.match(item.stripped) is not None


RULES: tuple[Rule, ...] = (
    Rule("bibliography", _is_bibliography, "bibtex"),
    Rule("pdf-type", _is_pdf_type, "pdf"),
    Rule("url-prefix", _looks_like_url, "url"),
    Rule("doi-prefix", _looks_like_doi, "doi"),
)


def classify(
    content: str,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    rules: tuple[Rule, ...] = RULES,
) -> MaterialCategory:
    """Classify an upload into one of ``pdf``, ``bibtex``, ``doi``, ``url``.

    Args:
        content: Text content of the upload (or the raw user input)
        filename: Original filename, if any
        content_type: Declared MIME type, if any
        rules: Rule table to evaluate (defaults to :data:`RULES`)

    Returns:
        The category of the first matching rule, or ``pdf`` if none match
        (this includes empty content).
    """
    item = ClassifierInput(content=content or "", filename=filename, content_type=content_type)
    for rule in rules:
        if rule.matches(item):
            return rule.category
    return DEFAULT_CATEGORY
