"""Canonical analysis result returned by the literature-analysis engine.

The engine's payload is kept as one deep-copied mapping.  Every typed view
(``papers``, ``comparative_table``, ``summary_statistics`` …) is computed
from that mapping on access, so nothing can drift out of sync with it.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class SummaryStatistics:
    """Aggregate statistics over the analysed corpus."""

    year_range: Optional[str] = None
    research_themes: list[str] = field(default_factory=list)
    methodologies: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Paper:
    """Standardised metadata and summary for one analysed paper."""

    title: str
    authors: list[str] = field(default_factory=list)
    year: Optional[int | str] = None
    journal: Optional[str] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    abstract: Optional[str] = None
    summary_150_words: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Paper":
        authors = data.get("authors") or []
        if isinstance(authors, str):
            authors = [a.strip() for a in authors.split(",") if a.strip()]
        return cls(
            title=str(data.get("title") or "(no title)"),
            authors=[str(a) for a in authors],
            year=data.get("year"),
            journal=data.get("journal") or None,
            doi=data.get("doi") or None,
            url=data.get("url") or None,
            abstract=data.get("abstract") or None,
            summary_150_words=data.get("summary_150_words") or None,
        )


@dataclass(frozen=True)
class ComparativeRow:
    """One row of the comparative analysis table."""

    paper: str = ""
    research_theme: str = ""
    methodology: str = ""
    key_findings: str = ""
    research_gaps: str = ""
    year: Optional[int | str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ComparativeRow":
        return cls(
            paper=str(data.get("paper") or ""),
            research_theme=str(data.get("research_theme") or ""),
            methodology=str(data.get("methodology") or ""),
            key_findings=str(data.get("key_findings") or ""),
            research_gaps=str(data.get("research_gaps") or ""),
            year=data.get("year"),
        )


def _list_of_str(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _list_of_dicts(value: Any) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, Mapping)]


class CanonicalResult:
    """The single structured analysis outcome all views derive from.

    Instances are read-only: the constructor deep-copies the payload and
    accessors hand out copies, so a result can only change by being
    replaced wholesale.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]):
        if "metadata" not in data:
            raise ValueError("CanonicalResult requires a 'metadata' field")
        object.__setattr__(self, "_data", copy.deepcopy(dict(data)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CanonicalResult is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalResult):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"CanonicalResult(total_papers={self.total_papers!r}, status={self.status!r})"

    # ── Raw access ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the underlying payload."""
        return copy.deepcopy(self._data)

    @property
    def metadata(self) -> dict[str, Any]:
        meta = self._data.get("metadata")
        return copy.deepcopy(meta) if isinstance(meta, Mapping) else {}

    @property
    def markdown_output(self) -> Optional[str]:
        value = self._data.get("markdown_output")
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    @property
    def json_output(self) -> Optional[dict[str, Any]]:
        value = self._data.get("json_output")
        if value is None:
            return None
        return copy.deepcopy(value)

    # ── Metadata ──────────────────────────────────────────────────────

    @property
    def total_papers(self) -> int:
        try:
            return int(self.metadata.get("total_papers") or 0)
        except (TypeError, ValueError):
            return 0

    @property
    def generated_date(self) -> Optional[str]:
        value = self.metadata.get("generated_date")
        return str(value) if value else None

    @property
    def summary_statistics(self) -> SummaryStatistics:
        stats = self.metadata.get("summary_statistics")
        if not isinstance(stats, Mapping):
            return SummaryStatistics()
        year_range = stats.get("year_range")
        return SummaryStatistics(
            year_range=str(year_range) if year_range else None,
            research_themes=_list_of_str(stats.get("research_themes")),
            methodologies=_list_of_str(stats.get("methodologies")),
        )

    # ── Structured output ─────────────────────────────────────────────

    @property
    def papers(self) -> list[Paper]:
        output = self._data.get("json_output")
        if not isinstance(output, Mapping):
            return []
        return [Paper.from_dict(p) for p in _list_of_dicts(output.get("papers"))]

    @property
    def comparative_table(self) -> list[ComparativeRow]:
        output = self._data.get("json_output")
        if not isinstance(output, Mapping):
            return []
        rows = _list_of_dicts(output.get("comparative_analysis_table"))
        return [ComparativeRow.from_dict(r) for r in rows]

    # ── Engine bookkeeping (the engine is inconsistent about casing) ──

    def _field(self, name: str) -> Any:
        if name in self._data:
            return self._data[name]
        return self._data.get(name.capitalize())

    @property
    def status(self) -> Optional[str]:
        return self._field("status")

    @property
    def confidence(self) -> Optional[float]:
        return self._field("confidence")

    @property
    def processing_notes(self) -> Optional[str]:
        return self._field("processing_notes")

    @property
    def model(self) -> Optional[str]:
        return self._field("model")

    @property
    def temperature(self) -> Optional[float]:
        return self._field("temperature")
