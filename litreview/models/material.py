"""Material record data model."""

from dataclasses import dataclass
from typing import Literal

MaterialCategory = Literal["pdf", "bibtex", "doi", "url"]

CATEGORIES: tuple[MaterialCategory, ...] = ("pdf", "bibtex", "doi", "url")


@dataclass(frozen=True)
class MaterialRecord:
    """One ingested reference (file, URL or DOI) awaiting analysis."""

    id: str
    name: str
    category: MaterialCategory
    content: str

    @property
    def label(self) -> str:
        """Upper-cased category, as shown on badges and in submissions."""
        return self.category.upper()
