"""In-memory registry of ingested research materials."""

import logging
import secrets
import time
from typing import Callable, Iterator, Optional

from litreview.models.material import MaterialCategory, MaterialRecord
from litreview.utils.text import is_absolute_url

logger = logging.getLogger(__name__)


def _default_id() -> str:
    """Time-based id with a random suffix ("1739184722103-9f2c1a7e")."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}"


class MaterialRegistry:
    """Ordered, id-keyed collection of :class:`MaterialRecord`.

    Insertion order is preserved and is the order materials are submitted
    in.  Records are only ever appended or removed, never edited.
    """

    def __init__(self, id_factory: Callable[[], str] = _default_id):
        """Initialize an empty registry.

        Args:
            id_factory: Callable producing candidate record ids
        """
        self._records: dict[str, MaterialRecord] = {}
        self._id_factory = id_factory
        self.url_buffer: str = ""

    def __iter__(self) -> Iterator[MaterialRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    @property
    def records(self) -> list[MaterialRecord]:
        """Snapshot of current records in arrival order."""
        return list(self._records.values())

    def get(self, record_id: str) -> Optional[MaterialRecord]:
        return self._records.get(record_id)

    def _new_id(self) -> str:
        record_id = self._id_factory()
        while record_id in self._records:
            record_id = self._id_factory()
        return record_id

    def add(self, name: str, category: MaterialCategory, content: str) -> MaterialRecord:
        """Append a new record and return it.

        Args:
            name: Display name (filename, URL, …); empty becomes "Untitled"
            category: Material category, fixed for the record's lifetime
            content: Raw content as submitted to the engine
        """
        record = MaterialRecord(
            id=self._new_id(),
            name=name or "Untitled",
            category=category,
            content=content,
        )
        self._records[record.id] = record
        logger.info("Added %s material %r (%s)", record.label, record.name, record.id)
        return record

    def remove(self, record_id: str) -> bool:
        """Remove a record by id.

        Returns:
            True if a record was removed, False if the id was unknown
        """
        record = self._records.pop(record_id, None)
        if record is None:
            return False
        logger.info("Removed material %r (%s)", record.name, record.id)
        return True

    def add_from_url(self, raw: Optional[str] = None) -> Optional[MaterialRecord]:
        """Admit a URL typed by the user.

        Uses *raw* when given, otherwise the pending :attr:`url_buffer`.
        Blank input is ignored.  Malformed URLs are dropped without a
        record being created; in both the success and failure case the
        buffer is cleared.

        Returns:
            The new record, or None if nothing was admitted
        """
        if raw is None:
            raw = self.url_buffer
        url = (raw or "").strip()
        if not url:
            return None

        self.url_buffer = ""
        if not is_absolute_url(url):
            logger.warning("Rejected malformed URL %r", url)
            return None
        return self.add(name=url, category="url", content=url)

    def clear(self) -> None:
        """Drop every record and the pending URL input."""
        self._records.clear()
        self.url_buffer = ""
