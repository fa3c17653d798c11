"""Text helpers for DOI normalisation and URL checks."""

import re
from urllib.parse import urlparse


def normalize_doi(doi: str) -> str:
    """Normalize DOI by removing URL prefixes and ``doi:`` scheme."""
    doi = doi.strip()
    doi = doi.replace("https://doi.org/", "").replace("http://doi.org/", "")
    doi = doi.replace("https://dx.doi.org/", "").replace("http://dx.doi.org/", "")
    if doi.lower().startswith("doi:"):
        doi = doi[4:]
    return doi.strip()


def is_absolute_url(value: str) -> bool:
    """Return True if *value* parses as an absolute URL (scheme + host).

    ``mailto:``-style URLs without a network location are accepted as
    long as they carry a scheme and a path.
    """
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    if not parsed.scheme or not re.fullmatch(r"[A-Za-z][A-Za-z0-9+.-]*", parsed.scheme):
        return False
    return bool(parsed.netloc or parsed.path)
