"""Utility functions."""

from litreview.utils.text import is_absolute_url, normalize_doi

__all__ = ["is_absolute_url", "normalize_doi"]
