import pytest

from litreview.utils.text import is_absolute_url, normalize_doi


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://example.org/paper", True),
        ("http://localhost:8000", True),
        ("ftp://files.example.org/a.pdf", True),
        ("not-a-url", False),
        ("example.org/paper", False),
        ("http://", False),
        ("https://exa mple.org", False),
        ("", False),
    ],
)
def test_is_absolute_url(value, expected) -> None:
    assert is_absolute_url(value) is expected


@pytest.mark.parametrize(
    "raw",
    ["10.1/z", " https://doi.org/10.1/z ", "http://dx.doi.org/10.1/z", "doi:10.1/z"],
)
def test_normalize_doi(raw) -> None:
    assert normalize_doi(raw) == "10.1/z"
