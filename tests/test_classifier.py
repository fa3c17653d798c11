import pytest

from litreview.services.classifier import RULES, classify


@pytest.mark.parametrize(
    ("content", "filename", "content_type", "expected"),
    [
        ("@article{x, title={T}}", "refs.bib", None, "bibtex"),
        ("anything", "REFS.BIB", None, "bibtex"),
        ("https://example.org", "notes.txt", "text/plain", "bibtex"),
        ("%PDF-1.7", "paper.pdf", "application/pdf", "pdf"),
        ("  https://arxiv.org/abs/1706.03762", None, None, "url"),
        ("10.1038/nature14539", None, None, "doi"),
        ("  10.5555/xyz", "doi.dat", "application/octet-stream", "doi"),
        ("random text", "file.docx", None, "pdf"),
    ],
)
def test_classify_rules(content, filename, content_type, expected) -> None:
    assert classify(content, filename, content_type) == expected


def test_bibliography_rule_wins_over_pdf_type() -> None:
    assert classify("x", "refs.bib", "application/pdf") == "bibtex"


def test_pdf_type_wins_over_url_content() -> None:
    assert classify("http://example.org", "a.pdf", "application/pdf") == "pdf"


def test_content_type_parameters_are_ignored() -> None:
    assert classify("x", None, "text/plain; charset=utf-8") == "bibtex"


def test_doi_needs_digits_after_prefix() -> None:
    assert classify("10.abc") == "pdf"


def test_empty_content_defaults_to_pdf() -> None:
    assert classify("") == "pdf"
    assert classify("   ") == "pdf"


def test_classify_is_deterministic() -> None:
    args = ("10.1000/182", "x.txt", None)
    assert {classify(*args) for _ in range(50)} == {"doi"}


def test_rule_table_order() -> None:
    assert [r.category for r in RULES] == ["bibtex", "pdf", "url", "doi"]
