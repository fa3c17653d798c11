from unittest.mock import AsyncMock, patch

from rich.console import Console

from litreview.cli import LitReviewCLI, create_parser
from litreview.config import Settings
from litreview.console import ConsoleUI


def _cli(tmp_path) -> tuple[LitReviewCLI, Console]:
    console = Console(record=True, width=200)
    return LitReviewCLI(Settings.load(tmp_path), ConsoleUI(console)), console


def test_parser_collects_repeated_options() -> None:
    args = create_parser().parse_args(
        ["analyze", "a.bib", "--url", "https://x.org", "--url", "https://y.org", "--doi", "10.1/z"]
    )
    assert args.urls == ["https://x.org", "https://y.org"]
    assert args.dois == ["10.1/z"]
    assert [str(p) for p in args.paths] == ["a.bib"]


def test_build_session_order_and_normalisation(tmp_path) -> None:
    bib = tmp_path / "refs.bib"
    bib.write_text("@article{a}", encoding="utf-8")
    cli, console = _cli(tmp_path)

    session = cli.build_session([bib], ["https://x.org", "bad"], ["https://doi.org/10.1/z"])

    assert [(r.category, r.content) for r in session.registry] == [
        ("bibtex", "@article{a}"),
        ("url", "https://x.org"),
        ("doi", "10.1/z"),
    ]
    assert "Skipped invalid URL: bad" in console.export_text()


def test_classify_command(tmp_path) -> None:
    (tmp_path / "paper.pdf").write_bytes(b"%PDF-1.4")
    (tmp_path / "doi.dat").write_text("10.1000/182", encoding="utf-8")
    cli, console = _cli(tmp_path)

    cli.cmd_classify([tmp_path / "paper.pdf", tmp_path / "doi.dat"])

    text = console.export_text()
    assert "PDF" in text
    assert "DOI" in text


def test_analyze_writes_exports(tmp_path, sample_result) -> None:
    cli, console = _cli(tmp_path)
    engine = AsyncMock()
    engine.analyze.return_value = {"success": True, "response": sample_result}

    with patch("litreview.cli.AgentService", return_value=engine):
        ok = cli.cmd_analyze([], ["https://x.org"], [], export_dir=tmp_path / "out")

    assert ok is True
    exported = sorted(p.suffix for p in (tmp_path / "out").iterdir())
    assert exported == [".json", ".md"]
    assert "Vaswani et al." in console.export_text()


def test_analyze_reports_error(tmp_path) -> None:
    cli, console = _cli(tmp_path)

    ok = cli.cmd_analyze([], [], [], export_dir=tmp_path / "out")

    assert ok is False
    assert "Nothing to submit" in console.export_text()
