from datetime import date

from litreview.models.result import CanonicalResult
from litreview.services.export_service import (
    ResultExporter,
    export_filename,
    export_json,
    export_markdown,
)
from litreview.services.views import prose_view, structured_view

DAY = date(2026, 10, 19)


def test_markdown_export_is_exact() -> None:
    result = CanonicalResult({"metadata": {}, "markdown_output": "# Title"})
    artifact = export_markdown(result, on=DAY)

    assert artifact.content == "# Title"
    assert artifact.data == b"# Title"
    assert artifact.filename == "literature-review-2026-10-19.md"
    assert artifact.media_type == "text/markdown"


def test_exports_match_views(sample_result) -> None:
    result = CanonicalResult(sample_result)
    assert export_markdown(result).content == prose_view(result)
    assert export_json(result).content == structured_view(result)


def test_json_export_filename() -> None:
    result = CanonicalResult({"metadata": {}, "json_output": {"papers": []}})
    assert export_json(result, on=DAY).filename == "literature-review-2026-10-19.json"


def test_exports_absent_without_backing_field() -> None:
    result = CanonicalResult({"metadata": {}})
    assert export_markdown(result) is None
    assert export_json(result) is None
    assert export_markdown(None) is None


def test_empty_markdown_is_not_exported() -> None:
    result = CanonicalResult({"metadata": {}, "markdown_output": "", "json_output": {}})
    assert export_markdown(result, on=DAY) is None
    assert export_json(result, on=DAY).content == "{}"


def test_export_filename_defaults_to_today() -> None:
    assert export_filename("md") == f"literature-review-{date.today().isoformat()}.md"


def test_exporter_writes_files(tmp_path, sample_result) -> None:
    result = CanonicalResult(sample_result)
    exporter = ResultExporter(tmp_path / "out")

    paths = exporter.export(result)

    assert [p.suffix for p in paths] == [".md", ".json"]
    assert paths[0].read_text(encoding="utf-8") == prose_view(result)
    assert paths[1].read_text(encoding="utf-8") == structured_view(result)


def test_exporter_skips_missing_outputs(tmp_path) -> None:
    exporter = ResultExporter(tmp_path)
    assert exporter.export(CanonicalResult({"metadata": {}})) == []
