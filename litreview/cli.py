"""Command-line interface handlers."""

import argparse
import asyncio
import mimetypes
from pathlib import Path
from typing import Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from litreview.config import Settings
from litreview.console import ConsoleUI
from litreview.services.agent_service import AgentService
from litreview.services.export_service import ResultExporter
from litreview.session import AnalysisSession
from litreview.utils.text import normalize_doi


class LitReviewCLI:
    """CLI application for litreview."""

    def __init__(self, settings: Optional[Settings] = None, ui: Optional[ConsoleUI] = None):
        """Initialize CLI with settings.

        Args:
            settings: Application settings (loads from disk if not provided)
            ui: Console UI (a default Rich console if not provided)
        """
        self.settings = settings or Settings.load()
        self.ui = ui or ConsoleUI()

    def cmd_classify(self, paths: list[Path]) -> None:
        """Show the category each file would be ingested as."""
        session = AnalysisSession()
        for path in paths:
            if not path.is_file():
                self.ui.warning(f"Not a file: {path}")
                continue
            content_type, _ = mimetypes.guess_type(path.name)
            session.add_upload(path.name, path.read_bytes(), content_type)
        self.ui.display_materials(session.registry)

    def build_session(
        self,
        paths: list[Path],
        urls: list[str],
        dois: list[str],
    ) -> AnalysisSession:
        """Ingest files, URLs and DOIs into a fresh session, in that order."""
        session = AnalysisSession()
        for path in paths:
            if not path.is_file():
                self.ui.warning(f"Not a file: {path}")
                continue
            content_type, _ = mimetypes.guess_type(path.name)
            session.add_upload(path.name, path.read_bytes(), content_type)
        for url in urls:
            if session.add_url(url) is None:
                self.ui.warning(f"Skipped invalid URL: {url}")
        for doi in dois:
            doi = normalize_doi(doi)
            session.registry.add(name=doi, category="doi", content=doi)
        return session

    def cmd_analyze(
        self,
        paths: list[Path],
        urls: list[str],
        dois: list[str],
        export_dir: Optional[Path] = None,
    ) -> bool:
        """Submit materials, print the result and write both exports.

        Returns:
            True if a result was produced
        """
        session = self.build_session(paths, urls, dois)
        self.ui.display_materials(session.registry)

        engine = AgentService(self.settings.engine)
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            console=self.ui.console,
        ) as progress:
            progress.add_task("Generating literature review...", total=None)
            result = asyncio.run(session.submit(engine, self.settings.engine.agent_id))

        if result is None:
            self.ui.error(session.error_message or "Analysis failed")
            return False

        self.ui.display_summary(result)
        self.ui.display_comparative_table(result)

        exporter = ResultExporter(export_dir or self.settings.export_dir)
        self.ui.exported(exporter.export(result))
        return True


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="litreview",
        description="Research materials → analysis engine → Markdown / JSON review",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # classify command
    classify_parser = subparsers.add_parser("classify", help="Show detected material types")
    classify_parser.add_argument("paths", nargs="+", type=Path, help="Files to classify")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Generate a literature review")
    analyze_parser.add_argument("paths", nargs="*", type=Path, help="PDF / BibTeX / text files")
    analyze_parser.add_argument(
        "--url",
        action="append",
        default=[],
        dest="urls",
        help="Web URL to include (repeatable)",
    )
    analyze_parser.add_argument(
        "--doi",
        action="append",
        default=[],
        dest="dois",
        help="DOI to include (repeatable)",
    )
    analyze_parser.add_argument(
        "--export-dir",
        type=Path,
        default=None,
        help="Directory for the .md / .json exports (default: exports/)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = LitReviewCLI()

    if args.command == "classify":
        cli.cmd_classify(args.paths)
        return 0
    if args.command == "analyze":
        ok = cli.cmd_analyze(args.paths, args.urls, args.dois, args.export_dir)
        return 0 if ok else 1
    return 2
