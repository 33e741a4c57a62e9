#!/usr/bin/env python3
"""
CiteCheck - Cross-check in-text citations against a document's reference list.

Usage:
    python check_citations.py "path/to/document.txt" [options]

Options:
    --format, -f         Output format: table, json or markdown
    --output, -o         Write the report to a file (or into a directory)
    --verbose, -v        Enable detailed logging
    --fail-on-missing    Exit with status 2 when citations have no reference
"""

import sys
import argparse
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from loguru import logger

from citecheck.citation_parser import CitationParser
from citecheck.config import config, OUTPUT_FORMATS, VERSION
from citecheck.document_loader import DocumentLoader
from citecheck.logging_setup import init_from_config, log_document_operation
from citecheck.models import ParseResult
from citecheck.report import build_summary_table, format_report, result_to_json

console = Console()

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_MISSING = 2

FORMAT_SUFFIXES = {'json': '.json', 'markdown': '.md', 'table': '.md'}


class CitationChecker:
    """Main application class: load, analyze, report."""

    def __init__(
        self,
        input_path: str,
        output_path: Optional[str] = None,
        output_format: str = "table",
        fail_on_missing: bool = False,
    ):
        self.input_path = input_path
        self.output_path = output_path
        self.output_format = output_format
        self.fail_on_missing = fail_on_missing
        self.parser = CitationParser()
        self.result: Optional[ParseResult] = None

    def run(self) -> int:
        """Run the check and return a process exit code."""
        console.print(Panel.fit(
            f"[bold blue]CiteCheck[/bold blue] v{VERSION}\n"
            "Cross-check in-text citations against the reference list",
            border_style="blue"
        ))

        try:
            loader = DocumentLoader(self.input_path)
            logger.debug(f"Input file: {loader.get_file_info()}")
            text = loader.read()
            self.result = self.parser.parse(text)
            log_document_operation("analyze", str(loader.input_path), {
                'in_text': self.result.total_in_text,
                'references': self.result.total_references,
            })
            self._emit(loader)
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")
            logger.exception("Citation check failed")
            return EXIT_ERROR

        self._print_summary()

        if self.fail_on_missing and self.result.missing_citations:
            return EXIT_MISSING
        return EXIT_OK

    def _render(self) -> str:
        if self.output_format == 'json':
            return result_to_json(self.result)
        return format_report(self.result, max_items=config.REPORT_MAX_ITEMS)

    def _emit(self, loader: DocumentLoader) -> None:
        if self.output_path:
            suffix = FORMAT_SUFFIXES[self.output_format]
            out_path = loader.write_output(self._render(), self.output_path, suffix)
            console.print(f"[green][OK][/green] Report written to {out_path}")
            return

        if self.output_format == 'table':
            console.print(build_summary_table(self.result))
        elif self.output_format == 'json':
            console.print_json(result_to_json(self.result))
        else:
            console.print(self._render(), markup=False)

    def _print_summary(self) -> None:
        result = self.result
        console.print(
            f"\n[bold]In-text:[/bold] {result.total_in_text}  "
            f"[bold]References:[/bold] {result.total_references}  "
            f"[red]Missing:[/red] {len(result.missing_citations)}  "
            f"[yellow]Unused:[/yellow] {len(result.unused_references)}"
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Cross-check in-text citations against a document's reference list"
    )
    parser.add_argument("input_file", help="Path to a plain-text document")
    parser.add_argument("--format", "-f", choices=OUTPUT_FORMATS, default=None,
                        help="Output format (default from CITECHECK_OUTPUT_FORMAT)")
    parser.add_argument("--output", "-o", help="Write the report to this file or directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--fail-on-missing", action="store_true",
                        help="Exit with status 2 when citations have no reference")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    init_from_config(verbose=True if args.verbose else None)

    checker = CitationChecker(
        input_path=args.input_file,
        output_path=args.output,
        output_format=args.format or config.DEFAULT_OUTPUT_FORMAT,
        fail_on_missing=args.fail_on_missing,
    )
    return checker.run()


if __name__ == "__main__":
    sys.exit(main())
