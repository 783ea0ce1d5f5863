"""Validate command - Check that SVG documents carry usable metadata.

A document is invalid when extraction fails or when it lacks a title, a
creator or a license. With --require-keywords, a document whose only
keyword is the "unsorted" placeholder is invalid too.
"""

from dataclasses import dataclass, field
from typing import List

import typer
from rich.markup import escape
from rich.table import Table

from svgmetadata.cli.base import MetadataCommand
from svgmetadata.cli.console import get_console
from svgmetadata.core.exceptions import SVGMetadataError
from svgmetadata.core.logging import get_logger
from svgmetadata.rdf.constants import DEFAULT_KEYWORD
from svgmetadata.rdf.models import MetadataRecord

logger = get_logger(__name__)

REQUIRED_FIELDS = ("title", "creator", "license")


@dataclass
class ValidationResult:
    """Outcome for one source."""

    source: str
    problems: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.problems


def check_record(record: MetadataRecord, require_keywords: bool = False) -> List[str]:
    """List what a successfully parsed record is missing.

    Args:
        record: Parsed record
        require_keywords: Treat the placeholder keyword as missing keywords

    Returns:
        Problem descriptions, empty when the record is complete
    """
    problems = [f"missing {name}" for name in REQUIRED_FIELDS if not getattr(record, name)]
    if require_keywords and record.keywords <= {DEFAULT_KEYWORD}:
        problems.append("missing keywords")
    return problems


class ValidateCommand(MetadataCommand):
    """Validate the metadata of a batch of documents."""

    def execute(
        self,
        sources: List[str],
        strict: bool = False,
        require_keywords: bool = False,
    ) -> int:
        results = [self._validate_one(s, strict, require_keywords) for s in sources]
        self._display_results(results)

        invalid = sum(1 for r in results if not r.is_valid)
        if invalid:
            self.print_warning(f"{invalid} of {len(results)} documents invalid")
            return 1

        self.print_success(f"All {len(results)} documents valid")
        return 0

    def _validate_one(
        self, source: str, strict: bool, require_keywords: bool
    ) -> ValidationResult:
        try:
            record = self.load_record(source, strict=strict)
        except SVGMetadataError as e:
            logger.debug("Validation failed", source=source, error_code=e.error_code)
            return ValidationResult(source=source, problems=[f"{e.error_code}: {e}"])
        return ValidationResult(
            source=source, problems=check_record(record, require_keywords)
        )

    def _display_results(self, results: List[ValidationResult]) -> None:
        table = Table(title="Metadata Validation")
        table.add_column("Document", style="cyan")
        table.add_column("Status")
        table.add_column("Problems")

        for result in results:
            status = "[green]valid[/green]" if result.is_valid else "[red]invalid[/red]"
            table.add_row(
                escape(result.source), status, escape("; ".join(result.problems))
            )

        get_console().print(table)


def command(
    sources: List[str] = typer.Argument(..., help="SVG files or URLs to check"),
    strict: bool = typer.Option(
        False, "--strict", help="Require rdf:RDF inside <metadata>"
    ),
    require_keywords: bool = typer.Option(
        False, "--require-keywords", help="Reject documents without keywords"
    ),
) -> None:
    """Check that documents have a title, creator and license.

    Exits with code 1 if any document is invalid.

    Examples:
        svgmetadata validate submissions/*.svg
        svgmetadata validate apple.svg --strict --require-keywords
    """
    cmd = ValidateCommand()
    exit_code = cmd.execute(sources, strict, require_keywords)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
