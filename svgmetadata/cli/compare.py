"""Compare command - Check whether two documents describe the same work."""

import typer
from rich.markup import escape
from rich.table import Table

from svgmetadata.cli.base import MetadataCommand
from svgmetadata.cli.console import get_console
from svgmetadata.core.exceptions import SVGMetadataError
from svgmetadata.rdf.models import MetadataRecord

COMPARED_FIELDS = ("creator", "title", "license")


class CompareCommand(MetadataCommand):
    """Compare creator, title and license of two documents."""

    def execute(self, first: str, second: str) -> int:
        try:
            left = self.load_record(first)
            right = self.load_record(second)
        except SVGMetadataError as e:
            return self.handle_error(e, "While loading documents to compare")

        if left.compare(right):
            self.print_success("Documents describe the same work")
            return 0

        self._display_differences(left, right, first, second)
        self.print_warning("Documents differ")
        return 1

    def _display_differences(
        self, left: MetadataRecord, right: MetadataRecord, first: str, second: str
    ) -> None:
        table = Table(title="Differences")
        table.add_column("Field", style="cyan")
        table.add_column(escape(first))
        table.add_column(escape(second))

        for name in COMPARED_FIELDS:
            a, b = getattr(left, name), getattr(right, name)
            if a != b:
                table.add_row(name, escape(a), escape(b))

        get_console().print(table)


def command(
    first: str = typer.Argument(..., help="First SVG file or URL"),
    second: str = typer.Argument(..., help="Second SVG file or URL"),
) -> None:
    """Exit 0 when both documents share creator, title and license.

    Keywords and other fields are ignored.

    Examples:
        svgmetadata compare apple.svg apple-v2.svg
    """
    cmd = CompareCommand()
    exit_code = cmd.execute(first, second)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
