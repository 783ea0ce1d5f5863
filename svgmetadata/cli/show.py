"""Show command - Print the metadata of one SVG document."""

import typer

from svgmetadata.cli.base import MetadataCommand
from svgmetadata.core.exceptions import SVGMetadataError
from svgmetadata.rdf.pydantic_models import MetadataSummary


class ShowCommand(MetadataCommand):
    """Print a text or JSON summary of a document's metadata."""

    def execute(self, source: str, as_json: bool = False, strict: bool = False) -> int:
        try:
            record = self.load_record(source, strict=strict)
        except SVGMetadataError as e:
            return self.handle_error(e, f"While reading {source}")

        if as_json:
            summary = MetadataSummary.from_record(record)
            typer.echo(summary.model_dump_json(indent=2))
        else:
            typer.echo(record.to_text(), nl=False)
        return 0


def command(
    source: str = typer.Argument(..., help="SVG file, URL, or - for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON summary"),
    strict: bool = typer.Option(
        False, "--strict", help="Require rdf:RDF inside <metadata>"
    ),
) -> None:
    """Show title, author, license and keywords of a document.

    Examples:
        svgmetadata show drawing.svg
        svgmetadata show drawing.svg --json
        cat drawing.svg | svgmetadata show -
    """
    cmd = ShowCommand()
    exit_code = cmd.execute(source, as_json, strict)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
