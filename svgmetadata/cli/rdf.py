"""RDF command - Print the regenerated RDF block of a document."""

import typer

from svgmetadata.cli.base import MetadataCommand
from svgmetadata.core.exceptions import SVGMetadataError


class RdfCommand(MetadataCommand):
    """Extract a document's metadata and serialize it again."""

    def execute(self, source: str, strict: bool = False) -> int:
        try:
            record = self.load_record(source, strict=strict)
        except SVGMetadataError as e:
            return self.handle_error(e, f"While reading {source}")

        typer.echo(record.to_rdf(), nl=False)
        return 0


def command(
    source: str = typer.Argument(..., help="SVG file, URL, or - for stdin"),
    strict: bool = typer.Option(
        False, "--strict", help="Require rdf:RDF inside <metadata>"
    ),
) -> None:
    """Print the normalized <metadata> block of a document.

    Examples:
        svgmetadata rdf drawing.svg > metadata.xml
    """
    cmd = RdfCommand()
    exit_code = cmd.execute(source, strict)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)
