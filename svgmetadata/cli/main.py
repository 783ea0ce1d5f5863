"""svgmetadata CLI - Main application entry point.

Registers the commands and applies the global options:

    svgmetadata [--verbose] [--config PATH] COMMAND ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from svgmetadata import __version__
from svgmetadata.cli import annotate, compare, rdf, show, validate
from svgmetadata.cli.base import CliState
from svgmetadata.core.config import load_config
from svgmetadata.core.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="svgmetadata",
    help="Read, check and rewrite the RDF metadata of SVG documents",
    add_completion=False,
    no_args_is_help=True,
)

app.command("show")(show.command)
app.command("validate")(validate.command)
app.command("compare")(compare.command)
app.command("rdf")(rdf.command)
app.command("annotate")(annotate.command)


@app.command("version")
def version_command() -> None:
    """Print the installed version."""
    typer.echo(f"svgmetadata {__version__}")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug messages to stderr"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to svgmetadata.yaml"
    ),
) -> None:
    """SVG metadata tools.

    Extract title, creator, license and keywords from the RDF block of
    SVG documents, validate submissions, and regenerate metadata.

    For help on specific commands:
        svgmetadata <command> --help
    """
    settings = load_config(config_path=config)
    level = "DEBUG" if verbose else settings.log_level
    configure_logging(level=level, log_file=settings.log_file)
    CliState.set_config(settings)
    logger.debug("Loaded configuration", strict=settings.strict_validation)


def cli_main() -> None:
    """Entry point for the svgmetadata console script."""
    app()


if __name__ == "__main__":
    cli_main()
