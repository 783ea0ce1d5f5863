"""Console output helpers shared by all commands.

Command output (RDF, SVG, JSON, text summaries) goes to stdout through
typer.echo so it can be piped. Status messages and error panels go through
rich.
"""

from __future__ import annotations

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from svgmetadata.core.exceptions import SVGMetadataError

_console = Console()
_error_console = Console(stderr=True)


def get_console() -> Console:
    """Get the shared stdout console."""
    return _console


def print_success(message: str) -> None:
    """Print a success message."""
    _console.print(f"[green][OK][/green] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    _console.print(f"[yellow][WARN][/yellow] {escape(message)}")


class ErrorRenderer:
    """Renders an SVGMetadataError as a panel with "Why" and "How to fix".

    Example
    -------
        try:
            record.parse(path)
        except SVGMetadataError as e:
            ErrorRenderer.render(e, context=f"While reading {path}")
            raise typer.Exit(1)
    """

    @staticmethod
    def render(exc: Exception, context: str = "") -> None:
        """Render an exception as a helpful error panel.

        Args:
            exc: Exception to render
            context: Optional context message (e.g., "While reading a.svg")
        """
        if isinstance(exc, SVGMetadataError):
            error_code = exc.error_code
            why = exc.why_it_happened
            how_to_fix = list(exc.how_to_fix)
        else:
            error_code = "SVGM-ERR-999"
            why = "An unexpected error occurred"
            how_to_fix = ["Re-run with --verbose for details"]

        content = ErrorRenderer._build_error_content(
            message=str(exc), context=context, why=why, how_to_fix=how_to_fix
        )
        panel = Panel(
            content,
            title=f"[bold red]Error: {error_code}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        _error_console.print(panel)

    @staticmethod
    def _build_error_content(
        message: str,
        context: str,
        why: str,
        how_to_fix: List[str],
    ) -> Text:
        content = Text()
        if context:
            content.append(f"{context}\n\n", style="dim")
        content.append(message, style="bold")
        content.append("\n\nWhy it happened:\n", style="yellow")
        content.append(why)
        content.append("\n\nHow to fix:", style="green")
        for step in how_to_fix:
            content.append(f"\n  - {step}")
        return content
