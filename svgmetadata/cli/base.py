"""Base class for svgmetadata commands.

Holds the configuration chosen by the global options and provides the
shared record loading and error reporting.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import typer

from svgmetadata.cli import console
from svgmetadata.core.config import Config
from svgmetadata.rdf.models import MetadataRecord

STDIN_SOURCE = "-"


class CliState:
    """Configuration selected by the top-level callback."""

    _config: Config = Config()

    @classmethod
    def get_config(cls) -> Config:
        return cls._config

    @classmethod
    def set_config(cls, config: Config) -> None:
        cls._config = config


class MetadataCommand(ABC):
    """Abstract base class for all svgmetadata commands.

    Subclasses implement execute() and return an exit code; the typer
    function wrapping them raises typer.Exit for non-zero codes.

    Example:
        class MyCommand(MetadataCommand):
            def execute(self, source: str) -> int:
                record = self.load_record(source)
                self.print_success(record.title)
                return 0
    """

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> int:
        """Run the command and return its exit code."""

    @property
    def config(self) -> Config:
        return CliState.get_config()

    def load_record(
        self, source: str, strict: bool = False, retain_xml: bool = False
    ) -> MetadataRecord:
        """Parse a source into a new record.

        Args:
            source: Path, URL, or "-" for standard input
            strict: Require the <metadata> wrapper (also enabled by config)
            retain_xml: Keep the document for to_svg()

        Returns:
            Populated MetadataRecord

        Raises:
            SVGMetadataError: If extraction fails
        """
        record = MetadataRecord(
            strict_validation=strict or self.config.strict_validation,
            language=self.config.default_language,
        )
        document: Any = source
        if source == STDIN_SOURCE:
            document = typer.get_binary_stream("stdin")
        return record.parse(
            document,
            retain_xml=retain_xml,
            timeout=self.config.fetch_timeout_sec,
            default_language=self.config.default_language,
        )

    def print_success(self, message: str) -> None:
        console.print_success(message)

    def print_warning(self, message: str) -> None:
        console.print_warning(message)

    def handle_error(self, error: Exception, context: str = "") -> int:
        """Handle command error and return exit code.

        Does not exit - returns exit code for caller to decide.

        Args:
            error: Exception that occurred
            context: Optional context message

        Returns:
            Exit code (1 for error)
        """
        console.ErrorRenderer.render(error, context=context)
        return 1
