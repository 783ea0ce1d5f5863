"""Core services shared by the engine and the CLI: config, errors, logging."""

from svgmetadata.core.config import Config, load_config
from svgmetadata.core.exceptions import (
    ExtractionError,
    MissingInputError,
    MissingMetadataWrapperError,
    MissingRdfRootError,
    MissingWorkElementError,
    NotRetainedError,
    SourceError,
    SourceFetchError,
    SourceNotFoundError,
    SourceReadError,
    SVGMetadataError,
    XMLParseError,
)
from svgmetadata.core.logging import configure_logging, get_logger

__all__ = [
    "Config",
    "load_config",
    "configure_logging",
    "get_logger",
    "SVGMetadataError",
    "SourceError",
    "MissingInputError",
    "SourceNotFoundError",
    "SourceReadError",
    "SourceFetchError",
    "ExtractionError",
    "XMLParseError",
    "MissingRdfRootError",
    "MissingMetadataWrapperError",
    "MissingWorkElementError",
    "NotRetainedError",
]
