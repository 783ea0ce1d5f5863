"""Resolve the many accepted kinds of input into document bytes.

Heuristic, checked in order:

1. None or empty            -> MissingInputError
2. bytes / bytearray        -> literal document
3. object with read()       -> open stream
4. str containing a newline -> literal SVG text
5. str starting http/ftp    -> URL, fetched
6. anything else            -> filesystem path

Text that arrives already decoded (str input, text-mode streams) is
re-encoded as UTF-8 and flagged so the parser ignores the encoding named in
the XML declaration.
"""

import os
import re
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import requests

from svgmetadata.core.exceptions import (
    MissingInputError,
    SourceFetchError,
    SourceNotFoundError,
    SourceReadError,
)
from svgmetadata.core.logging import get_logger

logger = get_logger(__name__)

URL_PATTERN = re.compile(r"^(?:https?|ftp)://", re.IGNORECASE)
TEXT_ENCODING = "utf-8"


@dataclass
class SourceDocument:
    """Raw document content plus an encoding that overrides the declaration."""

    content: bytes
    encoding: Optional[str] = None


def _from_content(content: Any) -> SourceDocument:
    if isinstance(content, str):
        return SourceDocument(content.encode(TEXT_ENCODING), TEXT_ENCODING)
    return SourceDocument(bytes(content))


def fetch_url(url: str, timeout: int) -> bytes:
    """
    Retrieve a remote document.

    HTTP(S) goes through requests; ftp:// is handled by urllib because
    requests has no FTP adapter.

    Raises:
        SourceFetchError: On network failure or a non-2xx status
    """
    logger.debug("Fetching document", url=url)
    if url.lower().startswith("ftp://"):
        try:
            with urllib.request.urlopen(url, timeout=timeout) as response:
                return response.read()
        except (urllib.error.URLError, OSError) as e:
            raise SourceFetchError(f"Could not retrieve '{url}': {e}") from e

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceFetchError(f"Could not retrieve '{url}': {e}") from e
    return response.content


def _read_path(source: Any) -> bytes:
    path = Path(os.fspath(source))
    try:
        is_file = path.is_file()
    except OSError as e:
        # e.g. ENAMETOOLONG for long single-line markup
        raise SourceNotFoundError(f"Filename '{path}' does not exist: {e}") from e
    if not is_file:
        raise SourceNotFoundError(f"Filename '{path}' does not exist")

    try:
        return path.read_bytes()
    except OSError as e:
        raise SourceReadError(f"Could not read '{path}': {e}") from e


def resolve_source(source: Any, timeout: int = 30) -> SourceDocument:
    """
    Turn a path, text blob, stream or URL into raw document bytes.

    Args:
        source: The document reference
        timeout: Seconds to wait for URL sources

    Returns:
        SourceDocument; its encoding is set when the input was already text

    Raises:
        MissingInputError: If no source was given
        SourceNotFoundError: If a path does not exist
        SourceReadError: If an existing file cannot be read
        SourceFetchError: If a URL cannot be retrieved
    """
    if source is None or (isinstance(source, (str, bytes, bytearray)) and not source):
        raise MissingInputError("No filename or text argument defined for parsing")

    if isinstance(source, (bytes, bytearray)):
        return SourceDocument(bytes(source))

    if hasattr(source, "read"):
        return _from_content(source.read())

    if isinstance(source, str) and "\n" in source:
        return _from_content(source)

    if isinstance(source, str) and URL_PATTERN.match(source):
        return SourceDocument(fetch_url(source, timeout))

    return SourceDocument(_read_path(source))
