"""
Shared pytest fixtures and configuration for svgmetadata tests.

Fixture Organization
--------------------
- **temp_dir**: Temporary directory for file operations
- **sample_svg**: A complete, wrapped SVG document as text
- **sample_svg_path**: The same document written to temp_dir
- **bare_svg**: A document whose rdf:RDF is not wrapped in <metadata>
- **clean_env**: Removes SVGMETADATA_* variables for config tests
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from svgmetadata.cli.base import CliState
from svgmetadata.core.config import Config
from tests.fixtures.documents import build_svg, create_sample_svg

ENV_VARS = (
    "SVGMETADATA_STRICT",
    "SVGMETADATA_LANGUAGE",
    "SVGMETADATA_FETCH_TIMEOUT",
    "SVGMETADATA_LOG_LEVEL",
    "SVGMETADATA_LOG_FILE",
)


# ============================================================================
# Path and Directory Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory (automatically cleaned up)
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def sample_svg() -> str:
    """Wrapped SVG with title, creator, license and two keywords."""
    return build_svg()


@pytest.fixture
def sample_svg_path(temp_dir: Path, sample_svg: str) -> Path:
    return create_sample_svg(temp_dir, sample_svg, "apple.svg")


@pytest.fixture
def bare_svg() -> str:
    """SVG whose rdf:RDF sits directly under the root."""
    return build_svg(wrapped=False)


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove configuration environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_cli_state() -> Generator[None, None, None]:
    """Give every test the default CLI configuration."""
    CliState.set_config(Config())
    yield
    CliState.set_config(Config())
