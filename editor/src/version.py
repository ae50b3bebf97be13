"""Application version module.

Installed: reads the distribution metadata of terminus-editor.
From a source checkout: falls back to the VERSION file at the project root.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "terminus-editor"


def get_version() -> str:
    """Get the application version string (e.g. '0.1.0')."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _source_version()


def _source_version() -> str:
    """Read VERSION next to pyproject.toml (editor/src/version.py -> ../../VERSION)."""
    version_file = Path(__file__).resolve().parent.parent.parent / "VERSION"
    try:
        return version_file.read_text().strip()
    except FileNotFoundError:
        return "0.0.0"
