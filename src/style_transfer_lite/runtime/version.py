"""Report the running package version for ``--version``."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from style_transfer_lite.logging_utils import logger

DISTRIBUTION_NAMES = ("style-transfer-lite", "style_transfer_lite")
UNKNOWN_VERSION = "0.0.0"


def _version_from_metadata() -> str | None:
    for distribution_name in DISTRIBUTION_NAMES:
        try:
            return importlib_metadata.version(distribution_name)
        except importlib_metadata.PackageNotFoundError:
            continue
    return None


def _version_from_pyproject(start: Path) -> str | None:
    """Read project.version from the nearest pyproject.toml above start."""
    for parent in start.parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except OSError as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None
    return None


def resolve_project_version() -> str:
    """
    Return the installed version, else the source checkout's version.

    Source checkouts are recognised by the nearest pyproject.toml; when
    neither source has a version, "0.0.0" is returned.
    """
    return (
        _version_from_metadata()
        or _version_from_pyproject(Path(__file__).resolve())
        or UNKNOWN_VERSION
    )
