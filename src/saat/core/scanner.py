"""Component scanner — finds single-file components under a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from saat.core.errors import ScanAccessError
from saat.core.models import ComponentMetadata

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".vue"

# Directories to always skip
_SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    ".nuxt",
    ".output",
    "dist",
    "coverage",
    "__pycache__",
}


def scan_components(
    directory: str | Path,
    extension: str = DEFAULT_EXTENSION,
) -> list[ComponentMetadata]:
    """Recursively collect component files, sorted by path.

    Unreadable directories are skipped; a missing or unreadable root yields
    an empty list.
    """
    directory = Path(directory)
    components: list[ComponentMetadata] = []

    for root, dirs, files in os.walk(directory, onerror=_skip_unreadable):
        dirs[:] = [d for d in dirs if d not in _SKIP_DIRS]

        for name in files:
            if not name.endswith(extension):
                continue
            path = Path(root) / name
            components.append(
                ComponentMetadata(name=path.name[: -len(extension)], path=str(path))
            )

    components.sort(key=lambda c: c.path)
    return components


def _skip_unreadable(error: OSError) -> None:
    skipped = ScanAccessError(f"Cannot read {error.filename}: {error.strerror}")
    logger.debug("Skipping directory: %s", skipped)
