"""Extension and version directory enumeration."""

from __future__ import annotations

import os
import re
from pathlib import Path

from edge_plugins.errors import DirectoryNotFound

# Extension IDs are 32 characters in the a-p range; accept any lowercase letter
_EXTENSION_ID_RE = re.compile(r"^[a-z]{32}$")

# "1.2", "1.2.3", "1.2.3_0", "120.0.6099.71_1" ...
_VERSION_DIR_RE = re.compile(r"^[0-9]{1,6}\.[0-9]{1,6}")


def is_extension_id(name: str) -> bool:
    return _EXTENSION_ID_RE.match(name) is not None


def is_version_directory_name(name: str) -> bool:
    return _VERSION_DIR_RE.match(name) is not None


def _list_subdirectories(path: Path) -> list[str]:
    """Return names of the real directories directly under ``path``, sorted.

    Symlinks are skipped even when they point at a directory.
    """
    names: list[str] = []
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    names.append(entry.name)
            except OSError:
                continue
    names.sort()
    return names


def list_extension_ids(root: str | Path) -> list[str]:
    """List extension ID directories directly under the extensions root.

    Raises:
        DirectoryNotFound: if ``root`` is missing or not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise DirectoryNotFound(
            str(root),
            f"Could not obtain plugins information: The path '{root}' does not exist",
        )
    try:
        names = _list_subdirectories(root)
    except OSError as exc:
        raise DirectoryNotFound(str(root)) from exc
    return [name for name in names if is_extension_id(name)]


def list_version_directories(extension_root: str | Path) -> list[str]:
    """List version directory names inside one extension directory.

    Returns an empty list when the extension directory cannot be read.
    """
    try:
        names = _list_subdirectories(Path(extension_root))
    except OSError:
        return []
    return [name for name in names if is_version_directory_name(name)]
