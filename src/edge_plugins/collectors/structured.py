"""Structured file readers.

Both readers answer the same question: given a file and a dotted key path
such as ``extensions.settings.<id>.state``, what is the value there? Missing
files, unparsable content and missing keys all come back as None.
"""

from __future__ import annotations

import json
import plistlib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError


def lookup(data: Any, dotted_key: str) -> Any:
    """Walk ``data`` along ``dotted_key``. Returns None when a step is missing."""
    current = data
    for part in dotted_key.split("."):
        if isinstance(current, dict):
            if part not in current:
                return None
            current = current[part]
        elif isinstance(current, list) and part.isdigit():
            index = int(part)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def to_text(value: Any) -> str | None:
    """Render a looked-up value as a string, None for missing or empty values."""
    if value is None:
        return None
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (dict, list)):
        text = json.dumps(value)
    else:
        text = str(value)
    return text or None


class StructuredFileReader(ABC):
    """Read single values out of a structured file by dotted key path."""

    @abstractmethod
    def load(self, path: str | Path) -> Any:
        """Parse the whole file. Returns None if it cannot be read or parsed."""
        ...

    def get_raw(self, path: str | Path, dotted_key: str) -> Any:
        data = self.load(path)
        if data is None:
            return None
        return lookup(data, dotted_key)

    def get_value(self, path: str | Path, dotted_key: str) -> str | None:
        """Return the value at ``dotted_key`` as a string, or None."""
        return to_text(self.get_raw(path, dotted_key))


class JsonFileReader(StructuredFileReader):
    """Reads manifest.json, messages.json and the Preferences stores."""

    def load(self, path: str | Path) -> Any:
        try:
            # utf-8-sig: some extension manifests ship with a BOM
            with open(path, "r", encoding="utf-8-sig") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError):
            return None


class PlistFileReader(StructuredFileReader):
    """Reads XML or binary property lists such as an app's Info.plist."""

    def load(self, path: str | Path) -> Any:
        try:
            with open(path, "rb") as fh:
                return plistlib.load(fh)
        except (OSError, plistlib.InvalidFileException, ExpatError, ValueError):
            return None
