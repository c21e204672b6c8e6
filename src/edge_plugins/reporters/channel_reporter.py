"""Output fields for the calling endpoint agent.

The agent reads a single JSON object holding the named output fields plus an
``errors`` list. It is written to the configured output path, or to stdout
when no path is set; everything meant for humans goes to stderr instead.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from edge_plugins.models import UINT32_MAX, PluginReport

COUNT_FIELD = "MicrosoftEdgePluginsCount"
NAMES_FIELD = "MicrosoftEdgePluginsNames"
ERRORS_FIELD = "errors"


class OutputChannel:
    """Collects typed output fields and serializes them in one document."""

    def __init__(self) -> None:
        self.fields: dict[str, int | list[str]] = {}
        self.errors: list[str] = []

    def write_uint32(self, name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name}: expected an integer, got {type(value).__name__}")
        if not 0 <= value <= UINT32_MAX:
            raise ValueError(f"{name}: {value} does not fit in an unsigned 32-bit integer")
        self.fields[name] = value

    def write_string_list(self, name: str, values: list[str]) -> None:
        self.fields[name] = [str(v) for v in values]

    def write_error(self, message: str) -> None:
        self.errors.append(message)

    def to_dict(self) -> dict:
        data: dict = dict(self.fields)
        data[ERRORS_FIELD] = list(self.errors)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def flush(self, output_path: str | None = None, stream: TextIO | None = None) -> str:
        """Write the document. Returns the path written, or "-" for a stream."""
        text = self.to_json()
        if output_path:
            path = Path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
            return str(path)
        out = stream or sys.stdout
        out.write(text + "\n")
        out.flush()
        return "-"


def build_channel(report: PluginReport) -> OutputChannel:
    channel = OutputChannel()
    for diagnostic in report.diagnostics:
        channel.write_error(diagnostic.message)
    channel.write_uint32(COUNT_FIELD, report.count)
    channel.write_string_list(NAMES_FIELD, report.output_names())
    return channel


def generate(report: PluginReport, output_path: str | None = None, stream: TextIO | None = None) -> str:
    """Emit the report's output fields.

    Args:
        report: The collected plugin report.
        output_path: Destination file; stdout (or ``stream``) when None.
        stream: Alternate stream used when no output path is given.

    Returns:
        The path written, or "-" when written to a stream.
    """
    return build_channel(report).flush(output_path, stream)


def generate_error(message: str, output_path: str | None = None, stream: TextIO | None = None) -> str:
    """Emit a fatal error with no output fields."""
    channel = OutputChannel()
    channel.write_error(message)
    return channel.flush(output_path, stream)
