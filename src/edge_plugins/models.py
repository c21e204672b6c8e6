"""Core Pydantic models for Edge Plugins."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

UINT32_MAX = 2**32 - 1

EMPTY_NAMES_PLACEHOLDER = "-"


class VersionRelation(str, Enum):
    LESS = "<"
    EQUAL = "=="
    GREATER = ">"


class PluginStatus(str, Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"
    UNKNOWN = "N/A"


# Raw "state" values stored in the browser preference files
STATE_TO_STATUS = {
    "0": PluginStatus.DISABLED,
    "1": PluginStatus.ENABLED,
}


def status_from_state(state: str | None) -> PluginStatus:
    """Map a raw preference-store state value to a PluginStatus."""
    if state is None:
        return PluginStatus.UNKNOWN
    return STATE_TO_STATUS.get(state.strip(), PluginStatus.UNKNOWN)


class VersionEntry(BaseModel):
    raw_directory_name: str
    normalized_version: str


class ExtensionRecord(BaseModel):
    id: str
    version_directories: list[VersionEntry] = Field(default_factory=list)
    selected_version: VersionEntry
    display_name: str
    status: PluginStatus = PluginStatus.UNKNOWN

    def formatted(self) -> str:
        """Return the reported "<name> <version>; <status>" string."""
        return f"{self.display_name} {self.selected_version.normalized_version}; {self.status.value}"


class Diagnostic(BaseModel):
    """A non-fatal warning emitted on the error channel."""
    message: str
    extension_id: str | None = None


class PluginReport(BaseModel):
    browser: str = "Edge"
    hostname: str = ""
    os_version: str = ""
    browser_version: str | None = None
    scan_start: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    scan_end: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    count: int = Field(default=0, ge=0, le=UINT32_MAX)
    names: list[str] = Field(default_factory=list)
    records: list[ExtensionRecord] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    def output_names(self) -> list[str]:
        """Names as emitted on the output channel, never empty."""
        return list(self.names) if self.names else [EMPTY_NAMES_PLACEHOLDER]
