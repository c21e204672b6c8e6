"""Enabled/disabled lookup in the profile preference stores."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from edge_plugins.collectors.structured import (
    JsonFileReader,
    StructuredFileReader,
    lookup,
    to_text,
)
from edge_plugins.models import PluginStatus, status_from_state


def state_key(extension_id: str) -> str:
    return f"extensions.settings.{extension_id}.state"


class StatusResolver:
    """Looks up extension state in Preferences, then Secure Preferences.

    Each store is parsed at most once per resolver; the stores can be several
    megabytes and every extension reads them.
    """

    def __init__(
        self,
        preferences_file: str | Path,
        secure_preferences_file: str | Path,
        reader: StructuredFileReader | None = None,
    ):
        self.preferences_file = Path(preferences_file)
        self.secure_preferences_file = Path(secure_preferences_file)
        self.reader = reader or JsonFileReader()
        self._documents: dict[Path, Any] = {}

    def _document(self, store: Path) -> Any:
        if store not in self._documents:
            self._documents[store] = self.reader.load(store) if store.is_file() else None
        return self._documents[store]

    def get_state(self, extension_id: str) -> str | None:
        """Raw state value for ``extension_id``, None if neither store has one."""
        key = state_key(extension_id)
        for store in (self.preferences_file, self.secure_preferences_file):
            document = self._document(store)
            if document is None:
                continue
            state = to_text(lookup(document, key))
            if state:
                return state
        return None

    def resolve_status(self, extension_id: str) -> PluginStatus:
        return status_from_state(self.get_state(extension_id))
