"""Display name resolution from manifest.json and _locales messages."""

from __future__ import annotations

from pathlib import Path

from edge_plugins.collectors.structured import JsonFileReader, StructuredFileReader
from edge_plugins.errors import LocaleFieldMissing, LocalizedNameMissing, NameFieldMissing

MANIFEST_FILE = "manifest.json"
LOCALES_DIR = "_locales"
MESSAGES_FILE = "messages.json"

_MSG_PREFIX = "__MSG_"
_MSG_SUFFIX = "__"


def is_locale_marker(name: str) -> bool:
    """True for names like "__MSG_extName__"."""
    return _MSG_PREFIX in name


def get_label_name(name: str) -> str:
    """Extract "extName" from "__MSG_extName__"."""
    label = name.rsplit("MSG_", 1)[-1]
    if label.endswith(_MSG_SUFFIX):
        label = label[: -len(_MSG_SUFFIX)]
    return label


class ManifestResolver:
    """Resolves an extension's display name from its version directory."""

    def __init__(self, reader: StructuredFileReader | None = None):
        self.reader = reader or JsonFileReader()

    def resolve_display_name(self, version_dir: str | Path) -> str:
        """Return the display name declared by ``version_dir/manifest.json``.

        Locale markers are resolved through
        ``_locales/<default_locale>/messages.json``.

        Raises:
            NameFieldMissing: no usable ``name`` in the manifest.
            LocaleFieldMissing: the name is a locale marker but the manifest has
                no ``default_locale``.
            LocalizedNameMissing: the messages file has no entry for the label.
        """
        version_dir = Path(version_dir)
        manifest_path = version_dir / MANIFEST_FILE

        name = self.reader.get_value(manifest_path, "name")
        if not name:
            raise NameFieldMissing()
        if not is_locale_marker(name):
            return name

        locale = self.reader.get_value(manifest_path, "default_locale")
        if not locale:
            raise LocaleFieldMissing()

        messages_path = version_dir / LOCALES_DIR / locale / MESSAGES_FILE
        localized = self._lookup_message(messages_path, get_label_name(name))
        if not localized:
            raise LocalizedNameMissing(locale)
        return localized

    def _lookup_message(self, messages_path: Path, label: str) -> str | None:
        if not label:
            return None
        # Labels are exact in the manifest but browsers match them case-insensitively
        message = self.reader.get_value(messages_path, f"{label}.message")
        if message:
            return message

        messages = self.reader.load(messages_path)
        if not isinstance(messages, dict):
            return None
        wanted = label.lower()
        for key, entry in messages.items():
            if key.lower() == wanted and isinstance(entry, dict):
                text = entry.get("message")
                if isinstance(text, str) and text:
                    return text
        return None


def resolve_display_name(version_dir: str | Path) -> str:
    return ManifestResolver().resolve_display_name(version_dir)
