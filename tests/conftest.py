"""Shared test fixtures for building fake browser profiles."""

from __future__ import annotations

import json
import plistlib
import sys
from pathlib import Path

import pytest

from edge_plugins.config import Config

# Platform skip markers
macos_only = pytest.mark.skipif(
    sys.platform != "darwin",
    reason="Test requires macOS",
)

ADBLOCK_ID = "a" * 32
TRANSLATE_ID = "b" * 32
BROKEN_ID = "c" * 32


def write_json(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class FakeProfile:
    """Builds an Edge profile directory tree under a temporary directory."""

    def __init__(self, root: Path):
        self.root = root
        self.profile_dir = root / "Default"
        self.extensions_dir = self.profile_dir / "Extensions"
        self.app_dir = root / "Microsoft Edge.app"
        self.extensions_dir.mkdir(parents=True)
        self._settings: dict[str, dict] = {}
        self._secure_settings: dict[str, dict] = {}

    def add_extension(
        self,
        extension_id: str,
        version: str = "1.0.0_0",
        manifest: dict | None = None,
        messages: dict[str, dict] | None = None,
    ) -> Path:
        """Add one version directory with a manifest and optional locale files."""
        version_dir = self.extensions_dir / extension_id / version
        version_dir.mkdir(parents=True, exist_ok=True)
        if manifest is not None:
            write_json(version_dir / "manifest.json", manifest)
        for locale, entries in (messages or {}).items():
            write_json(version_dir / "_locales" / locale / "messages.json", entries)
        return version_dir

    def add_empty_extension(self, extension_id: str) -> Path:
        path = self.extensions_dir / extension_id
        path.mkdir(parents=True, exist_ok=True)
        return path

    def set_state(self, extension_id: str, state, secure: bool = False) -> None:
        target = self._secure_settings if secure else self._settings
        target[extension_id] = {"state": state}
        self.write_preferences()

    def write_preferences(self) -> None:
        if self._settings:
            write_json(
                self.profile_dir / "Preferences",
                {"extensions": {"settings": self._settings}},
            )
        if self._secure_settings:
            write_json(
                self.profile_dir / "Secure Preferences",
                {"extensions": {"settings": self._secure_settings}},
            )

    def install_browser(self, version: str = "120.0.2210.91") -> Path:
        contents = self.app_dir / "Contents"
        contents.mkdir(parents=True, exist_ok=True)
        info_plist = contents / "Info.plist"
        with open(info_plist, "wb") as fh:
            plistlib.dump({"CFBundleShortVersionString": version}, fh)
        return info_plist

    def config(self, **kwargs) -> Config:
        return Config(app_dir=self.app_dir, profile_dir=self.profile_dir, **kwargs)


@pytest.fixture
def profile(tmp_path: Path) -> FakeProfile:
    """Return an empty fake Edge profile."""
    return FakeProfile(tmp_path)


@pytest.fixture
def populated_profile(profile: FakeProfile) -> FakeProfile:
    """Profile with a plain-named, a localized and a broken extension."""
    profile.add_extension(ADBLOCK_ID, "1.2.0_0", manifest={"name": "AdBlock"})
    profile.add_extension(ADBLOCK_ID, "1.10.0_0", manifest={"name": "AdBlock"})
    profile.add_extension(
        TRANSLATE_ID,
        "2.0.1_1",
        manifest={"name": "__MSG_extName__", "default_locale": "en"},
        messages={"en": {"extName": {"message": "Translator"}}},
    )
    profile.add_empty_extension(BROKEN_ID)
    profile.set_state(ADBLOCK_ID, 1)
    profile.set_state(TRANSLATE_ID, 0, secure=True)
    return profile


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()
