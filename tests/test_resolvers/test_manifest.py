"""Tests for display name resolution."""

from __future__ import annotations

import pytest

from conftest import ADBLOCK_ID, write_json
from edge_plugins.errors import (
    LocaleFieldMissing,
    LocalizedNameMissing,
    NameFieldMissing,
    PluginError,
)
from edge_plugins.resolvers.manifest import (
    ManifestResolver,
    get_label_name,
    is_locale_marker,
    resolve_display_name,
)


class TestLabelName:
    def test_marker_detection(self):
        assert is_locale_marker("__MSG_extName__")
        assert not is_locale_marker("MyPlugin")
        assert not is_locale_marker("MSG_thing")

    def test_label_extraction(self):
        assert get_label_name("__MSG_extName__") == "extName"
        assert get_label_name("__MSG_app_name__") == "app_name"
        assert get_label_name("__MSG___") == ""


class TestResolveDisplayName:
    def test_plain_name(self, profile):
        version_dir = profile.add_extension(ADBLOCK_ID, manifest={"name": "MyPlugin"})
        assert resolve_display_name(version_dir) == "MyPlugin"

    def test_localized_name(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_extName__", "default_locale": "en"},
            messages={"en": {"extName": {"message": "My Plugin"}}},
        )
        assert resolve_display_name(version_dir) == "My Plugin"

    def test_uses_default_locale_not_first_locale(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_extName__", "default_locale": "fr"},
            messages={
                "en": {"extName": {"message": "Translator"}},
                "fr": {"extName": {"message": "Traducteur"}},
            },
        )
        assert resolve_display_name(version_dir) == "Traducteur"

    def test_label_matched_case_insensitively(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_APP_NAME__", "default_locale": "en_US"},
            messages={"en_US": {"app_name": {"message": "Password Manager"}}},
        )
        assert resolve_display_name(version_dir) == "Password Manager"

    def test_manifest_with_bom(self, profile):
        version_dir = profile.add_extension(ADBLOCK_ID)
        (version_dir / "manifest.json").write_bytes(
            b'\xef\xbb\xbf{"name": "Bom Plugin"}'
        )
        assert resolve_display_name(version_dir) == "Bom Plugin"

    def test_missing_manifest(self, profile):
        version_dir = profile.add_extension(ADBLOCK_ID)
        with pytest.raises(NameFieldMissing):
            resolve_display_name(version_dir)

    @pytest.mark.parametrize("manifest", [{}, {"name": ""}, {"version": "1.0"}])
    def test_missing_or_empty_name(self, profile, manifest):
        version_dir = profile.add_extension(ADBLOCK_ID, manifest=manifest)
        with pytest.raises(NameFieldMissing) as excinfo:
            resolve_display_name(version_dir)
        assert isinstance(excinfo.value, PluginError)
        assert "manifest.json" in str(excinfo.value)

    def test_missing_default_locale(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_extName__"},
            messages={"en": {"extName": {"message": "My Plugin"}}},
        )
        with pytest.raises(LocaleFieldMissing):
            resolve_display_name(version_dir)

    def test_missing_messages_file(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_extName__", "default_locale": "de"},
            messages={"en": {"extName": {"message": "My Plugin"}}},
        )
        with pytest.raises(LocalizedNameMissing) as excinfo:
            resolve_display_name(version_dir)
        assert "'de' messages.json" in str(excinfo.value)

    def test_missing_label_in_messages(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_extName__", "default_locale": "en"},
            messages={"en": {"extDescription": {"message": "Blocks ads"}}},
        )
        with pytest.raises(LocalizedNameMissing):
            resolve_display_name(version_dir)

    def test_empty_message(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_extName__", "default_locale": "en"},
            messages={"en": {"extName": {"message": ""}}},
        )
        with pytest.raises(LocalizedNameMissing):
            resolve_display_name(version_dir)

    def test_resolver_with_custom_reader(self, profile):
        class StaticReader:
            def __init__(self, values):
                self.values = values

            def get_value(self, path, dotted_key):
                return self.values.get(dotted_key)

            def load(self, path):
                return None

        resolver = ManifestResolver(reader=StaticReader({"name": "From Reader"}))
        assert resolver.resolve_display_name(profile.root) == "From Reader"

    def test_unparsable_messages(self, profile):
        version_dir = profile.add_extension(
            ADBLOCK_ID,
            manifest={"name": "__MSG_extName__", "default_locale": "en"},
        )
        messages = version_dir / "_locales" / "en" / "messages.json"
        messages.parent.mkdir(parents=True)
        messages.write_text("{not json", encoding="utf-8")
        with pytest.raises(LocalizedNameMissing):
            resolve_display_name(version_dir)

    def test_name_from_rewritten_manifest(self, profile):
        version_dir = profile.add_extension(ADBLOCK_ID, manifest={"name": "Old"})
        write_json(version_dir / "manifest.json", {"name": "New"})
        assert resolve_display_name(version_dir) == "New"
