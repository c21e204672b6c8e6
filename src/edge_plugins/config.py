"""YAML configuration loader with defaults."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import yaml

from edge_plugins.collectors.command import DEFAULT_SEARCH_PATH
from edge_plugins.errors import InvalidConfiguration, InvalidVersionFormat
from edge_plugins.versioning import parse_version

_DEFAULT_CONFIG_RESOURCE = "edge_plugins.data"
_DEFAULT_CONFIG_FILE = "default_config.yaml"

DEFAULT_APP_DIR = "/Applications/Microsoft Edge.app"
DEFAULT_PROFILE_DIR = "~/Library/Application Support/Microsoft Edge/Default"


def _expand(path: str | Path) -> Path:
    return Path(path).expanduser()


class Config:
    """Application configuration loaded from YAML with CLI overrides."""

    def __init__(
        self,
        browser_name: str = "Edge",
        app_dir: str | Path = DEFAULT_APP_DIR,
        profile_dir: str | Path = DEFAULT_PROFILE_DIR,
        minimum_browser_version: str = "65",
        minimum_macos_version: tuple[int, int] = (10, 13),
        search_path: str = DEFAULT_SEARCH_PATH,
        output_path: str | None = None,
        output_formats: list[str] | None = None,
        output_directory: str = "./reports",
        skip_preconditions: bool = False,
        verbose: bool = False,
    ):
        self.browser_name = browser_name
        self.app_dir = _expand(app_dir)
        self.profile_dir = _expand(profile_dir)
        self.minimum_browser_version = str(minimum_browser_version)
        self.minimum_macos_version = tuple(minimum_macos_version)
        self.search_path = search_path
        self.output_path = output_path
        self.output_formats = output_formats or ["channel"]
        self.output_directory = output_directory
        self.skip_preconditions = skip_preconditions
        self.verbose = verbose

    @property
    def info_plist(self) -> Path:
        return self.app_dir / "Contents" / "Info.plist"

    @property
    def preferences_file(self) -> Path:
        return self.profile_dir / "Preferences"

    @property
    def secure_preferences_file(self) -> Path:
        return self.profile_dir / "Secure Preferences"

    @property
    def extensions_dir(self) -> Path:
        return self.profile_dir / "Extensions"

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return cls._from_dict(raw)

    @classmethod
    def from_defaults(cls) -> Config:
        """Load built-in default configuration."""
        try:
            ref = resources.files(_DEFAULT_CONFIG_RESOURCE).joinpath(_DEFAULT_CONFIG_FILE)
            raw = yaml.safe_load(ref.read_text(encoding="utf-8")) or {}
            return cls._from_dict(raw)
        except (FileNotFoundError, TypeError):
            return cls()

    @classmethod
    def _from_dict(cls, raw: dict) -> Config:
        """Parse a raw dict into Config.

        Raises:
            InvalidConfiguration: browser.minimum_version is not dotted-numeric.
        """
        browser = raw.get("browser") or {}
        platform_section = raw.get("platform") or {}
        output_section = raw.get("output") or {}

        min_macos = platform_section.get("minimum_macos_version", [10, 13])
        try:
            min_macos = (int(min_macos[0]), int(min_macos[1]))
        except (TypeError, ValueError, IndexError):
            min_macos = (10, 13)

        min_browser = str(browser.get("minimum_version") or "65")
        try:
            parse_version(min_browser)
        except InvalidVersionFormat as exc:
            raise InvalidConfiguration(f"browser.minimum_version: {exc}") from exc

        return cls(
            browser_name=browser.get("name") or "Edge",
            app_dir=browser.get("app_dir") or DEFAULT_APP_DIR,
            profile_dir=browser.get("profile_dir") or DEFAULT_PROFILE_DIR,
            minimum_browser_version=min_browser,
            minimum_macos_version=min_macos,
            search_path=platform_section.get("search_path") or DEFAULT_SEARCH_PATH,
            output_path=output_section.get("path") or None,
            output_formats=output_section.get("formats") or ["channel"],
            output_directory=output_section.get("directory") or "./reports",
        )

    def apply_overrides(
        self,
        app_dir: str | None = None,
        profile_dir: str | None = None,
        output_path: str | None = None,
        formats: str | None = None,
        output_dir: str | None = None,
        skip_preconditions: bool = False,
        verbose: bool = False,
    ) -> None:
        """Apply CLI flag overrides to this config."""
        if app_dir:
            self.app_dir = _expand(app_dir)
        if profile_dir:
            self.profile_dir = _expand(profile_dir)
        if output_path:
            self.output_path = output_path
        if formats:
            self.output_formats = [f.strip() for f in formats.split(",")]
        if output_dir:
            self.output_directory = output_dir
        if skip_preconditions:
            self.skip_preconditions = True
        if verbose:
            self.verbose = True
