"""Startup checks. Each failure raises a FatalError and aborts the run."""

from __future__ import annotations

import re

from edge_plugins import platform
from edge_plugins.collectors.structured import PlistFileReader
from edge_plugins.config import Config
from edge_plugins.errors import (
    BrowserVersionNotFound,
    BrowserVersionTooOld,
    DirectoryNotFound,
    InvalidOSVersionFormat,
    RunningAsRoot,
    UnsupportedOSVersion,
)
from edge_plugins.versioning import make_version_comparison

_MACOS_VERSION_RE = re.compile(r"^([0-9]{2})\.([0-9]{1,2})")
_BROWSER_VERSION_RE = re.compile(r"[0-9]{2,}\.[0-9]{1,4}\.[0-9]{1,4}\.[0-9]{1,4}")

BUNDLE_VERSION_KEY = "CFBundleShortVersionString"


def check_macos_version(current_version: str, minimum: tuple[int, int] = (10, 13)) -> None:
    match = _MACOS_VERSION_RE.match(current_version or "")
    if match is None:
        raise InvalidOSVersionFormat(
            f"The macOS version format is invalid: {current_version}"
        )
    major, minor = int(match.group(1)), int(match.group(2))
    if (major, minor) < tuple(minimum):
        raise UnsupportedOSVersion(f"Unsupported macOS version: {current_version}")


def check_running_as_user() -> None:
    if platform.is_root():
        raise RunningAsRoot("This remote action can only be run as user (non-root)")


def get_browser_version(config: Config) -> str | None:
    """Read the bundle version from the browser's Info.plist.

    Returns None unless it looks like a full Chromium version (e.g. 120.0.2210.91).
    """
    version = PlistFileReader().get_value(config.info_plist, BUNDLE_VERSION_KEY)
    if not version:
        return None
    match = _BROWSER_VERSION_RE.search(version)
    return match.group(0) if match else None


def check_browser_version(config: Config) -> str:
    """Ensure the browser is installed and recent enough. Returns its version."""
    if not config.app_dir.is_dir():
        raise DirectoryNotFound(str(config.app_dir))

    version = get_browser_version(config)
    if not version:
        raise BrowserVersionNotFound(f"{config.browser_name} version not found")

    if make_version_comparison(version, "<", config.minimum_browser_version):
        raise BrowserVersionTooOld(
            f"This script is compatible with {config.browser_name} "
            f"{config.minimum_browser_version} onwards"
        )
    return version


def run_preconditions(config: Config) -> str:
    """Run every startup check in order and return the browser version."""
    check_macos_version(
        platform.get_macos_version(config.search_path),
        config.minimum_macos_version,
    )
    check_running_as_user()
    return check_browser_version(config)
