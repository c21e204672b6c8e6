"""Platform detection, privilege checks, and OS version lookup."""

from __future__ import annotations

import os
import platform as _platform
import socket
import sys

from edge_plugins.collectors.command import DEFAULT_SEARCH_PATH, run_cmd


def is_macos() -> bool:
    """Return True if running on macOS."""
    return sys.platform == "darwin"


def get_current_user_uid() -> int:
    """Return the effective UID of this process."""
    return os.geteuid()


def is_root() -> bool:
    return get_current_user_uid() == 0


def get_macos_version(search_path: str = DEFAULT_SEARCH_PATH) -> str:
    """Return the macOS product version, e.g. "14.4.1".

    Uses ``sw_vers -productVersion``; falls back to platform.mac_ver() when the
    tool is unavailable. Returns an empty string if neither yields a value.
    """
    result = run_cmd(["sw_vers", "-productVersion"], search_path=search_path)
    if result.success and result.stdout.strip():
        return result.stdout.strip()
    return _platform.mac_ver()[0]


def get_os_version(search_path: str = DEFAULT_SEARCH_PATH) -> str:
    """Return a human-readable OS version string."""
    if is_macos():
        version = get_macos_version(search_path)
        if version:
            return f"macOS {version}"
    return f"{sys.platform} ({_platform.release()})"


def get_hostname() -> str:
    """Return the system hostname."""
    return socket.gethostname()
