"""Exception hierarchy.

FatalError subclasses abort the whole run. PluginError subclasses are scoped
to a single extension and become diagnostics while the scan continues.
"""

from __future__ import annotations

import traceback


class EdgePluginsError(Exception):
    """Base class for all errors raised by this package."""

    def source_line(self) -> int | None:
        """Line number of the frame that raised this error, if known."""
        if self.__traceback__ is None:
            return None
        frames = traceback.extract_tb(self.__traceback__)
        if not frames:
            return None
        return frames[-1].lineno


class FatalError(EdgePluginsError):
    """Aborts the run with a non-zero exit code."""


class UnsupportedOSVersion(FatalError):
    pass


class InvalidOSVersionFormat(FatalError):
    pass


class RunningAsRoot(FatalError):
    pass


class DirectoryNotFound(FatalError):
    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(
            message or f"Directory: '{path}' is not accessible or it does not exist"
        )


class BrowserVersionNotFound(FatalError):
    pass


class BrowserVersionTooOld(FatalError):
    pass


class InvalidConfiguration(FatalError):
    pass


class InvalidVersionFormat(EdgePluginsError, ValueError):
    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid version format: '{version}'")


class PluginError(EdgePluginsError):
    """Non-fatal failure while resolving a single extension."""


class NoVersionFound(PluginError):
    pass


class NameFieldMissing(PluginError):
    def __init__(self, message: str = "Could not get name from manifest.json"):
        super().__init__(message)


class LocaleFieldMissing(PluginError):
    def __init__(self, message: str = "Could not get default_locale from manifest.json"):
        super().__init__(message)


class LocalizedNameMissing(PluginError):
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Could not get display name from '{locale}' messages.json")
