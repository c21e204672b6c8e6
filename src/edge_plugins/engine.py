"""Extension discovery, per-extension resolution, and report assembly."""

from __future__ import annotations

from datetime import datetime, timezone

from rich.console import Console
from rich.markup import escape

from edge_plugins.config import Config
from edge_plugins.errors import NoVersionFound, PluginError
from edge_plugins.models import (
    EMPTY_NAMES_PLACEHOLDER,
    Diagnostic,
    ExtensionRecord,
    PluginReport,
    PluginStatus,
)
from edge_plugins.platform import get_hostname, get_os_version
from edge_plugins.preconditions import run_preconditions
from edge_plugins.resolvers.manifest import ManifestResolver
from edge_plugins.resolvers.status import StatusResolver
from edge_plugins.scanner import list_extension_ids, list_version_directories
from edge_plugins.versioning import (
    partition_version_directories,
    select_latest,
    version_entry,
)

console = Console(stderr=True)


class Engine:
    """Scans one browser profile and produces a PluginReport."""

    def __init__(
        self,
        config: Config,
        manifest_resolver: ManifestResolver | None = None,
        status_resolver: StatusResolver | None = None,
    ):
        self.config = config
        self.manifest_resolver = manifest_resolver or ManifestResolver()
        self.status_resolver = status_resolver or StatusResolver(
            config.preferences_file,
            config.secure_preferences_file,
        )

    def resolve_extension(
        self, extension_id: str
    ) -> tuple[ExtensionRecord | None, list[Diagnostic]]:
        """Resolve version, name and status for one extension.

        Returns the record (None when it cannot be reported) and any
        diagnostics raised along the way. Never raises PluginError.
        """
        extension_path = self.config.extensions_dir / extension_id
        version_dirs, malformed = partition_version_directories(
            list_version_directories(extension_path)
        )

        diagnostics: list[Diagnostic] = []
        for directory in malformed:
            diagnostics.append(Diagnostic(
                extension_id=extension_id,
                message=(
                    f"Ignoring version directory '{directory}' for plugin with ID "
                    f"'{extension_id}': Invalid version format: '{directory}'"
                ),
            ))

        try:
            latest = select_latest(version_dirs)
        except NoVersionFound:
            diagnostics.append(Diagnostic(
                extension_id=extension_id,
                message=(
                    f"Error while retrieving version path for plugin with ID "
                    f"'{extension_id}': Could not detect any version installed "
                    f"in plugin path {extension_path}"
                ),
            ))
            return None, diagnostics

        try:
            name = self.manifest_resolver.resolve_display_name(extension_path / latest)
        except PluginError as exc:
            diagnostics.append(Diagnostic(
                extension_id=extension_id,
                message=(
                    f"Error while retrieving plugin name for plugin ID "
                    f"{extension_id}: {exc}"
                ),
            ))
            return None, diagnostics

        status = self.status_resolver.resolve_status(extension_id)
        if status is PluginStatus.UNKNOWN:
            diagnostics.append(Diagnostic(
                extension_id=extension_id,
                message=f"Could not retrieve status for plugin ID {extension_id}",
            ))

        record = ExtensionRecord(
            id=extension_id,
            version_directories=[version_entry(d) for d in version_dirs],
            selected_version=version_entry(latest),
            display_name=name,
            status=status,
        )
        return record, diagnostics

    def collect(self, browser_version: str | None = None) -> PluginReport:
        """Scan the extensions directory and fold every extension into a report.

        ``count`` is the number of discovered extension directories, so it can
        be larger than ``len(names)`` when some extensions fail to resolve.

        Raises:
            DirectoryNotFound: the extensions directory does not exist.
        """
        scan_start = datetime.now(timezone.utc)
        extension_ids = list_extension_ids(self.config.extensions_dir)

        records: list[ExtensionRecord] = []
        diagnostics: list[Diagnostic] = []
        for extension_id in extension_ids:
            record, extension_diagnostics = self.resolve_extension(extension_id)
            diagnostics.extend(extension_diagnostics)
            if record is not None:
                records.append(record)
            if self.config.verbose:
                label = escape(record.formatted()) if record else "[yellow]skipped[/yellow]"
                console.print(f"[cyan]{extension_id}[/cyan] {label}")

        if not extension_ids:
            diagnostics.append(Diagnostic(
                message=f"There are no plugins installed on {self.config.browser_name}",
            ))

        names = [record.formatted() for record in records] or [EMPTY_NAMES_PLACEHOLDER]

        return PluginReport(
            browser=self.config.browser_name,
            hostname=get_hostname(),
            os_version=get_os_version(self.config.search_path),
            browser_version=browser_version,
            scan_start=scan_start,
            scan_end=datetime.now(timezone.utc),
            count=len(extension_ids),
            names=names,
            records=records,
            diagnostics=diagnostics,
        )

    def run(self) -> PluginReport:
        """Check preconditions, then collect.

        Raises:
            FatalError: a precondition failed or the extensions directory is
                missing.
        """
        browser_version = None
        if not self.config.skip_preconditions:
            browser_version = run_preconditions(self.config)
        return self.collect(browser_version)
