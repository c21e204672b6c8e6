"""Rich console report output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from edge_plugins.models import PluginReport, PluginStatus

STATUS_COLORS = {
    PluginStatus.ENABLED: "green",
    PluginStatus.DISABLED: "yellow",
    PluginStatus.UNKNOWN: "dim",
}


def generate(report: PluginReport, output_dir: str, console: Console | None = None) -> str:
    """Display the report on the console using Rich.

    Args:
        report: The plugin report to display.
        output_dir: Unused for console output, kept for interface consistency.
        console: Console to print to; stderr by default.

    Returns:
        Empty string (console output has no file path).
    """
    con = console or Console(stderr=True)

    con.print()
    con.print(f"[bold]{escape(report.browser)} Plugins[/bold]")
    con.print(f"Host: {escape(report.hostname)}")
    con.print(f"OS: {escape(report.os_version)}")
    if report.browser_version:
        con.print(f"{escape(report.browser)} version: {escape(report.browser_version)}")
    con.print(f"Scan: {report.scan_start.isoformat()} to {report.scan_end.isoformat()}")
    con.print()

    table = Table(title=f"Installed extensions ({len(report.records)} of {report.count} reported)")
    table.add_column("ID", style="cyan", width=34)
    table.add_column("Name", width=40)
    table.add_column("Version", width=20)
    table.add_column("Status", width=10)

    for record in report.records:
        style = STATUS_COLORS.get(record.status, "")
        table.add_row(
            record.id,
            escape(record.display_name),
            record.selected_version.normalized_version,
            f"[{style}]{record.status.value}[/{style}]",
        )

    con.print(table)

    if report.diagnostics:
        con.print()
        con.print(f"[bold yellow]{len(report.diagnostics)} warning(s)[/bold yellow]")
        for diagnostic in report.diagnostics:
            con.print(f"  [yellow]{escape(diagnostic.message)}[/yellow]")

    return ""
