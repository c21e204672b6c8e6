"""Click CLI interface for Edge Plugins."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from edge_plugins import __version__
from edge_plugins.config import Config
from edge_plugins.engine import Engine
from edge_plugins.errors import FatalError, InvalidVersionFormat
from edge_plugins.reporters import channel_reporter, console_reporter, json_reporter
from edge_plugins.versioning import compare_versions

# stdout belongs to the output channel
console = Console(stderr=True)


def format_fatal(error: FatalError) -> str:
    """Render a fatal error as "Line <n>: <message>"."""
    line = error.source_line()
    if line is None:
        return str(error)
    return f"Line {line}: {error}"


@click.group()
@click.version_option(version=__version__, prog_name="edge-plugins")
def main():
    """Edge Plugins - list Microsoft Edge extensions with version and status."""


@main.command()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True), help="Path to config YAML")
@click.option("--profile-dir", default=None, help="Browser profile directory (default: Edge Default profile)")
@click.option("--app-dir", default=None, help="Browser application bundle (default: /Applications/Microsoft Edge.app)")
@click.option("--output", "output_path", default=None, help="Write output fields to this file instead of stdout")
@click.option("--format", "formats", default=None, help="Output formats: channel,console,json (default: channel)")
@click.option("--output-dir", default=None, help="Output directory for json reports (default: ./reports)")
@click.option("--skip-preconditions", is_flag=True, help="Skip OS, user and browser version checks")
@click.option("--verbose", is_flag=True, help="Print each extension as it is resolved")
def collect(
    config_path: str | None,
    profile_dir: str | None,
    app_dir: str | None,
    output_path: str | None,
    formats: str | None,
    output_dir: str | None,
    skip_preconditions: bool,
    verbose: bool,
):
    """Collect installed extensions for the browser profile."""
    try:
        if config_path:
            config = Config.from_yaml(config_path)
        else:
            config = Config.from_defaults()
    except FatalError as exc:
        message = format_fatal(exc)
        console.print(f"[bold red]ERROR: {escape(message)}[/bold red]")
        if not formats or "channel" in formats:
            channel_reporter.generate_error(message, output_path)
        sys.exit(1)

    config.apply_overrides(
        app_dir=app_dir,
        profile_dir=profile_dir,
        output_path=output_path,
        formats=formats,
        output_dir=output_dir,
        skip_preconditions=skip_preconditions,
        verbose=verbose,
    )

    engine = Engine(config)
    try:
        report = engine.run()
    except FatalError as exc:
        message = format_fatal(exc)
        console.print(f"[bold red]ERROR: {escape(message)}[/bold red]")
        if "channel" in config.output_formats:
            channel_reporter.generate_error(message, config.output_path)
        sys.exit(1)

    for diagnostic in report.diagnostics:
        console.print(f"[yellow]WARNING: {escape(diagnostic.message)}[/yellow]")

    output_files: list[str] = []
    for fmt in config.output_formats:
        if fmt == "channel":
            path = channel_reporter.generate(report, config.output_path)
            if path != "-":
                output_files.append(path)
        elif fmt == "console":
            console_reporter.generate(report, config.output_directory, console=console)
        elif fmt == "json":
            output_files.append(json_reporter.generate(report, config.output_directory))
        else:
            console.print(f"[yellow]Unknown output format: {escape(fmt)}[/yellow]")

    if output_files and config.verbose:
        console.print("[bold]Reports written:[/bold]")
        for path in output_files:
            console.print(f"  {path}")


@main.command()
@click.argument("compared")
@click.argument("comparator")
def compare(compared: str, comparator: str):
    """Print "<", "==" or ">" for two dotted-numeric versions."""
    try:
        relation = compare_versions(compared, comparator)
    except InvalidVersionFormat as exc:
        console.print(f"[bold red]ERROR: {escape(str(exc))}[/bold red]")
        sys.exit(1)
    click.echo(relation.value)
