"""CLI entry point for linktime.

Invoked as::

    linktime [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m linktime.cli.main

Commands
--------
version     Show version information
plugins     Bootstrap and list every registered plugin
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="linktime-plugins")
def cli() -> None:
    """Self-registering plugins, looked up by extension-point type."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from linktime import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]linktime[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# plugins command
# ---------------------------------------------------------------------------


@cli.command(name="plugins")
@click.option(
    "--manifest",
    "-m",
    default=None,
    type=click.Path(exists=False, dir_okay=False),
    help="YAML bootstrap manifest naming plugin modules to import",
)
@click.option(
    "--no-entry-points",
    is_flag=True,
    default=False,
    help="Do not load plugins declared under package entry-points",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every registration")
def plugins_command(manifest: str | None, no_entry_points: bool, verbose: bool) -> None:
    """Bootstrap the plugin catalog and list every registered plugin."""
    import dataclasses

    from linktime import (
        BootstrapConfig,
        ManifestError,
        bootstrap,
        default_catalog,
        load_config,
        plugins_of,
    )

    _configure_logging(verbose)

    try:
        config = load_config(manifest) if manifest is not None else BootstrapConfig()
    except ManifestError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    if no_entry_points:
        config = dataclasses.replace(config, entry_point_groups=())

    report = bootstrap(config)
    catalog = default_catalog()

    for name in report.failed:
        err_console.print(f"[yellow]Warning:[/yellow] could not load {name}")

    if report.plugin_count == 0:
        console.print("[bold]Registered plugins:[/bold]")
        console.print("  (No plugins registered. Install a plugin package to see entries here.)")
        return

    table = Table(title="Registered plugins", show_lines=False)
    table.add_column("Extension point", style="bold", min_width=16)
    table.add_column("Plugin", min_width=12)
    table.add_column("Module", style="dim")

    for extension_point in catalog.extension_points():
        for instance in plugins_of(extension_point):
            plugin_class = type(instance)
            table.add_row(
                extension_point.__qualname__,
                plugin_class.__qualname__,
                plugin_class.__module__,
            )

    console.print(table)
    console.print(
        f"\n[bold]Summary:[/bold] {report.plugin_count} plugin(s) across "
        f"{len(catalog)} extension point(s)"
    )


if __name__ == "__main__":
    cli()
