"""CLI entry point for checklist-metrics.

Invoked as::

    checklist-metrics [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m checklist_metrics.cli.main

Commands
--------
summary     Headline completed / eligible counts
tiers       Per-tier progress
radar       Per-section, per-tier radar dataset
report      Full dashboard export for a renderer
collisions  List items whose normalized ids collide
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from checklist_metrics.errors import ChecklistMetricsError

if TYPE_CHECKING:
    from checklist_metrics.config import MetricsConfig
    from checklist_metrics.model.nodes import Catalog, StateSnapshot

console = Console()
err_console = Console(stderr=True)


def _load_inputs(
    config: "MetricsConfig", catalog_path: str, state_path: str
) -> tuple["Catalog", "StateSnapshot"]:
    """Load catalog and state, exiting on error."""
    from checklist_metrics.catalog import load_catalog
    from checklist_metrics.state import load_state

    try:
        catalog = load_catalog(catalog_path, allow_collisions=config.allow_collisions)
        state = load_state(
            state_path,
            completion_key=config.completion_key,
            ignore_key=config.ignore_key,
        )
    except ChecklistMetricsError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    return catalog, state


def _percent_color(percent: float) -> str:
    """Map a completion percentage to a Rich color string."""
    if percent >= 75:
        return "green"
    if percent >= 40:
        return "yellow"
    return "red"


def _emit(text: str, lang: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Written to[/green] {output}", soft_wrap=True)
    else:
        console.print(Syntax(text, lang, line_numbers=False))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="checklist-metrics")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="YAML settings file",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Completion metrics for prioritized checklists."""
    from checklist_metrics.config import MetricsConfig, load_config

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    try:
        ctx.obj = load_config(config_path) if config_path else MetricsConfig()
    except ChecklistMetricsError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from checklist_metrics import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]checklist-metrics[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# summary command
# ---------------------------------------------------------------------------


@cli.command(name="summary")
@click.argument("catalog_file", type=click.Path(exists=False))
@click.argument("state_file", type=click.Path(exists=False))
@click.pass_obj
def summary_command(config: "MetricsConfig", catalog_file: str, state_file: str) -> None:
    """Show how many items are complete across the whole catalog.

    CATALOG_FILE is the checklist catalog; STATE_FILE the store dump.
    """
    from checklist_metrics.core import summarize

    catalog, state = _load_inputs(config, catalog_file, state_file)
    progress = summarize(catalog, state)
    percent = progress.rounded_percentage()
    color = _percent_color(percent)

    console.print(
        f"You've completed [bold]{progress.completed} out of {progress.out_of}[/bold] items "
        f"([{color}]{percent}%[/{color}])",
        soft_wrap=True,
    )


# ---------------------------------------------------------------------------
# tiers command
# ---------------------------------------------------------------------------


@cli.command(name="tiers")
@click.argument("catalog_file", type=click.Path(exists=False))
@click.argument("state_file", type=click.Path(exists=False))
@click.pass_obj
def tiers_command(config: "MetricsConfig", catalog_file: str, state_file: str) -> None:
    """Show progress for each priority tier."""
    from checklist_metrics.core import tier_gauges

    catalog, state = _load_inputs(config, catalog_file, state_file)

    table = Table(title="Progress by priority")
    table.add_column("Tier", style="bold", min_width=12)
    table.add_column("Completed", justify="right")
    table.add_column("Out of", justify="right")
    table.add_column("Percent", justify="right")

    for gauge in tier_gauges(catalog, state, colors=config.gauge_colors):
        color = _percent_color(gauge.percent)
        table.add_row(
            gauge.label,
            str(gauge.progress.completed),
            str(gauge.progress.out_of),
            f"[{color}]{gauge.percent}%[/{color}]",
        )
    console.print(table)


# ---------------------------------------------------------------------------
# radar command
# ---------------------------------------------------------------------------


@cli.command(name="radar")
@click.argument("catalog_file", type=click.Path(exists=False))
@click.argument("state_file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_obj
def radar_command(
    config: "MetricsConfig",
    catalog_file: str,
    state_file: str,
    output_format: str,
    output: str | None,
) -> None:
    """Show per-section completion for each priority tier."""
    import json

    import yaml

    from checklist_metrics.core import RadarBuilder
    from checklist_metrics.export import DashboardSerializer

    if output and output_format.lower() == "table":
        raise click.UsageError("--output requires --format json or yaml")

    catalog, state = _load_inputs(config, catalog_file, state_file)
    builder = RadarBuilder(
        colors=config.radar_colors,
        border_width=config.border_width,
        max_workers=config.max_workers,
    )
    try:
        radar = builder.build(catalog, state)
    except ChecklistMetricsError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    output_format = output_format.lower()
    if output_format == "table":
        table = Table(title="Completion by section")
        table.add_column("Section", style="bold")
        for series in radar.series:
            table.add_column(series.label, justify="right")
        for index, label in enumerate(radar.labels):
            table.add_row(label, *(f"{round(s.values[index])}%" for s in radar.series))
        console.print(table)
        return

    data = DashboardSerializer().radar_to_dict(radar)
    if output_format == "json":
        _emit(json.dumps(data, indent=2), "json", output)
    else:
        _emit(yaml.safe_dump(data, sort_keys=False), "yaml", output)


# ---------------------------------------------------------------------------
# report command
# ---------------------------------------------------------------------------


@cli.command(name="report")
@click.argument("catalog_file", type=click.Path(exists=False))
@click.argument("state_file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_obj
def report_command(
    config: "MetricsConfig",
    catalog_file: str,
    state_file: str,
    output_format: str,
    output: str | None,
) -> None:
    """Export the full dashboard (summary, gauges, radar) for a renderer."""
    from checklist_metrics.dashboard import build_dashboard
    from checklist_metrics.export import DashboardSerializer

    catalog, state = _load_inputs(config, catalog_file, state_file)
    try:
        dashboard = build_dashboard(catalog, state, config)
    except ChecklistMetricsError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    serializer = DashboardSerializer()
    if output_format.lower() == "json":
        _emit(serializer.to_json(dashboard), "json", output)
    else:
        _emit(serializer.to_yaml(dashboard), "yaml", output)


# ---------------------------------------------------------------------------
# collisions command
# ---------------------------------------------------------------------------


@cli.command(name="collisions")
@click.argument("catalog_file", type=click.Path(exists=False))
def collisions_command(catalog_file: str) -> None:
    """List checklist items whose normalized ids collide.

    Exits with status 1 when any collision is found.
    """
    from checklist_metrics.catalog import find_collisions, load_catalog

    try:
        catalog = load_catalog(catalog_file, allow_collisions=True)
    except ChecklistMetricsError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    collisions = find_collisions(catalog)
    if not collisions:
        console.print(f"[green]OK[/green] {catalog_file}: no id collisions", soft_wrap=True)
        return

    table = Table(title=f"Id collisions: {catalog_file}", show_lines=True)
    table.add_column("Id", style="bold")
    table.add_column("Items")
    for item_id, points in sorted(collisions.items()):
        table.add_row(item_id, "\n".join(points))
    console.print(table)
    sys.exit(1)


if __name__ == "__main__":
    cli()
