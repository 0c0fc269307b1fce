from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Optional

import typer
import uvicorn

from scoreline.config import settings
from scoreline.data.adapters import extract_scores
from scoreline.domain.models import EntityLevel
from scoreline.exceptions import DataSourceError
from scoreline.services.exporter import SeriesExporter
from scoreline.services.sparklines import SparklineService

cli = typer.Typer(help="Scoreline CLI (quality-score sparkline series)")


@cli.callback()
def _configure(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.logging.level.upper(), logging.INFO)
    logging.basicConfig(level=level)


def _load_items(path: Path) -> list[dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if isinstance(payload, list):
        return payload
    return extract_scores(payload)


def _build_view(path: Path, level: EntityLevel, window: Optional[str], reference_date: Optional[str]):
    try:
        items = _load_items(path)
        ref = date.fromisoformat(reference_date) if reference_date else None
        return SparklineService().build(level, items, window=window, reference_now=ref)
    except (OSError, json.JSONDecodeError, DataSourceError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


@cli.command()
def version() -> None:
    """Print runtime version."""
    typer.echo(f"Scoreline {settings.app.version}")


@cli.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind"),
    port: int = typer.Option(8000, help="Port to bind"),
    reload: bool = typer.Option(False, help="Enable autoreload for local development"),
) -> None:
    """Run the Scoreline API server."""
    uvicorn.run(
        "scoreline.api.main:app",
        host=host,
        port=port,
        reload=reload,
        app_dir="src",
    )


@cli.command()
def series(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON score list or API response"),
    level: EntityLevel = typer.Option(EntityLevel.CAMPAIGN, help="Hierarchy level of the scores"),
    window: Optional[str] = typer.Option(None, "--range", help="7d|30d|90d|1y or a day count"),
    reference_date: Optional[str] = typer.Option(None, help="Last day of the window (YYYY-MM-DD); defaults to today"),
) -> None:
    """Print the aggregated series and its summary."""
    view = _build_view(file, level, window, reference_date)
    typer.echo(f"{view.level} | {view.window_days} days | {view.granularity.value}")
    for point in view.points:
        typer.echo(f"{point.label:>14}  {point.qs:5.2f}  {point.secondary_count}")
    typer.echo(f"average={view.summary.average:.2f} trend={view.summary.trend_percent:+.1f}%")


@cli.command()
def export(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON score list or API response"),
    level: EntityLevel = typer.Option(EntityLevel.CAMPAIGN, help="Hierarchy level of the scores"),
    window: Optional[str] = typer.Option(None, "--range", help="7d|30d|90d|1y or a day count"),
    reference_date: Optional[str] = typer.Option(None, help="Last day of the window (YYYY-MM-DD)"),
    output: Optional[Path] = typer.Option(None, help="Output directory"),
    name: str = typer.Option("series", help="Entity name used in the file name"),
) -> None:
    """Export the series to an Excel workbook."""
    view = _build_view(file, level, window, reference_date)
    path = SeriesExporter(output_dir=output).export(view, name=name)
    typer.echo(str(path))


if __name__ == "__main__":
    cli()
