from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from warehouse.config import get_settings
from warehouse.driver import parse_commands, replay
from warehouse.placement import available_placements
from warehouse.reporter import print_catalog
from warehouse.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Warehouse catalog CLI.")
log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} | "
        f"input={settings.input_path} output={settings.output_path} "
        f"placement={settings.placement}"
    )


@app.command()
def run(
    input_path: Optional[Path] = typer.Argument(
        None,
        help="Command file to replay (default from settings).",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the snapshot; '-' for stdout (default from settings).",
    ),
    placement: Optional[str] = typer.Option(
        None,
        "--placement",
        "-p",
        help="Placement for add commands (standard, probing, list).",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        help="Also render the final catalog as a table.",
    ),
) -> None:
    """
    Replay a command file against a fresh catalog and write its snapshot.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    chosen = placement or settings.placement

    if chosen == "list":
        typer.echo("Available placements: " + ", ".join(available_placements()))
        return

    source = input_path or Path(settings.input_path)
    target = output or settings.output_path

    try:
        commands = parse_commands(source.read_text(encoding="utf-8"))
        catalog = replay(commands, placement=chosen)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    except OSError as exc:
        typer.echo(f"Error: cannot read {source}: {exc.strerror or exc}", err=True)
        raise typer.Exit(code=2)

    snapshot = catalog.snapshot()
    if target == "-":
        typer.echo(snapshot)
    else:
        Path(target).write_text(snapshot, encoding="utf-8")
        log.info("Snapshot written", extra={"output": target, "products": len(catalog)})

    if table:
        print_catalog(catalog)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
