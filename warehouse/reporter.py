from __future__ import annotations

from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from warehouse.bucket import BUCKET_CAPACITY
from warehouse.catalog import Catalog


def summarize(catalog: Catalog) -> Dict[int, int]:
    """Occupancy per bucket index."""
    return {index: bucket.size() for index, bucket in enumerate(catalog.buckets)}


def print_catalog(catalog: Catalog, console: Optional[Console] = None) -> None:
    """
    Render the catalog as a rich table.

    Rows follow bucket index, then heap position, so the first row of each
    bucket is its least popular product (the next eviction candidate).
    """
    console = console or Console()

    if len(catalog) == 0:
        console.print("[yellow]Catalog is empty.[/yellow]")
        return

    occupancy = summarize(catalog)
    full = sum(1 for size in occupancy.values() if size == BUCKET_CAPACITY)
    table = Table(
        title=f"Warehouse Catalog\n[dim]{len(catalog)} products │ {full} full bucket(s)[/dim]",
        box=box.ROUNDED,
        caption="Position 1 is the next eviction candidate",
    )

    table.add_column("Bucket", justify="right", style="cyan", no_wrap=True)
    table.add_column("Pos", justify="right", style="blue")
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Name", style="bold")
    table.add_column("Stock", justify="right", style="green")
    table.add_column("Demand", justify="right", style="bold green")
    table.add_column("Added", justify="right", style="yellow")
    table.add_column("Last Purchase", justify="right", style="red")

    for index, bucket in enumerate(catalog.buckets):
        rows: List[List[str]] = []
        for position, product in enumerate(bucket.records(), start=1):
            rows.append(
                [
                    str(index) if position == 1 else "",
                    str(position),
                    str(product.id),
                    product.name,
                    f"{product.stock:,}",
                    f"{product.demand:,}",
                    str(product.day_added),
                    str(product.last_purchase_day),
                ]
            )
        for i, row in enumerate(rows):
            table.add_row(*row, end_section=i == len(rows) - 1)

    console.print(table)


__all__ = ["print_catalog", "summarize"]
