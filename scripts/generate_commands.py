"""
Workload generation script for the warehouse catalog.

Emits deterministic pseudo-random command files in the format read by
`warehouse run`: a count line followed by that many commands. Restock,
purchase and delete commands mostly target ids that were added earlier so
replays exercise real mutations, with an occasional unknown id mixed in.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import List

import typer

app = typer.Typer(help="Generate synthetic warehouse command files.")

_NAMES = ["apple", "bolt", "cable", "drill", "easel", "fan", "glue", "hammer", "ink", "jar"]
_ACTIONS = ["add", "restock", "purchase", "delete"]
_WEIGHTS = [5, 2, 4, 1]


def _generate_commands(rows: int, seed: int, max_id: int = 200, max_day: int = 365) -> List[str]:
    rng = random.Random(seed)
    # Ids never appear twice at once: an id is only added again after a delete.
    free: List[int] = list(range(1, max_id + 1))
    resident: List[int] = []
    lines: List[str] = []
    day = 1

    for _ in range(rows):
        action = rng.choices(_ACTIONS, weights=_WEIGHTS)[0]
        day = min(max_day, day + rng.randint(0, 2))
        if not resident:
            action = "add"
        elif action == "add" and not free:
            action = "purchase"

        if action == "add":
            product_id = free.pop(rng.randrange(len(free)))
            resident.append(product_id)
            name = f"{rng.choice(_NAMES)}{product_id}"
            lines.append(
                f"add {day} {product_id} {name} {rng.randint(1, 50)} {rng.randint(0, 20)}"
            )
            continue

        # One in ten mutations targets an id that was never added.
        if rng.random() > 0.1:
            target = resident[rng.randrange(len(resident))]
        else:
            target = max_id + rng.randint(1, max_id)
        if action == "restock":
            lines.append(f"restock {target} {rng.randint(1, 30)}")
        elif action == "purchase":
            lines.append(f"purchase {day} {target} {rng.randint(1, 15)}")
        else:
            lines.append(f"delete {target}")
            if target <= max_id:
                resident.remove(target)
                free.append(target)
    return lines


def _write_commands(path: Path, lines: List[str]) -> None:
    with path.open("w", encoding="utf-8") as f:
        f.write(f"{len(lines)}\n")
        for line in lines:
            f.write(f"{line}\n")


@app.command()
def main(
    rows: int = typer.Option(
        100,
        "--rows",
        "-r",
        help="Number of commands to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    max_id: int = typer.Option(
        200,
        "--max-id",
        help="Largest product id to add.",
    ),
    output: Path = typer.Option(
        Path("everything.in"),
        "--output",
        "-o",
        help="Command file output path.",
    ),
) -> None:
    """
    Generate a command file for `warehouse run`.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)
    lines = _generate_commands(rows, seed=seed, max_id=max_id)
    _write_commands(output, lines)
    typer.echo(
        f"Wrote {len(lines):,} commands -> {output} "
        f"(seed={seed}) in {time.perf_counter() - start:.3f}s"
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
