"""
Command driver: parse a command file and replay it against a fresh catalog.

Input format (whitespace separated tokens, line breaks are not significant):

    <count>
    add <day> <id> <name> <stock> <demand>
    restock <id> <amount>
    purchase <day> <id> <amount>
    delete <id>

Exactly `count` commands are read; anything after them is ignored.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Literal, Sequence, Union

from pydantic import BaseModel

from warehouse.catalog import Catalog
from warehouse.domain.models import Outcome
from warehouse.placement import PlacementStrategy, resolve_placement
from warehouse.utils.logging import get_logger

log = get_logger(__name__)


class CommandParseError(ValueError):
    """Raised when a command file cannot be parsed."""


class AddCommand(BaseModel):
    action: Literal["add"] = "add"
    day: int
    id: int
    name: str
    stock: int
    demand: int


class RestockCommand(BaseModel):
    action: Literal["restock"] = "restock"
    id: int
    amount: int


class PurchaseCommand(BaseModel):
    action: Literal["purchase"] = "purchase"
    day: int
    id: int
    amount: int


class DeleteCommand(BaseModel):
    action: Literal["delete"] = "delete"
    id: int


Command = Union[AddCommand, RestockCommand, PurchaseCommand, DeleteCommand]

# Field order as the arguments appear after the keyword.
_LAYOUTS = {
    "add": (AddCommand, ("day", "id", "name", "stock", "demand")),
    "restock": (RestockCommand, ("id", "amount")),
    "purchase": (PurchaseCommand, ("day", "id", "amount")),
    "delete": (DeleteCommand, ("id",)),
}


def _read_int(tokens: Iterator[str], what: str, index: int) -> int:
    token = next(tokens, None)
    if token is None:
        raise CommandParseError(f"command {index}: missing {what}")
    try:
        return int(token)
    except ValueError:
        raise CommandParseError(f"command {index}: {what} must be an integer, got {token!r}") from None


def parse_commands(text: str) -> List[Command]:
    """Parse command file contents into typed commands."""
    if not text.strip():
        return []
    tokens = iter(text.split())
    count = _read_int(tokens, "command count", 0)
    if count < 0:
        raise CommandParseError(f"command count must be non-negative, got {count}")

    commands: List[Command] = []
    for index in range(1, count + 1):
        keyword = next(tokens, None)
        if keyword is None:
            raise CommandParseError(f"command {index}: expected {count} commands, input ended")
        if keyword not in _LAYOUTS:
            raise CommandParseError(
                f"command {index}: unknown action {keyword!r} "
                f"(expected one of {', '.join(_LAYOUTS)})"
            )
        model, fields = _LAYOUTS[keyword]
        values = {}
        for field in fields:
            if field == "name":
                name = next(tokens, None)
                if name is None:
                    raise CommandParseError(f"command {index}: missing name")
                values[field] = name
            else:
                values[field] = _read_int(tokens, field, index)
        commands.append(model(**values))
    return commands


def apply_command(
    catalog: Catalog,
    command: Command,
    placement: Union[str, PlacementStrategy] = "standard",
) -> Union[Outcome, bool]:
    """
    Dispatch one command to the matching catalog operation.

    Returns the operation outcome; for `add` it returns whether a product was
    evicted to make room.
    """
    if isinstance(command, AddCommand):
        result = catalog.place(
            command.id,
            command.name,
            command.stock,
            command.day,
            command.demand,
            placement=placement,
        )
        return result.evicted is not None
    if isinstance(command, RestockCommand):
        return catalog.restock_product(command.id, command.amount)
    if isinstance(command, PurchaseCommand):
        return catalog.purchase_product(command.id, command.day, command.amount)
    if isinstance(command, DeleteCommand):
        return catalog.delete_product(command.id)
    raise TypeError(f"Unsupported command type: {type(command).__name__}")


def replay(
    commands: Sequence[Command],
    placement: Union[str, PlacementStrategy] = "standard",
) -> Catalog:
    """Apply `commands` in order to a new catalog and return it."""
    strategy = resolve_placement(placement)
    catalog = Catalog()
    tally: Counter = Counter()

    for command in commands:
        outcome = apply_command(catalog, command, placement=strategy)
        if isinstance(outcome, Outcome):
            tally[outcome.value] += 1
        else:
            tally["added"] += 1
            if outcome:
                tally["evicted"] += 1

    log.info(
        f"[REPLAY COMPLETE] {len(commands)} command(s) applied",
        extra={
            "placement": strategy.name,
            "commands": len(commands),
            "added": tally["added"],
            "evicted": tally["evicted"],
            "applied": tally[Outcome.APPLIED.value],
            "not_found": tally[Outcome.NOT_FOUND.value],
            "rejected": tally[Outcome.REJECTED.value],
            "stored": len(catalog),
        },
    )
    return catalog


__all__ = [
    "AddCommand",
    "Command",
    "CommandParseError",
    "DeleteCommand",
    "PurchaseCommand",
    "RestockCommand",
    "apply_command",
    "parse_commands",
    "replay",
]
