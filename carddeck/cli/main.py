"""Typer entry-point wiring for the carddeck CLI."""

from __future__ import annotations

import logging
import random

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import DEFAULT_JOKERS, DeckConfig
from ..deck import Deck
from ..errors import InsufficientCards

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


@app.callback()
def _root() -> None:
    """Deal and classify poker hands from a configurable deck."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def deal(
    decks: int = typer.Option(1, min=1, help="Number of standard decks combined."),
    hand_size: int = typer.Option(5, min=1, help="Cards dealt per hand."),
    hands: int = typer.Option(1, min=1, help="Number of hands to deal."),
    jokers: bool = typer.Option(True, "--jokers/--no-jokers", help="Include the two jokers in each deck."),
    shuffle: bool = typer.Option(True, "--shuffle/--no-shuffle", help="Shuffle the deck instead of sorting it."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    verbose: bool = typer.Option(False, "--verbose", help="Log deck operations."),
) -> None:
    """Deal hands and report the strongest pattern in each."""

    _configure_logging(verbose)
    config = DeckConfig(
        decks=decks,
        hand_size=hand_size,
        jokers=DEFAULT_JOKERS if jokers else (),
        shuffle=shuffle,
    )
    deck = Deck(config, rng=random.Random(seed))

    table = Table(title="Dealt Hands", box=box.SIMPLE_HEAVY)
    table.add_column("Hand", justify="right", no_wrap=True)
    table.add_column("Cards", justify="left")
    table.add_column("Pattern", justify="left", no_wrap=True)

    for number in range(1, hands + 1):
        try:
            hand = deck.deal_hand()
        except InsufficientCards as exc:
            console.print(f"[red]{exc}[/red]", markup=True)
            raise typer.Exit(code=1) from exc
        table.add_row(str(number), str(hand), hand.evaluate().name)

    console.print(table)
    console.print(f"[cyan]{len(deck)} card(s) left in the deck.[/cyan]")


def main() -> None:
    """Entry-point for ``python -m carddeck.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
