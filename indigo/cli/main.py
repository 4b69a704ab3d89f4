"""Typer entry-point wiring for the Indigo CLI."""

from __future__ import annotations

import logging
import random

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .. import benchmark
from ..cards import Deck, format_cards
from ..engine import IndigoGame, InputKind
from ..errors import InsufficientDeck, InvalidCardCount
from ..logging_utils import LOG_LEVEL, setup_logging
from ..state import GameConfig, Side
from . import prompts
from .render import TITLE, ConsoleRenderer
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = logging.getLogger(__name__)

DECK_MENU = "Choose an action (reset, shuffle, get, exit):"


def _resolve_seed(seed: int | None) -> int:
    if seed is None:
        seed = random.SystemRandom().randrange(0, 2**63)
    return seed


def _parse_first(first: str | None) -> bool | None:
    if first is None:
        return None
    token = first.strip().lower()
    if token not in (prompts.YES, prompts.NO):
        raise typer.BadParameter("--first must be 'yes' or 'no'.")
    return token == prompts.YES


def _run_console_game(config: GameConfig, out: Console) -> IndigoGame:
    """Play one game on ``out``, reading the human's moves from stdin."""

    seed = _resolve_seed(config.seed)
    logger.info("starting game with seed %d", seed)
    game = IndigoGame(
        rng=random.Random(seed),
        sink=ConsoleRenderer(out),
        human_first=config.human_first,
    )
    out.print(TITLE, highlight=False)

    request = game.advance()
    while request is not None:
        if request.kind is InputKind.FIRST_PLAYER:
            human_first = prompts.ask_first_player(out)
            if human_first is None:
                game.exit()
            else:
                game.choose_first(human_first)
        else:
            index = prompts.ask_card(out, request.hand_size)
            if index is None:
                game.exit()
            else:
                game.play_card(index)
        request = game.advance()
    return game


@app.callback()
def _configure(
    log_level: str = typer.Option(
        LOG_LEVEL,
        "--log-level",
        envvar="INDIGO_LOG_LEVEL",
        help="Logging level written to stderr (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Indigo: a two-player card game against the computer."""

    setup_logging(log_level)


@app.command()
def play(
    seed: int | None = typer.Option(
        None, envvar="INDIGO_SEED", help="Random seed for reproducible games (omit for randomness)."
    ),
    first: str | None = typer.Option(
        None, "--first", help="Answer the 'Play first?' question up front (yes or no)."
    ),
    tui: bool = typer.Option(False, "--tui", help="Play in the full-screen terminal interface."),
) -> None:
    """Play a game of Indigo against the computer."""

    config = GameConfig(seed=seed, human_first=_parse_first(first))
    if tui:
        run_textual_app(config)
        return
    _run_console_game(config, console)


@app.command("deck")
def deck_menu(
    seed: int | None = typer.Option(None, envvar="INDIGO_SEED", help="Random seed for the deck order."),
) -> None:
    """Manage a standalone deck: reset, shuffle and draw cards."""

    deck = Deck.build(random.Random(_resolve_seed(seed)))
    while True:
        console.print(DECK_MENU, highlight=False)
        action = console.input().strip().lower()
        if action == "reset":
            deck.reset()
            console.print("Card deck is reset.", highlight=False)
        elif action == "shuffle":
            deck.reshuffle()
            console.print("Card deck is shuffled.", highlight=False)
        elif action == "get":
            console.print("Number of cards:", highlight=False)
            raw = console.input().strip()
            try:
                cards = deck.draw(int(raw) if raw.isdigit() else 0)
            except (InvalidCardCount, InsufficientDeck) as exc:
                console.print(str(exc), highlight=False)
                continue
            console.print(format_cards(cards), highlight=False)
        elif action == prompts.EXIT:
            console.print("Bye", highlight=False)
            break
        else:
            console.print("Wrong action.", highlight=False)


@app.command("simulate")
def simulate(
    games: int = typer.Option(100, min=1, help="Number of games to simulate."),
    seed: int = typer.Option(123, help="Random seed for the simulation."),
) -> None:
    """Run the computer heuristic against a random baseline."""

    report = benchmark.run_head_to_head(games, seed=seed)

    table = Table(title="Head-to-Head Simulation", box=box.SIMPLE_HEAVY)
    table.add_column("Seat", justify="center")
    table.add_column("Strategy", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Cards", justify="right")

    for side, label in ((Side.HUMAN, "Random"), (Side.COMPUTER, "Heuristic")):
        totals = report.breakdown(side)
        table.add_row(side.label, label, str(totals.wins), str(totals.points), str(totals.cards))

    console.print(table)
    console.print(f"[cyan]{len(report.games)} game(s) simulated, {report.draws} drawn.[/cyan]")


def main() -> None:
    """Entry-point for ``python -m indigo.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
