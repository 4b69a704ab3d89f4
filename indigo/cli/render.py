"""Rendering helpers turning engine events into console text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Sequence

from rich.console import Console

from ..cards import Card, Suit
from ..events import (
    CardPrompt,
    ComputerPlay,
    GameEvent,
    GameOver,
    HandSummary,
    InitialTable,
    RoundWon,
    Scoreboard,
    TableSummary,
)

__all__ = [
    "TITLE",
    "format_card",
    "format_hand",
    "card_prompt",
    "describe_event",
    "ConsoleRenderer",
]

TITLE: Final[str] = "Indigo Card Game"

_SUIT_STYLES = {
    Suit.DIAMONDS: "magenta",
    Suit.HEARTS: "red",
    Suit.SPADES: "cyan",
    Suit.CLUBS: "green",
}


def format_card(card: Card, *, markup: bool = True) -> str:
    """Return a Rich-rendered label for ``card``."""

    if not markup:
        return card.label()
    color = _SUIT_STYLES.get(card.suit, "white")
    return f"[{color}]{card.label()}[/{color}]"


def format_hand(cards: Sequence[Card], *, markup: bool = True) -> str:
    return " ".join(
        f"{idx}){format_card(card, markup=markup)}" for idx, card in enumerate(cards, start=1)
    )


def card_prompt(hand_size: int) -> str:
    return f"Choose a card to play (1-{hand_size}):"


def describe_event(event: GameEvent, *, markup: bool = True) -> list[str]:
    """Return the console lines for ``event``."""

    if isinstance(event, InitialTable):
        cards = " ".join(format_card(card, markup=markup) for card in event.cards)
        return [f"Initial cards on the table: {cards}"]
    if isinstance(event, TableSummary):
        if event.top is None:
            return ["", "No cards on the table"]
        top = format_card(event.top, markup=markup)
        return ["", f"{event.count} cards on the table, and the top card is {top}"]
    if isinstance(event, HandSummary):
        return [f"Cards in hand: {format_hand(event.cards, markup=markup)}"]
    if isinstance(event, CardPrompt):
        return [card_prompt(event.hand_size)]
    if isinstance(event, ComputerPlay):
        return [f"Computer plays {format_card(event.card, markup=markup)}"]
    if isinstance(event, RoundWon):
        return [f"{event.winner.label} wins cards"]
    if isinstance(event, Scoreboard):
        return [
            f"Score: Player {event.human_points} - Computer {event.computer_points}",
            f"Cards: Player {event.human_cards} - Computer {event.computer_cards}",
        ]
    if isinstance(event, GameOver):
        return ["Game Over"]
    raise TypeError(f"unsupported event {event!r}")


@dataclass(slots=True)
class ConsoleRenderer:
    """Event sink printing every event to a Rich console."""

    console: Console

    def __call__(self, event: GameEvent) -> None:
        for line in describe_event(event):
            self.console.print(line, highlight=False)
