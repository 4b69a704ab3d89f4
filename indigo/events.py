"""Display events emitted by the engine for renderers to consume."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from .cards import Card
from .state import Side

__all__ = [
    "InitialTable",
    "TableSummary",
    "HandSummary",
    "CardPrompt",
    "ComputerPlay",
    "RoundWon",
    "Scoreboard",
    "GameOver",
    "GameEvent",
    "EventSink",
    "EventLog",
]


@dataclass(frozen=True, slots=True)
class InitialTable:
    cards: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class TableSummary:
    """Number of cards on the table and the card to beat."""

    count: int
    top: Card | None


@dataclass(frozen=True, slots=True)
class HandSummary:
    cards: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class CardPrompt:
    hand_size: int


@dataclass(frozen=True, slots=True)
class ComputerPlay:
    card: Card


@dataclass(frozen=True, slots=True)
class RoundWon:
    winner: Side
    cards: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class Scoreboard:
    """Running score and won-card tallies for both sides."""

    human_points: int
    computer_points: int
    human_cards: int
    computer_cards: int
    final: bool = False


@dataclass(frozen=True, slots=True)
class GameOver:
    pass


GameEvent = Union[
    InitialTable,
    TableSummary,
    HandSummary,
    CardPrompt,
    ComputerPlay,
    RoundWon,
    Scoreboard,
    GameOver,
]

EventSink = Callable[[GameEvent], None]


@dataclass(slots=True)
class EventLog:
    """Sink that keeps every event it receives, in order."""

    events: list[GameEvent] = field(default_factory=list)

    def __call__(self, event: GameEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[type]:
        return [type(event) for event in self.events]

    def clear(self) -> None:
        self.events.clear()
