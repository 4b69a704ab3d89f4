"""Core game state data structures for Indigo."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Iterable

from .cards import Card, Deck
from .errors import OutOfRangeIndex

__all__ = [
    "Side",
    "Stage",
    "GameConfig",
    "PlayerState",
    "GameState",
    "INITIAL_TABLE_SIZE",
    "HAND_SIZE",
    "deal_new_game",
]

logger = logging.getLogger(__name__)

INITIAL_TABLE_SIZE: Final[int] = 4
HAND_SIZE: Final[int] = 6


class Side(str, Enum):
    """The two seats at the table."""

    HUMAN = "player"
    COMPUTER = "computer"

    @property
    def other(self) -> "Side":
        return Side.COMPUTER if self is Side.HUMAN else Side.HUMAN

    @property
    def label(self) -> str:
        return self.value.title()


class Stage(str, Enum):
    """Phases of a single game, advanced only by the engine."""

    PROMPT_FIRST = "prompt_first"
    PRINT_INITIAL = "print_initial"
    GAME_LOOP = "game_loop"
    FINAL_SCORE = "final_score"
    GAME_OVER = "game_over"


@dataclass(slots=True)
class GameConfig:
    """Runtime options for a single game session."""

    seed: int | None = None
    human_first: bool | None = None


@dataclass(slots=True)
class PlayerState:
    """Hand and score ledger tracked for each side."""

    hand: list[Card] = field(default_factory=list)
    cards_won: list[Card] = field(default_factory=list)
    points: int = 0
    moved_first: bool = False
    won_previous_round: bool = False

    def assign_hand(self, cards: Iterable[Card]) -> None:
        """Replace the hand wholesale."""

        self.hand = list(cards)

    def play(self, index: int) -> Card:
        """Remove and return the card at 1-based ``index``."""

        if not 1 <= index <= len(self.hand):
            raise OutOfRangeIndex(f"card index {index} outside 1-{len(self.hand)}")
        return self.hand.pop(index - 1)

    def record_win(self, cards: Iterable[Card]) -> None:
        self.cards_won.extend(cards)

    def add_points(self, points: int) -> None:
        self.points += points


@dataclass(slots=True)
class GameState:
    """Aggregate owning the deck, the table and both players."""

    deck: Deck
    table: list[Card] = field(default_factory=list)
    players: dict[Side, PlayerState] = field(
        default_factory=lambda: {side: PlayerState() for side in Side}
    )
    active: Side = Side.HUMAN
    stage: Stage = Stage.PROMPT_FIRST

    def player(self, side: Side) -> PlayerState:
        return self.players[side]

    @property
    def top_card(self) -> Card | None:
        """Return the current matching target, if any."""

        return self.table[-1] if self.table else None

    def mark_moved_first(self, side: Side) -> None:
        self.players[side].moved_first = True
        self.players[side.other].moved_first = False

    def mark_previous_winner(self, side: Side) -> None:
        self.players[side].won_previous_round = True
        self.players[side.other].won_previous_round = False

    def moved_first_side(self) -> Side | None:
        for side, player in self.players.items():
            if player.moved_first:
                return side
        return None

    def previous_winner(self) -> Side | None:
        for side, player in self.players.items():
            if player.won_previous_round:
                return side
        return None

    def switch_active(self) -> Side:
        self.active = self.active.other
        return self.active

    def card_count(self) -> int:
        """Return the number of cards accounted for across every pile."""

        total = len(self.deck) + len(self.table)
        for player in self.players.values():
            total += len(player.hand) + len(player.cards_won)
        return total


def deal_new_game(deck: Deck) -> GameState:
    """Deal the table and both opening hands returning a fresh ``GameState``."""

    table = deck.draw(INITIAL_TABLE_SIZE)
    players = {side: PlayerState() for side in Side}
    players[Side.HUMAN].assign_hand(deck.draw(HAND_SIZE))
    players[Side.COMPUTER].assign_hand(deck.draw(HAND_SIZE))
    logger.debug("dealt %d table cards, %d left in deck", len(table), len(deck))
    return GameState(deck=deck, table=table, players=players)
