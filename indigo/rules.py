"""Round resolution and scoring rules for Indigo."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from .cards import Card, Rank
from .state import GameState, Side

__all__ = [
    "POINT_RANKS",
    "MAJORITY_BONUS",
    "MAX_POINTS",
    "RoundOutcome",
    "FinalSettlement",
    "is_match",
    "candidates",
    "score_points",
    "resolve_play",
    "settle_final_score",
]

logger = logging.getLogger(__name__)

POINT_RANKS: Final[frozenset[Rank]] = frozenset(
    {Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE}
)
MAJORITY_BONUS: Final[int] = 3
MAX_POINTS: Final[int] = 23


@dataclass(frozen=True, slots=True)
class RoundOutcome:
    """Result of a single play against the table."""

    played: Card
    winner: Side | None = None
    won_cards: tuple[Card, ...] = ()
    points: int = 0

    @property
    def table_cleared(self) -> bool:
        return self.winner is not None


@dataclass(frozen=True, slots=True)
class FinalSettlement:
    """Breakdown of the adjustments applied when the game ends."""

    leftover_to: Side | None = None
    leftover_cards: tuple[Card, ...] = ()
    leftover_points: int = 0
    bonus_to: Side | None = None
    bonus_points: int = 0
    no_round_won: bool = False


def is_match(played: Card, top: Card | None) -> bool:
    """Return ``True`` when ``played`` shares a rank or a suit with ``top``."""

    if top is None:
        return False
    return played.rank == top.rank or played.suit == top.suit


def candidates(hand: Sequence[Card], top: Card | None) -> list[int]:
    """Return 0-based positions of the cards in ``hand`` that match ``top``."""

    return [idx for idx, card in enumerate(hand) if is_match(card, top)]


def score_points(cards: Iterable[Card]) -> int:
    """Count one point for every 10, J, Q, K and A."""

    return sum(1 for card in cards if card.rank in POINT_RANKS)


def resolve_play(state: GameState, played: Card, side: Side) -> RoundOutcome:
    """Put ``played`` on the table and award the table to ``side`` on a match."""

    previous_top = state.top_card
    state.table.append(played)
    if not is_match(played, previous_top):
        return RoundOutcome(played=played)

    won = tuple(state.table)
    player = state.player(side)
    player.record_win(won)
    points = score_points(won)
    player.add_points(points)
    state.mark_previous_winner(side)
    state.table.clear()
    logger.info("%s wins %d cards for %d points", side.label, len(won), points)
    return RoundOutcome(played=played, winner=side, won_cards=won, points=points)


def settle_final_score(state: GameState) -> FinalSettlement:
    """Apply the end-of-game awards and return what was granted."""

    first = state.moved_first_side()
    if not any(player.cards_won for player in state.players.values()):
        if first is None:
            return FinalSettlement(no_round_won=True)
        leftover = tuple(state.table)
        player = state.player(first)
        player.record_win(leftover)
        player.add_points(MAX_POINTS)
        state.table.clear()
        logger.info("no round won; %s takes the table and %d points", first.label, MAX_POINTS)
        return FinalSettlement(
            leftover_to=first,
            leftover_cards=leftover,
            leftover_points=MAX_POINTS,
            no_round_won=True,
        )

    leftover_to: Side | None = None
    leftover: tuple[Card, ...] = ()
    leftover_points = 0
    if state.table:
        leftover_to = state.previous_winner() or first
        if leftover_to is not None:
            leftover = tuple(state.table)
            leftover_points = score_points(leftover)
            player = state.player(leftover_to)
            player.record_win(leftover)
            player.add_points(leftover_points)
            state.table.clear()

    human = len(state.player(Side.HUMAN).cards_won)
    computer = len(state.player(Side.COMPUTER).cards_won)
    bonus_to: Side | None = None
    if human > computer:
        bonus_to = Side.HUMAN
    elif computer > human:
        bonus_to = Side.COMPUTER
    if bonus_to is not None:
        state.player(bonus_to).add_points(MAJORITY_BONUS)

    return FinalSettlement(
        leftover_to=leftover_to,
        leftover_cards=leftover,
        leftover_points=leftover_points,
        bonus_to=bonus_to,
        bonus_points=MAJORITY_BONUS if bonus_to is not None else 0,
    )
