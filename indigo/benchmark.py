"""Benchmark harness pitting the computer heuristic against a baseline."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .engine import IndigoGame, InputKind
from .state import Side
from .strategy import ComputerStrategy, RandomStrategy, Strategy

__all__ = ["GameResult", "SideBreakdown", "HeadToHeadReport", "autoplay", "run_head_to_head"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameResult:
    """Final tallies of one simulated game."""

    game_number: int
    human_first: bool
    human_points: int
    computer_points: int
    human_cards: int
    computer_cards: int

    @property
    def winner(self) -> Side | None:
        if self.human_points > self.computer_points:
            return Side.HUMAN
        if self.computer_points > self.human_points:
            return Side.COMPUTER
        return None


@dataclass(frozen=True, slots=True)
class SideBreakdown:
    """Aggregate statistics for one seat across a benchmark."""

    wins: int
    points: int
    cards: int


@dataclass(slots=True)
class HeadToHeadReport:
    """Summary of a head-to-head run between the two seats."""

    games: list[GameResult] = field(default_factory=list)

    @property
    def draws(self) -> int:
        return sum(1 for game in self.games if game.winner is None)

    def breakdown(self, side: Side) -> SideBreakdown:
        if side is Side.HUMAN:
            points = sum(game.human_points for game in self.games)
            cards = sum(game.human_cards for game in self.games)
        else:
            points = sum(game.computer_points for game in self.games)
            cards = sum(game.computer_cards for game in self.games)
        wins = sum(1 for game in self.games if game.winner is side)
        return SideBreakdown(wins=wins, points=points, cards=cards)


def autoplay(game: IndigoGame, seat: Strategy, *, human_first: bool) -> None:
    """Drive ``game`` to completion, answering human requests with ``seat``."""

    request = game.advance()
    while request is not None:
        if request.kind is InputKind.FIRST_PLAYER:
            game.choose_first(human_first)
        else:
            hand = game.state.player(Side.HUMAN).hand
            game.play_card(seat.choose_index(tuple(hand), tuple(game.state.table)))
        request = game.advance()


def run_head_to_head(
    games: int,
    *,
    seed: int,
    baseline: Strategy | None = None,
    challenger: Strategy | None = None,
) -> HeadToHeadReport:
    """Play ``games`` games with ``baseline`` in the human seat.

    The challenger defaults to the computer heuristic and the baseline to
    uniform random play; first move alternates between the seats.
    """

    if games <= 0:
        raise ValueError("games must be positive")
    rng = random.Random(seed)
    baseline = baseline if baseline is not None else RandomStrategy(random.Random(rng.getrandbits(32)))
    challenger = challenger if challenger is not None else ComputerStrategy(random.Random(rng.getrandbits(32)))

    report = HeadToHeadReport()
    for number in range(1, games + 1):
        human_first = number % 2 == 1
        game = IndigoGame(rng=random.Random(rng.getrandbits(32)), computer=challenger)
        autoplay(game, baseline, human_first=human_first)
        board = game.scoreboard(final=True)
        result = GameResult(
            game_number=number,
            human_first=human_first,
            human_points=board.human_points,
            computer_points=board.computer_points,
            human_cards=board.human_cards,
            computer_cards=board.computer_cards,
        )
        logger.debug("game %d finished %d-%d", number, result.human_points, result.computer_points)
        report.games.append(result)
    return report
