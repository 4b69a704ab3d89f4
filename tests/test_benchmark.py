from __future__ import annotations

import random

import pytest

from indigo.benchmark import run_head_to_head
from indigo.state import Side
from indigo.strategy import ComputerStrategy


def test_run_head_to_head_returns_report() -> None:
    report = run_head_to_head(4, seed=7)

    assert len(report.games) == 4
    assert [game.human_first for game in report.games] == [True, False, True, False]
    human = report.breakdown(Side.HUMAN)
    computer = report.breakdown(Side.COMPUTER)
    assert human.wins + computer.wins + report.draws == 4
    assert human.cards + computer.cards == 4 * 52
    for game in report.games:
        assert game.human_points + game.computer_points in (20, 23)


def test_run_head_to_head_is_reproducible() -> None:
    first = run_head_to_head(3, seed=11)
    second = run_head_to_head(3, seed=11)

    assert first.games == second.games


def test_heuristic_mirror_match_accepts_custom_strategies() -> None:
    report = run_head_to_head(
        2,
        seed=3,
        baseline=ComputerStrategy(random.Random(1)),
        challenger=ComputerStrategy(random.Random(2)),
    )

    assert len(report.games) == 2


def test_run_head_to_head_requires_games() -> None:
    with pytest.raises(ValueError):
        run_head_to_head(0, seed=1)
