from __future__ import annotations

import random
from typing import Any, Sequence

import pytest

from indigo.cards import Card
from indigo.strategy import ComputerStrategy, RandomStrategy, equivalence_pool


class RecordingRandom(random.Random):
    """Random stub that records the pool and picks its last entry."""

    def __init__(self) -> None:
        super().__init__(0)
        self.pools: list[list[Any]] = []

    def choice(self, seq: Sequence[Any]) -> Any:
        self.pools.append(list(seq))
        return seq[-1]


class ExplodingRandom(random.Random):
    def choice(self, seq: Sequence[Any]) -> Any:
        raise AssertionError("deterministic rule should not consult the RNG")


def _cards(codes: Sequence[str]) -> list[Card]:
    return [Card.from_code(code) for code in codes]


def test_single_card_is_forced() -> None:
    strategy = ComputerStrategy(ExplodingRandom())

    assert strategy.choose_index(_cards(["2C"]), _cards(["7H"])) == 1
    assert strategy.choose_index(_cards(["2C"]), []) == 1


def test_single_candidate_is_played() -> None:
    strategy = ComputerStrategy(ExplodingRandom())

    assert strategy.choose_index(_cards(["7S", "3D", "9C"]), _cards(["7H"])) == 1
    assert strategy.choose_index(_cards(["3D", "9C", "2H"]), _cards(["4S", "7H"])) == 3


def test_empty_table_sheds_cards_of_a_repeated_suit() -> None:
    rng = RecordingRandom()
    strategy = ComputerStrategy(rng)

    index = strategy.choose_index(_cards(["2H", "5H", "9C", "KD", "3S"]), [])

    assert rng.pools == [[0, 1]]
    assert index == 2


def test_no_candidate_short_hand_falls_back_to_repeated_rank() -> None:
    rng = RecordingRandom()
    strategy = ComputerStrategy(rng)

    index = strategy.choose_index(_cards(["9H", "9D", "2S"]), _cards(["7C"]))

    assert rng.pools == [[0, 1]]
    assert index == 2


def test_no_duplicates_uses_whole_hand() -> None:
    rng = RecordingRandom()
    strategy = ComputerStrategy(rng)

    index = strategy.choose_index(_cards(["2H", "5D", "9S", "KC"]), [])

    assert rng.pools == [[0, 1, 2, 3]]
    assert index == 4


def test_multiple_candidates_prefer_suit_matches() -> None:
    rng = RecordingRandom()
    strategy = ComputerStrategy(rng)

    index = strategy.choose_index(_cards(["2H", "9H", "7S", "3C"]), _cards(["7H"]))

    assert rng.pools == [[0, 1]]
    assert index == 2


def test_multiple_candidates_fall_back_to_rank_matches() -> None:
    rng = RecordingRandom()
    strategy = ComputerStrategy(rng)

    index = strategy.choose_index(_cards(["7S", "7D", "2H", "3C"]), _cards(["7H"]))

    assert rng.pools == [[0, 1]]
    assert index == 2


def test_multiple_candidates_without_majority_use_all_candidates() -> None:
    rng = RecordingRandom()
    strategy = ComputerStrategy(rng)

    index = strategy.choose_index(_cards(["7S", "3C", "2H"]), _cards(["7H"]))

    assert rng.pools == [[0, 2]]
    assert index == 3


def test_equivalence_pool_ignores_ranks_for_long_hands() -> None:
    hand = _cards(["9H", "9D", "2S", "KC", "5H"])

    assert equivalence_pool(hand) == [0, 4]


@pytest.mark.parametrize("strategy_cls", [ComputerStrategy, RandomStrategy])
def test_empty_hand_is_rejected(strategy_cls: type) -> None:
    with pytest.raises(ValueError):
        strategy_cls(random.Random(0)).choose_index([], [])


def test_choices_stay_within_hand() -> None:
    rng = random.Random(5)
    hand = _cards(["2H", "5H", "9C", "KD", "3S", "QH"])
    table = _cards(["4H"])
    for strategy in (ComputerStrategy(rng), RandomStrategy(rng)):
        for _ in range(50):
            assert 1 <= strategy.choose_index(hand, table) <= len(hand)
