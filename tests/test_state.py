from __future__ import annotations

import random

import pytest

from indigo import state
from indigo.cards import Card, Deck
from indigo.errors import OutOfRangeIndex
from indigo.state import GameState, PlayerState, Side


def test_deal_new_game_partitions_the_deck() -> None:
    deck = Deck.build(random.Random(11))
    order = list(deck.cards)

    game_state = state.deal_new_game(deck)

    assert game_state.table == order[:4]
    assert game_state.player(Side.HUMAN).hand == order[4:10]
    assert game_state.player(Side.COMPUTER).hand == order[10:16]
    assert len(game_state.deck) == 36
    assert game_state.card_count() == 52
    assert game_state.stage is state.Stage.PROMPT_FIRST


def test_play_removes_card_and_keeps_order() -> None:
    player = PlayerState()
    player.assign_hand(Card.from_code(code) for code in ["7S", "3D", "9C"])

    played = player.play(2)

    assert played == Card.from_code("3D")
    assert player.hand == [Card.from_code("7S"), Card.from_code("9C")]


@pytest.mark.parametrize("index", [0, 4, -1])
def test_play_out_of_range_raises(index: int) -> None:
    player = PlayerState()
    player.assign_hand(Card.from_code(code) for code in ["7S", "3D", "9C"])

    with pytest.raises(OutOfRangeIndex):
        player.play(index)
    assert len(player.hand) == 3


def test_ledger_accumulates_wins_and_points() -> None:
    player = PlayerState()
    player.record_win([Card.from_code("AH"), Card.from_code("2H")])
    player.record_win([Card.from_code("KC")])
    player.add_points(2)
    player.add_points(1)

    assert len(player.cards_won) == 3
    assert player.points == 3


def test_flags_are_mutually_exclusive() -> None:
    game_state = GameState(deck=Deck())

    game_state.mark_moved_first(Side.HUMAN)
    game_state.mark_previous_winner(Side.HUMAN)
    game_state.mark_previous_winner(Side.COMPUTER)

    assert game_state.moved_first_side() is Side.HUMAN
    assert not game_state.player(Side.COMPUTER).moved_first
    assert game_state.previous_winner() is Side.COMPUTER
    assert not game_state.player(Side.HUMAN).won_previous_round

    game_state.mark_moved_first(Side.COMPUTER)
    assert game_state.moved_first_side() is Side.COMPUTER
    assert not game_state.player(Side.HUMAN).moved_first


def test_switch_active_toggles_between_sides() -> None:
    game_state = GameState(deck=Deck())

    assert game_state.active is Side.HUMAN
    assert game_state.switch_active() is Side.COMPUTER
    assert game_state.switch_active() is Side.HUMAN
    assert Side.HUMAN.other is Side.COMPUTER
    assert Side.COMPUTER.label == "Computer"
