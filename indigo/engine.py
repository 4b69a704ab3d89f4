"""Turn and game state machine driving a single Indigo game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from . import rules
from .cards import Card, Deck
from .errors import IllegalTransition
from .events import (
    CardPrompt,
    ComputerPlay,
    EventSink,
    GameEvent,
    GameOver,
    HandSummary,
    InitialTable,
    RoundWon,
    Scoreboard,
    TableSummary,
)
from .state import HAND_SIZE, GameState, Side, Stage, deal_new_game
from .strategy import ComputerStrategy, Strategy

__all__ = ["InputKind", "InputRequest", "IndigoGame"]

logger = logging.getLogger(__name__)


class InputKind(str, Enum):
    """Kinds of decisions the engine needs from the human."""

    FIRST_PLAYER = "first_player"
    CARD = "card"


@dataclass(frozen=True, slots=True)
class InputRequest:
    """Pending question for the human seat."""

    kind: InputKind
    hand_size: int = 0


def _discard_event(event: GameEvent) -> None:
    return None


class IndigoGame:
    """Owns a ``GameState`` and advances it stage by stage.

    The engine never reads input itself. ``advance`` runs every automatic
    transition and stops at the first point where the human has to decide,
    returning an ``InputRequest``; the caller answers it with
    ``choose_first``, ``play_card`` or ``exit`` and calls ``advance`` again.
    ``advance`` returns ``None`` once the game is over.
    """

    def __init__(
        self,
        state: GameState | None = None,
        *,
        rng: random.Random | None = None,
        sink: EventSink | None = None,
        computer: Strategy | None = None,
        human_first: bool | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.state = state if state is not None else deal_new_game(Deck.build(self.rng))
        self.sink: EventSink = sink if sink is not None else _discard_event
        self.computer: Strategy = computer if computer is not None else ComputerStrategy(self.rng)
        self.human_first = human_first
        self.pending: InputRequest | None = None
        self.settlement: rules.FinalSettlement | None = None

    @property
    def stage(self) -> Stage:
        return self.state.stage

    @property
    def is_over(self) -> bool:
        return self.state.stage is Stage.GAME_OVER

    def advance(self) -> InputRequest | None:
        """Run transitions until human input is required or the game ends."""

        while self.pending is None and not self.is_over:
            self._step()
        return self.pending

    def choose_first(self, human_first: bool) -> None:
        """Answer the first-player question."""

        self._expect(InputKind.FIRST_PLAYER)
        self.pending = None
        self._start(human_first)

    def play_card(self, index: int) -> rules.RoundOutcome:
        """Play the human card at 1-based ``index``."""

        self._expect(InputKind.CARD)
        card = self.state.player(Side.HUMAN).play(index)
        self.pending = None
        return self._finish_play(card, Side.HUMAN)

    def exit(self) -> None:
        """Stop at the current input point and settle the score."""

        if self.pending is None:
            raise IllegalTransition("exit is only accepted while waiting for input")
        request, self.pending = self.pending, None
        if request.kind is InputKind.FIRST_PLAYER:
            # Nobody has moved yet, so there is nothing to settle.
            self._set_stage(Stage.GAME_OVER)
            self._emit(GameOver())
            return
        self._set_stage(Stage.FINAL_SCORE)

    def scoreboard(self, *, final: bool = False) -> Scoreboard:
        human = self.state.player(Side.HUMAN)
        computer = self.state.player(Side.COMPUTER)
        return Scoreboard(
            human_points=human.points,
            computer_points=computer.points,
            human_cards=len(human.cards_won),
            computer_cards=len(computer.cards_won),
            final=final,
        )

    def _expect(self, kind: InputKind) -> None:
        if self.pending is None or self.pending.kind is not kind:
            raise IllegalTransition(f"no pending {kind.value} request in stage {self.stage.value}")

    def _emit(self, event: GameEvent) -> None:
        self.sink(event)

    def _set_stage(self, stage: Stage) -> None:
        logger.debug("stage %s -> %s", self.state.stage.value, stage.value)
        self.state.stage = stage

    def _step(self) -> None:
        stage = self.state.stage
        if stage is Stage.PROMPT_FIRST:
            if self.human_first is None:
                self.pending = InputRequest(InputKind.FIRST_PLAYER)
            else:
                self._start(self.human_first)
        elif stage is Stage.PRINT_INITIAL:
            self._emit(InitialTable(tuple(self.state.table)))
            self._set_stage(Stage.GAME_LOOP)
        elif stage is Stage.GAME_LOOP:
            self._take_turn()
        elif stage is Stage.FINAL_SCORE:
            self._final_score()

    def _start(self, human_first: bool) -> None:
        side = Side.HUMAN if human_first else Side.COMPUTER
        self.state.mark_moved_first(side)
        self.state.active = side
        logger.info("%s moves first", side.label)
        self._set_stage(Stage.PRINT_INITIAL)

    def _table_summary(self) -> TableSummary:
        return TableSummary(count=len(self.state.table), top=self.state.top_card)

    def _take_turn(self) -> None:
        side = self.state.active
        player = self.state.player(side)
        if not player.hand:
            if self.state.deck.is_empty:
                self._set_stage(Stage.FINAL_SCORE)
                return
            player.assign_hand(self.state.deck.draw(HAND_SIZE))
            logger.debug("re-dealt %s, %d cards left in deck", side.label, len(self.state.deck))

        self._emit(self._table_summary())
        if side is Side.HUMAN:
            self._emit(HandSummary(tuple(player.hand)))
            self._emit(CardPrompt(len(player.hand)))
            self.pending = InputRequest(InputKind.CARD, hand_size=len(player.hand))
            return

        index = self.computer.choose_index(tuple(player.hand), tuple(self.state.table))
        card = player.play(index)
        logger.debug("computer plays %s (index %d)", card.label(), index)
        self._finish_play(card, side)

    def _finish_play(self, card: Card, side: Side) -> rules.RoundOutcome:
        outcome = rules.resolve_play(self.state, card, side)
        if side is Side.COMPUTER:
            self._emit(ComputerPlay(card))
        if outcome.winner is not None:
            self._emit(RoundWon(outcome.winner, outcome.won_cards))
            self._emit(self.scoreboard())
        self.state.switch_active()
        return outcome

    def _final_score(self) -> None:
        self._emit(self._table_summary())
        self.settlement = rules.settle_final_score(self.state)
        self._emit(self.scoreboard(final=True))
        self._set_stage(Stage.GAME_OVER)
        self._emit(GameOver())
