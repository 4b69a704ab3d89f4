"""Validated console input for the first-player and card prompts."""

from __future__ import annotations

from typing import Final

from rich.console import Console

from .render import card_prompt

__all__ = [
    "YES",
    "NO",
    "EXIT",
    "FIRST_PROMPT",
    "ExitRequested",
    "parse_first_choice",
    "parse_card_choice",
    "ask_first_player",
    "ask_card",
]

YES: Final[str] = "yes"
NO: Final[str] = "no"
EXIT: Final[str] = "exit"
FIRST_PROMPT: Final[str] = "Play first?"


class ExitRequested(Exception):
    """Internal signal for the ``exit`` token."""


def parse_first_choice(raw: str) -> bool | None:
    """Return ``True``/``False`` for yes/no, raise ``ExitRequested`` on exit.

    ``None`` means the token was not understood and the question is repeated.
    """

    token = raw.strip().lower()
    if token == EXIT:
        raise ExitRequested
    if token == YES:
        return True
    if token == NO:
        return False
    return None


def parse_card_choice(raw: str, hand_size: int) -> int | None:
    """Return a 1-based index within ``hand_size`` or ``None`` for bad input."""

    token = raw.strip().lower()
    if token == EXIT:
        raise ExitRequested
    if not token.isdigit():
        return None
    index = int(token)
    if 1 <= index <= hand_size:
        return index
    return None


def ask_first_player(console: Console) -> bool | None:
    """Ask until yes or no is given; ``None`` means the player typed exit."""

    while True:
        console.print(FIRST_PROMPT, highlight=False)
        try:
            answer = parse_first_choice(console.input())
        except ExitRequested:
            return None
        if answer is not None:
            return answer


def ask_card(console: Console, hand_size: int) -> int | None:
    """Read a card index, re-prompting on bad input; ``None`` means exit."""

    while True:
        try:
            index = parse_card_choice(console.input(), hand_size)
        except ExitRequested:
            return None
        if index is not None:
            return index
        console.print(card_prompt(hand_size), highlight=False)
