"""Exception hierarchy raised by the Indigo rules engine."""

from __future__ import annotations

__all__ = [
    "IndigoError",
    "OutOfRangeIndex",
    "InsufficientDeck",
    "InvalidCardCount",
    "IllegalTransition",
]


class IndigoError(RuntimeError):
    """Base class for contract violations inside the engine."""


class OutOfRangeIndex(IndigoError):
    """Raised when a hand index falls outside ``[1, len(hand)]``."""


class InsufficientDeck(IndigoError):
    """Raised when more cards are requested than remain in the deck."""


class InvalidCardCount(IndigoError):
    """Raised when a draw request is not between 1 and 52 cards."""


class IllegalTransition(IndigoError):
    """Raised when the state machine is driven out of order."""
