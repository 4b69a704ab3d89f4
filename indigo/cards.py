"""Card abstractions and deck lifecycle for Indigo."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Iterable, Iterator, Sequence

from .errors import InsufficientDeck, InvalidCardCount

__all__ = [
    "Suit",
    "Rank",
    "Card",
    "Deck",
    "DECK_SIZE",
    "iter_full_deck",
    "format_cards",
]

logger = logging.getLogger(__name__)


class Suit(str, Enum):
    """Enumeration of the four suits."""

    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"
    CLUBS = "♣"


class Rank(str, Enum):
    """Enumeration of ranks from deuce up to ace."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


DECK_SIZE: Final[int] = len(Rank) * len(Suit)

_SUIT_CODES = {
    "D": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "S": Suit.SPADES,
    "C": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse codes such as ``10H``, ``qs`` or ``7♥``."""

        if len(code) < 2:
            raise ValueError(f"invalid card code '{code}'")
        face, suit_code = code[:-1].upper(), code[-1]
        suit = _SUIT_CODES.get(suit_code.upper())
        if suit is None:
            suit = Suit(suit_code)
        return cls(rank=Rank(face), suit=suit)

    def label(self) -> str:
        """Create a display label such as ``10♥``."""

        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return self.label()


def iter_full_deck() -> Iterator[Card]:
    """Yield all 52 cards in rank-major order."""

    for rank in Rank:
        for suit in Suit:
            yield Card(rank=rank, suit=suit)


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.label() for card in cards)


@dataclass(slots=True)
class Deck:
    """Ordered pile of remaining cards, drawn from the front."""

    cards: list[Card] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def build(cls, rng: random.Random | None = None) -> "Deck":
        """Return a full 52-card deck shuffled with ``rng``."""

        deck = cls(rng=rng if rng is not None else random.Random())
        deck.reset()
        return deck

    @classmethod
    def from_cards(cls, cards: Sequence[Card], rng: random.Random | None = None) -> "Deck":
        """Wrap a pre-arranged card order without shuffling it."""

        if len(set(cards)) != len(cards):
            raise ValueError("deck must not contain duplicate cards")
        return cls(cards=list(cards), rng=rng if rng is not None else random.Random())

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def reset(self) -> None:
        """Restore all 52 cards and shuffle them."""

        self.cards = list(iter_full_deck())
        self.rng.shuffle(self.cards)
        logger.debug("deck reset to %d cards", len(self.cards))

    def reshuffle(self) -> None:
        """Shuffle the remaining cards in place without changing membership."""

        self.rng.shuffle(self.cards)
        logger.debug("deck reshuffled with %d cards remaining", len(self.cards))

    def draw(self, count: int) -> list[Card]:
        """Remove and return the first ``count`` cards."""

        if count < 1 or count > DECK_SIZE:
            raise InvalidCardCount("Invalid number of cards.")
        if count > len(self.cards):
            raise InsufficientDeck("The remaining cards are insufficient to meet the request.")
        drawn = self.cards[:count]
        del self.cards[:count]
        return drawn
