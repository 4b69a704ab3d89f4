"""Card-selection strategies for the computer seat."""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from .cards import Card
from .rules import candidates

__all__ = ["Strategy", "ComputerStrategy", "RandomStrategy", "equivalence_pool"]

logger = logging.getLogger(__name__)


class Strategy(Protocol):
    """Anything able to pick a 1-based card index from a hand."""

    def choose_index(self, hand: Sequence[Card], table: Sequence[Card]) -> int:
        ...


def equivalence_pool(hand: Sequence[Card]) -> list[int]:
    """Return 0-based positions of the cards worth shedding first.

    Cards sharing a suit with another card in hand come first. Short hands
    (four cards or fewer) fall back to cards sharing a rank. When nothing is
    duplicated the whole hand is eligible.
    """

    suits = Counter(card.suit for card in hand)
    by_suit = [idx for idx, card in enumerate(hand) if suits[card.suit] >= 2]
    if by_suit:
        return by_suit
    if len(hand) <= 4:
        ranks = Counter(card.rank for card in hand)
        by_rank = [idx for idx, card in enumerate(hand) if ranks[card.rank] >= 2]
        if by_rank:
            return by_rank
    return list(range(len(hand)))


def _narrow_candidates(hand: Sequence[Card], matching: list[int], top: Card) -> list[int]:
    same_suit = [idx for idx in matching if hand[idx].suit == top.suit]
    if len(same_suit) >= 2:
        return same_suit
    same_rank = [idx for idx in matching if hand[idx].rank == top.rank]
    if len(same_rank) >= 2:
        return same_rank
    return matching


@dataclass(slots=True)
class ComputerStrategy:
    """Heuristic opponent that grabs free wins and sheds duplicated cards."""

    rng: random.Random = field(default_factory=random.Random)

    def choose_index(self, hand: Sequence[Card], table: Sequence[Card]) -> int:
        """Return the 1-based index of the card the computer plays."""

        if not hand:
            raise ValueError("cannot choose a card from an empty hand")
        if len(hand) == 1:
            return 1

        top = table[-1] if table else None
        matching = candidates(hand, top)
        if top is not None and len(matching) == 1:
            logger.debug("single candidate %s", hand[matching[0]].label())
            return matching[0] + 1

        if top is None or not matching:
            pool = equivalence_pool(hand)
        else:
            pool = _narrow_candidates(hand, matching, top)
        choice = self.rng.choice(pool)
        logger.debug("picked %s from pool of %d", hand[choice].label(), len(pool))
        return choice + 1


@dataclass(slots=True)
class RandomStrategy:
    """Baseline that plays any card uniformly at random."""

    rng: random.Random = field(default_factory=random.Random)

    def choose_index(self, hand: Sequence[Card], table: Sequence[Card]) -> int:
        if not hand:
            raise ValueError("cannot choose a card from an empty hand")
        return self.rng.randint(1, len(hand))
