"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import IntEnum

from poker_ranker.core.card import Card


class HandCategory(IntEnum):
    """Hand categories, weakest first. The value is the category ordinal."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'Three of a Kind'."""
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.ONE_PAIR: 'One Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
    HandCategory.ROYAL_FLUSH: 'Royal Flush',
}


@dataclass(frozen=True)
class HandResult:
    """
    Result of hand evaluation.

    Attributes:
        category: Hand category
        score: Comparable score; higher beats lower, equal scores tie
        cards: The evaluated cards, in input order
    """
    category: HandCategory
    score: int
    cards: tuple[Card, ...]
