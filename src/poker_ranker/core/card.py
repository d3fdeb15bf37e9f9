"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum

from poker_ranker.config.notation_config import get_notation_config


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def numeric_value(self) -> int:
        """Value used for ordering, 2 (deuce) through 14 (ace)."""
        return RANK_VALUES[self]

    @property
    def full_name(self) -> str:
        """Singular name, e.g. 'Ace'."""
        return RANK_NAMES[self][0]

    @property
    def plural_name(self) -> str:
        """Plural name, e.g. 'Sixes'."""
        return RANK_NAMES[self][1]

    @classmethod
    def from_value(cls, value: int) -> 'Rank':
        """
        Look up the rank with the given numeric value.

        Raises:
            ValueError: If no rank has that value
        """
        try:
            return VALUE_RANKS[value]
        except KeyError:
            raise ValueError(f"No rank with value {value}")


RANK_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,
}

VALUE_RANKS = {value: rank for rank, value in RANK_VALUES.items()}

RANK_NAMES = {
    Rank.TWO: ('Two', 'Twos'),
    Rank.THREE: ('Three', 'Threes'),
    Rank.FOUR: ('Four', 'Fours'),
    Rank.FIVE: ('Five', 'Fives'),
    Rank.SIX: ('Six', 'Sixes'),
    Rank.SEVEN: ('Seven', 'Sevens'),
    Rank.EIGHT: ('Eight', 'Eights'),
    Rank.NINE: ('Nine', 'Nines'),
    Rank.TEN: ('Ten', 'Tens'),
    Rank.JACK: ('Jack', 'Jacks'),
    Rank.QUEEN: ('Queen', 'Queens'),
    Rank.KING: ('King', 'Kings'),
    Rank.ACE: ('Ace', 'Aces'),
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable and hashable; two cards are equal when rank and
    suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @classmethod
    def from_string(cls, card_str: str, notation: str = 'standard') -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: Card text in the given notation, e.g. 'As' or '10h'
                      for the standard notation, '♦a' for the french one
            notation: Id of the card notation to read the text with

        Returns:
            Card instance

        Raises:
            ValueError: If the text or the notation is invalid
        """
        config = get_notation_config(notation)
        if config is None:
            raise ValueError(f"Unknown card notation: {notation}")

        rank_name, suit_name = config.split_card(card_str)
        try:
            return cls(rank=Rank[rank_name], suit=Suit[suit_name])
        except KeyError:
            raise ValueError(f"Notation {notation} maps {card_str!r} to unknown rank or suit")


def rank_of(card: Card) -> Rank:
    """Rank of a card."""
    return card.rank


def suit_of(card: Card) -> Suit:
    """Suit of a card."""
    return card.suit


def rank_value(rank: Rank) -> int:
    """Numeric value of a rank: numerals map to themselves, J=11, Q=12, K=13, A=14."""
    return RANK_VALUES[rank]
