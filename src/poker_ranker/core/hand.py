"""Five-card hand helpers."""

import logging
import re
from collections import Counter
from collections.abc import Iterable, Sequence

from .card import Card, Rank, rank_value

logger = logging.getLogger(__name__)

HAND_SIZE = 5

WHEEL_VALUES = [14, 5, 4, 3, 2]


class InvalidHandSize(ValueError):
    """Exception raised when a hand does not hold exactly five cards."""

    pass


def validate_hand_size(hand: Sequence[Card]) -> None:
    """
    Ensure a hand holds exactly five cards.

    Raises:
        InvalidHandSize: If the hand has any other length
    """
    if len(hand) != HAND_SIZE:
        raise InvalidHandSize(f"Hand must contain exactly {HAND_SIZE} cards, got {len(hand)}")


def rank_frequencies(hand: Sequence[Card]) -> Counter[Rank]:
    """Count occurrences of each rank in the hand."""
    return Counter(card.rank for card in hand)


def is_same_suit(hand: Sequence[Card]) -> bool:
    """True if every card shares the first card's suit."""
    suit = hand[0].suit
    return all(card.suit == suit for card in hand)


def sort_by_rank(hand: Sequence[Card]) -> list[Card]:
    """Sort cards by rank value, highest first. Cards of equal rank keep their order."""
    return sorted(hand, key=lambda c: rank_value(c.rank), reverse=True)


def sorted_values(hand: Sequence[Card]) -> list[int]:
    """Rank values of the hand, highest first."""
    return [rank_value(card.rank) for card in sort_by_rank(hand)]


def is_straight(hand: Sequence[Card]) -> bool:
    """
    Check whether the hand forms a straight.

    A-5-4-3-2 (the wheel) counts as a straight with the ace playing low.
    Otherwise every card must be exactly one rank below the previous one,
    so any paired rank rules a straight out.
    """
    values = sorted_values(hand)

    if values == WHEEL_VALUES:
        return True

    return all(values[i - 1] == values[i] + 1 for i in range(1, len(values)))


def parse_hand(cards: str | Iterable[str], notation: str = 'standard') -> list[Card]:
    """
    Create a list of cards from text.

    Args:
        cards: Either one string of card texts separated by whitespace or
               commas (e.g. "As Kd 10h 7c 3d"), or an iterable of card texts
        notation: Id of the card notation used by the texts

    Returns:
        List of parsed cards, in input order

    Raises:
        ValueError: If any card text is invalid
    """
    if isinstance(cards, str):
        card_strings = [s for s in re.split(r"[\s,]+", cards) if s]
    else:
        card_strings = list(cards)

    hand = []
    for i, card_str in enumerate(card_strings):
        try:
            card = Card.from_string(card_str, notation=notation)
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i + 1} in hand {card_strings}: {e}")

        hand.append(card)

    logger.debug(f"Parsed hand {card_strings}: {[str(c) for c in hand]}")
    return hand
