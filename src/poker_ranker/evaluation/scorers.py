"""Per-category hand scorers.

Each scorer checks that the hand really belongs to its category and returns
the hand's score. The evaluator only calls a scorer after classifying the
hand, so ``InvalidCategoryState`` means a caller used a scorer directly on a
hand of another category.
"""
from collections.abc import Sequence

from poker_ranker.core.card import Card, Rank, rank_value
from poker_ranker.core.hand import (
    is_same_suit, is_straight, rank_frequencies, sorted_values, validate_hand_size
)
from poker_ranker.evaluation.constants import (
    ROYAL_VALUES, TIE_BREAK_SLOTS, WHEEL_HIGH_VALUE, WHEEL_VALUES
)
from poker_ranker.evaluation.scoring import encode_score
from poker_ranker.evaluation.types import HandCategory


class InvalidCategoryState(ValueError):
    """Exception raised when a hand does not meet a scorer's category."""

    pass


def _ranks_with_count(hand: Sequence[Card], count: int) -> list[Rank]:
    """Ranks occurring exactly ``count`` times, highest first."""
    frequencies = rank_frequencies(hand)
    ranks = [rank for rank, n in frequencies.items() if n == count]
    return sorted(ranks, key=rank_value, reverse=True)


def _kickers(hand: Sequence[Card], excluded: Sequence[Rank]) -> list[int]:
    """Values of the cards outside the given ranks, highest first."""
    return sorted(
        (rank_value(card.rank) for card in hand if card.rank not in excluded),
        reverse=True
    )


def _straight_high_value(values: list[int]) -> int:
    """High card of a straight; the wheel plays five-high."""
    if values == WHEEL_VALUES:
        return WHEEL_HIGH_VALUE
    return values[0]


def score_high_card(hand: Sequence[Card]) -> int:
    """Score a high card hand: all five cards, highest first."""
    validate_hand_size(hand)
    values = sorted_values(hand)
    return encode_score(HandCategory.HIGH_CARD, zip(values, TIE_BREAK_SLOTS))


def score_one_pair(hand: Sequence[Card]) -> int:
    """Score a one pair hand: the pair, then three kickers."""
    validate_hand_size(hand)
    pairs = _ranks_with_count(hand, 2)
    if len(pairs) != 1:
        raise InvalidCategoryState('Hand does not contain exactly one pair')

    pair_rank = pairs[0]
    kickers = _kickers(hand, pairs)
    return encode_score(
        HandCategory.ONE_PAIR,
        [(rank_value(pair_rank), 4)] + list(zip(kickers, (2, 1, 0)))
    )


def score_two_pair(hand: Sequence[Card]) -> int:
    """Score a two pair hand: higher pair, lower pair, kicker."""
    validate_hand_size(hand)
    pairs = _ranks_with_count(hand, 2)
    if len(pairs) != 2:
        raise InvalidCategoryState('Hand does not contain exactly two pairs')

    high_pair, low_pair = pairs
    tie_breaks = [(rank_value(high_pair), 4), (rank_value(low_pair), 2)]
    tie_breaks.extend((kicker, 0) for kicker in _kickers(hand, pairs))
    return encode_score(HandCategory.TWO_PAIR, tie_breaks)


def score_three_of_a_kind(hand: Sequence[Card]) -> int:
    """Score three of a kind: the trips, then two kickers."""
    validate_hand_size(hand)
    threes = _ranks_with_count(hand, 3)
    if len(threes) != 1:
        raise InvalidCategoryState('Hand does not contain exactly three of a kind')

    kickers = _kickers(hand, threes)
    return encode_score(
        HandCategory.THREE_OF_A_KIND,
        [(rank_value(threes[0]), 4)] + list(zip(kickers, (2, 1)))
    )


def score_straight(hand: Sequence[Card]) -> int:
    """Score a straight by its high card only."""
    validate_hand_size(hand)
    if not is_straight(hand):
        raise InvalidCategoryState('Hand is not a straight')

    high = _straight_high_value(sorted_values(hand))
    return encode_score(HandCategory.STRAIGHT, [(high, 4)])


def score_flush(hand: Sequence[Card]) -> int:
    """Score a flush: all five cards, highest first."""
    validate_hand_size(hand)
    if not is_same_suit(hand):
        raise InvalidCategoryState('Hand is not a flush')

    values = sorted_values(hand)
    return encode_score(HandCategory.FLUSH, zip(values, TIE_BREAK_SLOTS))


def score_full_house(hand: Sequence[Card]) -> int:
    """Score a full house: the trips, then the pair."""
    validate_hand_size(hand)
    threes = _ranks_with_count(hand, 3)
    pairs = _ranks_with_count(hand, 2)
    if len(threes) != 1 or len(pairs) != 1:
        raise InvalidCategoryState('Hand does not contain a full house')

    return encode_score(
        HandCategory.FULL_HOUSE,
        [(rank_value(threes[0]), 4), (rank_value(pairs[0]), 2)]
    )


def score_four_of_a_kind(hand: Sequence[Card]) -> int:
    """Score four of a kind: the quads, then the kicker."""
    validate_hand_size(hand)
    fours = _ranks_with_count(hand, 4)
    if len(fours) != 1:
        raise InvalidCategoryState('Hand does not contain four of a kind')

    tie_breaks = [(rank_value(fours[0]), 4)]
    tie_breaks.extend((kicker, 2) for kicker in _kickers(hand, fours))
    return encode_score(HandCategory.FOUR_OF_A_KIND, tie_breaks)


def score_straight_flush(hand: Sequence[Card]) -> int:
    """
    Score a straight flush.

    A-K-Q-J-10 of one suit is a royal flush, which has no tie-break: every
    royal flush scores exactly ``ROYAL_FLUSH * SCORE_BASE``.
    """
    validate_hand_size(hand)
    if not (is_same_suit(hand) and is_straight(hand)):
        raise InvalidCategoryState('Hand is not a straight flush')

    values = sorted_values(hand)
    if values == ROYAL_VALUES:
        return encode_score(HandCategory.ROYAL_FLUSH)

    high = _straight_high_value(values)
    return encode_score(HandCategory.STRAIGHT_FLUSH, [(high, 4)])
