"""Score encoding shared by all hand scorers.

A score is ``category * SCORE_BASE`` plus one rank value per tie-break slot,
each weighted by ``SLOT_WIDTH ** slot``. Comparing scores numerically is the
same as comparing (category, tie-break values) lexicographically.
"""
from collections.abc import Iterable

from poker_ranker.evaluation.constants import SCORE_BASE, SLOT_WIDTH, TIE_BREAK_SLOTS
from poker_ranker.evaluation.types import HandCategory


def slot_weight(slot: int) -> int:
    """Multiplier for a tie-break slot (slot 4 -> 10^8, slot 0 -> 1)."""
    return SLOT_WIDTH ** slot


def encode_score(category: HandCategory, tie_breaks: Iterable[tuple[int, int]] = ()) -> int:
    """
    Build a score from a category and its tie-breaks.

    Args:
        category: Hand category
        tie_breaks: (rank value, slot) pairs

    Returns:
        Integer score
    """
    score = category * SCORE_BASE
    for value, slot in tie_breaks:
        score += value * slot_weight(slot)
    return score


def decode_score(score: int) -> tuple[HandCategory, list[int]]:
    """
    Split a score back into its category and tie-break slot values.

    Returns:
        The category and the five slot values, most significant first.
        Unused slots are 0.

    Raises:
        ValueError: If the score does not encode a known category
    """
    if score < 0:
        raise ValueError(f"Invalid score: {score}")

    category, remainder = divmod(score, SCORE_BASE)
    values = [(remainder // slot_weight(slot)) % SLOT_WIDTH for slot in TIE_BREAK_SLOTS]
    return HandCategory(category), values


def category_of(score: int) -> HandCategory:
    """Category encoded in a score."""
    return decode_score(score)[0]
