"""Human-readable descriptions of poker hands."""
from collections.abc import Sequence

from poker_ranker.core.card import Card, Rank
from poker_ranker.evaluation.evaluator import HandEvaluator, evaluator
from poker_ranker.evaluation.scoring import decode_score
from poker_ranker.evaluation.types import HandCategory


class HandDescriber:
    """Generates human-readable descriptions for poker hands.

    Descriptions are read back from the hand's score, so they name exactly
    the ranks that decide ties (a wheel is described as five-high).
    """

    def __init__(self, hand_evaluator: HandEvaluator | None = None):
        """Initialize with the evaluator used to score hands."""
        self.evaluator = hand_evaluator or evaluator

    def describe_hand(self, cards: Sequence[Card]) -> str:
        """Get a basic description of the hand, e.g. 'Full House'."""
        return self.evaluator.classify(cards).display_name

    def describe_hand_detailed(self, cards: Sequence[Card]) -> str:
        """Get a detailed description of the hand, e.g. 'Full House, Aces over Kings'."""
        return self.describe_score(self.evaluator.evaluate_hand(cards))

    def describe_score(self, score: int) -> str:
        """Get a detailed description of a hand from its score."""
        category, values = decode_score(score)
        # Slot 4 holds the defining rank for every category, slot 2 the
        # second group of two pair and full house.
        primary = Rank.from_value(values[0]) if values[0] else None
        secondary = Rank.from_value(values[2]) if values[2] else None

        if category == HandCategory.ROYAL_FLUSH:
            return "Royal Flush"
        elif category == HandCategory.STRAIGHT_FLUSH:
            return f"{primary.full_name}-high Straight Flush"
        elif category == HandCategory.FOUR_OF_A_KIND:
            return f"Four {primary.plural_name}"
        elif category == HandCategory.FULL_HOUSE:
            return f"Full House, {primary.plural_name} over {secondary.plural_name}"
        elif category == HandCategory.FLUSH:
            return f"{primary.full_name}-high Flush"
        elif category == HandCategory.STRAIGHT:
            return f"{primary.full_name}-high Straight"
        elif category == HandCategory.THREE_OF_A_KIND:
            return f"Three {primary.plural_name}"
        elif category == HandCategory.TWO_PAIR:
            return f"Two Pair, {primary.plural_name} and {secondary.plural_name}"
        elif category == HandCategory.ONE_PAIR:
            return f"Pair of {primary.plural_name}"
        return f"{primary.full_name} High"
