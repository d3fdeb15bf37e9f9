"""Main poker hand evaluation interface."""
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import logging

from poker_ranker.core.card import Card
from poker_ranker.core.hand import (
    is_same_suit, is_straight, rank_frequencies, validate_hand_size
)
from poker_ranker.evaluation.scorers import (
    score_flush,
    score_four_of_a_kind,
    score_full_house,
    score_high_card,
    score_one_pair,
    score_straight,
    score_straight_flush,
    score_three_of_a_kind,
    score_two_pair,
)
from poker_ranker.evaluation.scoring import category_of
from poker_ranker.evaluation.types import HandCategory, HandResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandShape:
    """
    Features of a hand that decide its category.

    Attributes:
        quads: Number of ranks occurring exactly four times
        trips: Number of ranks occurring exactly three times
        pairs: Number of ranks occurring exactly twice
        same_suit: Whether all cards share one suit
        straight: Whether the cards form a straight (wheel included)
    """
    quads: int
    trips: int
    pairs: int
    same_suit: bool
    straight: bool

    @classmethod
    def from_hand(cls, hand: Sequence[Card]) -> 'HandShape':
        """Compute the shape of a five-card hand."""
        counts = list(rank_frequencies(hand).values())
        return cls(
            quads=counts.count(4),
            trips=counts.count(3),
            pairs=counts.count(2),
            same_suit=is_same_suit(hand),
            straight=is_straight(hand),
        )


@dataclass(frozen=True)
class CategoryRule:
    """
    One entry of the classification table.

    Attributes:
        category: Category the rule detects. The straight flush rule also
                  produces royal flushes through its scorer.
        matches: Predicate on the hand's shape
        scorer: Scorer for hands matching the rule
    """
    category: HandCategory
    matches: Callable[[HandShape], bool]
    scorer: Callable[[Sequence[Card]], int]


# Checked in order; the first matching rule wins. A hand can satisfy several
# predicates (every straight flush is also a flush), so order is significant.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(HandCategory.STRAIGHT_FLUSH, lambda s: s.same_suit and s.straight, score_straight_flush),
    CategoryRule(HandCategory.FOUR_OF_A_KIND, lambda s: s.quads == 1, score_four_of_a_kind),
    CategoryRule(HandCategory.FULL_HOUSE, lambda s: s.trips == 1 and s.pairs == 1, score_full_house),
    CategoryRule(HandCategory.FLUSH, lambda s: s.same_suit, score_flush),
    CategoryRule(HandCategory.STRAIGHT, lambda s: s.straight, score_straight),
    CategoryRule(HandCategory.THREE_OF_A_KIND, lambda s: s.trips == 1, score_three_of_a_kind),
    CategoryRule(HandCategory.TWO_PAIR, lambda s: s.pairs == 2, score_two_pair),
    CategoryRule(HandCategory.ONE_PAIR, lambda s: s.pairs == 1, score_one_pair),
    CategoryRule(HandCategory.HIGH_CARD, lambda s: True, score_high_card),
)


class HandEvaluator:
    """
    Scores five-card poker hands.

    Higher scores beat lower scores and equal scores are exact ties, so
    hands can be ordered by sorting on their scores.
    """

    def __init__(self, rules: Iterable[CategoryRule] = CATEGORY_RULES):
        """
        Initialize evaluator.

        Args:
            rules: Classification table, strongest category first. The last
                   rule must match every hand.
        """
        self.rules = tuple(rules)

    def find_rule(self, hand: Sequence[Card]) -> CategoryRule:
        """
        Find the first rule matching a hand.

        Raises:
            InvalidHandSize: If the hand does not hold exactly five cards
            ValueError: If no rule matches
        """
        validate_hand_size(hand)
        shape = HandShape.from_hand(hand)
        for rule in self.rules:
            if rule.matches(shape):
                return rule
        raise ValueError(f"No category rule matches hand {[str(c) for c in hand]}")

    def evaluate_hand(self, hand: Sequence[Card]) -> int:
        """
        Classify and score one hand.

        Args:
            hand: Five cards, in any order

        Returns:
            Integer score

        Raises:
            InvalidHandSize: If the hand does not hold exactly five cards
        """
        rule = self.find_rule(hand)
        score = rule.scorer(hand)
        logger.debug(f"Hand {[str(c) for c in hand]} scored {score} ({category_of(score).display_name})")
        return score

    def evaluate(self, hand: Sequence[Card]) -> HandResult:
        """Evaluate one hand, returning its category and score together."""
        score = self.evaluate_hand(hand)
        return HandResult(category=category_of(score), score=score, cards=tuple(hand))

    def classify(self, hand: Sequence[Card]) -> HandCategory:
        """Category of a hand."""
        return category_of(self.evaluate_hand(hand))

    def evaluate_hands(self, hands: Iterable[Sequence[Card]]) -> list[tuple[list[Card], int]]:
        """
        Score a batch of hands.

        Args:
            hands: Hands to evaluate

        Returns:
            (hand, score) pairs in input order. The batch is not sorted.
        """
        results = [(list(hand), self.evaluate_hand(hand)) for hand in hands]
        logger.debug(f"Evaluated {len(results)} hands")
        return results

    def compare_hands(self, hand1: Sequence[Card], hand2: Sequence[Card]) -> int:
        """
        Compare two poker hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie
        """
        score1 = self.evaluate_hand(hand1)
        score2 = self.evaluate_hand(hand2)
        if score1 == score2:
            return 0
        return 1 if score1 > score2 else -1


# Global evaluator instance
evaluator = HandEvaluator()


def evaluate_hand(hand: Sequence[Card]) -> int:
    """Convenience function to score one hand."""
    return evaluator.evaluate_hand(hand)


def evaluate_hands(hands: Iterable[Sequence[Card]]) -> list[tuple[list[Card], int]]:
    """Convenience function to score a batch of hands."""
    return evaluator.evaluate_hands(hands)
