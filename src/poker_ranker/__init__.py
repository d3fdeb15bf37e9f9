"""Five-card poker hand scoring package."""

from poker_ranker.core.card import Card, Rank, Suit
from poker_ranker.core.hand import InvalidHandSize, parse_hand
from poker_ranker.evaluation.evaluator import HandEvaluator, evaluate_hand, evaluate_hands
from poker_ranker.evaluation.scorers import InvalidCategoryState
from poker_ranker.evaluation.types import HandCategory, HandResult

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "InvalidHandSize",
    "parse_hand",
    "HandEvaluator",
    "evaluate_hand",
    "evaluate_hands",
    "InvalidCategoryState",
    "HandCategory",
    "HandResult",
]
