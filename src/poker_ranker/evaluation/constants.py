"""Constants for poker hand scoring."""
from poker_ranker.core.hand import WHEEL_VALUES  # noqa: F401

# Category ordinal multiplier. The largest tie-break (ace in every slot) is
# 1414141414, so categories never overlap.
SCORE_BASE = 10 ** 14

# Each tie-break slot holds one rank value (2-14) in two decimal digits.
SLOT_WIDTH = 100

# Tie-break slots, most significant first.
TIE_BREAK_SLOTS = (4, 3, 2, 1, 0)

# Sorted (descending) rank values of a royal flush
ROYAL_VALUES = [14, 13, 12, 11, 10]

# The ace plays low in the wheel, so it ranks as a five-high straight
WHEEL_HIGH_VALUE = 5
