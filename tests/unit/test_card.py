"""Tests for card module."""
import dataclasses

import pytest
from poker_ranker.core.card import (
    Card, Rank, Suit, rank_of, rank_value, suit_of
)


def test_card_creation():
    """Test basic card creation."""
    card = Card(Rank.ACE, Suit.SPADES)
    assert card.rank == Rank.ACE
    assert card.suit == Suit.SPADES
    assert rank_of(card) == Rank.ACE
    assert suit_of(card) == Suit.SPADES


def test_card_string_representation():
    """Test string conversion of cards."""
    assert str(Card(Rank.ACE, Suit.SPADES)) == "As"
    assert str(Card(Rank.TEN, Suit.HEARTS)) == "Th"


def test_card_equality_and_hashing():
    """Cards compare by rank and suit and can be used in sets."""
    card1 = Card(Rank.ACE, Suit.SPADES)
    card2 = Card(Rank.ACE, Suit.SPADES)
    card3 = Card(Rank.ACE, Suit.HEARTS)

    assert card1 == card2
    assert card1 != card3
    assert card1 != "As"
    assert len({card1, card2, card3}) == 2


def test_card_is_immutable():
    card = Card(Rank.ACE, Suit.SPADES)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.rank = Rank.KING


@pytest.mark.parametrize("rank,expected", [
    (Rank.TWO, 2),
    (Rank.FIVE, 5),
    (Rank.NINE, 9),
    (Rank.TEN, 10),
    (Rank.JACK, 11),
    (Rank.QUEEN, 12),
    (Rank.KING, 13),
    (Rank.ACE, 14),
])
def test_rank_value(rank, expected):
    """Face ranks map to 11-14, numerals to themselves."""
    assert rank_value(rank) == expected
    assert rank.numeric_value == expected
    assert Rank.from_value(expected) == rank


def test_every_rank_has_a_value():
    assert sorted(rank_value(r) for r in Rank) == list(range(2, 15))


@pytest.mark.parametrize("value", [0, 1, 15])
def test_rank_from_invalid_value(value):
    with pytest.raises(ValueError):
        Rank.from_value(value)


def test_rank_names():
    assert Rank.ACE.full_name == "Ace"
    assert Rank.SIX.plural_name == "Sixes"
    assert Rank.TEN.plural_name == "Tens"


@pytest.mark.parametrize("card_str,expected_rank,expected_suit", [
    ("As", Rank.ACE, Suit.SPADES),
    ("2h", Rank.TWO, Suit.HEARTS),
    ("Td", Rank.TEN, Suit.DIAMONDS),
    ("10d", Rank.TEN, Suit.DIAMONDS),
    ("Kc", Rank.KING, Suit.CLUBS),
    ("Q♥", Rank.QUEEN, Suit.HEARTS),
])
def test_card_from_string(card_str, expected_rank, expected_suit):
    """Test creating cards from the standard notation."""
    card = Card.from_string(card_str)
    assert card.rank == expected_rank
    assert card.suit == expected_suit


@pytest.mark.parametrize("card_str,expected_rank,expected_suit", [
    ("♦a", Rank.ACE, Suit.DIAMONDS),
    ("♥r", Rank.KING, Suit.HEARTS),
    ("♠d", Rank.QUEEN, Suit.SPADES),
    ("♣v", Rank.JACK, Suit.CLUBS),
    ("♦10", Rank.TEN, Suit.DIAMONDS),
    ("♠7", Rank.SEVEN, Suit.SPADES),
])
def test_card_from_french_string(card_str, expected_rank, expected_suit):
    """The french notation writes the suit first and uses a/r/d/v faces."""
    card = Card.from_string(card_str, notation="french")
    assert card.rank == expected_rank
    assert card.suit == expected_suit


@pytest.mark.parametrize("invalid_str", [
    "",           # Empty string
    "A",          # Missing suit
    "AsH",        # Too long
    "Xs",         # Invalid rank
    "Ax",         # Invalid suit
    "1s",         # Partial ten
    "♦a",         # French card in standard notation
])
def test_card_from_string_invalid(invalid_str):
    """Test error handling for invalid card strings."""
    with pytest.raises(ValueError):
        Card.from_string(invalid_str)


@pytest.mark.parametrize("card_str", ["as", "AS", "As", "aS"])
def test_card_from_string_case_insensitivity(card_str):
    """Test that from_string is case-insensitive."""
    card = Card.from_string(card_str)
    assert card.rank == Rank.ACE
    assert card.suit == Suit.SPADES


def test_card_from_string_unknown_notation():
    with pytest.raises(ValueError, match="Unknown card notation"):
        Card.from_string("As", notation="klingon")
