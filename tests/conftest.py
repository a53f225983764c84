"""
Pytest configuration shared by the test suite.

Provides helpers for building shoes with a known card order, so that a round
can be dealt exactly as a test expects.
"""

import random

import pytest

from puntobanco.baccarat.game import BaccaratGame
from puntobanco.baccarat.rules import BaccaratRules
from puntobanco.common.card import Card, Rank, Suit
from puntobanco.common.shoe import Shoe

# Enough ten-value cards behind the stacked ones to keep the shoe above one deck
FILLER_CARDS = 60


def stacked_cards(*ranks: Rank, filler: int = FILLER_CARDS):
    """Cards for the given ranks, front first, followed by ten-value filler."""
    cards = [Card(Suit.SPADES, rank) for rank in ranks]
    cards.extend(Card(Suit.CLUBS, Rank.KING) for _ in range(filler))
    return cards


@pytest.fixture
def stacked_shoe():
    """Factory fixture: ``stacked_shoe(Rank.TWO, ...)`` returns an unshuffled shoe."""

    def _make(*ranks: Rank, filler: int = FILLER_CARDS) -> Shoe:
        return Shoe(cards=stacked_cards(*ranks, filler=filler))

    return _make


@pytest.fixture
def stacked_game(stacked_shoe):
    """Factory fixture returning a session dealt from a stacked shoe."""

    def _make(*ranks: Rank, filler: int = FILLER_CARDS) -> BaccaratGame:
        return BaccaratGame(rules=BaccaratRules(), shoe=stacked_shoe(*ranks, filler=filler))

    return _make


@pytest.fixture
def rng():
    """A seeded generator for reproducible tests."""
    return random.Random(1234)
