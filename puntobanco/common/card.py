"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Spades, Hearts, Diamonds, and Clubs.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Ace through King. Each rank knows its baccarat pip value.

- `Card`: An immutable playing card. A card has a suit and a rank, and exposes
the pip value used for scoring and for the burn procedure.

This module is part of the `puntobanco` package, a baccarat simulator.
"""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, ordered Ace (1) through King (13).
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def pip_value(self) -> int:
        """Ace counts 1, tens and court cards count 10, the rest their number."""
        return min(self.value, 10)

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        if self in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING):
            return self.name[0]
        return str(self.value)

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card. Cards never change once built.

    >>> card = Card(Suit.HEARTS, Rank.KING)
    >>> print(card)
    K of ♥
    >>> card.pip_value
    10
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    @property
    def pip_value(self) -> int:
        """The card's counting value: 1 for an Ace, 10 for tens and court cards."""
        return self.rank.pip_value

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"{self.rank.rank_str} of {self.suit}"
