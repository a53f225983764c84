"""
This module contains the Deck class, which represents one 52-card deck.

The canonical order is a static table (suits Spades, Hearts, Diamonds, Clubs,
each running Ace through King) so that an unshuffled shoe always enumerates
the same way.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Suit.SPADES, Rank.ACE)
>>> deck.size
51
"""

from typing import List, Optional, Tuple

from puntobanco.common.card import Card, Rank, Suit

SUIT_ORDER: Tuple[Suit, ...] = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)

RANK_ORDER: Tuple[Rank, ...] = (
    Rank.ACE,
    Rank.TWO,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
)

# (suit, rank, pip value) for every card of one deck, in canonical order
DECK_TABLE: Tuple[Tuple[Suit, Rank, int], ...] = tuple(
    (suit, rank, rank.pip_value) for suit in SUIT_ORDER for rank in RANK_ORDER
)

CARDS_PER_DECK = len(DECK_TABLE)


class Deck:
    """
    A class representing a single deck of cards.
    """

    # Precompute the default deck
    _default_deck = [Card(suit, rank) for suit, rank, _ in DECK_TABLE]

    def __init__(self, cards: Optional[List[Card]] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, the canonical 52-card deck is used.
        """
        if cards is None:
            self.cards: List[Card] = self._default_deck.copy()
        else:
            self.cards = cards.copy()

    def deal(self) -> Card:
        """
        Take the top card off the deck.

        :return: The first card of the deck.
        :raises IndexError: If the deck is empty.
        """
        return self.cards.pop(0)

    @property
    def size(self) -> int:
        """Return the number of remaining cards in the deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if the deck is empty."""
        return len(self.cards) == 0

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
