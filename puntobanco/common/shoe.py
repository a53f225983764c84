"""
A multi-deck baccarat shoe.

The shoe is filled with ``num_decks`` canonical decks, shuffled once as a
single pool, burned, and then dealt from the front until the session ends.
It is never reshuffled; a new session builds a new shoe.
"""

import logging
import math
import random
from typing import List, Optional

from puntobanco.common.card import Card
from puntobanco.common.deck import CARDS_PER_DECK, Deck

logger = logging.getLogger(__name__)


class ShoeEmpty(Exception):
    """Raised when a card is drawn from a shoe with no cards left."""

    pass


class Shoe:
    def __init__(
        self,
        num_decks: int = 6,
        rng: Optional[random.Random] = None,
        cards: Optional[List[Card]] = None,
        cards_per_deck: int = CARDS_PER_DECK,
    ):
        """
        Initialize a Shoe instance.

        :param num_decks: Number of decks to use in the shoe (default is 6)
        :param rng: Random generator used for shuffling. A fresh, independently
                    seeded generator is created when omitted.
        :param cards: Explicit card order for the shoe (optional). When given,
                      the shoe holds exactly these cards, front first.
        :param cards_per_deck: Size of one deck, used for deck accounting
        """
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if cards_per_deck < 1:
            raise ValueError("Cards per deck must be at least 1")

        self.num_decks = num_decks
        self.cards_per_deck = cards_per_deck
        self.rng = rng if rng is not None else random.Random()
        self.burned_cards: List[Card] = []
        self.next_card_index = 0

        if cards is None:
            self.cards: List[Card] = []
            for _ in range(num_decks):
                self.cards.extend(Deck().cards)
        else:
            self.cards = list(cards)

        self.total_cards = len(self.cards)

    def shuffle(self):
        """Shuffle every undealt card as one combined pool."""
        undealt = self.cards[self.next_card_index:]
        self.rng.shuffle(undealt)
        self.cards[self.next_card_index:] = undealt
        logger.debug("Shuffled %d cards", len(undealt))
        return self

    def draw(self) -> Card:
        """
        Remove and return the front card of the shoe.

        :raises ShoeEmpty: If no cards remain.
        """
        if self.next_card_index >= self.total_cards:
            raise ShoeEmpty("Cannot draw from an empty shoe")
        card = self.cards[self.next_card_index]
        self.next_card_index += 1
        return card

    def burn(self) -> List[Card]:
        """
        Expose the front card and discard as many further cards as its pip value.

        :return: Every card taken out of play, the exposed card first.
        """
        first = self.draw()
        burned = [first]
        for _ in range(first.pip_value):
            burned.append(self.draw())
        self.burned_cards = burned
        logger.debug("Burn card %s, discarded %d more", first, first.pip_value)
        return burned.copy()

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining in the shoe."""
        return self.total_cards - self.next_card_index

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards drawn so far, burn included."""
        return self.next_card_index

    @property
    def decks_remaining(self) -> int:
        """Deck slots that still hold at least one undealt card."""
        return math.ceil(self.cards_remaining / self.cards_per_deck)

    def is_empty(self) -> bool:
        return self.cards_remaining == 0

    def remaining_cards(self) -> List[Card]:
        """Return a copy of the undealt cards, front first."""
        return self.cards[self.next_card_index:]

    def __str__(self) -> str:
        return f"Shoe with {self.cards_remaining} cards remaining"

    def __repr__(self) -> str:
        return f"Shoe(num_decks={self.num_decks}, cards_remaining={self.cards_remaining})"


def build_shoe(num_decks: int = 6, rng: Optional[random.Random] = None) -> Shoe:
    """Build an unshuffled shoe of ``num_decks`` canonical decks."""
    return Shoe(num_decks=num_decks, rng=rng)
