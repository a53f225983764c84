"""
Baccarat hand implementation.

In Baccarat, hand values are calculated differently than blackjack:
- Aces count 1, cards 2-9 count face value
- 10, J, Q, K count 10, which drops out of the total
- Only the rightmost digit of the sum counts (17 = 7, 23 = 3)
"""

from typing import Iterable, List, Optional

from puntobanco.common.card import Card


def score(cards: Iterable[Card]) -> int:
    """Sum of pip values modulo 10."""
    return sum(card.pip_value for card in cards) % 10


class BaccaratHand:
    """Represents the Player or Banker hand of one round."""

    def __init__(self):
        self.cards: List[Card] = []

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def value(self) -> int:
        """
        Calculate the value of the hand.

        Returns:
            Hand value (0-9)
        """
        return score(self.cards)

    def is_natural(self) -> bool:
        """
        Check if this is a natural hand (8 or 9 on the first two cards).

        Returns:
            True if natural, False otherwise
        """
        return len(self.cards) == 2 and self.value() in (8, 9)

    def card_count(self) -> int:
        return len(self.cards)

    def third_card_value(self) -> Optional[int]:
        """
        Get the pip value of the third card, used by the Banker drawing rules.

        Returns:
            Pip value of the third card (1-10), or None if there is none
        """
        if len(self.cards) >= 3:
            return self.cards[2].pip_value
        return None

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards)
        return f"[{cards_str}] = {self.value()}"

    def __repr__(self) -> str:
        return f"BaccaratHand(cards={self.cards}, value={self.value()})"
