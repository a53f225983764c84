"""
Baccarat game engine.

Implements a single Baccarat session: one shoe dealt round by round through
the initial deal, the natural check, the Player and Banker third-card rules,
and settlement, until the shoe is down to its reserve.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from puntobanco.baccarat.constants import Outcome
from puntobanco.baccarat.hand import BaccaratHand
from puntobanco.baccarat.rules import (
    BaccaratRules,
    banker_draws_third_card,
    player_draws_third_card,
)
from puntobanco.baccarat.stats import GameStatistics
from puntobanco.common.shoe import Shoe, build_shoe

logger = logging.getLogger(__name__)


class ShoeExhausted(Exception):
    """Raised when a round is requested from a shoe that is down to its reserve."""

    pass


class RoundState(Enum):
    """Steps a round passes through."""
    READY = auto()
    DEALT = auto()
    NATURAL_SETTLED = auto()
    PLAYER_DECIDED = auto()
    BANKER_DECIDED = auto()
    SETTLED = auto()


@dataclass
class RoundResult:
    """Result of a Baccarat round."""
    outcome: Outcome
    score: int  # Winning total, or the tied total
    player_value: int
    banker_value: int
    player_cards: int  # Number of cards in Player hand
    banker_cards: int  # Number of cards in Banker hand
    player_natural: bool
    banker_natural: bool
    player_third_card: Optional[int] = None


class BaccaratGame:
    """
    One Baccarat session, owning its shoe for its whole life.

    Handles gating, dealing, drawing rules, outcome determination and the
    game-level statistics.
    """

    def __init__(
        self,
        rules: Optional[BaccaratRules] = None,
        shoe: Optional[Shoe] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Baccarat session.

        Args:
            rules: Session rules configuration
            shoe: A prepared shoe, dealt as-is. When omitted, a shoe is built
                from the rules, shuffled and burned.
            rng: Random generator for the shuffle of a freshly built shoe
        """
        self.rules = rules if rules else BaccaratRules()

        if shoe is not None:
            self.shoe = shoe
        else:
            self.shoe = build_shoe(self.rules.num_decks, rng)
            self.shoe.shuffle()
            if self.rules.burn:
                self.shoe.burn()

        self.player_hand = BaccaratHand()
        self.banker_hand = BaccaratHand()
        self.state = RoundState.READY
        self.statistics = GameStatistics()
        self.can_continue = self._shoe_can_support_round()

        logger.info(
            "New session: %d cards in shoe, %d burned",
            self.shoe.cards_remaining,
            len(self.shoe.burned_cards),
        )

    def _shoe_can_support_round(self) -> bool:
        return self.shoe.decks_remaining > self.rules.reserve_decks

    def reset_hands(self):
        """Reset hands for a new round."""
        self.player_hand = BaccaratHand()
        self.banker_hand = BaccaratHand()
        self.state = RoundState.READY

    def deal_initial_cards(self):
        """
        Deal initial four cards (2 to Player, 2 to Banker).

        Order: Player, Banker, Player, Banker
        """
        self.player_hand.add_card(self.shoe.draw())
        self.banker_hand.add_card(self.shoe.draw())
        self.player_hand.add_card(self.shoe.draw())
        self.banker_hand.add_card(self.shoe.draw())
        self.state = RoundState.DEALT

    def apply_drawing_rules(self):
        """
        Apply Baccarat drawing rules to determine if third cards are needed.

        1. Check for naturals (8 or 9) - no more cards dealt
        2. Determine if Player draws third card
        3. Determine if Banker draws third card (depends on Player's draw)
        """
        if self.player_hand.is_natural() or self.banker_hand.is_natural():
            self.state = RoundState.NATURAL_SETTLED
            return

        player_drew = False
        if player_draws_third_card(self.player_hand.value()):
            self.player_hand.add_card(self.shoe.draw())
            player_drew = True
        self.state = RoundState.PLAYER_DECIDED

        if banker_draws_third_card(
            self.banker_hand.value(), player_drew, self.player_hand.third_card_value()
        ):
            self.banker_hand.add_card(self.shoe.draw())
        self.state = RoundState.BANKER_DECIDED

    def determine_outcome(self) -> Outcome:
        """
        Determine the outcome of the round.

        Returns:
            Outcome enum value
        """
        player_value = self.player_hand.value()
        banker_value = self.banker_hand.value()

        if player_value > banker_value:
            return Outcome.PLAYER_WIN
        elif banker_value > player_value:
            return Outcome.BANKER_WIN
        else:
            return Outcome.TIE

    def play_round(self) -> RoundResult:
        """
        Play a complete round of Baccarat.

        Returns:
            The settled RoundResult

        Raises:
            ShoeExhausted: If the shoe is down to its reserve. No card is drawn.
        """
        if not self.can_continue or not self._shoe_can_support_round():
            self.can_continue = False
            raise ShoeExhausted(
                f"Shoe is down to {self.shoe.cards_remaining} cards, no further rounds"
            )

        self.reset_hands()
        self.deal_initial_cards()
        player_natural = self.player_hand.is_natural()
        banker_natural = self.banker_hand.is_natural()
        self.apply_drawing_rules()

        outcome = self.determine_outcome()
        self.state = RoundState.SETTLED
        self.statistics.record(outcome)

        player_value = self.player_hand.value()
        banker_value = self.banker_hand.value()
        result = RoundResult(
            outcome=outcome,
            score=banker_value if outcome == Outcome.BANKER_WIN else player_value,
            player_value=player_value,
            banker_value=banker_value,
            player_cards=self.player_hand.card_count(),
            banker_cards=self.banker_hand.card_count(),
            player_natural=player_natural,
            banker_natural=banker_natural,
            player_third_card=self.player_hand.third_card_value(),
        )

        self.can_continue = self._shoe_can_support_round()
        logger.debug(
            "Round %d: Player %s, Banker %s -> %s",
            self.statistics.total_hands,
            self.player_hand,
            self.banker_hand,
            outcome.value,
        )
        return result

    def __str__(self) -> str:
        return f"Baccarat Game: {self.statistics.total_hands} rounds played"

    def __repr__(self) -> str:
        return (
            f"BaccaratGame(rounds={self.statistics.total_hands}, "
            f"P:{self.statistics.player_win_count}, "
            f"B:{self.statistics.banker_win_count}, "
            f"T:{self.statistics.tie_count})"
        )


def new_session(
    num_decks: int = 6, rng: Optional[random.Random] = None, seed: Optional[int] = None
) -> BaccaratGame:
    """
    Build, shuffle and burn a shoe and open a session on it.

    Args:
        num_decks: Number of decks in the shoe
        rng: Random generator for the shuffle (takes precedence over seed)
        seed: Seed for a new generator, for reproducible sessions
    """
    if rng is None:
        rng = random.Random(seed)
    return BaccaratGame(rules=BaccaratRules(num_decks=num_decks), rng=rng)


def play_round(session: BaccaratGame) -> Tuple[Outcome, int]:
    """Play one round and return its outcome with the winning or tied total."""
    result = session.play_round()
    return result.outcome, result.score
