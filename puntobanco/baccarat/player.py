"""
A simulated baccarat bettor running a doubling progression.

The bettor guesses Player or Banker at random each round, doubles the stake
after a loss, returns to the minimum after a win and keeps the stake after a
tie. Play stops when the session's shoe is exhausted or the bankroll can no
longer cover the minimum bet.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from puntobanco.baccarat.constants import BETTABLE_SIDES, BetResult, Outcome
from puntobanco.baccarat.game import BaccaratGame, ShoeExhausted
from puntobanco.baccarat.stats import BetStatistics

logger = logging.getLogger(__name__)


@dataclass
class BettingParameters:
    """
    Bankroll and table limits for a bettor.

    Attributes:
        initial_bankroll: Starting bankroll in whole currency units
        minimum_bet: Table minimum, also the progression's base stake
        max_bet: Ceiling on any single stake
    """

    initial_bankroll: int = 500000
    minimum_bet: int = 10
    max_bet: int = 5000000

    def __post_init__(self):
        if self.initial_bankroll < 0:
            raise ValueError("Initial bankroll must be non-negative")
        if self.minimum_bet < 1:
            raise ValueError("Minimum bet must be at least 1")
        if self.max_bet < self.minimum_bet:
            raise ValueError("Maximum bet must not be below the minimum bet")


class BettingPlayer:
    """A bettor playing a doubling progression against one session at a time."""

    def __init__(
        self,
        game: Optional[BaccaratGame],
        params: Optional[BettingParameters] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Creates a new bettor.

        Args:
            game: Session to play against (may be attached later)
            params: Bankroll and bet limits
            rng: Random generator for the Player/Banker guess
        """
        self.params = params or BettingParameters()
        self.game = game
        self.rng = rng if rng is not None else random.Random()

        self.initial_bankroll = self.params.initial_bankroll
        self.bankroll = self.params.initial_bankroll
        self.minimum_bet = self.params.minimum_bet
        self.max_bet = self.params.max_bet
        self.current_bet = self.params.minimum_bet
        self.won_last_hand = True
        self.tied_last_hand = False
        self.statistics = BetStatistics()

    def start_new_game(self, game: BaccaratGame, start_with_minimum_bet: bool = True):
        """
        Attach a fresh session and clear the bet statistics. The bankroll carries over.
        """
        self.game = game
        self.statistics.reset()
        if start_with_minimum_bet:
            self.won_last_hand = True
            self.tied_last_hand = False

    def can_play(self) -> bool:
        return (
            self.game is not None
            and self.game.can_continue
            and self.bankroll >= self.minimum_bet
        )

    def next_bet(self) -> int:
        """
        Size the next stake from the previous result, then apply the limits.

        A win resets to the minimum, a tie keeps the stake, a loss doubles it.
        The stake is capped at the table maximum and then at the bankroll.
        Nothing is committed here; `play_hand` adopts the stake once the
        round has been played.
        """
        if self.won_last_hand:
            bet = self.minimum_bet
        elif self.tied_last_hand:
            bet = self.current_bet
        else:
            bet = self.current_bet * 2

        bet = min(bet, self.max_bet)
        return min(bet, self.bankroll)

    def guess(self) -> Outcome:
        """Back Player or Banker with equal probability."""
        return BETTABLE_SIDES[self.rng.randrange(2)]

    def play_hand(self) -> BetResult:
        """
        Stake, guess, play one round and settle it.

        Raises:
            ValueError: If no game is attached.
            ShoeExhausted: If the session refuses the round; the stake is
                returned and neither the current bet nor the max bet changes.
        """
        if self.game is None:
            raise ValueError("No game attached")

        bet = self.next_bet()
        self.bankroll -= bet
        pick = self.guess()

        try:
            outcome = self.game.play_round().outcome
        except ShoeExhausted:
            self.bankroll += bet
            raise

        self.current_bet = bet
        self.statistics.record_bet(bet)

        if outcome == Outcome.TIE:
            self.bankroll += bet
            self.won_last_hand = False
            self.tied_last_hand = True
            result = BetResult.TIE
        elif outcome == pick:
            self.bankroll += bet * 2
            self.won_last_hand = True
            self.tied_last_hand = False
            result = BetResult.WIN
        else:
            self.won_last_hand = False
            self.tied_last_hand = False
            result = BetResult.LOSS

        self.statistics.record(result)
        logger.debug(
            "Bet %d on %s, round %s: %s, bankroll %d",
            bet,
            pick.value,
            outcome.value,
            result.value,
            self.bankroll,
        )
        return result

    def play_until_stopped(self) -> int:
        """
        Bet round after round until the shoe or the bankroll runs out.

        Returns:
            Number of rounds bet
        """
        rounds = 0
        while self.can_play():
            try:
                self.play_hand()
            except ShoeExhausted:
                break
            rounds += 1

        logger.info(
            "Stopped after %d rounds, bankroll %d (%s)",
            rounds,
            self.bankroll,
            "shoe exhausted" if self.bankroll >= self.minimum_bet else "out of money",
        )
        return rounds

    def __repr__(self) -> str:
        return (
            f"BettingPlayer(bankroll={self.bankroll}, current_bet={self.current_bet}, "
            f"minimum_bet={self.minimum_bet}, max_bet={self.max_bet})"
        )


def new_player(
    session: BaccaratGame,
    initial_bankroll: int,
    minimum_bet: int,
    max_bet: int,
    rng: Optional[random.Random] = None,
) -> BettingPlayer:
    """Create a bettor bound to ``session``."""
    params = BettingParameters(
        initial_bankroll=initial_bankroll, minimum_bet=minimum_bet, max_bet=max_bet
    )
    return BettingPlayer(session, params, rng)


def play_until_stopped(player: BettingPlayer) -> int:
    """Run ``player``'s betting loop to termination."""
    return player.play_until_stopped()
