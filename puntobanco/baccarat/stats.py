"""
This module contains the statistics trackers for baccarat simulations.

Two trackers share one shape: `GameStatistics` follows the raw outcome of
each round (Player, Banker, Tie) and `BetStatistics` follows the bettor's
result (Win, Loss, Tie). Both keep running counts, current and maximum
streaks per category, and derive percentages on demand.

A percentage over zero recorded hands is undefined and is reported as
``None`` rather than as a float NaN.
"""

from typing import Any, Dict, Hashable, Optional, Sequence

from puntobanco.baccarat.constants import (
    BET_CATEGORIES,
    GAME_CATEGORIES,
    BetResult,
    Outcome,
)


class StreakStatistics:
    """
    Counts and streaks over a fixed, ordered set of three categories.

    A streak extends only when a category repeats the immediately preceding
    one. Any other category starts its own streak at 1 and zeroes the current
    streaks of the other categories; a tie therefore breaks a win streak, and
    only a tie following a tie extends the tie streak. The max streak is
    raised only when a streak is extended, so an outcome that never repeats
    back to back leaves its max streak at 0.
    """

    def __init__(self, categories: Sequence[Hashable]):
        if len(set(categories)) != len(categories):
            raise ValueError("Categories must be distinct")
        self.categories = tuple(categories)
        self.reset()

    def reset(self):
        """Clear every count and streak."""
        self.total_hands = 0
        self.counts: Dict[Hashable, int] = {c: 0 for c in self.categories}
        self.current_streaks: Dict[Hashable, int] = {c: 0 for c in self.categories}
        self.max_streaks: Dict[Hashable, int] = {c: 0 for c in self.categories}
        self.last_category: Optional[Hashable] = None

    def record(self, category: Hashable) -> None:
        """Record one hand whose result falls in ``category``."""
        if category not in self.counts:
            raise ValueError(f"Unknown category: {category}")

        self.total_hands += 1
        self.counts[category] += 1

        if category == self.last_category:
            self.current_streaks[category] += 1
            if self.current_streaks[category] > self.max_streaks[category]:
                self.max_streaks[category] = self.current_streaks[category]
        else:
            for other in self.categories:
                self.current_streaks[other] = 0
            self.current_streaks[category] = 1
            self.last_category = category

    def count(self, category: Hashable) -> int:
        return self.counts[category]

    def current_streak(self, category: Hashable) -> int:
        return self.current_streaks[category]

    def max_streak(self, category: Hashable) -> int:
        return self.max_streaks[category]

    def percentage(self, category: Hashable) -> Optional[float]:
        """
        Share of recorded hands that fell in ``category``.

        Returns:
            A fraction in [0, 1], or None when no hands have been recorded.
        """
        if self.total_hands == 0:
            return None
        return self.counts[category] / self.total_hands

    def report(self) -> Dict[str, Any]:
        """
        Returns a dictionary containing the current statistics.
        """
        report: Dict[str, Any] = {"total_hands": self.total_hands}
        for category in self.categories:
            name = getattr(category, "value", str(category))
            report[f"{name}_count"] = self.counts[category]
            report[f"{name}_current_streak"] = self.current_streaks[category]
            report[f"{name}_max_streak"] = self.max_streaks[category]
            report[f"{name}_percentage"] = self.percentage(category)
        return report


class GameStatistics(StreakStatistics):
    """Running statistics over raw round outcomes."""

    def __init__(self):
        super().__init__(GAME_CATEGORIES)

    @property
    def player_win_count(self) -> int:
        return self.counts[Outcome.PLAYER_WIN]

    @property
    def banker_win_count(self) -> int:
        return self.counts[Outcome.BANKER_WIN]

    @property
    def tie_count(self) -> int:
        return self.counts[Outcome.TIE]

    @property
    def player_current_streak(self) -> int:
        return self.current_streaks[Outcome.PLAYER_WIN]

    @property
    def banker_current_streak(self) -> int:
        return self.current_streaks[Outcome.BANKER_WIN]

    @property
    def tie_current_streak(self) -> int:
        return self.current_streaks[Outcome.TIE]

    @property
    def player_max_streak(self) -> int:
        return self.max_streaks[Outcome.PLAYER_WIN]

    @property
    def banker_max_streak(self) -> int:
        return self.max_streaks[Outcome.BANKER_WIN]

    @property
    def tie_max_streak(self) -> int:
        return self.max_streaks[Outcome.TIE]

    def get_player_win_percentage(self) -> Optional[float]:
        return self.percentage(Outcome.PLAYER_WIN)

    def get_banker_win_percentage(self) -> Optional[float]:
        return self.percentage(Outcome.BANKER_WIN)

    def get_tie_percentage(self) -> Optional[float]:
        return self.percentage(Outcome.TIE)


class BetStatistics(StreakStatistics):
    """Running statistics over one bettor's results, plus the largest stake."""

    def __init__(self):
        super().__init__(BET_CATEGORIES)

    def reset(self):
        super().reset()
        self.max_bet = 0

    def record_bet(self, amount: int) -> None:
        """Remember ``amount`` if it is the largest stake seen so far."""
        if amount > self.max_bet:
            self.max_bet = amount

    @property
    def win_count(self) -> int:
        return self.counts[BetResult.WIN]

    @property
    def loss_count(self) -> int:
        return self.counts[BetResult.LOSS]

    @property
    def tie_count(self) -> int:
        return self.counts[BetResult.TIE]

    @property
    def current_win_streak(self) -> int:
        return self.current_streaks[BetResult.WIN]

    @property
    def current_loss_streak(self) -> int:
        return self.current_streaks[BetResult.LOSS]

    @property
    def current_tie_streak(self) -> int:
        return self.current_streaks[BetResult.TIE]

    @property
    def max_win_streak(self) -> int:
        return self.max_streaks[BetResult.WIN]

    @property
    def max_loss_streak(self) -> int:
        return self.max_streaks[BetResult.LOSS]

    @property
    def max_tie_streak(self) -> int:
        return self.max_streaks[BetResult.TIE]

    def get_win_percentage(self) -> Optional[float]:
        return self.percentage(BetResult.WIN)

    def get_loss_percentage(self) -> Optional[float]:
        return self.percentage(BetResult.LOSS)

    def get_tie_percentage(self) -> Optional[float]:
        return self.percentage(BetResult.TIE)

    def report(self) -> Dict[str, Any]:
        report = super().report()
        report["max_bet"] = self.max_bet
        return report
