"""
Baccarat game implementation.

This module provides a Punto Banco engine: shoe dealing under the fixed
drawing rules, outcome and streak statistics, and a doubling-progression
bettor that plays sessions to exhaustion.
"""

from puntobanco.baccarat.constants import BetResult, Outcome
from puntobanco.baccarat.game import (
    BaccaratGame,
    RoundResult,
    RoundState,
    ShoeExhausted,
    new_session,
    play_round,
)
from puntobanco.baccarat.hand import BaccaratHand, score
from puntobanco.baccarat.player import (
    BettingParameters,
    BettingPlayer,
    new_player,
    play_until_stopped,
)
from puntobanco.baccarat.rules import BaccaratRules
from puntobanco.baccarat.stats import BetStatistics, GameStatistics, StreakStatistics

__all__ = [
    "BaccaratGame",
    "BaccaratHand",
    "BaccaratRules",
    "BetResult",
    "BetStatistics",
    "BettingParameters",
    "BettingPlayer",
    "GameStatistics",
    "Outcome",
    "RoundResult",
    "RoundState",
    "ShoeExhausted",
    "StreakStatistics",
    "new_player",
    "new_session",
    "play_round",
    "play_until_stopped",
    "score",
]
