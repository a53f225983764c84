"""Baccarat outcome categories shared by the engine, statistics and betting layers."""

from enum import Enum


class Outcome(Enum):
    """Possible outcomes of a Baccarat round."""
    PLAYER_WIN = "player_win"
    BANKER_WIN = "banker_win"
    TIE = "tie"


class BetResult(Enum):
    """Result of a single bet from the bettor's side."""
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


# Categories in reporting order
GAME_CATEGORIES = (Outcome.PLAYER_WIN, Outcome.BANKER_WIN, Outcome.TIE)
BET_CATEGORIES = (BetResult.WIN, BetResult.LOSS, BetResult.TIE)

# Sides a bettor can back; a tie is never guessed
BETTABLE_SIDES = (Outcome.PLAYER_WIN, Outcome.BANKER_WIN)
