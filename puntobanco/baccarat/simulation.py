"""
Batch simulation of baccarat sessions.

Every session gets its own shoe and its own random generator, derived from
a master seed, so runs are reproducible and independent runs can be spread
over worker processes without sharing state.
"""

import logging
import multiprocessing
import random
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from puntobanco.baccarat.game import BaccaratGame, ShoeExhausted
from puntobanco.baccarat.player import BettingParameters, BettingPlayer
from puntobanco.baccarat.rules import BaccaratRules
from puntobanco.baccarat.stats import BetStatistics, GameStatistics

logger = logging.getLogger(__name__)


@dataclass
class SessionSummary:
    """Bet-level results of one shoe played by one bettor."""
    total_hands: int
    win_count: int
    loss_count: int
    tie_count: int
    max_win_streak: int
    max_loss_streak: int
    max_tie_streak: int
    win_percentage: Optional[float]
    loss_percentage: Optional[float]
    tie_percentage: Optional[float]
    max_bet: int
    bankroll: int

    @classmethod
    def from_statistics(cls, stats: BetStatistics, bankroll: int) -> "SessionSummary":
        return cls(
            total_hands=stats.total_hands,
            win_count=stats.win_count,
            loss_count=stats.loss_count,
            tie_count=stats.tie_count,
            max_win_streak=stats.max_win_streak,
            max_loss_streak=stats.max_loss_streak,
            max_tie_streak=stats.max_tie_streak,
            win_percentage=stats.get_win_percentage(),
            loss_percentage=stats.get_loss_percentage(),
            tie_percentage=stats.get_tie_percentage(),
            max_bet=stats.max_bet,
            bankroll=bankroll,
        )

    def to_dict(self) -> Dict:
        return asdict(self)


def _child_seed(master: random.Random) -> int:
    return master.getrandbits(64)


def run_shoe(
    num_decks: int = 6, seed: Optional[int] = None, rules: Optional[BaccaratRules] = None
) -> GameStatistics:
    """
    Play one session to exhaustion with no bettor attached.

    Returns:
        The session's game-level statistics
    """
    rules = rules or BaccaratRules(num_decks=num_decks)
    game = BaccaratGame(rules=rules, rng=random.Random(seed))
    while True:
        try:
            game.play_round()
        except ShoeExhausted:
            break
    logger.info("Shoe finished after %d rounds", game.statistics.total_hands)
    return game.statistics


def run_player(
    num_shoes: int,
    params: Optional[BettingParameters] = None,
    num_decks: int = 6,
    seed: Optional[int] = None,
    start_with_minimum_bet: bool = True,
) -> List[SessionSummary]:
    """
    Run one bettor through ``num_shoes`` fresh shoes, carrying the bankroll over.

    Bet statistics are reset at the start of each shoe.

    Returns:
        One summary per shoe played
    """
    master = random.Random(seed)
    rules = BaccaratRules(num_decks=num_decks)
    player = BettingPlayer(None, params, rng=random.Random(_child_seed(master)))

    summaries = []
    for shoe_number in range(num_shoes):
        game = BaccaratGame(rules=rules, rng=random.Random(_child_seed(master)))
        player.start_new_game(game, start_with_minimum_bet)
        player.play_until_stopped()
        summaries.append(SessionSummary.from_statistics(player.statistics, player.bankroll))
        logger.debug("Shoe %d done, bankroll %d", shoe_number + 1, player.bankroll)
    return summaries


def _run_player_args(args):
    return run_player(*args)


def run_players(
    num_players: int,
    num_shoes: int,
    params: Optional[BettingParameters] = None,
    num_decks: int = 6,
    seed: Optional[int] = None,
    workers: Optional[int] = None,
) -> List[List[SessionSummary]]:
    """
    Run independent bettors, optionally across worker processes.

    Args:
        num_players: Number of independent bettors
        num_shoes: Shoes played by each bettor
        params: Bankroll and bet limits shared by all bettors
        num_decks: Number of decks per shoe
        seed: Master seed; each bettor gets its own derived seed
        workers: Worker processes to use; 1 runs everything in this process,
            None uses one process per CPU

    Returns:
        Per-bettor lists of shoe summaries, in bettor order
    """
    master = random.Random(seed)
    batch_args = [
        (num_shoes, params, num_decks, _child_seed(master)) for _ in range(num_players)
    ]

    if workers == 1 or num_players <= 1:
        return [run_player(*args) for args in batch_args]

    processes = workers or multiprocessing.cpu_count()
    with multiprocessing.Pool(processes) as pool:
        return pool.map(_run_player_args, batch_args)


def summarize_bankrolls(
    final_bankrolls: Sequence[int], initial_bankroll: int, minimum_bet: int
) -> Dict[str, float]:
    """
    Describe the distribution of final bankrolls across bettors.

    A bettor counts as ruined when the bankroll ends below the minimum bet.
    """
    if len(final_bankrolls) == 0:
        raise ValueError("No bankrolls to summarize")

    values = np.asarray(final_bankrolls, dtype=float)
    return {
        "players": int(values.size),
        "mean": float(np.mean(values)),
        "median": float(np.median(values)),
        "std_dev": float(np.std(values)),
        "p10": float(np.percentile(values, 10)),
        "p90": float(np.percentile(values, 90)),
        "ruin_rate": float(np.mean(values < minimum_bet)),
        "profit_rate": float(np.mean(values > initial_bankroll)),
    }
