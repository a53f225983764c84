"""
Baccarat simulation CLI.

Two modes are available:
- Shoe report mode (default), which deals whole shoes with no bettor and
  prints the outcome statistics of each.
- Player mode (`--player`), which runs a doubling-progression bettor through
  many shoes and prints one comma-separated line per shoe.
"""

import argparse
import logging
import time
from typing import Optional

from puntobanco.baccarat.player import BettingParameters
from puntobanco.baccarat.simulation import (
    SessionSummary,
    run_player,
    run_players,
    run_shoe,
    summarize_bankrolls,
)
from puntobanco.baccarat.stats import GameStatistics

CSV_HEADER = (
    "TotalHands,WinCount,LossCount,TieCount,MaxWinStreak,MaxLossStreak,"
    "MaxTieStreak,WinPercentage,LossPercentage,TiePercentage,MaxBet,Bankroll"
)


def format_percentage(value: Optional[float]) -> str:
    """Render a fraction as a percentage; undefined values print as n/a."""
    if value is None:
        return "n/a"
    return f"{value * 100:.2f}%"


def format_summary_row(summary: SessionSummary) -> str:
    return ",".join(
        [
            str(summary.total_hands),
            str(summary.win_count),
            str(summary.loss_count),
            str(summary.tie_count),
            str(summary.max_win_streak),
            str(summary.max_loss_streak),
            str(summary.max_tie_streak),
            format_percentage(summary.win_percentage),
            format_percentage(summary.loss_percentage),
            format_percentage(summary.tie_percentage),
            str(summary.max_bet),
            str(summary.bankroll),
        ]
    )


def print_shoe_report(number: int, stats: GameStatistics):
    print(f"Shoe #{number}")
    print("-" * 60)
    print(f"Total hands played: {stats.total_hands}")
    print(f"Player wins: {stats.player_win_count}")
    print(f"Banker wins: {stats.banker_win_count}")
    print(f"Ties: {stats.tie_count}")
    print(f"Player max win streak: {stats.player_max_streak}")
    print(f"Banker max win streak: {stats.banker_max_streak}")
    print(f"Tie max streak: {stats.tie_max_streak}")
    print(f"Player win percentage: {format_percentage(stats.get_player_win_percentage())}")
    print(f"Banker win percentage: {format_percentage(stats.get_banker_win_percentage())}")
    print(f"Tie percentage: {format_percentage(stats.get_tie_percentage())}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Baccarat Shoe and Betting Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Deal 10 shoes and report outcome statistics
  python -m puntobanco.baccarat.baccarat --shoes 10

  # Run the doubling bettor through 1500 shoes
  python -m puntobanco.baccarat.baccarat --player --shoes 1500

  # Compare 200 independent bettors across all CPUs
  python -m puntobanco.baccarat.baccarat --player --players 200 --shoes 50
        """,
    )
    parser.add_argument("--shoes", type=int, default=1, help="Number of shoes to play (default: 1)")
    parser.add_argument(
        "--player",
        action="store_true",
        help="Run the doubling-progression bettor instead of plain shoe reports",
    )
    parser.add_argument(
        "--players",
        type=int,
        default=1,
        help="Number of independent bettors in player mode (default: 1)",
    )
    parser.add_argument("--num_decks", type=int, default=6, help="Number of decks in shoe (default: 6)")
    parser.add_argument("--bankroll", type=int, default=500000, help="Initial bankroll (default: 500000)")
    parser.add_argument("--min_bet", type=int, default=10, help="Minimum bet amount (default: 10)")
    parser.add_argument("--max_bet", type=int, default=5000000, help="Maximum bet amount (default: 5000000)")
    parser.add_argument("--seed", type=int, default=None, help="Master seed for reproducible runs")
    parser.add_argument(
        "--single_cpu",
        action="store_true",
        help="If provided, run all bettors in this process instead of a worker pool.",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv=None):
    """Main CLI interface for Baccarat simulation."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.shoes < 1:
        parser.error("--shoes must be at least 1")
    if args.players < 1:
        parser.error("--players must be at least 1")

    if not args.player:
        for number in range(1, args.shoes + 1):
            seed = None if args.seed is None else args.seed + number
            print_shoe_report(number, run_shoe(args.num_decks, seed))
        return 0

    try:
        params = BettingParameters(
            initial_bankroll=args.bankroll, minimum_bet=args.min_bet, max_bet=args.max_bet
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.players == 1:
        print(CSV_HEADER)
        for summary in run_player(args.shoes, params, args.num_decks, args.seed):
            print(format_summary_row(summary))
        return 0

    start_time = time.time()
    results = run_players(
        args.players,
        args.shoes,
        params,
        args.num_decks,
        args.seed,
        workers=1 if args.single_cpu else None,
    )
    duration = time.time() - start_time

    final_bankrolls = [summaries[-1].bankroll for summaries in results]
    summary = summarize_bankrolls(final_bankrolls, params.initial_bankroll, params.minimum_bet)

    print(f"\nBaccarat Bettor Comparison ({args.players} bettors, {args.shoes} shoes each)")
    print("=" * 60)
    print(f"Mean final bankroll: {summary['mean']:,.2f}")
    print(f"Median final bankroll: {summary['median']:,.2f}")
    print(f"Std deviation: {summary['std_dev']:,.2f}")
    print(f"10th / 90th percentile: {summary['p10']:,.2f} / {summary['p90']:,.2f}")
    print(f"Ruined: {summary['ruin_rate'] * 100:.1f}%")
    print(f"Ahead of initial bankroll: {summary['profit_rate'] * 100:.1f}%")
    print(f"\nDuration: {duration:.2f} seconds")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    main()
