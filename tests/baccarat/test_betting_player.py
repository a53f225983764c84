"""
Tests for the doubling-progression bettor.

Most tests drive the bettor against a scripted session whose outcomes are
fixed in advance, and pin the guess to the Player side.
"""

import random
from unittest.mock import Mock

import pytest

from puntobanco.baccarat import (
    BetResult,
    BettingParameters,
    BettingPlayer,
    Outcome,
    RoundResult,
    ShoeExhausted,
    new_player,
    new_session,
    play_until_stopped,
)

P, B, T = Outcome.PLAYER_WIN, Outcome.BANKER_WIN, Outcome.TIE


class ScriptedGame:
    """Stands in for a session, settling rounds from a fixed list of outcomes."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.rounds = 0

    @property
    def can_continue(self):
        return self.rounds < len(self.outcomes)

    def play_round(self):
        if not self.can_continue:
            raise ShoeExhausted("scripted shoe is empty")
        outcome = self.outcomes[self.rounds]
        self.rounds += 1
        return RoundResult(
            outcome=outcome,
            score=5,
            player_value=5,
            banker_value=5,
            player_cards=2,
            banker_cards=2,
            player_natural=False,
            banker_natural=False,
        )


def always_player_rng():
    rng = Mock()
    rng.randrange.return_value = 0
    return rng


def make_player(outcomes, bankroll=500000, minimum_bet=10, max_bet=5000000):
    params = BettingParameters(initial_bankroll=bankroll, minimum_bet=minimum_bet, max_bet=max_bet)
    return BettingPlayer(ScriptedGame(outcomes), params, rng=always_player_rng())


class TestBetSizing:
    """Tests for the progression and its limits."""

    def test_first_bet_is_minimum(self):
        player = make_player([])
        assert player.next_bet() == 10

    def test_progression(self):
        player = make_player([B, B, T, B, P])
        bets = []
        for _ in range(5):
            player.play_hand()
            bets.append(player.current_bet)
        assert bets == [10, 20, 40, 40, 80]
        assert player.next_bet() == 10

    def test_bankroll_after_progression(self):
        player = make_player([B, B, T, B, P])
        player.play_until_stopped()
        # -10 -20 (push 40) -40 then +80 on an 80 stake
        assert player.bankroll == 500000 - 10 - 20 - 40 + 80

    def test_capped_at_max_bet(self):
        player = make_player([B, B, B, B], max_bet=30)
        bets = []
        for _ in range(4):
            player.play_hand()
            bets.append(player.current_bet)
        assert bets == [10, 20, 30, 30]
        assert player.statistics.max_bet == 30

    def test_capped_at_bankroll(self):
        player = make_player([B, B, B, B, B], bankroll=50)
        rounds = player.play_until_stopped()
        assert rounds == 3
        assert player.bankroll == 0
        assert player.statistics.max_bet == 20

    def test_tie_stake_clamped_to_bankroll(self):
        player = make_player([])
        player.bankroll = 25
        player.current_bet = 40
        player.won_last_hand = False
        player.tied_last_hand = True
        assert player.next_bet() == 25

    def test_clamps_apply_in_order(self):
        # Doubling 40 gives 80, the table caps it at 60, the bankroll at 50
        player = make_player([], bankroll=50, max_bet=60)
        player.current_bet = 40
        player.won_last_hand = False
        assert player.next_bet() == 50


class TestSettlement:
    """Tests for crediting the bankroll and recording results."""

    def test_win_pays_even_money(self):
        player = make_player([P])
        assert player.play_hand() == BetResult.WIN
        assert player.bankroll == 500010
        assert player.won_last_hand
        assert not player.tied_last_hand

    def test_tie_is_a_push(self):
        player = make_player([T])
        assert player.play_hand() == BetResult.TIE
        assert player.bankroll == 500000
        assert player.tied_last_hand
        assert not player.won_last_hand

    def test_loss_keeps_stake(self):
        player = make_player([B])
        assert player.play_hand() == BetResult.LOSS
        assert player.bankroll == 499990
        assert not player.won_last_hand
        assert not player.tied_last_hand

    def test_bet_statistics(self):
        player = make_player([B, B, T, B, P, P])
        player.play_until_stopped()
        stats = player.statistics
        assert stats.total_hands == 6
        assert stats.win_count == 2
        assert stats.loss_count == 3
        assert stats.tie_count == 1
        assert stats.max_loss_streak == 2
        assert stats.current_loss_streak == 0
        assert stats.max_win_streak == 2
        assert stats.max_bet == 80


class TestStopping:
    """Tests for the end of the betting loop."""

    def test_stops_when_shoe_exhausted(self):
        player = make_player([P, B, P])
        assert player.play_until_stopped() == 3
        assert player.statistics.total_hands == 3

    def test_stops_when_bankroll_below_minimum(self):
        player = make_player([B] * 10, bankroll=5)
        assert player.play_until_stopped() == 0
        assert player.bankroll == 5

    def test_refused_round_returns_stake(self):
        game = Mock(can_continue=True)
        game.play_round.side_effect = ShoeExhausted("no more rounds")
        player = BettingPlayer(game, BettingParameters(), rng=always_player_rng())
        with pytest.raises(ShoeExhausted):
            player.play_hand()
        assert player.bankroll == 500000
        assert player.current_bet == 10
        assert player.statistics.max_bet == 0
        assert player.play_until_stopped() == 0
        assert player.statistics.total_hands == 0

    def test_refused_round_after_loss_keeps_last_stake(self):
        player = make_player([B])
        player.play_hand()
        with pytest.raises(ShoeExhausted):
            player.play_hand()
        assert player.bankroll == 499990
        assert player.current_bet == 10
        assert player.statistics.max_bet == 10
        assert player.next_bet() == 20

    def test_no_game_attached(self):
        player = BettingPlayer(None)
        assert not player.can_play()
        assert player.play_until_stopped() == 0

    def test_play_hand_without_game_raises(self):
        player = BettingPlayer(None)
        with pytest.raises(ValueError, match="No game attached"):
            player.play_hand()
        assert player.bankroll == 500000
        assert player.statistics.max_bet == 0


class TestGuess:
    """Tests for the random Player/Banker pick."""

    def test_guess_never_backs_tie(self):
        player = BettingPlayer(None, rng=random.Random(8))
        picks = {player.guess() for _ in range(500)}
        assert picks == {P, B}

    def test_seeded_guesses_reproducible(self):
        first = BettingPlayer(None, rng=random.Random(3))
        second = BettingPlayer(None, rng=random.Random(3))
        assert [first.guess() for _ in range(50)] == [second.guess() for _ in range(50)]


class TestParameters:
    """Tests for bettor configuration."""

    def test_defaults(self):
        params = BettingParameters()
        assert params.initial_bankroll == 500000
        assert params.minimum_bet == 10
        assert params.max_bet == 5000000

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"initial_bankroll": -1},
            {"minimum_bet": 0},
            {"minimum_bet": 100, "max_bet": 50},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            BettingParameters(**kwargs)


class TestRealSessions:
    """The bettor against real shuffled shoes."""

    def test_play_until_stopped_terminates(self):
        session = new_session(6, seed=31)
        player = new_player(session, 500000, 10, 5000000, rng=random.Random(32))
        rounds = play_until_stopped(player)
        assert rounds > 0
        assert not session.can_continue or player.bankroll < player.minimum_bet
        assert player.bankroll >= 0
        assert player.statistics.total_hands == rounds
        assert session.statistics.total_hands == rounds

    def test_small_bankroll_runs_out(self):
        session = new_session(6, seed=77)
        player = new_player(session, 10, 10, 1000, rng=random.Random(78))
        play_until_stopped(player)
        assert player.bankroll >= 0
        assert session.can_continue is False or player.bankroll < 10

    def test_start_new_game_keeps_bankroll(self):
        player = new_player(new_session(6, seed=1), 500000, 10, 5000000, rng=random.Random(2))
        player.play_until_stopped()
        bankroll = player.bankroll
        fresh = new_session(6, seed=3)
        player.start_new_game(fresh)
        assert player.game is fresh
        assert player.bankroll == bankroll
        assert player.statistics.total_hands == 0
        assert player.statistics.max_bet == 0
        assert player.won_last_hand
        assert player.next_bet() == min(10, bankroll)
