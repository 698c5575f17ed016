"""Tests for game and batch statistics."""

import pytest

from warsim.analysis.stats import (
    BatchSummary, game_stats, hand_size_series, simulate_games, summarize_results
)
from warsim.simulation.cards import Card, Suit
from warsim.simulation.engine import GameResult, WarConfig
from warsim.simulation.state import Match, Play, Player, Round


def make_round(winner: Player, players: list, wars: int = 0, hand_size: int = 5) -> Round:
    first = Match(tuple(
        Play(p, Card(Suit.SPADES, 7), hand_size=hand_size) for p in players
    ))
    matches = [first] + [
        Match(tuple(Play(p, Card(Suit.SPADES, 3)) for p in players)) for _ in range(wars)
    ]
    return Round(matches=matches, winner=winner)


class TestGameStats:
    """Tests for per-game statistics."""

    def test_counts(self):
        p0, p1 = Player(0), Player(1)
        rounds = [
            make_round(p0, [p0, p1]),
            make_round(p1, [p0, p1], wars=2),
            make_round(p1, [p0, p1], wars=1),
        ]
        stats = game_stats(rounds, winner=1)

        assert stats.round_count == 3
        assert stats.war_count == 2
        assert stats.longest_war == 2
        assert stats.wins == {0: 1, 1: 2}
        assert stats.winner == 1

    def test_empty_history(self):
        stats = game_stats([])
        assert stats.round_count == 0
        assert stats.longest_war == 0
        assert stats.wins == {}

    def test_hand_size_series(self):
        p0, p1, p2 = Player(0), Player(1), Player(2)
        rounds = [
            make_round(p0, [p0, p1, p2], hand_size=4),
            make_round(p0, [p0, p2], hand_size=6),
        ]
        assert hand_size_series(rounds, 3) == [[4, 4, 4], [6, 0, 6]]


class TestBatch:
    """Tests for batch simulation and summaries."""

    def test_summarize(self):
        results = [
            GameResult(winner=0, round_count=100, rounds=[]),
            GameResult(winner=1, round_count=300, rounds=[]),
            GameResult(winner=None, round_count=200, rounds=[]),
        ]
        summary = summarize_results(results)

        assert isinstance(summary, BatchSummary)
        assert summary.games == 3
        assert summary.draws == 1
        assert summary.draw_rate == pytest.approx(1 / 3)
        assert summary.mean_rounds == pytest.approx(200.0)
        assert summary.median_rounds == pytest.approx(200.0)
        assert summary.min_rounds == 100
        assert summary.max_rounds == 300
        assert summary.wins == {0: 1, 1: 1}

    def test_summary_to_dict(self):
        summary = summarize_results([GameResult(winner=1, round_count=10, rounds=[])])
        d = summary.to_dict()
        assert d["games"] == 1
        assert d["wins"] == {"1": 1}
        assert d["std_rounds"] == 0.0

    def test_summarize_empty_batch_raises(self):
        with pytest.raises(ValueError):
            summarize_results([])

    def test_simulate_games_is_reproducible(self):
        config = WarConfig(win_shuffle="fisher-yates", seed=123)
        first = simulate_games(config, 3)
        second = simulate_games(config, 3)

        assert len(first) == 3
        assert [r.round_count for r in first] == [r.round_count for r in second]
        assert [r.seed for r in first] == [r.seed for r in second]
        assert len({r.seed for r in first}) == 3
