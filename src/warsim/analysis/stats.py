"""Game and batch statistics over War histories."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence

import numpy as np

from warsim.simulation.engine import GameResult, WarConfig, play_war_game
from warsim.simulation.state import Round

logger = logging.getLogger(__name__)


@dataclass
class GameStats:
    """Counts for a single game."""

    round_count: int
    war_count: int  # Rounds that needed at least one war
    longest_war: int  # Most war matches in a single round
    wins: Dict[int, int] = field(default_factory=dict)  # Rounds won per position
    winner: Optional[int] = None


@dataclass
class BatchSummary:
    """Statistics across many simulated games."""

    games: int
    draws: int
    mean_rounds: float
    std_rounds: float
    min_rounds: int
    max_rounds: int
    median_rounds: float
    wins: Dict[int, int] = field(default_factory=dict)  # Games won per position

    @property
    def draw_rate(self) -> float:
        return self.draws / self.games if self.games else 0.0

    def to_dict(self) -> dict:
        return {
            "games": self.games,
            "draws": self.draws,
            "draw_rate": self.draw_rate,
            "mean_rounds": self.mean_rounds,
            "std_rounds": self.std_rounds,
            "min_rounds": self.min_rounds,
            "max_rounds": self.max_rounds,
            "median_rounds": self.median_rounds,
            "wins": {str(k): v for k, v in sorted(self.wins.items())},
        }


def game_stats(rounds: Sequence[Round], winner: Optional[int] = None) -> GameStats:
    """Summarize one game's history."""
    wins: Dict[int, int] = {}
    for round_ in rounds:
        if round_.winner is not None:
            position = round_.winner.position
            wins[position] = wins.get(position, 0) + 1

    return GameStats(
        round_count=len(rounds),
        war_count=sum(1 for r in rounds if r.war_count),
        longest_war=max((r.war_count for r in rounds), default=0),
        wins=wins,
        winner=winner,
    )


def hand_size_series(rounds: Sequence[Round], player_count: int) -> List[List[int]]:
    """Hand size of every position at the start of each round.

    Read from the first match's snapshots; players out of the game show 0.
    """
    series = []
    for round_ in rounds:
        sizes = [0] * player_count
        if round_.matches:
            for play in round_.matches[0].plays:
                sizes[play.player.position] = play.hand_size
        series.append(sizes)
    return series


def simulate_games(config: WarConfig, games: int) -> List[GameResult]:
    """Play ``games`` independent games, seeding each from ``config.seed``."""
    seeds = np.random.default_rng(config.seed).integers(0, 2**32 - 1, size=games)
    results = []
    for seed in seeds:
        results.append(play_war_game(replace(config, seed=int(seed))))
    return results


def summarize_results(results: Sequence[GameResult]) -> BatchSummary:
    """Aggregate round counts and winners across games."""
    if not results:
        raise ValueError("Cannot summarize an empty batch")

    counts = np.array([r.round_count for r in results])
    wins: Dict[int, int] = {}
    for result in results:
        if result.winner is not None:
            wins[result.winner] = wins.get(result.winner, 0) + 1

    summary = BatchSummary(
        games=len(results),
        draws=sum(1 for r in results if r.is_draw),
        mean_rounds=float(np.mean(counts)),
        std_rounds=float(np.std(counts)),
        min_rounds=int(np.min(counts)),
        max_rounds=int(np.max(counts)),
        median_rounds=float(np.median(counts)),
        wins=wins,
    )
    logger.info(
        f"{summary.games} games: {summary.mean_rounds:.1f} +/- {summary.std_rounds:.1f} rounds, "
        f"{summary.draws} draws"
    )
    return summary
