"""Statistics over simulated War games."""

from warsim.analysis.stats import (
    GameStats,
    BatchSummary,
    game_stats,
    hand_size_series,
    simulate_games,
    summarize_results,
)

__all__ = [
    "GameStats",
    "BatchSummary",
    "game_stats",
    "hand_size_series",
    "simulate_games",
    "summarize_results",
]
