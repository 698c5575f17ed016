"""War game engine."""

from warsim.simulation.cards import Card, Deck, Suit
from warsim.simulation.engine import GameResult, WarConfig, play_war_game
from warsim.simulation.errors import ConfigurationError, EmptyHandError, WarError
from warsim.simulation.shuffles import ShuffleStrategy
from warsim.simulation.state import Match, Play, Player, Round
from warsim.simulation.war import MAX_ROUNDS, WarGame

__all__ = [
    "Card",
    "Deck",
    "Suit",
    "GameResult",
    "WarConfig",
    "play_war_game",
    "ConfigurationError",
    "EmptyHandError",
    "WarError",
    "ShuffleStrategy",
    "Match",
    "Play",
    "Player",
    "Round",
    "MAX_ROUNDS",
    "WarGame",
]
