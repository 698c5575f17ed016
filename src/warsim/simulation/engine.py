"""Game configuration and single-game runner."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Union

from warsim.simulation.cards import Deck
from warsim.simulation.errors import ConfigurationError
from warsim.simulation.shuffles import ShuffleStrategy
from warsim.simulation.state import Round
from warsim.simulation.war import MAX_ROUNDS, WarGame


@dataclass
class WarConfig:
    """Configuration for a War game."""

    player_count: int = 2
    win_shuffle: Union[ShuffleStrategy, str] = ShuffleStrategy.NONE
    max_rounds: int = MAX_ROUNDS
    seed: Optional[int] = None
    shuffle_deck: bool = True

    def __post_init__(self):
        """Validate settings and generate a seed if not provided."""
        self.win_shuffle = ShuffleStrategy.parse(self.win_shuffle)
        if self.player_count < 2:
            raise ConfigurationError(f"War needs at least 2 players, got {self.player_count}")
        if self.max_rounds < 1:
            raise ConfigurationError(f"max_rounds must be positive, got {self.max_rounds}")
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass(frozen=True)
class GameResult:
    """Result of a simulated game."""

    winner: Optional[int]  # Player position, None for a draw
    round_count: int
    rounds: tuple[Round, ...]
    seed: Optional[int] = None

    def __init__(
        self,
        winner: Optional[int],
        round_count: int,
        rounds: List[Round],
        seed: Optional[int] = None,
    ) -> None:
        object.__setattr__(self, "winner", winner)
        object.__setattr__(self, "round_count", round_count)
        object.__setattr__(self, "rounds", tuple(rounds))
        object.__setattr__(self, "seed", seed)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def create_game(config: WarConfig, deck: Optional[Deck] = None) -> WarGame:
    """Build an engine for ``config`` over a fresh standard deck."""
    return WarGame(
        deck if deck is not None else Deck.standard(),
        player_count=config.player_count,
        win_shuffle=config.win_shuffle,
        rng=random.Random(config.seed),
        max_rounds=config.max_rounds,
        shuffle_deck=config.shuffle_deck,
    )


def play_war_game(config: WarConfig, deck: Optional[Deck] = None) -> GameResult:
    """Play a complete War game and return its result."""
    game = create_game(config, deck)
    rounds = game.play()
    winner = game.winner

    return GameResult(
        winner=winner.position if winner is not None else None,
        round_count=len(rounds),
        rounds=rounds,
        seed=config.seed,
    )
