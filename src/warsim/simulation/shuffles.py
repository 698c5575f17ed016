"""Shuffle strategies applied to a round's pot before the winner takes it."""

from __future__ import annotations

import functools
import random
from enum import Enum
from typing import Callable, Dict, List, Sequence, TypeVar, Union

from warsim.simulation.errors import ConfigurationError

T = TypeVar("T")


class ShuffleStrategy(Enum):
    """How much entropy goes back into the winner's hand."""

    NONE = "none"
    FISHER_YATES = "fisher-yates"
    SMOOSH = "smoosh"

    @classmethod
    def parse(cls, value: Union[ShuffleStrategy, str]) -> ShuffleStrategy:
        """Resolve an enum member, value or name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            aliases = {"fisheryates": "fisher-yates", "identity": "none"}
            key = aliases.get(key, key)
            for strategy in cls:
                if strategy.value == key:
                    return strategy
        choices = ", ".join(s.value for s in cls)
        raise ConfigurationError(f"Unknown shuffle strategy {value!r} (expected one of: {choices})")


def no_shuffle(cards: Sequence[T], rng: random.Random) -> List[T]:
    """Identity: the pot keeps the order it was played in."""
    return list(cards)


def fisher_yates(cards: Sequence[T], rng: random.Random) -> List[T]:
    """Uniform random permutation (Durstenfeld's Fisher-Yates)."""
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def smoosh(cards: Sequence[T], rng: random.Random) -> List[T]:
    """Sort with a coin-flip comparator.

    Cheap and visibly non-uniform; kept to compare game lengths against
    a real shuffle.
    """
    compare = functools.cmp_to_key(lambda a, b: rng.random() * 2 - 1)
    return sorted(cards, key=compare)


SHUFFLES: Dict[ShuffleStrategy, Callable[[Sequence, random.Random], List]] = {
    ShuffleStrategy.NONE: no_shuffle,
    ShuffleStrategy.FISHER_YATES: fisher_yates,
    ShuffleStrategy.SMOOSH: smoosh,
}


def apply_shuffle(
    strategy: Union[ShuffleStrategy, str],
    cards: Sequence[T],
    rng: random.Random,
) -> List[T]:
    """Run ``cards`` through the named strategy."""
    return SHUFFLES[ShuffleStrategy.parse(strategy)](cards, rng)
