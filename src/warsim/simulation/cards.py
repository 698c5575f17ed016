"""Playing cards and the 52-card deck consumed by the War engine."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional


class Suit(IntEnum):
    """Playing card suits, in Unicode playing-card block order."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


ACE = 1
KING = 13

SUIT_LABELS = {
    Suit.SPADES: "Spades",
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
}

# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

FACE_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}

# U+1F0A1 is the Ace of Spades. Each suit occupies a row of 16 code points,
# and a Knight sits between Jack and Queen.
UNICODE_BASE = 0x1F0A1


@dataclass(frozen=True)
class Card:
    """Immutable playing card. Rank 1 is the Ace."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not ACE <= self.rank <= KING:
            raise ValueError(f"Card rank must be in [1, 13], got {self.rank}")
        # Accept plain ints for the suit
        object.__setattr__(self, "suit", Suit(self.suit))

    def better_than(self, other: Card) -> bool:
        """An Ace always wins, even against another Ace; otherwise higher rank wins."""
        if self.rank == ACE:
            return True
        if other.rank == ACE:
            return False
        return self.rank > other.rank

    def equal_to(self, other: Card) -> bool:
        """Cards tie when their ranks match, whatever the suit."""
        return self.rank == other.rank

    @property
    def id(self) -> int:
        return int(self.suit) * 13 + self.rank

    @property
    def is_red(self) -> bool:
        return self.suit in (Suit.HEARTS, Suit.DIAMONDS)

    @property
    def is_black(self) -> bool:
        return not self.is_red

    @property
    def color(self) -> str:
        return "red" if self.is_red else "black"

    @property
    def rank_label(self) -> str:
        return FACE_LABELS.get(self.rank, str(self.rank))

    @property
    def suit_label(self) -> str:
        return SUIT_LABELS[self.suit]

    @property
    def label(self) -> str:
        return f"{self.rank_label} of {self.suit_label}"

    @property
    def short_label(self) -> str:
        return f"{self.rank_label}{SUIT_SYMBOLS[self.suit]}"

    @property
    def unicode(self) -> str:
        """Single-glyph representation from the Unicode playing-card block."""
        offset = self.rank - 1
        if self.rank >= 12:
            offset += 1
        return chr(UNICODE_BASE + int(self.suit) * 16 + offset)

    def __str__(self) -> str:
        return self.short_label


class Deck:
    """Ordered card source. Dealing reads it without consuming it."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self.cards: List[Card] = list(cards) if cards is not None else standard_cards()

    @classmethod
    def standard(cls) -> Deck:
        """Suit-major 52-card deck: Ace..King of Spades, then Hearts, ..."""
        return cls(standard_cards())

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the deck in place."""
        (rng or random.Random()).shuffle(self.cards)

    def render(self) -> str:
        return " ".join(card.unicode for card in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Deck({len(self.cards)} cards)"


def standard_cards() -> List[Card]:
    return [Card(suit, rank) for suit in Suit for rank in range(ACE, KING + 1)]


def standard_war_order() -> List[Card]:
    """52 cards ordered 2..K, A within each suit, suits in enum order."""
    ranks = list(range(2, KING + 1)) + [ACE]
    return [Card(suit, rank) for suit in Suit for rank in ranks]
