"""Game state for War: players, plays, matches and rounds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from warsim.simulation.cards import Card
from warsim.simulation.errors import EmptyHandError

WAR_CARDS = 4  # Three face down, one face up


@dataclass(eq=False)
class Player:
    """A seat at the table.

    The hand is a stack: the end of the list is the top, where cards are
    dealt from; won cards go underneath, at the start of the list.
    """

    position: int
    hand: List[Card] = field(default_factory=list)

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def has_cards(self) -> bool:
        return bool(self.hand)

    def deal(self) -> Card:
        """Remove and return the top card of the hand."""
        if not self.hand:
            raise EmptyHandError(f"Player {self.position} cannot deal with an empty hand")
        return self.hand.pop()

    def win(self, cards: Sequence[Card]) -> None:
        """Put cards at the bottom of the hand, keeping their order."""
        self.hand[:0] = cards

    def __repr__(self) -> str:
        return f"Player({self.position}, {len(self.hand)} cards)"


@dataclass(frozen=True)
class Play:
    """The cards one player put into a single match.

    ``hand`` is a snapshot of the player's hand taken before the cards were
    dealt; it is kept for history and rendering only.
    """

    player: Player
    cards: tuple[Card, ...]
    hand: tuple[Card, ...] = ()
    hand_size: int = -1

    def __post_init__(self) -> None:
        cards = self.cards
        if isinstance(cards, Card):
            cards = (cards,)
        object.__setattr__(self, "cards", tuple(cards))
        object.__setattr__(self, "hand", tuple(self.hand))
        if self.hand_size < 0:
            object.__setattr__(self, "hand_size", len(self.hand))
        if not self.cards:
            raise ValueError("A play needs at least one card")

    @classmethod
    def deal_from(cls, player: Player, count: int = 1) -> Play:
        """Snapshot the player's hand, then deal up to ``count`` cards."""
        hand = tuple(player.hand)
        cards = [player.deal()]
        while len(cards) < count and player.has_cards:
            cards.append(player.deal())
        return cls(player=player, cards=tuple(cards), hand=hand)

    @property
    def active_card(self) -> Card:
        """The face-up card used for comparison."""
        return self.cards[-1]


def evaluate_match(plays: Sequence[Play]) -> tuple[Play, ...]:
    """Return the plays holding the best active card.

    A single play is a clear winner; several plays mean a tie.
    """
    winners: List[Play] = []
    for play in plays:
        if not winners or play.active_card.better_than(winners[0].active_card):
            winners = [play]
        elif play.active_card.equal_to(winners[0].active_card):
            winners.append(play)
    return tuple(winners)


@dataclass(frozen=True)
class Match:
    """One simultaneous comparison of active cards."""

    plays: tuple[Play, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "plays", tuple(self.plays))

    @property
    def winners(self) -> tuple[Play, ...]:
        return evaluate_match(self.plays)

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    def play_for(self, player: Union[Player, int]) -> Optional[Play]:
        """Find the play a player (or position) made in this match."""
        position = player.position if isinstance(player, Player) else player
        for play in self.plays:
            if play.player.position == position:
                return play
        return None


def round_pot(matches: Sequence[Match]) -> List[Card]:
    """Every card played across the matches, in match then play order."""
    return [card for match in matches for play in match.plays for card in play.cards]


@dataclass(eq=False)
class Round:
    """A normal match followed by any war matches needed to break ties."""

    matches: List[Match] = field(default_factory=list)
    winner: Optional[Player] = None

    @property
    def cards(self) -> List[Card]:
        """The pot."""
        return round_pot(self.matches)

    @property
    def last_match(self) -> Optional[Match]:
        return self.matches[-1] if self.matches else None

    @property
    def war_count(self) -> int:
        return max(len(self.matches) - 1, 0)

    @property
    def is_resolved(self) -> bool:
        return self.winner is not None
