"""War game engine: dealing, the round state machine and the game loop."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Union

from warsim.simulation.cards import Deck
from warsim.simulation.errors import ConfigurationError
from warsim.simulation.shuffles import ShuffleStrategy, apply_shuffle
from warsim.simulation.state import WAR_CARDS, Match, Play, Player, Round

logger = logging.getLogger(__name__)

MAX_ROUNDS = 10_000


class WarGame:
    """Plays War for N players and records every round.

    A game ends when one player holds every card, or is declared a draw
    once ``max_rounds`` rounds have been played.
    """

    def __init__(
        self,
        deck: Deck,
        player_count: int = 2,
        win_shuffle: Union[ShuffleStrategy, str] = ShuffleStrategy.NONE,
        rng: Optional[random.Random] = None,
        max_rounds: int = MAX_ROUNDS,
        shuffle_deck: bool = True,
    ) -> None:
        """Build the players and validate the setup.

        Args:
            deck: Card source, dealt in full at the start of every game
            player_count: Number of players (at least 2)
            win_shuffle: Strategy applied to each pot before the winner takes it
            rng: Random source for the deck shuffle and the pot shuffles
            max_rounds: Round cap after which the game is a draw
            shuffle_deck: Shuffle the deck before dealing (disable for stacked decks)

        Raises:
            ConfigurationError: If the setup cannot produce a fair game
        """
        if player_count < 2:
            raise ConfigurationError(f"War needs at least 2 players, got {player_count}")
        if len(deck) == 0:
            raise ConfigurationError("Cannot play with an empty deck")
        if len(deck) % player_count:
            raise ConfigurationError(
                f"A {len(deck)}-card deck cannot be dealt evenly to {player_count} players"
            )
        if max_rounds < 1:
            raise ConfigurationError(f"max_rounds must be positive, got {max_rounds}")

        self.deck = deck
        self.player_count = player_count
        self.win_shuffle = ShuffleStrategy.parse(win_shuffle)
        self.rng = rng or random.Random()
        self.max_rounds = max_rounds
        self.shuffle_deck = shuffle_deck
        self.players: List[Player] = [Player(position) for position in range(player_count)]
        self.rounds: List[Round] = []

    def start(self) -> None:
        """Reset hands and history, shuffle the deck and deal it round-robin."""
        self.rounds = []
        for player in self.players:
            player.hand.clear()

        if self.shuffle_deck:
            self.deck.shuffle(self.rng)

        # Later cards land on top, so they are dealt first
        for idx, card in enumerate(self.deck):
            self.players[idx % self.player_count].hand.append(card)

        logger.debug(
            f"Dealt {len(self.deck)} cards to {self.player_count} players "
            f"(pot shuffle: {self.win_shuffle.value})"
        )

    def play(self) -> List[Round]:
        """Play a full game and return its rounds in order."""
        self.start()

        while len(self.players_remaining()) > 1 and len(self.rounds) < self.max_rounds:
            self.play_round()

        winner = self.winner
        if winner is not None:
            logger.info(f"Player {winner.position} won after {len(self.rounds)} rounds")
        else:
            logger.info(f"Game declared a draw after {len(self.rounds)} rounds")
        return self.rounds

    def play_round(self) -> Round:
        """Resolve and record one round, escalating to war until a single winner remains."""
        round_ = Round()

        # Normal match: one card each
        plays = [Play.deal_from(player) for player in self.players_remaining()]
        match = Match(plays)
        round_.matches.append(match)
        winners = match.winners

        while len(winners) > 1:
            tied = [play.player for play in winners]
            contenders = [player for player in tied if player.has_cards]

            if not contenders:
                # Nobody left to fight the war; lowest seat takes the pot
                round_.winner = min(tied, key=lambda p: p.position)
                logger.warning(
                    f"War between players {[p.position for p in tied]} has no cards left; "
                    f"awarding the pot to player {round_.winner.position}"
                )
                break

            logger.debug(
                f"War between players {[p.position for p in tied]} "
                f"on {winners[0].active_card}"
            )
            # Three face down and one face up, or as many as the hand allows
            plays = [Play.deal_from(player, WAR_CARDS) for player in contenders]
            match = Match(plays)
            round_.matches.append(match)
            winners = match.winners

        if round_.winner is None:
            round_.winner = winners[0].player

        pot = apply_shuffle(self.win_shuffle, round_.cards, self.rng)
        round_.winner.win(pot)
        logger.debug(f"Player {round_.winner.position} won a pot of {len(pot)} cards")
        self.rounds.append(round_)
        return round_

    def players_remaining(self) -> List[Player]:
        """Players still holding at least one card."""
        return [player for player in self.players if player.has_cards]

    @property
    def winner(self) -> Optional[Player]:
        """The only player holding cards, if the game has been won."""
        remaining = self.players_remaining()
        return remaining[0] if len(remaining) == 1 else None

    @property
    def card_count(self) -> int:
        return sum(player.hand_size for player in self.players)
