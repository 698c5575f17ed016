"""JSON serialization for game history.

The layout is consumed by rendering and analysis code outside this package:

    Round -> {"winner": position | None, "matches": [Match, ...]}
    Match -> {"plays": [Play, ...]}
    Play  -> {"player": position, "handSize": int, "hand": [Card, ...], "cards": [Card, ...]}
    Card  -> {"suite": 0..3, "rank": 1..13, "color": ..., "label": ..., "unicode": ...}

Card ``color``, ``label`` and ``unicode`` are derived from suite and rank;
they are written for renderers and ignored when reading.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from warsim.simulation.cards import Card, Suit
from warsim.simulation.state import Match, Play, Player, Round


def card_to_dict(card: Card) -> Dict[str, Any]:
    """Convert Card to dict."""
    return {
        "suite": int(card.suit),
        "rank": card.rank,
        "color": card.color,
        "label": card.short_label,
        "unicode": card.unicode,
    }


def card_from_dict(data: Dict[str, Any]) -> Card:
    """Create Card from dict."""
    return Card(suit=Suit(data["suite"]), rank=data["rank"])


def play_to_dict(play: Play) -> Dict[str, Any]:
    """Convert Play to dict."""
    return {
        "player": play.player.position,
        "handSize": play.hand_size,
        "hand": [card_to_dict(c) for c in play.hand],
        "cards": [card_to_dict(c) for c in play.cards],
    }


def match_to_dict(match: Match) -> Dict[str, Any]:
    """Convert Match to dict."""
    return {
        "plays": [play_to_dict(p) for p in match.plays],
    }


def round_to_dict(round_: Round) -> Dict[str, Any]:
    """Convert Round to JSON-serializable dict."""
    return {
        "winner": round_.winner.position if round_.winner is not None else None,
        "matches": [match_to_dict(m) for m in round_.matches],
    }


def _player(players: Dict[int, Player], position: int) -> Player:
    if position not in players:
        players[position] = Player(position)
    return players[position]


def _play_from_dict(data: Dict[str, Any], players: Dict[int, Player]) -> Play:
    hand = [card_from_dict(c) for c in data.get("hand", [])]
    return Play(
        player=_player(players, data["player"]),
        cards=tuple(card_from_dict(c) for c in data["cards"]),
        hand=tuple(hand),
        hand_size=data.get("handSize", len(hand)),
    )


def round_from_dict(
    data: Dict[str, Any],
    players: Optional[Dict[int, Player]] = None,
) -> Round:
    """Rebuild a Round from dict.

    Plays refer to placeholder players (empty hands) keyed by position.
    Pass the same ``players`` mapping when loading several rounds so that
    they share Player objects.
    """
    if players is None:
        players = {}

    matches = [
        Match(tuple(_play_from_dict(p, players) for p in m["plays"]))
        for m in data["matches"]
    ]
    winner = data.get("winner")
    return Round(
        matches=matches,
        winner=_player(players, winner) if winner is not None else None,
    )


def history_to_dict(rounds: Sequence[Round]) -> Dict[str, Any]:
    """Convert a game's rounds to dict."""
    return {
        "round_count": len(rounds),
        "rounds": [round_to_dict(r) for r in rounds],
    }


def history_from_dict(data: Dict[str, Any]) -> List[Round]:
    """Create the list of Rounds from dict."""
    players: Dict[int, Player] = {}
    return [round_from_dict(r, players) for r in data["rounds"]]


def history_to_json(rounds: Sequence[Round], indent: Optional[int] = None) -> str:
    """Serialize game history to JSON string."""
    return json.dumps(history_to_dict(rounds), indent=indent, ensure_ascii=False)


def history_from_json(json_str: str) -> List[Round]:
    """Deserialize game history from JSON string."""
    return history_from_dict(json.loads(json_str))


def save_history(rounds: Sequence[Round], path: Union[str, Path]) -> None:
    """Write game history to a JSON file."""
    Path(path).write_text(history_to_json(rounds), encoding="utf-8")


def load_history(path: Union[str, Path]) -> List[Round]:
    """Read game history from a JSON file."""
    return history_from_json(Path(path).read_text(encoding="utf-8"))
