"""Serializable game history for rendering and analysis."""

from warsim.history.serialization import (
    round_to_dict,
    round_from_dict,
    history_to_json,
    history_from_json,
    save_history,
    load_history,
)

__all__ = [
    "round_to_dict",
    "round_from_dict",
    "history_to_json",
    "history_from_json",
    "save_history",
    "load_history",
]
