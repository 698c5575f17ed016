"""Exceptions raised by the War simulation."""


class WarError(Exception):
    """Base class for War simulation errors."""

    pass


class ConfigurationError(WarError, ValueError):
    """Invalid engine construction (player count, deck size, shuffle strategy)."""

    pass


class EmptyHandError(WarError, RuntimeError):
    """A player was asked to deal with no cards left.

    The engine only asks contending players to deal, so this signals a
    broken card-conservation invariant and is never recovered from.
    """

    pass
