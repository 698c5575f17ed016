"""warsim: a War card game simulator with a replayable round history."""

__version__ = "0.1.0"
