"""Top-level package for the Indigo card game engine."""

from . import cards, engine, events, rules, state, strategy

__all__ = [
    "cards",
    "engine",
    "events",
    "rules",
    "state",
    "strategy",
]
