"""
Exceptions raised by the wordler engine.

Only genuine caller mistakes raise. Contradictory feedback and an exhausted
dictionary are normal outcomes and are reported through return values.
"""


class WordlerError(Exception):
    """Base class for all wordler errors."""


class InvalidFeedbackError(WordlerError, ValueError):
    """A feedback row doesn't fit the current suggestion (length, symbol, letter)."""


class StrategyLockedError(WordlerError, RuntimeError):
    """Scoring strategy changes are only allowed before any feedback is committed."""
