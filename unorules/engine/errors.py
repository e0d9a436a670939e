"""Engine exceptions.

Rule violations are not exceptions: ``Game.execute_turn`` reports them by
returning False. Everything here means the match cannot go on as tracked.
"""


class DeckSpecError(ValueError):
    """Deck specification is missing or malformed."""


class DeckEmptyError(RuntimeError):
    """No card left to draw, even after recycling the discard pile."""


class GameNotInitializedError(RuntimeError):
    """A game operation was called before ``Game.init()``."""


class GameOverError(RuntimeError):
    """A turn operation was called after the match already has a winner."""


class HandMismatchError(RuntimeError):
    """An accepted card is not in the hand of the participant who played it."""
