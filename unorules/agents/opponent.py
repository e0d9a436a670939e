"""Read-only view of another player, for strategies that peek at a hand."""

from typing import Tuple

from unorules.engine import Card, Player


class OpponentView:
    """Exposes an opponent's id, hand and card count, never its mutators.

    Reads go to the live player, so the view follows the match as it goes on.
    """

    __slots__ = ("_player",)

    def __init__(self, player: Player):
        if player is None:
            raise ValueError("Opponent is required")
        self._player = player

    @property
    def id(self) -> int:
        return self._player.id

    @property
    def hand(self) -> Tuple[Card, ...]:
        return tuple(self._player.hand)

    def card_count(self) -> int:
        return self._player.card_count()

    def __repr__(self) -> str:
        return f"OpponentView(id={self.id}, cards={self.card_count()})"
