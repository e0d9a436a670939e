"""Turn order over a fixed roster of player ids."""

import logging
from enum import Enum
from typing import Sequence

logger = logging.getLogger(__name__)


class Direction(Enum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1


class Scheduler:
    """Circular turn order with a direction flag.

    The first ``next_player()`` call activates seat 0 instead of moving past it,
    so the turn loop can always start with ``next_player()``.
    """

    def __init__(self, player_ids: Sequence[int]):
        if player_ids is None or len(player_ids) == 0:
            logger.error("Cannot create a scheduler without players")
            raise ValueError("Scheduler needs at least one player")
        if len(set(player_ids)) != len(player_ids):
            raise ValueError(f"Duplicate player ids: {list(player_ids)}")
        self._player_ids = tuple(player_ids)
        self._index = -1
        self.direction = Direction.CLOCKWISE
        logger.info("Scheduler ready with %d players, order %s", len(self._player_ids), self._player_ids)

    def current_player(self) -> int:
        if self._index == -1:
            return self._player_ids[0]
        return self._player_ids[self._index]

    def next_player(self) -> int:
        self._move()
        logger.debug("Turn passed to player %d", self.current_player())
        return self.current_player()

    def skip_turn(self) -> None:
        """Burn one seat without giving it a turn."""
        self._move()
        logger.debug("Skipping player %d", self.current_player())

    def reverse_direction(self) -> None:
        if self.direction == Direction.CLOCKWISE:
            self.direction = Direction.COUNTER_CLOCKWISE
        else:
            self.direction = Direction.CLOCKWISE
        logger.debug("Direction is now %s", self.direction.name)

    def players_disposition(self) -> tuple[int, ...]:
        """Seating order, for presentation."""
        return self._player_ids

    def _move(self) -> None:
        if self._index == -1:
            self._index = 0
            return
        self._index = (self._index + self.direction.value) % len(self._player_ids)
