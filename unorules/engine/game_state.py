"""Public game snapshot and seat setup records."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from unorules.engine.card import Card


class SeatKind(str, Enum):
    """Who sits in a seat."""

    HUMAN = "human"
    RANDOM = "random"
    AGGRESSIVE = "aggressive"
    CHEATER = "cheater"


class ColorChoice(str, Enum):
    """How a bot binds the color of a wildcard it plays."""

    RANDOM = "random"
    MOST_FREQUENT = "most_frequent"


@dataclass(frozen=True)
class PlayerSetup:
    """Configuration of one seat. ``victim_id`` is required for cheaters."""

    id: int
    name: str
    kind: SeatKind = SeatKind.RANDOM
    victim_id: Optional[int] = None
    color_choice: ColorChoice = ColorChoice.RANDOM

    @property
    def is_human(self) -> bool:
        return self.kind == SeatKind.HUMAN


DEFAULT_SEATS: Tuple[PlayerSetup, ...] = (
    PlayerSetup(1, "You", SeatKind.HUMAN),
    PlayerSetup(2, "Random Bot", SeatKind.RANDOM),
    PlayerSetup(3, "Aggressive Bot", SeatKind.AGGRESSIVE),
    PlayerSetup(4, "Cheater Bot", SeatKind.CHEATER, victim_id=1),
)


@dataclass(frozen=True)
class SeatInfo:
    """Seat description handed to presentation layers."""

    id: int
    name: str
    is_human: bool


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of what a view may show.

    ``hand`` belongs to ``viewer_id``; other players are only visible through
    ``hand_sizes``.
    """

    top_card: Card
    viewer_id: int
    hand: Tuple[Card, ...]
    hand_sizes: Mapping[int, int]
    current_player: int
    malus_active: bool
    malus_amount: int = 0
    seating: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.top_card is None:
            raise ValueError("GameState needs a top card")
        object.__setattr__(self, "hand", tuple(self.hand))
        object.__setattr__(self, "hand_sizes", MappingProxyType(dict(self.hand_sizes)))
        object.__setattr__(self, "seating", tuple(self.seating))
