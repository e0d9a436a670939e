"""Card, Color, Rank and CardEffect types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional


class Color(str, Enum):
    """Card colors. WILD marks a wildcard that has not been bound yet."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WILD = "wild"

    @classmethod
    def concrete(cls) -> tuple["Color", ...]:
        """The four colors a wildcard can be bound to."""
        return (cls.RED, cls.BLUE, cls.GREEN, cls.YELLOW)


class Rank(str, Enum):
    """Card ranks: numerals plus the special ranks."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"

    @property
    def is_numeral(self) -> bool:
        return self.value.isdigit()


class CardEffect(str, Enum):
    """Effects a card can carry. Which ranks carry which effects is deck data."""

    REVERSE_TURN = "reverse_turn"
    SKIP_NEXT = "skip_next"
    CHANGE_COLOR = "change_color"
    ALWAYS_PLAYABLE = "always_playable"


WILD_RANKS = (Rank.WILD, Rank.WILD_DRAW_FOUR)

DEFAULT_PENALTIES = {
    Rank.DRAW_TWO: 2,
    Rank.WILD_DRAW_FOUR: 4,
}


def default_penalty(rank: Rank) -> int:
    """Draw penalty a rank carries when the deck data does not override it."""
    return DEFAULT_PENALTIES.get(rank, 0)


@dataclass(frozen=True)
class Card:
    """An immutable card.

    Wildcards sit in hands with color=WILD; playing one binds a color through
    ``with_color``, which returns a new card and keeps ``is_native_wild`` true.
    """

    color: Color
    rank: Rank
    draw_penalty: int = 0
    effects: FrozenSet[CardEffect] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.draw_penalty < 0:
            raise ValueError(f"Draw penalty must be non-negative, got {self.draw_penalty}")
        if not isinstance(self.effects, frozenset):
            object.__setattr__(self, "effects", frozenset(self.effects))

    @classmethod
    def of(
        cls,
        color: Color,
        rank: Rank,
        draw_penalty: Optional[int] = None,
        effects: Iterable[CardEffect] = (),
    ) -> "Card":
        """Build a card, deriving the penalty from the rank when not given."""
        penalty = default_penalty(rank) if draw_penalty is None else draw_penalty
        return cls(color=color, rank=rank, draw_penalty=penalty, effects=frozenset(effects))

    def has_effect(self, effect: CardEffect) -> bool:
        return effect in self.effects

    @property
    def is_native_wild(self) -> bool:
        return self.rank in WILD_RANKS or CardEffect.CHANGE_COLOR in self.effects

    def with_color(self, color: Color) -> "Card":
        if color == self.color:
            return self
        return Card(color=color, rank=self.rank, draw_penalty=self.draw_penalty, effects=self.effects)

    def same_face(self, other: "Card") -> bool:
        """True if both cards are the same card apart from the bound color."""
        return (
            self.rank == other.rank
            and self.draw_penalty == other.draw_penalty
            and self.effects == other.effects
        )

    def __str__(self) -> str:
        if self.color == Color.WILD:
            return self.rank.value
        return f"{self.color.value}_{self.rank.value}"
