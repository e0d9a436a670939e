"""Deck specification loading.

A deck file holds one record per line::

    COLOR,RANK,QUANTITY[,EFFECT|EFFECT...][,PENALTY]

Blank lines and lines starting with ``#`` are ignored. Names are matched
case-insensitively against the enums in ``unorules.engine.card``. When the
penalty column is empty the rank's default penalty applies.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Union

from unorules.engine.card import Card, CardEffect, Color, Rank
from unorules.engine.errors import DeckSpecError

COMMENT_PREFIX = "#"
SEPARATOR = ","
EFFECTS_SEPARATOR = "|"
MIN_FIELDS = 3
RANDOM_VARIANT = "random"


@dataclass(frozen=True)
class CardSpec:
    """One weighted deck record: ``quantity`` copies of the same card."""

    color: Color
    rank: Rank
    quantity: int
    effects: FrozenSet[CardEffect] = field(default_factory=frozenset)
    draw_penalty: Optional[int] = None

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {self.quantity}")
        if self.draw_penalty is not None and self.draw_penalty < 0:
            raise ValueError(f"Draw penalty must be non-negative, got {self.draw_penalty}")

    def build(self) -> List[Card]:
        card = Card.of(self.color, self.rank, self.draw_penalty, self.effects)
        return [card] * self.quantity


def expand(specs: Iterable[CardSpec]) -> List[Card]:
    """Turn weighted records into the flat, ordered card list they describe."""
    cards: List[Card] = []
    for spec in specs:
        cards.extend(spec.build())
    return cards


def _parse_enum(enum_cls, raw: str, what: str):
    name = raw.strip().upper()
    try:
        return enum_cls[name]
    except KeyError:
        raise ValueError(f"Unknown {what}: {raw.strip()!r}") from None


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid {what}: {raw.strip()!r}") from None


def parse_line(line: str) -> CardSpec:
    """Parse a single non-comment record."""
    parts = line.split(SEPARATOR)
    if len(parts) < MIN_FIELDS:
        raise ValueError(f"Expected at least {MIN_FIELDS} fields, got {len(parts)}")

    color = _parse_enum(Color, parts[0], "color")
    rank = _parse_enum(Rank, parts[1], "rank")
    quantity = _parse_int(parts[2], "quantity")

    effects: set[CardEffect] = set()
    if len(parts) > 3 and parts[3].strip():
        for name in parts[3].split(EFFECTS_SEPARATOR):
            if name.strip():
                effects.add(_parse_enum(CardEffect, name, "effect"))

    penalty = None
    if len(parts) > 4 and parts[4].strip():
        penalty = _parse_int(parts[4], "draw penalty")

    return CardSpec(color, rank, quantity, frozenset(effects), penalty)


def parse_deck(lines: Iterable[str], source: str = "<deck>") -> List[CardSpec]:
    """Parse deck records, failing on the first malformed line."""
    specs: List[CardSpec] = []
    for lineno, line in enumerate(lines, start=1):
        clean = line.strip()
        if not clean or clean.startswith(COMMENT_PREFIX):
            continue
        try:
            specs.append(parse_line(clean))
        except ValueError as e:
            raise DeckSpecError(f"{source}, line {lineno}: {e}") from e
    return specs


def load_deck_file(path: Union[str, Path]) -> List[CardSpec]:
    """Load deck records from a file on disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeckSpecError(f"Cannot read deck file {path}: {e}") from e
    return parse_deck(text.splitlines(), source=str(path))


class Variant(str, Enum):
    """Bundled deck variants, each backed by a deck file shipped with the package."""

    STANDARD = "standard"
    DOUBLE_TROUBLE = "double_trouble"
    REVERSE_ZERO = "reverse_zero"
    BLOCK_SEVEN = "block_seven"
    TOTAL_CHAOS = "total_chaos"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def file_name(self) -> str:
        return f"{self.value}_deck.csv"

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Variant":
        return (rng or random).choice(list(cls))

    @classmethod
    def resolve(cls, name: Union["Variant", str], rng: Optional["random.Random"] = None) -> "Variant":
        """Variant by name; ``RANDOM_VARIANT`` draws a fresh one on every call."""
        if name == RANDOM_VARIANT:
            return cls.random(rng)
        return cls(name)

    def load(self) -> List[CardSpec]:
        resource = resources.files("unorules.engine").joinpath("decks").joinpath(self.file_name)
        return parse_deck(resource.read_text(encoding="utf-8").splitlines(), source=self.file_name)


_DESCRIPTIONS = {
    Variant.STANDARD: "Standard game with the classic rules",
    Variant.DOUBLE_TROUBLE: "Draw Two and Wild Draw Four penalties are doubled",
    Variant.REVERSE_ZERO: "Playing a Zero reverses the direction of play",
    Variant.BLOCK_SEVEN: "Playing a Seven skips the next player",
    Variant.TOTAL_CHAOS: "All special rules at once",
}
