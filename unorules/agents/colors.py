"""Color strategies: which color a bot binds to a wildcard."""

import random
from collections import Counter
from typing import Optional, Sequence

from unorules.engine import Card, Color

DEFAULT_COLOR = Color.RED


class RandomColorStrategy:
    """Uniform over the four concrete colors; ignores the hand."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def choose_color(self, hand: Sequence[Card]) -> Color:
        return self._rng.choice(Color.concrete())

    def __repr__(self) -> str:
        return "RandomColorStrategy()"


class MostFrequentColorStrategy:
    """The color the hand holds most of, wildcards not counted.

    Ties resolve in ``Color.concrete()`` order; a hand with nothing to count
    gets ``DEFAULT_COLOR``.
    """

    def choose_color(self, hand: Sequence[Card]) -> Color:
        counts = Counter(c.color for c in hand if not c.is_native_wild and c.color != Color.WILD)
        if not counts:
            return DEFAULT_COLOR
        return max(Color.concrete(), key=lambda color: counts[color])

    def __repr__(self) -> str:
        return "MostFrequentColorStrategy()"
