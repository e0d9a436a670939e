"""Card strategies for bots.

All strategies take the bot's candidate cards and return one of them, or None
to pass. Ties go to the first best card in input order.
"""

import random
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from unorules.agents.opponent import OpponentView
from unorules.engine import Card, Color, Rank


class RandomStrategy:
    """Picks uniformly among the candidates."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def choose_card(self, possible_cards: Sequence[Card]) -> Optional[Card]:
        if not possible_cards:
            return None
        return self._rng.choice(list(possible_cards))

    def __repr__(self) -> str:
        return "RandomStrategy()"


AGGRESSIVE_PRIORITY: Dict[Rank, int] = {
    Rank.WILD_DRAW_FOUR: 100,
    Rank.DRAW_TWO: 50,
    Rank.WILD: 20,
}
AGGRESSIVE_DEFAULT = 1


class AggressiveStrategy:
    """Plays the most punishing card available."""

    def choose_card(self, possible_cards: Sequence[Card]) -> Optional[Card]:
        return max(possible_cards, key=self.score, default=None)

    @staticmethod
    def score(card: Card) -> int:
        return AGGRESSIVE_PRIORITY.get(card.rank, AGGRESSIVE_DEFAULT)

    def __repr__(self) -> str:
        return "AggressiveStrategy()"


SCORE_SKIP_REVERSE = 10
SCORE_DRAW_TWO = 15
SCORE_WILD = 25
SCORE_DEFENDABLE = -1_000_000
SCORE_NORMAL = 1
URGENCY_BASE = 10


@dataclass(frozen=True)
class VictimAnalysis:
    """Counts over the victim's hand taken once per decision."""

    colors: Counter
    ranks: Counter
    total: int

    @classmethod
    def of(cls, victim: OpponentView) -> "VictimAnalysis":
        hand = victim.hand
        colors = Counter(c.color for c in hand if not c.is_native_wild)
        ranks = Counter(c.rank for c in hand)
        return cls(colors=colors, ranks=ranks, total=victim.card_count())

    def holds(self, rank: Rank) -> bool:
        return self.ranks[rank] > 0

    def urgency(self) -> int:
        """Grows as the victim gets closer to emptying their hand."""
        return max(1, URGENCY_BASE - self.total)


class CheaterStrategy:
    """Looks at one opponent's hand and plays against it.

    Penalty cards the victim could answer in kind are avoided, penalties get
    more attractive as the victim's hand shrinks, and plain cards prefer the
    color the victim holds least of.
    """

    def __init__(self, victim: OpponentView):
        if victim is None:
            raise ValueError("Victim view is required")
        self._victim = victim

    @property
    def victim_id(self) -> int:
        return self._victim.id

    def choose_card(self, possible_cards: Sequence[Card]) -> Optional[Card]:
        analysis = VictimAnalysis.of(self._victim)
        return max(possible_cards, key=lambda c: self.score(c, analysis), default=None)

    def score(self, card: Card, analysis: VictimAnalysis) -> int:
        if card.is_native_wild:
            if card.rank == Rank.WILD_DRAW_FOUR:
                if analysis.holds(Rank.WILD_DRAW_FOUR):
                    return SCORE_DEFENDABLE
                return SCORE_WILD * analysis.urgency()
            return SCORE_WILD
        if card.rank == Rank.DRAW_TWO:
            if analysis.holds(Rank.DRAW_TWO):
                return SCORE_DEFENDABLE
            return SCORE_DRAW_TWO * analysis.urgency()
        if card.rank in (Rank.SKIP, Rank.REVERSE):
            return SCORE_SKIP_REVERSE
        return self._color_score(card.color, analysis)

    @staticmethod
    def _color_score(color: Color, analysis: VictimAnalysis) -> int:
        return max(0, SCORE_NORMAL * (analysis.total - analysis.colors[color]))

    def __repr__(self) -> str:
        return f"CheaterStrategy(victim={self._victim.id})"
