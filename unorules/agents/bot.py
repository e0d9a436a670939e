"""Bot participant driven by a card strategy and a color strategy."""

import logging
from typing import Iterable, List, Optional

from unorules.agent.protocol import CardStrategy, ColorStrategy
from unorules.engine import Card, Player

logger = logging.getLogger(__name__)


class Bot(Player):
    """A participant that decides its own moves.

    Cards rejected during the current turn are left out of the candidates, so
    a bot whose every card was refused ends up passing.
    """

    is_bot = True

    def __init__(
        self,
        player_id: int,
        name: str,
        card_strategy: CardStrategy,
        color_strategy: ColorStrategy,
    ):
        super().__init__(player_id, name)
        if card_strategy is None or color_strategy is None:
            raise ValueError("Bot needs a card strategy and a color strategy")
        self.card_strategy = card_strategy
        self.color_strategy = color_strategy
        self._rejected: List[Card] = []

    def possible_moves(self) -> List[Card]:
        candidates = self.hand
        for card in self._rejected:
            if card in candidates:
                candidates.remove(card)
        return candidates

    def play_card(self) -> Optional[Card]:
        card = self.card_strategy.choose_card(self.possible_moves())
        if card is not None and card.is_native_wild:
            color = self.color_strategy.choose_color(self.hand)
            card = card.with_color(color)
        return card

    def add_cards(self, cards: Iterable[Card]) -> None:
        super().add_cards(cards)
        self._rejected.clear()

    def notify_move_result(self, card: Card, valid: bool) -> None:
        if not valid and card is not None:
            i = self._index_of(card)
            if i != -1:
                self._rejected.append(self._hand[i])
        super().notify_move_result(card, valid)
        if valid:
            self._rejected.clear()

    def __repr__(self) -> str:
        return (
            f"Bot(id={self.id}, name={self.name!r}, cards={self.card_count()}, "
            f"card_strategy={self.card_strategy!r}, color_strategy={self.color_strategy!r})"
        )
