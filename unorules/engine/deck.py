"""Draw pile and discard pile."""

import logging
import random
from typing import List, Optional, Sequence

from unorules.engine.card import Card, Color
from unorules.engine.deck_loader import CardSpec, expand
from unorules.engine.errors import DeckEmptyError

logger = logging.getLogger(__name__)


def is_safe_start_card(card: Card) -> bool:
    """A card that can open the discard pile without demanding any resolution."""
    return not card.is_native_wild and card.draw_penalty == 0 and not card.effects


class DiscardPile:
    """Played cards, newest last."""

    def __init__(self) -> None:
        self._pile: List[Card] = []

    def add(self, card: Card) -> None:
        if card is None:
            raise ValueError("Cannot add a missing card to the discard pile")
        self._pile.append(card)

    def peek(self) -> Card:
        if not self._pile:
            raise IndexError("Discard pile is empty, no top card")
        return self._pile[-1]

    def extract_all_except_top(self) -> List[Card]:
        """Remove and return every card but the top one, oldest first."""
        if len(self._pile) <= 1:
            return []
        recycled = self._pile[:-1]
        self._pile = self._pile[-1:]
        return recycled

    def is_empty(self) -> bool:
        return not self._pile

    def __len__(self) -> int:
        return len(self._pile)

    def __repr__(self) -> str:
        top = self._pile[-1] if self._pile else None
        return f"DiscardPile(size={len(self._pile)}, top={top})"


class Deck:
    """Draw pile built from weighted card records.

    The list is used as a stack: the last element is the top of the deck.
    """

    def __init__(self, specs: Sequence[CardSpec], rng: Optional[random.Random] = None):
        self._specs = list(specs)
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self.reload()

    def reload(self) -> None:
        """Rebuild the full deck from its records and shuffle it."""
        cards = expand(self._specs)
        if not cards:
            raise ValueError("Deck specification produced no cards")
        self._cards = cards
        self.shuffle()
        logger.debug("Deck loaded with %d cards", len(self._cards))

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            raise DeckEmptyError("Deck is empty, refill it from the discard pile before drawing")
        return self._cards.pop()

    def draw_start_card(self) -> Card:
        """Remove and return the first safe card in draw order.

        Falls back to the top card when the deck holds no safe card at all.
        """
        if not self._cards:
            raise DeckEmptyError("Deck is empty, no start card available")
        for i in range(len(self._cards) - 1, -1, -1):
            if is_safe_start_card(self._cards[i]):
                return self._cards.pop(i)
        card = self._cards.pop()
        logger.warning("No safe start card in deck, using %s", card)
        return card

    def refill_from(self, pile: DiscardPile) -> None:
        """Move every discarded card except the top one back into the deck.

        Native wildcards come back unbound.
        """
        recycled = [
            card.with_color(Color.WILD) if card.is_native_wild else card
            for card in pile.extract_all_except_top()
        ]
        if not recycled:
            return
        self._cards.extend(recycled)
        self.shuffle()
        logger.info("Refilled deck with %d cards from the discard pile", len(recycled))
