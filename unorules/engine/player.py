"""Participants: a hand of cards plus a way to pick the next move."""

import logging
from typing import Iterable, List, Optional

from unorules.engine.card import Card
from unorules.engine.errors import HandMismatchError

logger = logging.getLogger(__name__)


class Player:
    """Base participant. Holds the hand; subclasses decide moves.

    ``notify_move_result`` is the only way a card leaves the hand: the engine
    calls it after ruling on a move.
    """

    is_bot = False

    def __init__(self, player_id: int, name: str):
        if name is None:
            raise ValueError("Player name is required")
        self.id = player_id
        self.name = name
        self._hand: List[Card] = []

    @property
    def hand(self) -> List[Card]:
        """A copy of the hand, in the order cards were received."""
        return list(self._hand)

    def card_count(self) -> int:
        return len(self._hand)

    def add_cards(self, cards: Iterable[Card]) -> None:
        cards = list(cards)
        self._hand.extend(cards)
        logger.debug("Player %d received %d card(s)", self.id, len(cards))

    def play_card(self) -> Optional[Card]:
        """Return the card to try, or None to draw / accept the malus."""
        raise NotImplementedError

    def notify_move_result(self, card: Card, valid: bool) -> None:
        if card is None:
            raise ValueError("Card is required")
        if valid:
            self._remove(card)
            logger.info("Player %d played %s", self.id, card)
        else:
            logger.debug("Player %d had %s rejected", self.id, card)

    def _index_of(self, card: Card) -> int:
        """Locate a played card in the hand. Bound wildcards match their unbound face."""
        for i, held in enumerate(self._hand):
            if held == card:
                return i
        if card.is_native_wild:
            for i, held in enumerate(self._hand):
                if held.is_native_wild and held.same_face(card):
                    return i
        return -1

    def _remove(self, card: Card) -> None:
        i = self._index_of(card)
        if i == -1:
            logger.error("Player %d played %s but it is not in hand %s", self.id, card, self._hand)
            raise HandMismatchError(f"Card {card} not in hand of player {self.id}")
        del self._hand[i]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r}, cards={len(self._hand)})"


class HumanPlayer(Player):
    """A participant whose moves come from outside the engine (terminal, UI)."""

    def play_card(self) -> Optional[Card]:
        raise NotImplementedError(
            f"Human player {self.id} has no built-in move; input comes from the driver"
        )
