"""Game orchestrator: ties deck, discard pile, scheduler, sanctioner and players together."""

import logging
import random
from typing import Dict, List, Optional, Sequence, Union

from unorules.engine.card import Card, CardEffect
from unorules.engine.deck import Deck, DiscardPile
from unorules.engine.deck_loader import RANDOM_VARIANT, CardSpec, Variant
from unorules.engine.errors import DeckEmptyError, GameNotInitializedError, GameOverError
from unorules.engine.game_state import DEFAULT_SEATS, GameState, PlayerSetup, SeatInfo
from unorules.engine.player import Player
from unorules.engine.sanctioner import Sanctioner
from unorules.engine.scheduler import Scheduler
from unorules.engine.validator import is_valid_card, is_valid_defense

logger = logging.getLogger(__name__)

HAND_SIZE = 7


class Game:
    """A single match.

    Synchronous and single-threaded: one driver calls ``advance_turn()`` to
    hand the turn over, then ``execute_turn()`` until it returns True.

    Args:
        seats: Seat configuration in seating order.
        deck_specs: Weighted deck records. When given, ``variant`` is ignored.
        rng: Random source for shuffling and bot decisions.
        variant: Bundled variant to play, or ``RANDOM_VARIANT`` to draw a new
            one at every ``init()``.
    """

    def __init__(
        self,
        seats: Sequence[PlayerSetup] = DEFAULT_SEATS,
        deck_specs: Optional[Sequence[CardSpec]] = None,
        rng: Optional[random.Random] = None,
        variant: Union[Variant, str] = Variant.STANDARD,
    ):
        if not seats:
            raise ValueError("A game needs at least one seat")
        self._seats = tuple(seats)
        self._deck_specs = list(deck_specs) if deck_specs is not None else None
        self._variant_choice = variant if variant == RANDOM_VARIANT else Variant(variant)
        self.variant: Optional[Variant] = None
        self._rng = rng or random.Random()
        self._sanctioner = Sanctioner()
        self._players: Dict[int, Player] = {}
        self._deck: Optional[Deck] = None
        self._discard = DiscardPile()
        self._scheduler: Optional[Scheduler] = None
        self._initialized = False

    def init(self) -> None:
        """Start a fresh match: new deck, new hands, safe start card."""
        from unorules.agents.factory import build_roster

        logger.info("Initializing game")
        self._sanctioner.reset()
        if self._deck_specs is None:
            self.variant = Variant.resolve(self._variant_choice, self._rng)
            logger.info("Variant: %s", self.variant.value)
            self._deck = Deck(self.variant.load(), rng=self._rng)
        elif self._deck is None:
            self._deck = Deck(self._deck_specs, rng=self._rng)
        else:
            self._deck.reload()
        self._discard = DiscardPile()

        roster = build_roster(self._seats, rng=self._rng)
        self._players = {p.id: p for p in roster}
        logger.info("Players created: %s", list(self._players))
        self._scheduler = Scheduler([p.id for p in roster])

        for player in roster:
            player.add_cards(self._draw() for _ in range(HAND_SIZE))

        start_card = self._deck.draw_start_card()
        self._discard.add(start_card)
        self._initialized = True
        logger.info("Game initialized. Start card: %s", start_card)

    @property
    def players(self) -> List[Player]:
        """Participants in seating order."""
        self._ensure_initialized()
        return [self._players[pid] for pid in self._scheduler.players_disposition()]

    def player(self, player_id: int) -> Player:
        self._ensure_initialized()
        return self._players[player_id]

    def game_setup(self) -> List[SeatInfo]:
        self._ensure_initialized()
        return [SeatInfo(p.id, p.name, not p.is_bot) for p in self.players]

    def current_participant(self) -> Player:
        self._ensure_initialized()
        return self._players[self._scheduler.current_player()]

    def advance_turn(self) -> Player:
        """Hand the turn to the next seat and return its participant."""
        self._ensure_in_play()
        player_id = self._scheduler.next_player()
        logger.debug("Turn of player %d", player_id)
        return self._players[player_id]

    def execute_turn(self, card: Optional[Card]) -> bool:
        """Apply the current participant's move.

        ``card`` is None to draw (or, under a pending penalty, to accept it).
        Returns False when the rules reject the card; the same participant
        then tries again.
        """
        self._ensure_in_play()
        player = self.current_participant()
        logger.debug("Player %d executes turn with %s", player.id, card)

        if self._sanctioner.is_active():
            return self._handle_malus(player, card)

        if card is None:
            logger.info("Player %d draws a card", player.id)
            player.add_cards([self._draw()])
            return True

        top = self._discard.peek()
        if not is_valid_card(top, card):
            logger.info("Invalid move by player %d: %s on %s", player.id, card, top)
            player.notify_move_result(card, False)
            return False

        self._accept(player, card)
        return True

    def winner(self) -> Optional[int]:
        """Id of the first player, in seating order, with an empty hand."""
        self._ensure_initialized()
        for player in self.players:
            if player.card_count() == 0:
                return player.id
        return None

    def public_state(self, viewer_id: Optional[int] = None) -> GameState:
        """Snapshot for a view.

        Shows the hand of ``viewer_id``; by default the first human player, or
        the current player when every seat is a bot.
        """
        self._ensure_initialized()
        if viewer_id is None:
            humans = [p for p in self.players if not p.is_bot]
            viewer = humans[0] if humans else self.current_participant()
        else:
            viewer = self._players[viewer_id]
        return GameState(
            top_card=self._discard.peek(),
            viewer_id=viewer.id,
            hand=tuple(viewer.hand),
            hand_sizes={p.id: p.card_count() for p in self.players},
            current_player=self._scheduler.current_player(),
            malus_active=self._sanctioner.is_active(),
            malus_amount=self._sanctioner.malus_amount,
            seating=self._scheduler.players_disposition(),
        )

    def _handle_malus(self, player: Player, card: Optional[Card]) -> bool:
        if card is None:
            amount = self._sanctioner.malus_amount
            logger.info("Player %d accepts the malus and draws %d cards", player.id, amount)
            for _ in range(amount):
                player.add_cards([self._draw()])
            self._sanctioner.reset()
            return True

        top = self._discard.peek()
        if is_valid_defense(top, card):
            logger.info("Player %d defends with %s", player.id, card)
            self._accept(player, card)
            return True

        logger.info("Player %d failed to defend with %s on %s", player.id, card, top)
        player.notify_move_result(card, False)
        return False

    def _accept(self, player: Player, card: Card) -> None:
        player.notify_move_result(card, True)
        self._discard.add(card)
        self._apply_effects(card)
        if player.card_count() == 0:
            logger.info("Player %d (%s) wins", player.id, player.name)

    def _apply_effects(self, card: Card) -> None:
        if card.has_effect(CardEffect.SKIP_NEXT):
            logger.debug("%s skips the next player", card)
            self._scheduler.skip_turn()
        if card.has_effect(CardEffect.REVERSE_TURN):
            logger.debug("%s reverses the direction", card)
            self._scheduler.reverse_direction()
        self._sanctioner.accumulate(card)

    def _draw(self) -> Card:
        if self._deck.is_empty():
            logger.info("Deck is empty, refilling from the discard pile")
            self._deck.refill_from(self._discard)
        if self._deck.is_empty():
            logger.error("No cards left to draw, deck and discard pile are exhausted")
            raise DeckEmptyError("Deck is empty and the discard pile cannot refill it")
        return self._deck.draw()

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            logger.error("Game used before init()")
            raise GameNotInitializedError("Game must be initialized first, call init()")

    def _ensure_in_play(self) -> None:
        self._ensure_initialized()
        winner = self.winner()
        if winner is not None:
            raise GameOverError(f"Game is over, player {winner} already won")
