"""Rule and turn engine for UNO-style shedding games."""

from unorules.engine.card import Card, CardEffect, Color, Rank
from unorules.engine.deck import Deck, DiscardPile
from unorules.engine.deck_loader import RANDOM_VARIANT, CardSpec, Variant, load_deck_file, parse_deck
from unorules.engine.errors import (
    DeckEmptyError,
    DeckSpecError,
    GameNotInitializedError,
    GameOverError,
    HandMismatchError,
)
from unorules.engine.game_state import (
    DEFAULT_SEATS,
    ColorChoice,
    GameState,
    PlayerSetup,
    SeatInfo,
    SeatKind,
)
from unorules.engine.player import HumanPlayer, Player
from unorules.engine.sanctioner import Sanctioner
from unorules.engine.scheduler import Direction, Scheduler
from unorules.engine.validator import is_valid_card, is_valid_defense
from unorules.engine.game import Game

__all__ = [
    "Card",
    "CardEffect",
    "Color",
    "Rank",
    "Deck",
    "DiscardPile",
    "CardSpec",
    "RANDOM_VARIANT",
    "Variant",
    "load_deck_file",
    "parse_deck",
    "DeckEmptyError",
    "DeckSpecError",
    "GameNotInitializedError",
    "GameOverError",
    "HandMismatchError",
    "DEFAULT_SEATS",
    "ColorChoice",
    "GameState",
    "PlayerSetup",
    "SeatInfo",
    "SeatKind",
    "HumanPlayer",
    "Player",
    "Sanctioner",
    "Direction",
    "Scheduler",
    "is_valid_card",
    "is_valid_defense",
    "Game",
]
