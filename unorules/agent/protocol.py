"""Decision interfaces: bot strategies and move sources for the turn loop."""

from typing import Optional, Protocol, Sequence

from unorules.engine import Card, Color, GameState


class CardStrategy(Protocol):
    """Picks the card a bot tries next."""

    def choose_card(self, possible_cards: Sequence[Card]) -> Optional[Card]:
        """Choose among the bot's candidate cards.

        Args:
            possible_cards: Hand cards not yet rejected this turn.

        Returns:
            The card to try, or None to draw / accept the pending malus.
        """
        ...


class ColorStrategy(Protocol):
    """Binds a color to a wildcard the bot decided to play."""

    def choose_color(self, hand: Sequence[Card]) -> Color:
        """Return one of ``Color.concrete()``, never ``Color.WILD``."""
        ...


class AgentProtocol(Protocol):
    """Source of moves for a human seat."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_move(self, state: GameState, rejected: bool = False) -> Optional[Card]:
        """Choose a card from ``state.hand`` (wildcards already bound) or None to draw.

        Args:
            state: Snapshot with this player's hand.
            rejected: True when the previous attempt this turn was refused.
        """
        ...
