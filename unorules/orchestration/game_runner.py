"""Single game runner: the turn loop around a ``Game``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unorules.engine import Card, Game, Player

if TYPE_CHECKING:
    from unorules.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)

MAX_TURNS = 1000


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]
    num_turns: int
    player_ids: tuple[int, ...]
    history: tuple[str, ...] = ()


class GameRunner:
    """Runs a single game to completion.

    Bots decide on their own and retry after a rejection; human seats are
    asked through the agent registered for their id.
    """

    def __init__(
        self,
        game: Game,
        agents: Optional[dict[int, "AgentProtocol"]] = None,
        max_turns: int = MAX_TURNS,
    ):
        self._game = game
        self._agents = dict(agents or {})
        self._max_turns = max_turns
        self._history: list[str] = []

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def run(self) -> GameResult:
        """Initialize the game, play it and return the result."""
        game = self._game
        game.init()
        self._history = []
        for player in game.players:
            if not player.is_bot and player.id not in self._agents:
                raise ValueError(f"No agent registered for human player {player.id}")

        num_turns = 0
        while game.winner() is None and num_turns < self._max_turns:
            player = game.advance_turn()
            self._play_turn(player)
            num_turns += 1

        winner = game.winner()
        if winner is None:
            logger.warning("Game stopped after %d turns without a winner", num_turns)
        else:
            self._history.append(f"{game.player(winner).name} WON!")
        return GameResult(
            winner=winner,
            num_turns=num_turns,
            player_ids=tuple(p.id for p in game.players),
            history=self.history,
        )

    def _play_turn(self, player: Player) -> None:
        rejected = False
        while True:
            malus = self._game.public_state(player.id).malus_amount
            card = self._next_move(player, rejected)
            before = player.card_count()
            if self._game.execute_turn(card):
                self._record(player, card, player.card_count() - before, malus)
                return
            rejected = True

    def _next_move(self, player: Player, rejected: bool) -> Optional[Card]:
        if player.is_bot:
            return player.play_card()
        return self._agents[player.id].get_move(self._game.public_state(player.id), rejected)

    def _record(self, player: Player, card: Optional[Card], drawn: int, malus: int) -> None:
        if card is not None:
            self._history.append(f"{player.name} played {card}")
        elif malus:
            self._history.append(f"{player.name} drew {drawn} cards (penalty)")
        else:
            self._history.append(f"{player.name} drew a card")
