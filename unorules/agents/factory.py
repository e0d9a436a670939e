"""Builds participants from seat configuration."""

import random
from typing import Dict, List, Optional, Sequence

from unorules.agents.bot import Bot
from unorules.agents.colors import MostFrequentColorStrategy, RandomColorStrategy
from unorules.agents.opponent import OpponentView
from unorules.agents.strategies import AggressiveStrategy, CheaterStrategy, RandomStrategy
from unorules.agent.protocol import ColorStrategy
from unorules.engine import ColorChoice, HumanPlayer, Player, PlayerSetup, SeatKind


def _color_strategy(choice: ColorChoice, rng: Optional[random.Random]) -> ColorStrategy:
    if choice == ColorChoice.MOST_FREQUENT:
        return MostFrequentColorStrategy()
    return RandomColorStrategy(rng)


def create_random_bot(
    player_id: int,
    name: str = "Random Bot",
    color_choice: ColorChoice = ColorChoice.RANDOM,
    rng: Optional[random.Random] = None,
) -> Bot:
    return Bot(player_id, name, RandomStrategy(rng), _color_strategy(color_choice, rng))


def create_aggressive_bot(
    player_id: int,
    name: str = "Aggressive Bot",
    color_choice: ColorChoice = ColorChoice.RANDOM,
    rng: Optional[random.Random] = None,
) -> Bot:
    return Bot(player_id, name, AggressiveStrategy(), _color_strategy(color_choice, rng))


def create_cheater_bot(
    player_id: int,
    victim: Player,
    name: str = "Cheater Bot",
    color_choice: ColorChoice = ColorChoice.RANDOM,
    rng: Optional[random.Random] = None,
) -> Bot:
    """A bot that sees ``victim``'s hand through a read-only view."""
    if victim is None:
        raise ValueError("Cheater bot needs a victim")
    if victim.id == player_id:
        raise ValueError(f"Player {player_id} cannot target itself")
    strategy = CheaterStrategy(OpponentView(victim))
    return Bot(player_id, name, strategy, _color_strategy(color_choice, rng))


def build_roster(seats: Sequence[PlayerSetup], rng: Optional[random.Random] = None) -> List[Player]:
    """Create one participant per seat, in seating order.

    Cheaters are created after everybody else so their victim already exists;
    a cheater cannot target another cheater.
    """
    ids = [seat.id for seat in seats]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Duplicate seat ids: {ids}")

    created: Dict[int, Player] = {}
    for seat in seats:
        if seat.kind == SeatKind.HUMAN:
            created[seat.id] = HumanPlayer(seat.id, seat.name)
        elif seat.kind == SeatKind.RANDOM:
            created[seat.id] = create_random_bot(seat.id, seat.name, seat.color_choice, rng)
        elif seat.kind == SeatKind.AGGRESSIVE:
            created[seat.id] = create_aggressive_bot(seat.id, seat.name, seat.color_choice, rng)
        elif seat.kind != SeatKind.CHEATER:
            raise ValueError(f"Unknown seat kind: {seat.kind}")

    for seat in seats:
        if seat.kind != SeatKind.CHEATER:
            continue
        victim = created.get(seat.victim_id)
        if victim is None:
            raise ValueError(f"Cheater {seat.id} targets unknown or cheating player {seat.victim_id}")
        created[seat.id] = create_cheater_bot(seat.id, victim, seat.name, seat.color_choice, rng)

    return [created[seat.id] for seat in seats]
