"""Tournament - run many bot games and aggregate results."""

import random
from collections import defaultdict
from typing import Optional, Sequence, Union

from unorules.engine import CardSpec, Game, PlayerSetup, Variant
from unorules.orchestration.game_runner import MAX_TURNS, GameRunner


def run_tournament(
    seats: Sequence[PlayerSetup],
    num_games: int = 100,
    deck_specs: Optional[Sequence[CardSpec]] = None,
    seed: Optional[int] = None,
    max_turns: int = MAX_TURNS,
    variant: Union[Variant, str] = Variant.STANDARD,
) -> dict[int, int]:
    """Play ``num_games`` bot-only games.

    The seating order is reversed every other game so no seat always opens.
    Without ``deck_specs`` each game resolves ``variant`` on its own, so
    "random" picks a new deck per game.

    Returns:
        Dict mapping player id to number of wins. Games stopped at the turn
        cap count for nobody.
    """
    if any(seat.is_human for seat in seats):
        raise ValueError("Tournaments are bot-only")
    wins: dict[int, int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        order = list(seats) if g % 2 == 0 else list(reversed(seats))
        game = Game(
            order,
            deck_specs=deck_specs,
            rng=random.Random(rng.randint(0, 2**31 - 1)),
            variant=variant,
        )
        result = GameRunner(game, max_turns=max_turns).run()
        if result.winner is not None:
            wins[result.winner] += 1

    return dict(wins)
