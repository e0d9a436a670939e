"""Simulate a game between bots."""

import random

from unorules.engine import RANDOM_VARIANT, Game, PlayerSetup, SeatKind
from unorules.orchestration.game_runner import GameRunner


def main():
    seats = [
        PlayerSetup(1, "Bot1", SeatKind.RANDOM),
        PlayerSetup(2, "Bot2", SeatKind.AGGRESSIVE),
        PlayerSetup(3, "Bot3", SeatKind.RANDOM),
        PlayerSetup(4, "Bot4", SeatKind.CHEATER, victim_id=1),
    ]
    game = Game(seats, rng=random.Random(42), variant=RANDOM_VARIANT)
    result = GameRunner(game).run()

    print(f"Variant: {game.variant.value} - {game.variant.description}")
    for line in result.history:
        print(f"> {line}")
    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()
