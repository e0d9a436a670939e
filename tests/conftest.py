"""Shared test helpers."""

import random

import pytest

from unorules.engine import Card, CardEffect, Color, Rank


class NoShuffle(random.Random):
    """Random source that leaves lists in their given order."""

    def shuffle(self, x, *args, **kwargs) -> None:
        pass


def card(color: Color, rank: Rank, *effects: CardEffect, penalty=None) -> Card:
    return Card.of(color, rank, penalty, effects)


@pytest.fixture
def no_shuffle() -> NoShuffle:
    return NoShuffle(0)
