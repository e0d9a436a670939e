"""Unit tests for the card model."""

import pytest

from unorules.engine import Card, CardEffect, Color, Rank


def test_default_penalty_derived_from_rank() -> None:
    assert Card.of(Color.RED, Rank.DRAW_TWO).draw_penalty == 2
    assert Card.of(Color.WILD, Rank.WILD_DRAW_FOUR).draw_penalty == 4
    assert Card.of(Color.RED, Rank.SEVEN).draw_penalty == 0


def test_penalty_override() -> None:
    assert Card.of(Color.RED, Rank.TWO, draw_penalty=2).draw_penalty == 2
    assert Card.of(Color.RED, Rank.DRAW_TWO, draw_penalty=4).draw_penalty == 4


def test_negative_penalty_rejected() -> None:
    with pytest.raises(ValueError):
        Card(Color.RED, Rank.ONE, draw_penalty=-1)


@pytest.mark.parametrize(
    ("card", "expected"),
    [
        (Card.of(Color.WILD, Rank.WILD), True),
        (Card.of(Color.WILD, Rank.WILD_DRAW_FOUR), True),
        (Card.of(Color.RED, Rank.ZERO, effects=[CardEffect.CHANGE_COLOR]), True),
        (Card.of(Color.RED, Rank.SKIP, effects=[CardEffect.SKIP_NEXT]), False),
        (Card.of(Color.BLUE, Rank.NINE), False),
    ],
)
def test_is_native_wild(card: Card, expected: bool) -> None:
    assert card.is_native_wild is expected


def test_with_color_returns_new_card() -> None:
    wild = Card.of(Color.WILD, Rank.WILD_DRAW_FOUR, effects=[CardEffect.CHANGE_COLOR])
    blue = wild.with_color(Color.BLUE)
    assert blue is not wild
    assert blue.color == Color.BLUE
    assert wild.color == Color.WILD
    assert blue.is_native_wild
    assert blue.draw_penalty == wild.draw_penalty
    assert blue.effects == wild.effects


def test_with_same_color_is_identity() -> None:
    red = Card.of(Color.RED, Rank.FIVE)
    assert red.with_color(Color.RED) is red


def test_structural_equality_and_hash() -> None:
    a = Card.of(Color.RED, Rank.SKIP, effects=[CardEffect.SKIP_NEXT])
    b = Card(Color.RED, Rank.SKIP, 0, frozenset({CardEffect.SKIP_NEXT}))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Card.of(Color.RED, Rank.SKIP)
    assert len({a, b}) == 1


def test_effects_normalized_to_frozenset() -> None:
    c = Card(Color.RED, Rank.REVERSE, 0, {CardEffect.REVERSE_TURN})
    assert isinstance(c.effects, frozenset)
    assert c.has_effect(CardEffect.REVERSE_TURN)
    assert not c.has_effect(CardEffect.SKIP_NEXT)


def test_same_face_ignores_color() -> None:
    wild = Card.of(Color.WILD, Rank.WILD)
    assert wild.same_face(wild.with_color(Color.GREEN))
    assert not wild.same_face(Card.of(Color.WILD, Rank.WILD_DRAW_FOUR))


def test_str() -> None:
    assert str(Card.of(Color.RED, Rank.FIVE)) == "red_5"
    assert str(Card.of(Color.WILD, Rank.WILD)) == "wild"
    assert str(Card.of(Color.WILD, Rank.WILD).with_color(Color.BLUE)) == "blue_wild"
