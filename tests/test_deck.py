"""Unit tests for deck loading, the draw pile and the discard pile."""

import random
from collections import Counter

import pytest

from conftest import NoShuffle, card
from unorules.engine import (
    Card,
    CardEffect,
    CardSpec,
    Color,
    Deck,
    DeckEmptyError,
    DeckSpecError,
    DiscardPile,
    RANDOM_VARIANT,
    Rank,
    Variant,
    load_deck_file,
    parse_deck,
)
from unorules.engine.deck_loader import expand


def test_parse_deck_record_fields() -> None:
    specs = parse_deck([
        "# comment",
        "",
        "red, five, 2",
        "blue,SKIP,1,skip_next",
        "green,seven,3,SKIP_NEXT|reverse_turn,",
        "yellow,two,1,,2",
    ])
    assert specs == [
        CardSpec(Color.RED, Rank.FIVE, 2),
        CardSpec(Color.BLUE, Rank.SKIP, 1, frozenset({CardEffect.SKIP_NEXT})),
        CardSpec(Color.GREEN, Rank.SEVEN, 3, frozenset({CardEffect.SKIP_NEXT, CardEffect.REVERSE_TURN})),
        CardSpec(Color.YELLOW, Rank.TWO, 1, frozenset(), 2),
    ]


def test_expand_uses_default_and_override_penalties() -> None:
    cards = expand(parse_deck(["red,draw_two,2", "wild,wild_draw_four,1,,8"]))
    assert [c.draw_penalty for c in cards] == [2, 2, 8]


@pytest.mark.parametrize(
    "line",
    [
        "red,five",
        "purple,five,1",
        "red,eleven,1",
        "red,five,zero",
        "red,five,0",
        "red,five,1,fly",
        "red,five,1,,-2",
        "red,five,1,,two",
    ],
)
def test_malformed_record_names_line(line: str) -> None:
    with pytest.raises(DeckSpecError, match="line 2"):
        parse_deck(["# header", line], source="test.csv")


def test_load_deck_file(tmp_path) -> None:
    path = tmp_path / "deck.csv"
    path.write_text("# tiny\nred,one,3\nwild,wild,1,change_color\n", encoding="utf-8")
    specs = load_deck_file(path)
    assert len(expand(specs)) == 4


def test_load_missing_deck_file(tmp_path) -> None:
    with pytest.raises(DeckSpecError):
        load_deck_file(tmp_path / "missing.csv")


def test_standard_variant_composition() -> None:
    cards = expand(Variant.STANDARD.load())
    assert len(cards) == 108
    ranks = Counter(c.rank for c in cards)
    assert ranks[Rank.ZERO] == 4
    assert ranks[Rank.WILD] == 4
    assert ranks[Rank.WILD_DRAW_FOUR] == 4
    assert all(c.has_effect(CardEffect.SKIP_NEXT) for c in cards if c.rank == Rank.SKIP)
    assert all(c.has_effect(CardEffect.REVERSE_TURN) for c in cards if c.rank == Rank.REVERSE)
    assert all(c.draw_penalty == 2 for c in cards if c.rank == Rank.DRAW_TWO)


@pytest.mark.parametrize("variant", list(Variant))
def test_every_variant_loads(variant: Variant) -> None:
    assert len(expand(variant.load())) == 108
    assert variant.description


def test_variant_rules() -> None:
    double = expand(Variant.DOUBLE_TROUBLE.load())
    assert {c.draw_penalty for c in double if c.rank == Rank.WILD_DRAW_FOUR} == {8}
    zeros = [c for c in expand(Variant.REVERSE_ZERO.load()) if c.rank == Rank.ZERO]
    assert all(c.has_effect(CardEffect.REVERSE_TURN) for c in zeros)
    sevens = [c for c in expand(Variant.BLOCK_SEVEN.load()) if c.rank == Rank.SEVEN]
    assert all(c.has_effect(CardEffect.SKIP_NEXT) for c in sevens)


def test_random_variant_reproducible() -> None:
    assert Variant.random(random.Random(3)) == Variant.random(random.Random(3))


def test_deck_rejects_empty_specification() -> None:
    with pytest.raises(ValueError):
        Deck([])


def test_deck_conservation() -> None:
    specs = Variant.TOTAL_CHAOS.load()
    deck = Deck(specs, rng=random.Random(7))
    drawn = []
    while not deck.is_empty():
        drawn.append(deck.draw())
    assert Counter(drawn) == Counter(expand(specs))
    with pytest.raises(DeckEmptyError):
        deck.draw()


def test_deck_reproducible_with_seed() -> None:
    specs = Variant.STANDARD.load()
    d1 = Deck(specs, rng=random.Random(123))
    d2 = Deck(specs, rng=random.Random(123))
    assert [d1.draw() for _ in range(20)] == [d2.draw() for _ in range(20)]


def test_draw_takes_top_of_stack(no_shuffle) -> None:
    deck = Deck([CardSpec(Color.RED, Rank.ONE, 1), CardSpec(Color.BLUE, Rank.TWO, 1)], rng=no_shuffle)
    assert deck.draw() == card(Color.BLUE, Rank.TWO)
    assert deck.draw() == card(Color.RED, Rank.ONE)


def test_reload_restores_full_deck() -> None:
    deck = Deck(Variant.STANDARD.load(), rng=random.Random(1))
    for _ in range(30):
        deck.draw()
    deck.reload()
    assert len(deck) == 108


def test_start_card_skips_unsafe_cards(no_shuffle) -> None:
    specs = [
        CardSpec(Color.GREEN, Rank.FOUR, 1),
        CardSpec(Color.RED, Rank.FIVE, 1),
        CardSpec(Color.RED, Rank.SEVEN, 1, frozenset({CardEffect.SKIP_NEXT})),
        CardSpec(Color.RED, Rank.DRAW_TWO, 1),
        CardSpec(Color.WILD, Rank.WILD, 1),
    ]
    deck = Deck(specs, rng=no_shuffle)
    assert deck.draw_start_card() == card(Color.RED, Rank.FIVE)
    assert len(deck) == 4


def test_start_card_degraded_path(no_shuffle, caplog) -> None:
    deck = Deck([CardSpec(Color.WILD, Rank.WILD, 2), CardSpec(Color.RED, Rank.SKIP, 1, frozenset({CardEffect.SKIP_NEXT}))], rng=no_shuffle)
    start = deck.draw_start_card()
    assert start == card(Color.RED, Rank.SKIP, CardEffect.SKIP_NEXT)
    assert "No safe start card" in caplog.text


def test_discard_pile_peek_and_empty() -> None:
    pile = DiscardPile()
    assert pile.is_empty()
    with pytest.raises(IndexError):
        pile.peek()
    pile.add(card(Color.RED, Rank.ONE))
    pile.add(card(Color.BLUE, Rank.ONE))
    assert pile.peek() == card(Color.BLUE, Rank.ONE)
    assert not pile.is_empty()


def test_extract_all_except_top_small_piles() -> None:
    pile = DiscardPile()
    assert pile.extract_all_except_top() == []
    pile.add(card(Color.RED, Rank.ONE))
    assert pile.extract_all_except_top() == []
    assert len(pile) == 1
    assert pile.peek() == card(Color.RED, Rank.ONE)


def test_extract_all_except_top_keeps_top() -> None:
    pile = DiscardPile()
    cards = [card(Color.RED, Rank.ONE), card(Color.RED, Rank.TWO), card(Color.RED, Rank.THREE)]
    for c in cards:
        pile.add(c)
    assert pile.extract_all_except_top() == cards[:2]
    assert len(pile) == 1
    assert pile.peek() == cards[2]


def test_refill_from_discard_keeps_top(no_shuffle) -> None:
    deck = Deck([CardSpec(Color.RED, Rank.ONE, 1)], rng=no_shuffle)
    deck.draw()
    pile = DiscardPile()
    blue_wild = Card.of(Color.WILD, Rank.WILD).with_color(Color.BLUE)
    pile.add(blue_wild)
    pile.add(card(Color.GREEN, Rank.SIX))
    pile.add(card(Color.YELLOW, Rank.NINE))

    deck.refill_from(pile)

    assert pile.peek() == card(Color.YELLOW, Rank.NINE)
    assert len(pile) == 1
    assert len(deck) == 2
    assert Counter([deck.draw(), deck.draw()]) == Counter([card(Color.GREEN, Rank.SIX), Card.of(Color.WILD, Rank.WILD)])


def test_refill_from_single_card_pile_is_noop(no_shuffle) -> None:
    deck = Deck([CardSpec(Color.RED, Rank.ONE, 1)], rng=no_shuffle)
    deck.draw()
    pile = DiscardPile()
    pile.add(card(Color.RED, Rank.TWO))
    deck.refill_from(pile)
    assert deck.is_empty()
    assert len(pile) == 1


def test_refill_unbinds_change_color_numeral(no_shuffle) -> None:
    deck = Deck([CardSpec(Color.RED, Rank.ONE, 1)], rng=no_shuffle)
    deck.draw()
    wild_zero = card(Color.WILD, Rank.ZERO, CardEffect.CHANGE_COLOR)
    pile = DiscardPile()
    pile.add(wild_zero.with_color(Color.BLUE))
    pile.add(card(Color.BLUE, Rank.NINE))

    deck.refill_from(pile)

    recycled = deck.draw()
    assert recycled == wild_zero
    assert recycled.color == Color.WILD
    assert recycled.is_native_wild


def test_variant_resolve() -> None:
    assert Variant.resolve("block_seven") == Variant.BLOCK_SEVEN
    assert Variant.resolve(Variant.TOTAL_CHAOS) == Variant.TOTAL_CHAOS
    rng = random.Random(2)
    picks = {Variant.resolve(RANDOM_VARIANT, rng) for _ in range(50)}
    assert len(picks) > 1
    with pytest.raises(ValueError):
        Variant.resolve("uno_flip")
