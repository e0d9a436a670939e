"""Move legality checks."""

from unorules.engine.card import Card, CardEffect, Rank

DEFENSE_RANKS = (Rank.DRAW_TWO, Rank.WILD_DRAW_FOUR)


def _require(top: Card, candidate: Card) -> None:
    if top is None:
        raise ValueError("Top card is required")
    if candidate is None:
        raise ValueError("Candidate card is required")


def is_valid_card(top: Card, candidate: Card) -> bool:
    """Check if a card can be played on top of another in a normal turn.

    Wildcards and ALWAYS_PLAYABLE cards go on anything; other cards must match
    the top card's color or rank.
    """
    _require(top, candidate)
    return (
        candidate.is_native_wild
        or candidate.has_effect(CardEffect.ALWAYS_PLAYABLE)
        or candidate.color == top.color
        or candidate.rank == top.rank
    )


def is_valid_defense(top: Card, candidate: Card) -> bool:
    """Check if a card answers a pending penalty: Draw Two on Draw Two, Wild Draw Four on Wild Draw Four."""
    _require(top, candidate)
    return top.rank in DEFENSE_RANKS and candidate.rank == top.rank
