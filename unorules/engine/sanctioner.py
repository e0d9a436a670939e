"""Pending draw penalty accumulated by Draw Two / Wild Draw Four style cards."""

from unorules.engine.card import Card


class Sanctioner:
    """Counter of cards the next non-defending player has to draw."""

    def __init__(self) -> None:
        self._malus = 0

    def is_active(self) -> bool:
        return self._malus > 0

    @property
    def malus_amount(self) -> int:
        return self._malus

    def accumulate(self, card: Card) -> None:
        """Stack the card's draw penalty on top of the pending one."""
        if card is None:
            raise ValueError("Cannot accumulate a missing card")
        self._malus += card.draw_penalty

    def reset(self) -> None:
        self._malus = 0

    def __repr__(self) -> str:
        return f"Sanctioner(malus={self._malus})"
