"""Human agent - reads moves from terminal."""

from typing import Optional

from unorules.engine import Card, Color, GameState


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_move(self, state: GameState, rejected: bool = False) -> Optional[Card]:
        if rejected:
            print("Invalid move! Try again.")

        print("\n--- Your turn ---")
        print("Top discard:", state.top_card)
        if state.malus_active:
            print(f"Pending penalty: {state.malus_amount} cards (defend or draw)")
        print("Other players:", ", ".join(
            f"{pid}: {n} cards" for pid, n in state.hand_sizes.items() if pid != state.viewer_id
        ))
        print("\nYour hand:")
        for i, card in enumerate(state.hand):
            print(f"  {i}: {card}")
        print("  d: DRAW" if not state.malus_active else "  d: ACCEPT PENALTY")

        while True:
            try:
                raw = input("Enter number or d: ").strip().lower()
            except EOFError:
                return None
            if raw == "d":
                return None
            if raw.isdigit() and 0 <= int(raw) < len(state.hand):
                card = state.hand[int(raw)]
                if card.is_native_wild:
                    return card.with_color(self._ask_color())
                return card
            print("Invalid. Try again.")

    @staticmethod
    def _ask_color() -> Color:
        colors = Color.concrete()
        names = ", ".join(f"{i}: {c.value}" for i, c in enumerate(colors))
        while True:
            try:
                raw = input(f"Choose color ({names}): ").strip()
            except EOFError:
                return colors[0]
            if raw.isdigit() and 0 <= int(raw) < len(colors):
                return colors[int(raw)]
            print("Invalid. Try again.")
