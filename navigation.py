"""
navigation.py

Saturating cursor over a Deck: moving past either end is a no-op.
"""

from __future__ import annotations

from deck import Deck


class Navigator:
    def __init__(self, deck: Deck, index: int = 0) -> None:
        self.deck  = deck
        self.index = 0
        self._clamp(index)

    def advance(self) -> None:
        if self.index < len(self.deck) - 1:
            self.index += 1

    def retreat(self) -> None:
        if self.index > 0:
            self.index -= 1

    def current(self) -> str:
        return self.deck[self.index]

    def replace(self, deck: Deck) -> None:
        """Swap in a reloaded deck, pulling the cursor back if it shrank."""
        self.deck = deck
        self._clamp(self.index)

    def _clamp(self, index: int) -> None:
        self.index = max(0, min(index, len(self.deck) - 1))
