"""Tests for the slide cursor."""

import random

from deck import Deck
from navigation import Navigator


def _deck(n: int) -> Deck:
    return Deck(tuple(f"slide {i}" for i in range(n)))


class TestNavigator:
    """Tests for saturating navigation."""

    def test_advance_stops_at_last(self) -> None:
        nav = Navigator(_deck(2))
        nav.advance()
        nav.advance()
        assert nav.index == 1
        assert nav.current() == "slide 1"

    def test_retreat_stops_at_first(self) -> None:
        nav = Navigator(_deck(3))
        nav.retreat()
        assert nav.index == 0

    def test_single_slide_never_moves(self) -> None:
        nav = Navigator(_deck(1))
        nav.advance()
        nav.retreat()
        assert nav.index == 0

    def test_random_walk_stays_in_bounds(self) -> None:
        """Any advance/retreat sequence keeps 0 <= index < len."""
        rng = random.Random(7)
        for length in (1, 2, 5):
            nav = Navigator(_deck(length))
            for _ in range(200):
                rng.choice((nav.advance, nav.retreat))()
                assert 0 <= nav.index < length

    def test_replace_clamps_to_new_last(self) -> None:
        """A shrunken deck pulls the cursor back to its last slide."""
        nav = Navigator(_deck(5), index=4)
        nav.replace(_deck(3))
        assert nav.index == 2

    def test_replace_keeps_index_in_range(self) -> None:
        nav = Navigator(_deck(5), index=1)
        nav.replace(_deck(3))
        assert nav.index == 1
