"""Tests for key translation and the action queue."""

import pytest

from events import EventManager, translate_key


class TestTranslateKey:
    @pytest.mark.parametrize(
        "key, kind",
        [
            ("q", "quit"),
            ("ctrl+c", "quit"),
            ("left", "prev"),
            ("right", "next"),
            ("space", "next"),
            (" ", "next"),
        ],
    )
    def test_known_keys(self, key: str, kind: str) -> None:
        assert translate_key(key) == {"type": kind}

    @pytest.mark.parametrize("key", ["up", "down", "x", "enter", "Q"])
    def test_other_keys_ignored(self, key: str) -> None:
        assert translate_key(key) is None


class TestEventManager:
    def test_fifo_order(self) -> None:
        """Keys, ticks and resizes come out in arrival order."""
        mgr = EventManager()
        mgr.handle("right")
        mgr.post({"type": "tick"})
        mgr.handle("x")
        mgr.post({"type": "resize", "width": 80, "height": 24})

        assert mgr.poll() == {"type": "next"}
        assert mgr.poll() == {"type": "tick"}
        assert mgr.poll() == {"type": "resize", "width": 80, "height": 24}
        assert mgr.poll() is None

    def test_queues_are_independent(self) -> None:
        a, b = EventManager(), EventManager()
        a.handle("q")
        assert b.poll() is None
        assert a.poll() == {"type": "quit"}
