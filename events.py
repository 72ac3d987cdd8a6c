#!/usr/bin/env python3
"""
events.py  – key map + action queue

Key presses, timer ticks and resizes all become small action dicts on one
FIFO, so the presenter applies them strictly in arrival order.
"""

from __future__ import annotations
import queue

import config

Action = dict      # {"type": ..., **payload}


class EventManager:
    def __init__(self) -> None:
        self._fifo: "queue.Queue[Action]" = queue.Queue()

    # ── keyboard path ──────────────────────────────────────────────────
    def handle(self, key: str) -> None:
        """Enqueue whatever `key` is bound to; unbound keys are dropped."""
        act = translate_key(key)
        if act:
            self._fifo.put(act)

    # ── timer / resize path ────────────────────────────────────────────
    def post(self, action: Action) -> None:
        """Queue a ready-made action, e.g. {"type": "tick"} from the timer."""
        self._fifo.put(action)

    # ── main-loop consumer ─────────────────────────────────────────────
    def poll(self) -> Action | None:
        """Oldest pending action, or None when the queue is empty."""
        # single consumer: nothing can take the item between the two calls
        if self._fifo.empty():
            return None
        return self._fifo.get_nowait()


def translate_key(key: str) -> Action | None:
    if key in config.QUIT_KEYS:
        return {"type": "quit"}
    if key in config.PREV_KEYS:
        return {"type": "prev"}
    if key in config.NEXT_KEYS:
        return {"type": "next"}
    return None
