#!/usr/bin/env python3
"""
app.py – presenter state + textual host

The Presenter owns every piece of mutable state (deck, cursor, watch
baseline, viewport) and applies actions drained from its EventManager one at
a time.  SlideApp is the terminal runtime around it: it feeds keys, resizes
and timer ticks into the queue and shows the composed frame after each one.
"""
from __future__ import annotations

import datetime
import os
from typing import Optional

from rich.text import Text
from rich.theme import Theme
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Key, Resize
from textual.widgets import Static

import config
from deck      import Deck, load_deck
from errors    import FatalError
from events    import Action, EventManager
from navigation import Navigator
from renderer  import compose_frame, load_theme
from watcher   import FileWatcher


# ── helpers ────────────────────────────────────────────────────────────────
def resolve_author(default: str = config.DEFAULT_AUTHOR) -> str:
    """Account full name, then login name, then `default`."""
    try:
        import pwd
        entry = pwd.getpwuid(os.getuid())
    except (ImportError, KeyError, AttributeError):
        return default
    return entry.pw_gecos.split(",")[0] or entry.pw_name or default


def today() -> str:
    return datetime.date.today().strftime(config.DATE_FORMAT)


# ── presenter ──────────────────────────────────────────────────────────────
class Presenter:
    def __init__(
        self,
        path: str,
        *,
        theme: Optional[Theme] = None,
        author: Optional[str] = None,
        date: Optional[str] = None,
    ) -> None:
        self.path = path

        # baseline before the read: an edit racing startup reloads on tick 1
        self.watcher   = FileWatcher(path)
        deck = load_deck(path)
        self.navigator = Navigator(deck)
        self.events    = EventManager()

        self.theme  = theme if theme is not None else load_theme()
        self.author = author if author is not None else resolve_author()
        self.date   = date if date is not None else today()

        self.width  = 0
        self.height = 0
        self.running = True

    @property
    def deck(self) -> Deck:
        return self.navigator.deck

    # ── dispatch ----------------------------------------------------------
    def dispatch(self, act: Action) -> None:
        t = act["type"]
        if t == "quit":
            self.running = False
        elif t == "prev":
            self.navigator.retreat()
        elif t == "next":
            self.navigator.advance()
        elif t == "resize":
            self.width  = act["width"]
            self.height = act["height"]
        elif t == "tick":
            self.watcher.tick(self._reload)

    def drain(self) -> bool:
        """Apply every queued action in order; False once quit was seen."""
        while self.running and (act := self.events.poll()):
            self.dispatch(act)
        return self.running

    def _reload(self) -> Deck:
        deck = load_deck(self.path)
        self.navigator.replace(deck)
        return deck

    # ── frame -------------------------------------------------------------
    def frame(self) -> str:
        if not self.width or not self.height:
            return ""
        return compose_frame(
            self.navigator.current(),
            self.navigator.index,
            len(self.deck),
            self.author,
            self.date,
            self.width,
            self.height,
            self.theme,
        )

    def run(self) -> Optional[FatalError]:
        """Block until quit; returns the fatal error that ended the run, if any."""
        return SlideApp(self).run()


# ── terminal host ──────────────────────────────────────────────────────────
class SlideApp(App):
    CSS = """
    Screen { overflow: hidden; }
    #frame { width: 100%; height: 100%; }
    """

    BINDINGS = [
        Binding("ctrl+c", "press('ctrl+c')", show=False, priority=True),
    ]

    def __init__(self, presenter: Presenter) -> None:
        super().__init__()
        self.presenter = presenter

    def compose(self) -> ComposeResult:
        yield Static(id="frame")

    def on_mount(self) -> None:
        self.presenter.events.post(
            {"type": "resize", "width": self.size.width, "height": self.size.height}
        )
        self._pump()
        self.set_interval(config.WATCH_INTERVAL, self._tick)

    def on_resize(self, event: Resize) -> None:
        self.presenter.events.post(
            {"type": "resize", "width": event.size.width, "height": event.size.height}
        )
        self._pump()

    def on_key(self, event: Key) -> None:
        self.presenter.events.handle(event.key)
        self._pump()

    def action_press(self, key: str) -> None:
        self.presenter.events.handle(key)
        self._pump()

    def _tick(self) -> None:
        self.presenter.events.post({"type": "tick"})
        self._pump()

    def _pump(self) -> None:
        try:
            if not self.presenter.drain():
                self.exit()
                return
            frame = self.presenter.frame()
        except FatalError as err:
            self.exit(err)
            return
        self.query_one("#frame", Static).update(
            Text.from_ansi(frame, no_wrap=True, overflow="crop")
        )
