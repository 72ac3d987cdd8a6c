"""
deck.py

Reads a plain-text document and splits it into slides.

Slides are separated by every occurrence of `config.DELIMITER`, matched as a
plain substring (a `---` inside a code block splits too).  Each fragment loses
its leading and trailing CR/LF characters; other whitespace is kept verbatim.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

import config
from errors import FatalError


# ── Errors ──────────────────────────────────────────────────────────────────
class DeckError(FatalError):
    """Base class for documents that cannot be presented."""


class DeckNotFound(DeckError):
    pass


class DeckReadError(DeckError):
    pass


class InvalidTarget(DeckError):
    """The path names a directory."""


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Deck:
    slides: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.slides)

    def __getitem__(self, index: int) -> str:
        return self.slides[index]


# ── Parsing ─────────────────────────────────────────────────────────────────
def split_slides(content: str, delimiter: str = config.DELIMITER) -> Deck:
    """N delimiters always give N+1 slides, so the deck is never empty."""
    return Deck(tuple(part.strip("\r\n") for part in content.split(delimiter)))


def load_deck(path: str) -> Deck:
    if not path:
        raise DeckNotFound("no file specified")

    if os.path.isdir(path):
        raise InvalidTarget(f"can not read directories: {path}")

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()
    except FileNotFoundError as exc:
        raise DeckNotFound(f"no such file: {path}") from exc
    except IsADirectoryError as exc:
        raise InvalidTarget(f"can not read directories: {path}") from exc
    except OSError as exc:
        raise DeckReadError(f"can not read {path}: {exc.strerror or exc}") from exc

    return split_slides(content)
