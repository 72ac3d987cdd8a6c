"""
renderer.py

Builds one full terminal frame: the rendered slide on top, the status line
pinned to the bottom row.  Markdown styling and wrapping come from rich; this
module only decides where the pieces go.
"""

from __future__ import annotations

import io
import json

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.markdown import Markdown
from rich.padding import Padding
from rich.text import Text
from rich.theme import Theme

import config
from errors import FatalError

# narrowest viewport the paddings leave room for
_MIN_WIDTH = 2 * max(config.SLIDE_PADDING, config.STATUS_PADDING) + 1


class RenderError(FatalError):
    pass


# ── theme ──────────────────────────────────────────────────────────────────
def load_theme(path: str = config.THEME_PATH) -> Theme:
    """Read a JSON object mapping style names to rich style definitions."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            styles = json.load(f)
    except OSError as exc:
        raise RenderError(f"can not read theme {path}: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise RenderError(f"malformed theme {path}: {exc}") from exc

    if not isinstance(styles, dict) or not all(
        isinstance(v, str) for v in styles.values()
    ):
        raise RenderError(f"malformed theme {path}: expected an object of style strings")

    try:
        return Theme(styles)
    except StyleSyntaxError as exc:
        raise RenderError(f"malformed theme {path}: {exc}") from exc


def _console(width: int, theme: Theme) -> Console:
    return Console(
        width=width,
        theme=theme,
        file=io.StringIO(),
        force_terminal=True,
        color_system="truecolor",
        legacy_windows=False,
        highlight=False,
    )


# ── pieces ─────────────────────────────────────────────────────────────────
def render_slide(text: str, width: int, theme: Theme) -> str:
    console = _console(width, theme)
    try:
        with console.capture() as capture:
            console.print(Padding(Markdown(text), config.SLIDE_PADDING))
    except Exception as exc:
        raise RenderError(f"error when rendering markdown: {exc}") from exc
    return capture.get()


def paging(index: int, total: int) -> str:
    return f"{index + 1} / {total}"


def status_segments(author: str, date: str, index: int, total: int) -> tuple[Text, Text]:
    left = Text.assemble(
        " " * config.AUTHOR_MARGIN_LEFT,
        (author, "status.author"),
        " " * config.DATE_MARGIN,
        (date, "status.date"),
        " " * config.DATE_MARGIN,
    )
    right = Text.assemble(
        (paging(index, total), "status.page"),
        " " * config.PAGE_MARGIN_RIGHT,
    )
    return left, right


def join_horizontal(left: Text, right: Text, width: int) -> Text:
    """Left segment fills what the right one leaves; right stays flush.

    A left segment that does not fit is cut with an ellipsis.  If the right
    segment alone is wider than `width` the joined line is cropped.
    """
    room = width - right.cell_len
    line = left.copy()
    if room > 0:
        line.truncate(room, overflow="ellipsis", pad=True)
    else:
        line = Text()
    line.append_text(right)
    line.truncate(width, overflow="crop")
    line.no_wrap = True
    return line


def render_status(left: Text, right: Text, width: int, theme: Theme) -> str:
    inner = width - 2 * config.STATUS_PADDING
    console = _console(width, theme)
    with console.capture() as capture:
        console.print(Padding(join_horizontal(left, right, inner), config.STATUS_PADDING))
    return capture.get()


def _rows(block: str) -> list[str]:
    """Rows of a rendered block; only LF separates rows."""
    if not block:
        return []
    return block[:-1].split("\n") if block.endswith("\n") else block.split("\n")


def join_vertical(top: str, bottom: str, height: int) -> str:
    """Top-align `top` in the rows `bottom` leaves, cropping any excess.

    The result never has more than `height` rows; a viewport shorter than
    `bottom` keeps its last rows.
    """
    bottom_lines = _rows(bottom)
    room         = max(0, height - len(bottom_lines))
    top_lines    = _rows(top)[:room]
    top_lines   += [""] * (room - len(top_lines))
    rows         = top_lines + bottom_lines
    return "\n".join(rows[max(0, len(rows) - height):])


# ── main entry point ───────────────────────────────────────────────────────
def compose_frame(
    slide_text: str,
    index: int,
    total: int,
    author: str,
    date: str,
    width: int,
    height: int,
    theme: Theme,
) -> str:
    width = max(width, _MIN_WIDTH)

    body = render_slide(slide_text, width, theme)
    left, right = status_segments(author, date, index, total)
    status = render_status(left, right, width, theme)

    return join_vertical(body, status, height)
