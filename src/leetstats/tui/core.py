from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blessed import Terminal
    from leetstats.app import StatsApp


class Screen:
    """Base class for dashboard screens.

    Subclasses implement render() and handle_key(). The app loop calls
    render() only while the screen is dirty.
    """

    def __init__(self, app: StatsApp) -> None:
        self.app = app
        self.term: Terminal = app.term
        self.dirty: bool = True
        self._prev_width: int = 0
        self._prev_height: int = 0

    def render(self) -> None:
        raise NotImplementedError

    async def handle_key(self, key) -> None:
        """Process a blessed Keystroke."""
        raise NotImplementedError

    def invalidate(self) -> None:
        self.dirty = True

    def check_resize(self) -> bool:
        """Poll for a terminal size change (there is no SIGWINCH on Windows)."""
        w, h = self.term.width, self.term.height
        if w != self._prev_width or h != self._prev_height:
            self._prev_width = w
            self._prev_height = h
            self.invalidate()
            return True
        return False

    def run_async(self, coro) -> asyncio.Task:
        """Start a background task and redraw once it finishes."""

        async def _wrapper():
            try:
                return await coro
            finally:
                self.invalidate()

        return asyncio.create_task(_wrapper())

    async def on_enter(self) -> None:
        self.invalidate()


# ── Terminal helpers ──────────────────────────────────────────────────────


def write_at(term: Terminal, x: int, y: int, text: str) -> None:
    """Write text at column x, row y."""
    sys.stdout.write(term.move_xy(x, y) + text)


def clear_screen(term: Terminal) -> None:
    sys.stdout.write(term.clear)


def truncate(text: str, width: int) -> str:
    """Truncate PLAIN text to width, marking the cut with '...'."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def pad_right(text: str, width: int) -> str:
    """Pad PLAIN text with spaces to exactly width."""
    if width <= 0:
        return ""
    text = truncate(text, width)
    return text + " " * (width - len(text))


def center_x(width: int, text_len: int) -> int:
    return max(0, (width - text_len) // 2)


def write_row(term: Terminal, y: int, text: str, color: str = "",
              fill: bool = False) -> None:
    """Write a full row of PLAIN text, optionally colored and padded to width."""
    if fill:
        text = pad_right(text, term.width)
    sys.stdout.write(term.move_xy(0, y) + fmt(term, color, text))


def fmt(term: Terminal, color: str, text: str) -> str:
    """Apply a blessed attribute by name, falling back to plain text."""
    if not color:
        return text
    try:
        return getattr(term, color)(text)
    except (AttributeError, TypeError):
        return text


def flush() -> None:
    sys.stdout.flush()
