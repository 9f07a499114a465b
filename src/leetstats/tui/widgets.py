from __future__ import annotations

import math
from typing import TYPE_CHECKING

from leetstats.models.stats import clamp_percent, round_half_up
from leetstats.tui.core import fmt

if TYPE_CHECKING:
    from blessed import Terminal

BAR_FILLED = "█"
BAR_EMPTY = "░"

# ring_cells() cell codes
RING_FILLED = "#"
RING_EMPTY = "."
RING_OFF = " "

_RING_THICKNESS = 0.6


def bar_cells(percent: float, width: int) -> int:
    """Number of filled cells for a bar of the given width."""
    if width <= 0:
        return 0
    return min(width, max(0, round_half_up(clamp_percent(percent) / 100 * width)))


def progress_bar(term: Terminal, percent: float, width: int, color: str = "") -> str:
    filled = bar_cells(percent, width)
    return (
        fmt(term, color, BAR_FILLED * filled)
        + fmt(term, "dim", BAR_EMPTY * (width - filled))
    )


def ring_cells(percent: float, radius: int) -> list[str]:
    """Lay out a ring gauge as rows of cell codes.

    The arc starts at 12 o'clock and fills clockwise. Columns are half as
    wide as rows are tall, so x is scaled by 2 to keep the ring round.
    """
    percent = clamp_percent(percent)
    rows = []
    for y in range(-radius, radius + 1):
        row = []
        for x in range(-2 * radius, 2 * radius + 1):
            dx = x / 2
            if abs(math.hypot(dx, y) - radius) >= _RING_THICKNESS:
                row.append(RING_OFF)
                continue
            angle = math.atan2(dx, -y) % (2 * math.pi)
            position = angle / (2 * math.pi) * 100
            row.append(RING_FILLED if position < percent else RING_EMPTY)
        rows.append("".join(row))
    return rows


def ring_gauge(term: Terminal, percent: float, radius: int,
               color: str, background: str) -> list[str]:
    """Ring gauge rows with terminal formatting applied."""
    lines = []
    for row in ring_cells(percent, radius):
        line = ""
        for cell in row:
            if cell == RING_FILLED:
                line += fmt(term, color, BAR_FILLED)
            elif cell == RING_EMPTY:
                line += fmt(term, background, BAR_FILLED)
            else:
                line += " "
        lines.append(line)
    return lines
