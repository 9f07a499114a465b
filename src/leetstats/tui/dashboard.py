from __future__ import annotations

import asyncio

from leetstats.constants import (
    BAR_WIDTH,
    DIFFICULTIES,
    DIFFICULTY_COLORS,
    DIFFICULTY_LABELS,
    GAUGE_BACKGROUND_COLOR,
    GAUGE_RADIUS,
    PRIMARY_COLOR,
)
from leetstats.tui.core import (
    Screen, center_x, clear_screen, fmt, flush, pad_right, truncate, write_at, write_row,
)
from leetstats.tui.widgets import progress_bar, ring_gauge

# Layout rows
ROW_TITLE = 0
ROW_INPUT = 2
ROW_STATUS = 3
ROW_SUMMARY = 5
ROW_GAUGE = 7

COL_LABEL = 8
COL_COUNTS = 14
_NARROW_WIDTH = 60


class DashboardScreen(Screen):
    """Username input plus the rank, gauge and per-difficulty rows."""

    def __init__(self, app) -> None:
        super().__init__(app)
        self._input_buffer = ""
        self._task: asyncio.Task | None = None

    @property
    def slots(self):
        return self.app.renderer.slots

    @property
    def loading(self) -> bool:
        # The task may not have reached the guard yet when Enter is redrawn
        pending = self._task is not None and not self._task.done()
        return pending or self.app.lookup.in_flight

    # ── Rendering ─────────────────────────────────────────────────────

    def render(self) -> None:
        t = self.term
        w = t.width
        h = t.height
        s = self.slots

        clear_screen(t)
        write_row(t, ROW_TITLE, " LeetCode Stats", "reverse", fill=True)

        prompt = "  Username: "
        visible = truncate(self._input_buffer, max(0, w - len(prompt) - 2))
        write_at(t, 0, ROW_INPUT, prompt + visible + fmt(t, "reverse", " "))

        if self.loading:
            write_at(t, 2, ROW_STATUS, fmt(t, "dim", "loading..."))
        elif s.status:
            write_at(t, 2, ROW_STATUS, fmt(t, s.status_color, truncate(s.status, w - 2)))

        write_at(t, 2, ROW_SUMMARY, fmt(t, "bold", "Rank ") + s.rank)
        write_at(t, max(w // 2, 20), ROW_SUMMARY, fmt(t, "bold", "Solved ") + s.total_solved)

        narrow = w < _NARROW_WIDTH
        # Narrow terminals stack the tier rows under the gauge
        free_rows = h - ROW_GAUGE - 3 - (2 * len(DIFFICULTIES) if narrow else 0)
        radius = max(2, min(GAUGE_RADIUS, free_rows // 2))
        gauge_w = 4 * radius + 1
        for i, line in enumerate(ring_gauge(t, s.gauge, radius, PRIMARY_COLOR,
                                            GAUGE_BACKGROUND_COLOR)):
            write_at(t, 2, ROW_GAUGE + i, line)
        label = f"{s.gauge:.0f}%"
        write_at(t, 2 + center_x(gauge_w, len(label)), ROW_GAUGE + radius,
                 fmt(t, "bold", label))

        if narrow:
            x = 2
            y = ROW_GAUGE + 2 * radius + 2
        else:
            x = 2 + gauge_w + 4
            y = ROW_GAUGE + max(0, radius - 2)
        bar_w = max(0, min(BAR_WIDTH, w - x - COL_LABEL - COL_COUNTS - 1))
        for difficulty in DIFFICULTIES:
            if y >= h - 1:
                break
            self._render_tier(t, x, y, difficulty, bar_w)
            y += 2

        hints = "enter search  backspace edit  esc quit"
        write_row(t, h - 1, " " + hints, "dim", fill=True)
        flush()

    def _render_tier(self, t, x: int, y: int, difficulty: str, bar_w: int) -> None:
        s = self.slots
        color = DIFFICULTY_COLORS[difficulty]
        solved = getattr(s, f"{difficulty}_solved")
        total = getattr(s, f"{difficulty}_total")
        percent = getattr(s, f"{difficulty}_bar")
        write_at(t, x, y, fmt(t, color, pad_right(DIFFICULTY_LABELS[difficulty], COL_LABEL)))
        write_at(t, x + COL_LABEL, y, pad_right(f"{solved} / {total}", COL_COUNTS))
        if bar_w > 0:
            write_at(t, x + COL_LABEL + COL_COUNTS, y, progress_bar(t, percent, bar_w, color))

    # ── Key handling ──────────────────────────────────────────────────

    async def handle_key(self, key) -> None:
        if key.name == "KEY_ENTER":
            task = self.run_async(self.app.lookup.lookup(self._input_buffer))
            if not self.loading:
                self._task = task
            self.invalidate()
        elif key.name == "KEY_ESCAPE":
            self.app.exit()
        elif key.name == "KEY_BACKSPACE" or key.name == "KEY_DELETE":
            if self._input_buffer:
                self._input_buffer = self._input_buffer[:-1]
                self._on_input_changed()
        elif key and not key.is_sequence:
            self._input_buffer += key
            self._on_input_changed()

    def _on_input_changed(self) -> None:
        self.app.lookup.clear_status()
        self.invalidate()
