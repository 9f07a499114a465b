from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from leetstats.constants import DIFFICULTIES
from leetstats.models.stats import RESET_MODEL, DisplayModel

logger = logging.getLogger(__name__)


@dataclass
class OutputSlots:
    """Named values the dashboard draws. Written only by Renderer."""

    rank: str = "#--"
    total_solved: str = "0"
    easy_solved: str = "0"
    easy_total: str = "0"
    easy_bar: float = 0.0
    medium_solved: str = "0"
    medium_total: str = "0"
    medium_bar: float = 0.0
    hard_solved: str = "0"
    hard_total: str = "0"
    hard_bar: float = 0.0
    gauge: float = 0.0
    status: str = ""
    status_color: str = ""

    def snapshot(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def slot_values(model: DisplayModel) -> dict:
    """Map a model onto slot values without touching any slot."""
    values = {
        "rank": f"#{model.ranking}",
        "total_solved": str(model.total_solved),
        "gauge": float(model.completion_percent),
    }
    for difficulty in DIFFICULTIES:
        stats = model.tier(difficulty)
        values[f"{difficulty}_solved"] = str(stats.solved)
        values[f"{difficulty}_total"] = str(stats.total)
        values[f"{difficulty}_bar"] = stats.percent
    return values


class Renderer:
    def __init__(self, slots: OutputSlots | None = None) -> None:
        self.slots = slots or OutputSlots()
        self._model: DisplayModel = RESET_MODEL

    @property
    def model(self) -> DisplayModel:
        return self._model

    def apply(self, model: DisplayModel) -> None:
        """Project a model onto the output slots.

        All values are computed before any slot is written, so a failure
        leaves no mix of old and new data; the reset model is shown instead.
        """
        try:
            values = slot_values(model)
        except Exception:
            logger.exception("Could not render model %r, resetting", model)
            model = RESET_MODEL
            values = slot_values(RESET_MODEL)
        for name, value in values.items():
            setattr(self.slots, name, value)
        self._model = model

    def reset(self) -> None:
        self.apply(RESET_MODEL)

    def show_status(self, message: str, color: str = "red") -> None:
        self.slots.status = message
        self.slots.status_color = color

    def clear_status(self) -> None:
        self.slots.status = ""
        self.slots.status_color = ""
