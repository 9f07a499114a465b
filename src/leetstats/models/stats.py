"""Display model for a user's solved-problem statistics.

``normalize`` turns an untrusted API payload into a ``DisplayModel`` in
which every field is defined: missing or malformed counts become 0, a
missing rank becomes ``RANKING_SENTINEL`` and the question total is never
below 1, so the completion percent is always computable.
"""

import math
from dataclasses import dataclass, field

from leetstats.api.shapes import ResponseShape, detect_shape
from leetstats.constants import RANKING_SENTINEL

# Tag values used by the nested shape's acSubmissionNum entries
_TAG_ALL = "All"
_TIER_TAGS = {"easy": "Easy", "medium": "Medium", "hard": "Hard"}
_TIER_SOLVED_FIELDS = {"easy": "easySolved", "medium": "mediumSolved", "hard": "hardSolved"}
_TIER_TOTAL_FIELDS = {"easy": "totalEasy", "medium": "totalMedium", "hard": "totalHard"}

# Longer digit strings are not counts (and can exceed int() conversion limits)
_MAX_COUNT_DIGITS = 18


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_percent(value: float) -> float:
    return min(100.0, max(0.0, value))


@dataclass(frozen=True)
class DifficultyStats:
    solved: int = 0
    total: int = 0

    @property
    def percent(self) -> float:
        """Share of the tier solved, 0.0 when the tier has no problems."""
        if self.total <= 0:
            return 0.0
        if self.solved >= self.total:
            return 100.0
        # solved < total, so the ratio fits a float however large the counts
        return clamp_percent(self.solved / self.total * 100)


@dataclass(frozen=True)
class DisplayModel:
    ranking: int | str = RANKING_SENTINEL
    total_solved: int = 0
    total_questions: int = 1
    easy: DifficultyStats = field(default_factory=DifficultyStats)
    medium: DifficultyStats = field(default_factory=DifficultyStats)
    hard: DifficultyStats = field(default_factory=DifficultyStats)
    completion_percent: int = 0

    @property
    def has_ranking(self) -> bool:
        return self.ranking != RANKING_SENTINEL

    def tier(self, difficulty: str) -> DifficultyStats:
        return getattr(self, difficulty)

    @classmethod
    def reset(cls) -> "DisplayModel":
        """The all-zero model shown after any failure."""
        return cls()


RESET_MODEL = DisplayModel.reset()


def completion_percent(solved: int, questions: int) -> int:
    """round_half_up(100 * solved / questions) clamped to [0, 100], in exact int math."""
    q = max(questions, 1)
    return min(100, max(0, (200 * solved + q) // (2 * q)))


def _count(value) -> int:
    """Coerce a loosely typed API count to a non-negative int, 0 if unusable."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if math.isfinite(value) and value > 0:
            return int(value)
        return 0
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit() and len(text) <= _MAX_COUNT_DIGITS:
            return int(text)
    return 0


def _flat_solved(raw: dict) -> tuple[int, dict[str, int]]:
    solved = {tier: _count(raw.get(key)) for tier, key in _TIER_SOLVED_FIELDS.items()}
    return _count(raw.get("totalSolved")), solved


def _nested_solved(raw: dict) -> tuple[int, dict[str, int]]:
    user_stats = raw.get("matchedUserStats")
    entries = user_stats.get("acSubmissionNum") if isinstance(user_stats, dict) else None
    if not isinstance(entries, list):
        entries = []

    counts: dict[str, int] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        tag = entry.get("difficulty")
        if isinstance(tag, str) and tag not in counts:
            counts[tag] = _count(entry.get("count"))

    solved = {tier: counts.get(tag, 0) for tier, tag in _TIER_TAGS.items()}
    return counts.get(_TAG_ALL, 0), solved


def normalize(raw, shape: ResponseShape | None = None) -> DisplayModel:
    """Build a fully populated DisplayModel from a raw stats payload.

    The shape is detected from the payload when not given. Anything that
    is not a dict normalizes to the reset model. The payload is not
    modified.
    """
    if not isinstance(raw, dict):
        return RESET_MODEL
    if shape is None:
        shape = detect_shape(raw)

    if shape is ResponseShape.NESTED:
        total_solved, solved = _nested_solved(raw)
    else:
        total_solved, solved = _flat_solved(raw)

    tiers = {
        tier: DifficultyStats(solved=solved[tier], total=_count(raw.get(key)))
        for tier, key in _TIER_TOTAL_FIELDS.items()
    }
    ranking = _count(raw.get("ranking"))
    total_questions = _count(raw.get("totalQuestions")) or 1

    return DisplayModel(
        ranking=ranking if ranking > 0 else RANKING_SENTINEL,
        total_solved=total_solved,
        total_questions=total_questions,
        easy=tiers["easy"],
        medium=tiers["medium"],
        hard=tiers["hard"],
        completion_percent=completion_percent(total_solved, total_questions),
    )
