"""Normalization of raw stats payloads into DisplayModel."""

import copy

from leetstats.api.shapes import ResponseShape, detect_shape
from leetstats.models.stats import (
    RESET_MODEL,
    DifficultyStats,
    DisplayModel,
    completion_percent,
    normalize,
)

FLAT_SUCCESS = {
    "status": "success",
    "ranking": 1500,
    "totalSolved": 120,
    "totalQuestions": 3000,
    "easySolved": 80,
    "totalEasy": 800,
    "mediumSolved": 30,
    "totalMedium": 1600,
    "hardSolved": 10,
    "totalHard": 600,
}

NESTED_SUCCESS = {
    "ranking": 42000,
    "totalQuestions": 2000,
    "totalEasy": 500,
    "totalMedium": 1000,
    "totalHard": 500,
    "matchedUserStats": {
        "acSubmissionNum": [
            {"difficulty": "All", "count": 50, "submissions": 90},
            {"difficulty": "Easy", "count": 30, "submissions": 40},
            {"difficulty": "Medium", "count": 20, "submissions": 50},
        ],
    },
}


def test_flat_success():
    model = normalize(FLAT_SUCCESS)
    assert model == DisplayModel(
        ranking=1500,
        total_solved=120,
        total_questions=3000,
        easy=DifficultyStats(80, 800),
        medium=DifficultyStats(30, 1600),
        hard=DifficultyStats(10, 600),
        completion_percent=4,
    )


def test_missing_fields_default_to_zero():
    model = normalize({"status": "success"})
    assert model.ranking == "--"
    assert not model.has_ranking
    assert model.total_solved == 0
    assert model.total_questions == 1
    for difficulty in ("easy", "medium", "hard"):
        assert model.tier(difficulty) == DifficultyStats(0, 0)
    assert model.completion_percent == 0


def test_wrong_typed_fields_default_to_zero():
    model = normalize({
        "ranking": None,
        "totalSolved": "lots",
        "totalQuestions": [3000],
        "easySolved": True,
        "totalEasy": -5,
        "mediumSolved": float("nan"),
        "totalMedium": {"n": 1},
        "hardSolved": None,
    })
    assert model.ranking == "--"
    assert model.total_solved == 0
    assert model.total_questions == 1
    assert model.easy == DifficultyStats(0, 0)
    assert model.medium == DifficultyStats(0, 0)
    assert model.hard == DifficultyStats(0, 0)


def test_numeric_strings_and_floats_are_accepted():
    model = normalize({"ranking": "77", "totalSolved": 10.9, "totalQuestions": " 20 "})
    assert model.ranking == 77
    assert model.total_solved == 10
    assert model.total_questions == 20
    assert model.completion_percent == 50


def test_zero_ranking_is_sentinel():
    assert normalize({"ranking": 0}).ranking == "--"


def test_zero_total_questions_never_divides_by_zero():
    assert normalize({"totalSolved": 0, "totalQuestions": 0}).completion_percent == 0
    model = normalize({"totalSolved": 5, "totalQuestions": 0})
    assert model.total_questions == 1
    assert model.completion_percent == 100


def test_percent_clamped_when_solved_exceeds_questions():
    assert normalize({"totalSolved": 5000, "totalQuestions": 3000}).completion_percent == 100


def test_percent_rounds_half_up():
    assert completion_percent(1, 8) == 13  # 12.5
    assert completion_percent(1, 40) == 3  # 2.5
    assert completion_percent(1, 3) == 33


def test_percent_always_in_range():
    for solved in (0, 1, 7, 99, 100, 101, 10_000):
        for questions in (0, 1, 3, 100, 3000):
            assert 0 <= completion_percent(solved, questions) <= 100


def test_nested_success():
    model = normalize(NESTED_SUCCESS)
    assert model.ranking == 42000
    assert model.total_solved == 50
    assert model.total_questions == 2000
    assert model.easy == DifficultyStats(30, 500)
    assert model.medium == DifficultyStats(20, 1000)
    # No "Hard" entry: solved defaults to 0, total still comes from totalHard
    assert model.hard == DifficultyStats(0, 500)
    assert model.completion_percent == 3


def test_nested_tags_are_case_sensitive():
    raw = copy.deepcopy(NESTED_SUCCESS)
    raw["matchedUserStats"]["acSubmissionNum"] = [
        {"difficulty": "easy", "count": 30},
        {"difficulty": "EASY", "count": 30},
        "garbage",
        {"difficulty": "Easy", "count": 12},
        {"difficulty": "Easy", "count": 99},
    ]
    model = normalize(raw)
    assert model.easy.solved == 12
    assert model.total_solved == 0


def test_nested_without_submission_list():
    model = normalize({"matchedUserStats": {}, "totalEasy": 10}, ResponseShape.NESTED)
    assert model.total_solved == 0
    assert model.easy == DifficultyStats(0, 10)


def test_shape_detection():
    assert detect_shape(FLAT_SUCCESS) is ResponseShape.FLAT
    assert detect_shape(NESTED_SUCCESS) is ResponseShape.NESTED
    assert detect_shape({"matchedUserStats": None}) is ResponseShape.FLAT


def test_normalize_does_not_mutate_input():
    raw = copy.deepcopy(NESTED_SUCCESS)
    normalize(raw)
    assert raw == NESTED_SUCCESS


def test_non_dict_payload_is_reset_model():
    assert normalize(None) == RESET_MODEL
    assert normalize(["status", "success"]) == RESET_MODEL


def test_reset_model_is_all_zero():
    assert RESET_MODEL == DisplayModel.reset()
    assert RESET_MODEL.ranking == "--"
    assert RESET_MODEL.total_solved == 0
    assert RESET_MODEL.completion_percent == 0
    assert RESET_MODEL.easy.percent == 0.0


def test_difficulty_percent():
    assert DifficultyStats(80, 800).percent == 10.0
    assert DifficultyStats(5, 0).percent == 0.0
    assert DifficultyStats(10, 5).percent == 100.0


def test_huge_integer_counts_still_normalize():
    model = normalize({"totalSolved": 10**400, "totalQuestions": 3000})
    assert model.total_solved == 10**400
    assert model.completion_percent == 100

    model = normalize({"totalSolved": 1, "totalQuestions": 10**400})
    assert model.completion_percent == 0


def test_huge_tier_counts_give_bounded_percent():
    assert DifficultyStats(10**400, 3).percent == 100.0
    assert DifficultyStats(1, 10**400).percent == 0.0
    assert DifficultyStats(10**400, 2 * 10**400).percent == 50.0


def test_overlong_digit_strings_are_not_counts():
    model = normalize({"ranking": "9" * 5000, "totalSolved": "1" * 19})
    assert model.ranking == "--"
    assert model.total_solved == 0
    assert normalize({"totalSolved": "9" * 18}).total_solved == 10**18 - 1
