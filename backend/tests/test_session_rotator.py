"""Tests for the daily session-type patterns."""

from __future__ import annotations

import pytest

from study_nexus.session_rotator import EXAM_APPROACH_PATTERN, sequence_for


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        ("visual", ["learning", "practice", "practice", "review"]),
        ("auditory", ["learning", "review", "learning", "practice"]),
        ("kinesthetic", ["practice", "practice", "learning", "review"]),
        ("reading", ["learning", "learning", "review", "practice"]),
        (None, ["learning", "learning", "practice", "review"]),
    ],
)
def test_style_patterns_before_exam_approach(style, expected) -> None:
    assert sequence_for(1, 10, style) == expected
    assert sequence_for(7, 10, style) == expected


def test_exam_approach_overrides_learning_style() -> None:
    for style in ("visual", "auditory", "kinesthetic", "reading", None):
        assert sequence_for(8, 10, style) == list(EXAM_APPROACH_PATTERN)


def test_single_day_plan_is_already_in_exam_approach() -> None:
    assert sequence_for(1, 1, "visual") == ["review", "practice", "review", "practice"]
