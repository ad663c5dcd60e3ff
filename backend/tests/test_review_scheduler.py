"""Tests for the per-subject spaced-repetition queues."""

from __future__ import annotations

from study_nexus.review_scheduler import REVIEW_OFFSETS, ReviewScheduler


def test_learning_on_day_one_with_ten_day_horizon_enqueues_three_reviews() -> None:
    scheduler = ReviewScheduler(["Physics"])
    enqueued = scheduler.record_learning("Physics", "Classical Mechanics", day=1, days_to_plan=10)
    assert enqueued == 3
    assert scheduler.pending("Physics") == ["Classical Mechanics"] * 3


def test_offsets_beyond_horizon_are_dropped() -> None:
    scheduler = ReviewScheduler(["Physics"])
    assert scheduler.record_learning("Physics", "Waves", day=1, days_to_plan=31) == len(REVIEW_OFFSETS)
    assert scheduler.record_learning("Physics", "Optics", day=30, days_to_plan=30) == 0


def test_reviews_come_out_in_fifo_order_regardless_of_day() -> None:
    scheduler = ReviewScheduler(["Biology"])
    scheduler.record_learning("Biology", "Cell Biology", day=5, days_to_plan=6)
    scheduler.record_learning("Biology", "Ecology", day=1, days_to_plan=6)
    assert scheduler.next_review("Biology") == "Cell Biology"
    assert scheduler.next_review("Biology") == "Ecology"
    assert scheduler.next_review("Biology") == "Ecology"
    assert scheduler.next_review("Biology") is None


def test_queues_are_isolated_per_subject_and_instance() -> None:
    first = ReviewScheduler(["Physics", "Chemistry"])
    second = ReviewScheduler(["Physics"])
    first.record_learning("Physics", "Relativity", day=1, days_to_plan=2)
    assert first.next_review("Chemistry") is None
    assert second.next_review("Physics") is None
    assert len(first) == 1


def test_custom_strategy_is_used_for_dequeues() -> None:
    scheduler = ReviewScheduler(["Physics"], strategy=lambda queue: queue.pop() if queue else None)
    scheduler.record_learning("Physics", "A", day=1, days_to_plan=2)
    scheduler.record_learning("Physics", "B", day=1, days_to_plan=2)
    assert scheduler.next_review("Physics") == "B"
