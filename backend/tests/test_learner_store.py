from __future__ import annotations

import pytest

from study_nexus.errors import DuplicateLearnerError, LearnerNotFoundError
from study_nexus.learner_store import LearnerStore
from study_nexus.models import Learner


def test_duplicate_names_are_rejected_case_insensitively() -> None:
    store = LearnerStore()
    store.create("Ada")
    with pytest.raises(DuplicateLearnerError):
        store.create(" ada ")


def test_update_applies_change_and_returns_copy() -> None:
    store = LearnerStore()
    learner = store.create("Ada")

    def _recolor(record: Learner) -> None:
        record.avatar_color = "#10b981"

    updated = store.update(learner.learner_id, _recolor)
    assert updated.avatar_color == "#10b981"
    assert updated.last_updated >= learner.last_updated

    updated.avatar_color = "#000000"
    assert store.require(learner.learner_id).avatar_color == "#10b981"


def test_failed_update_leaves_record_untouched() -> None:
    store = LearnerStore()
    learner = store.create("Grace")

    def _broken(record: Learner) -> None:
        record.avatar_color = "#ef4444"
        raise ValueError("rejected")

    with pytest.raises(ValueError):
        store.update(learner.learner_id, _broken)
    assert store.require(learner.learner_id).avatar_color == learner.avatar_color


def test_update_unknown_learner_raises() -> None:
    with pytest.raises(LearnerNotFoundError):
        LearnerStore().update("learner_missing", lambda record: None)


def test_clear_reports_removed_count() -> None:
    store = LearnerStore()
    store.create("Ada")
    store.create("Grace")
    assert store.clear() == 2
    assert store.list() == []
