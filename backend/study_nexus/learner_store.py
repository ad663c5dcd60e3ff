"""Per-learner state held in process memory."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from .errors import DuplicateLearnerError, LearnerNotFoundError
from .models import Learner

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _normalize_learner_id(value: str) -> str:
    normalized = value.strip()
    if not normalized:
        raise ValueError("Learner id cannot be empty.")
    return normalized


class LearnerStore:
    """Keyed learner records; every read and write goes through a deep copy.

    Callers receive detached copies, so two requests never observe each other's
    intermediate state. Changes go through ``update``, which holds the lock
    from read to write.
    """

    def __init__(self) -> None:
        self._learners: Dict[str, Learner] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _clone(learner: Learner) -> Learner:
        return learner.model_copy(deep=True)

    def create(self, name: str, avatar_color: Optional[str] = None) -> Learner:
        trimmed = name.strip()
        if not trimmed:
            raise ValueError("Name is required.")
        with self._lock:
            if any(existing.name.lower() == trimmed.lower() for existing in self._learners.values()):
                raise DuplicateLearnerError(trimmed)
            learner_id = f"learner_{uuid.uuid4().hex[:12]}"
            learner = Learner(learner_id=learner_id, name=trimmed)
            if avatar_color:
                learner.avatar_color = avatar_color
            self._learners[learner_id] = learner
        logger.info("Created learner %s (%s)", learner_id, trimmed)
        return self._clone(learner)

    def get(self, learner_id: str) -> Optional[Learner]:
        key = _normalize_learner_id(learner_id)
        with self._lock:
            learner = self._learners.get(key)
            return self._clone(learner) if learner else None

    def require(self, learner_id: str) -> Learner:
        learner = self.get(learner_id)
        if learner is None:
            raise LearnerNotFoundError(learner_id)
        return learner

    def list(self) -> List[Learner]:
        with self._lock:
            return [self._clone(learner) for learner in self._learners.values()]

    def update(self, learner_id: str, mutate: Callable[[Learner], None]) -> Learner:
        """Load, change and write one learner under the store lock.

        ``mutate`` works on a private copy; if it raises, the stored record is untouched.
        Events about the change belong after ``update`` returns.
        """
        key = _normalize_learner_id(learner_id)
        with self._lock:
            current = self._learners.get(key)
            if current is None:
                raise LearnerNotFoundError(learner_id)
            working = self._clone(current)
            mutate(working)
            working.last_updated = _now()
            self._learners[key] = working
            return self._clone(working)

    def delete(self, learner_id: str) -> bool:
        key = _normalize_learner_id(learner_id)
        with self._lock:
            return self._learners.pop(key, None) is not None

    def clear(self) -> int:
        with self._lock:
            removed = len(self._learners)
            self._learners.clear()
        return removed


__all__ = ["LearnerStore"]
