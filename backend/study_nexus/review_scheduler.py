"""Per-subject spaced-repetition review queues."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Iterable, List, Optional, Tuple

REVIEW_OFFSETS: Tuple[int, ...] = (1, 3, 7, 14, 30)

ReviewStrategy = Callable[[Deque[str]], Optional[str]]


def fifo_review_strategy(queue: Deque[str]) -> Optional[str]:
    """Take the oldest pending topic; queue position is the only due signal."""
    if not queue:
        return None
    return queue.popleft()


class ReviewScheduler:
    """Owns one FIFO per subject for a single generation run."""

    def __init__(
        self,
        subjects: Iterable[str],
        *,
        offsets: Tuple[int, ...] = REVIEW_OFFSETS,
        strategy: ReviewStrategy = fifo_review_strategy,
    ) -> None:
        self._queues: Dict[str, Deque[str]] = {subject: deque() for subject in subjects}
        self._offsets = offsets
        self._strategy = strategy

    def record_learning(self, subject: str, topic: str, day: int, days_to_plan: int) -> int:
        """Enqueue one review per offset that still lands inside the horizon."""
        queue = self._queues.setdefault(subject, deque())
        enqueued = 0
        for offset in self._offsets:
            if day + offset <= days_to_plan:
                queue.append(topic)
                enqueued += 1
        return enqueued

    def next_review(self, subject: str) -> Optional[str]:
        queue = self._queues.get(subject)
        if queue is None:
            return None
        return self._strategy(queue)

    def pending(self, subject: str) -> List[str]:
        return list(self._queues.get(subject, ()))

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._queues.values())


__all__ = ["REVIEW_OFFSETS", "ReviewScheduler", "ReviewStrategy", "fifo_review_strategy"]
