"""Service-level errors raised around the scheduling engine."""

from __future__ import annotations


class LearnerNotFoundError(LookupError):
    def __init__(self, learner_id: str) -> None:
        super().__init__(f"Learner '{learner_id}' was not found.")
        self.learner_id = learner_id


class ScheduleNotFoundError(LookupError):
    def __init__(self, learner_id: str) -> None:
        super().__init__(f"No study schedule generated for '{learner_id}'.")
        self.learner_id = learner_id


class SessionNotFoundError(LookupError):
    def __init__(self, day: int, index: int) -> None:
        super().__init__(f"No session at day {day}, index {index}.")
        self.day = day
        self.index = index


class DuplicateLearnerError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Learner \"{name}\" already exists.")
        self.name = name


class EmptySubjectsError(ValueError):
    """Raised before generation when no subject survives input cleanup."""

    def __init__(self) -> None:
        super().__init__("Please add at least one subject.")


class GenerationCancelledError(RuntimeError):
    """Raised when a cancellation was requested before assembly started."""


__all__ = [
    "DuplicateLearnerError",
    "EmptySubjectsError",
    "GenerationCancelledError",
    "LearnerNotFoundError",
    "ScheduleNotFoundError",
    "SessionNotFoundError",
]
