from __future__ import annotations

import logging
from datetime import date
from typing import List

from study_nexus.telemetry import TelemetryEvent, clear_listeners, emit_event, register_listener


def test_listener_failures_are_logged_not_raised(caplog) -> None:
    received: List[TelemetryEvent] = []

    def _broken(event: TelemetryEvent) -> None:
        raise RuntimeError("listener down")

    clear_listeners()
    register_listener(_broken)
    register_listener(received.append)
    with caplog.at_level(logging.INFO, logger="study_nexus.telemetry"):
        emit_event("planner_stage", learner_id="learner_x", stage="analyzing_requirements", exam_date=date(2026, 3, 6))

    assert received[0].payload["exam_date"] == "2026-03-06"
    assert "Telemetry listener failed for planner_stage" in caplog.text
    assert "TELEMETRY" in caplog.text
    clear_listeners()


def test_unregister_stops_delivery() -> None:
    received: List[TelemetryEvent] = []
    unregister = register_listener(received.append)
    emit_event("session_completion", completed=True)
    unregister()
    emit_event("session_completion", completed=False)
    assert [event.payload["completed"] for event in received] == [True]


def test_named_listener_only_receives_matching_events() -> None:
    received: List[TelemetryEvent] = []
    unregister = register_listener(received.append, names=["session_completion"])
    emit_event("planner_stage", stage="analyzing_requirements")
    emit_event("session_completion", completed=True)
    emit_event("developer_reset", learner_count=2)
    unregister()
    assert [event.name for event in received] == ["session_completion"]
