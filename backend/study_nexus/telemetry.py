"""Planner events: generation pacing, completion changes and developer resets."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from threading import RLock
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

logger = logging.getLogger("study_nexus.telemetry")


@dataclass(frozen=True)
class TelemetryEvent:
    name: str
    payload: Dict[str, Any]


Listener = Callable[[TelemetryEvent], None]

_listeners: List[Tuple[Listener, Optional[FrozenSet[str]]]] = []
_lock = RLock()


def register_listener(listener: Listener, names: Optional[Iterable[str]] = None) -> Callable[[], None]:
    """Register an in-process listener and return a callable that removes it.

    With ``names`` the listener only receives those planner events (``planner_stage``,
    ``schedule_generation``, ``session_completion``, ...); otherwise it receives all of them.
    """
    entry = (listener, frozenset(names) if names is not None else None)
    with _lock:
        _listeners.append(entry)

    def _unregister() -> None:
        with _lock:
            if entry in _listeners:
                _listeners.remove(entry)

    return _unregister


def clear_listeners() -> None:
    with _lock:
        _listeners.clear()


def emit_event(name: str, **fields: Any) -> None:
    """Log a planner event as a ``TELEMETRY`` line and hand it to matching listeners."""
    event = TelemetryEvent(name=name, payload=_sanitize(fields))

    with _lock:
        listeners = [listener for listener, names in _listeners if names is None or name in names]

    for listener in listeners:
        try:
            listener(event)
        except Exception:  # noqa: BLE001
            logger.exception("Telemetry listener failed for %s", name)

    logger.info("TELEMETRY %s", json.dumps({"event": name, **event.payload}, default=str))


def _sanitize(fields: Dict[str, Any]) -> Dict[str, Any]:
    # Dates become ISO strings so listeners and log lines see the same payload.
    return {
        key: value.isoformat() if isinstance(value, (datetime, date)) else value
        for key, value in fields.items()
    }


__all__ = [
    "Listener",
    "TelemetryEvent",
    "clear_listeners",
    "emit_event",
    "register_listener",
]
