"""
Diagnostics for script event dispatch.

The tracer does not dispatch anything. The host calls ``observe()`` before
handing an event to its handlers and ``settle()`` afterwards; the tracer logs
the event summary and what the handlers did with it, and keeps counts.

Usage:
    tracer = EventTracer.from_config()

    event = tracer.observe(GhostMissEvent(NoteDirection.LEFT, False, -0.05, -10))
    for handler in handlers:
        if not event.should_propagate:
            break
        handler(event)
    tracer.settle(event)

    health, score = event.penalties()
"""
from __future__ import annotations

import logging
import threading
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar

from .base import ScriptEvent
from .config_io import TraceSettings, load_config, trace_settings
from .types import ScriptEventType

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=ScriptEvent)


class EventTracer:
    """Logs and counts script events around a dispatch pass."""

    def __init__(self, settings: Optional[TraceSettings] = None, log: Optional[logging.Logger] = None):
        self.settings = settings or TraceSettings()
        self._log = log or logger
        self._lock = threading.Lock()
        self._total = 0
        self._by_type: Dict[ScriptEventType, int] = defaultdict(int)
        self._canceled: Dict[ScriptEventType, int] = defaultdict(int)
        self._stopped: Dict[ScriptEventType, int] = defaultdict(int)

    @classmethod
    def from_config(
        cls,
        get_save_dir: Optional[Callable[[], Path]] = None,
        log: Optional[logging.Logger] = None,
    ) -> "EventTracer":
        return cls(trace_settings(load_config(get_save_dir)), log=log)

    def _loggable(self, event: ScriptEvent) -> bool:
        return event.type not in self.settings.ignore_types and self._log.isEnabledFor(self.settings.level)

    def observe(self, event: E) -> E:
        """Record an event about to be dispatched."""
        if not self.settings.enabled:
            return event

        with self._lock:
            self._total += 1
            self._by_type[event.type] += 1

        if self._loggable(event):
            self._log.log(self.settings.level, f"Dispatching {event}")
        return event

    def settle(self, event: E) -> E:
        """Record what the handlers did with a dispatched event."""
        if not self.settings.enabled:
            return event

        canceled = event.event_canceled
        stopped = not event.should_propagate
        with self._lock:
            if canceled:
                self._canceled[event.type] += 1
            if stopped:
                self._stopped[event.type] += 1

        if (canceled or stopped) and self._loggable(event):
            outcome = []
            if canceled:
                outcome.append("canceled")
            if stopped:
                outcome.append("propagation stopped")
            self._log.log(self.settings.level, f"{event.type.value} {' and '.join(outcome)}: {event}")
        return event

    def get_stats(self) -> Dict[str, Any]:
        """Get tracer statistics keyed by event type name."""
        with self._lock:
            return {
                "total": self._total,
                "by_type": {k.value: v for k, v in self._by_type.items()},
                "canceled": {k.value: v for k, v in self._canceled.items()},
                "stopped": {k.value: v for k, v in self._stopped.items()},
            }

    def reset(self) -> None:
        with self._lock:
            self._total = 0
            self._by_type.clear()
            self._canceled.clear()
            self._stopped.clear()
