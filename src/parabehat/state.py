#
# src/parabehat/state.py
#
"""
Shared, thread-safe state of one parallel run.
"""

import threading
from collections.abc import Iterator

import structlog
from attrs import define, field

from parabehat.execution.protocols import RunOutcome
from parabehat.summary import SummaryAggregator

log: structlog.stdlib.BoundLogger = structlog.get_logger("state")


class Register:
    """Append-only, lock-guarded sequence of strings kept in insertion order."""

    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()
        self._entries: list[str] = []

    def append(self, entry: str) -> None:
        with self._lock:
            self._entries.append(entry)

    def extend(self, entries: tuple[str, ...] | list[str]) -> None:
        with self._lock:
            self._entries.extend(entries)

    def snapshot(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"Register(name={self.name!r}, entries={len(self)})"


@define(slots=True)
class RunState:
    """
    Everything workers contribute to during a run.

    Each member guards itself, so outcomes from different workers can be
    recorded concurrently.
    """

    summary: SummaryAggregator = field(factory=SummaryAggregator)
    errors: Register = field(factory=lambda: Register("errors"))
    extras: Register = field(factory=lambda: Register("extras"))
    completed: int = field(default=0, init=False)
    _lock: threading.Lock = field(factory=threading.Lock, init=False, repr=False)

    def record(self, outcome: RunOutcome) -> None:
        """Merges one unit's outcome into the shared state."""
        self.summary.accumulate(outcome.counts)
        self.extras.extend(outcome.extras)
        self.errors.extend(outcome.errors)
        with self._lock:
            self.completed += 1
        if outcome.success and outcome.stderr.strip():
            # Failed units already carry stderr in their error entry.
            log.warning("Test process wrote to stderr", unit=str(outcome.unit), stderr=outcome.stderr.rstrip())
        log.debug(
            "Recorded run outcome",
            unit=str(outcome.unit),
            success=outcome.success,
            exit_code=outcome.exit_code,
            errors=len(outcome.errors),
            extras=len(outcome.extras),
        )

    def record_error(self, message: str) -> None:
        self.errors.append(message)

# 🔼⚙️
