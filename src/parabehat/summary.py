#
# src/parabehat/summary.py
#
"""
Scenario and step counters, and the lock-guarded aggregator that merges
them across concurrently running workers.
"""

import threading

import attrs
import structlog
from attrs import define, field
from rich.text import Text

log: structlog.stdlib.BoundLogger = structlog.get_logger("summary")

PASSED_STYLE = "green"
FAILED_STYLE = "red"
SKIPPED_STYLE = "cyan"


@define(frozen=True, slots=True)
class SummaryCounts:
    """
    Eight scenario/step counters.

    Sub-counters are never checked against their totals; the values are
    only as consistent as the text they were parsed from.
    """

    scenarios: int = field(default=0)
    scenarios_passed: int = field(default=0)
    scenarios_failed: int = field(default=0)
    scenarios_skipped: int = field(default=0)
    steps: int = field(default=0)
    steps_passed: int = field(default=0)
    steps_failed: int = field(default=0)
    steps_skipped: int = field(default=0)

    def __add__(self, other: "SummaryCounts") -> "SummaryCounts":
        if not isinstance(other, SummaryCounts):
            return NotImplemented
        mine = attrs.asdict(self)
        theirs = attrs.asdict(other)
        return SummaryCounts(**{name: mine[name] + theirs[name] for name in mine})

    @property
    def is_empty(self) -> bool:
        return self == SummaryCounts()

    def render_text(self) -> Text:
        """Renders both summary lines with the passed/failed/skipped clauses colored."""
        text = Text()
        _append_category(
            text, self.scenarios, "scenarios", self.scenarios_passed, self.scenarios_failed, self.scenarios_skipped
        )
        _append_category(text, self.steps, "steps", self.steps_passed, self.steps_failed, self.steps_skipped)
        return text

    def render(self) -> str:
        return self.render_text().plain


def _append_category(text: Text, total: int, label: str, passed: int, failed: int, skipped: int) -> None:
    text.append(f"{total} {label} (")
    text.append(f"{passed} passed", style=PASSED_STYLE)
    if failed > 0:
        text.append(", ")
        text.append(f"{failed} failed", style=FAILED_STYLE)
    if skipped > 0:
        text.append(", ")
        text.append(f"{skipped} skipped", style=SKIPPED_STYLE)
    text.append(")\n")


class SummaryAggregator:
    """
    Shared run summary, safe to update from any worker thread.

    All access goes through one lock: every accumulate() that has returned
    before snapshot() is called is visible in the snapshot.
    """

    def __init__(self, initial: SummaryCounts | None = None):
        self._lock = threading.Lock()
        self._counts = initial or SummaryCounts()

    def accumulate(self, delta: SummaryCounts) -> None:
        """Adds every counter of delta to the shared summary."""
        with self._lock:
            self._counts = self._counts + delta
        log.debug("Accumulated summary delta", **attrs.asdict(delta))

    def snapshot(self) -> SummaryCounts:
        with self._lock:
            return self._counts

    def render_text(self) -> Text:
        return self.snapshot().render_text()

    def render(self) -> str:
        return self.snapshot().render()


# 🔼⚙️
