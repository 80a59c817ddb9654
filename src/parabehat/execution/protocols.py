#
# src/parabehat/execution/protocols.py
#
"""
Defines protocols and data structures for executing one test unit.
"""
from pathlib import Path
from typing import Protocol, runtime_checkable

from attrs import define, field

from parabehat.summary import SummaryCounts


@define(frozen=True, slots=True)
class RunOutcome:
    """
    Structured result of executing one test unit.
    """
    unit: Path
    exit_code: int | None
    errors: tuple[str, ...] = field(default=())
    extras: tuple[str, ...] = field(default=())
    counts: SummaryCounts = field(factory=SummaryCounts)
    stderr: str = field(default="", repr=False)

    @property
    def success(self) -> bool:
        return self.exit_code == 0 and not self.errors


@runtime_checkable
class UnitExecutor(Protocol):
    """
    Protocol for something that can run a single test unit to completion.
    """
    def execute(self, unit: Path) -> RunOutcome:
        """
        Runs the unit and returns its outcome.

        Raises:
            ExecutionEnvironmentError: If the unit could not be started at all.
        """
        ...

# 🔼⚙️
