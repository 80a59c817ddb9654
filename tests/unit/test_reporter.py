# tests/unit/test_reporter.py

"""Unit tests for the final report."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from parabehat.execution.protocols import RunOutcome
from parabehat.runtime.reporter import Reporter, format_elapsed
from parabehat.state import RunState
from parabehat.summary import SummaryCounts


def test_report_order():
    output = io.StringIO()
    state = RunState()
    state.record(
        RunOutcome(
            unit=Path("a.feature"),
            exit_code=2,
            errors=("a.feature: 'bin/behat' exited with status 2",),
            extras=("--- Failed steps:\n    boom",),
            counts=SummaryCounts(scenarios=2, scenarios_passed=1, scenarios_failed=1, steps=4, steps_passed=4),
        )
    )

    Reporter(Console(file=output, color_system=None, width=200)).report(state, elapsed=1.5)

    assert output.getvalue() == (
        "\n"
        "--- Failed steps:\n"
        "    boom\n"
        "a.feature: 'bin/behat' exited with status 2\n"
        "2 scenarios (1 passed, 1 failed)\n"
        "4 steps (4 passed)\n"
        "\n"
        "Tests ran in: 1.500s\n"
    )


def test_report_without_errors_or_extras():
    output = io.StringIO()

    Reporter(Console(file=output, color_system=None)).report(RunState(), elapsed=0.25)

    assert output.getvalue() == "\n0 scenarios (0 passed)\n0 steps (0 passed)\n\nTests ran in: 0.250s\n"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0.0, "0.000s"), (12.3456, "12.346s"), (61.5, "1m1.500s")],
)
def test_format_elapsed(seconds: float, expected: str):
    assert format_elapsed(seconds) == expected
