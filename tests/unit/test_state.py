# tests/unit/test_state.py

"""Unit tests for the shared run state and its registers."""

import threading
from pathlib import Path

from parabehat.execution.protocols import RunOutcome
from parabehat.state import Register, RunState
from parabehat.summary import SummaryCounts


class TestRegister:
    def test_keeps_insertion_order(self):
        register = Register("errors")
        register.append("first")
        register.extend(["second", "third"])

        assert list(register) == ["first", "second", "third"]
        assert len(register) == 3

    def test_snapshot_is_detached(self):
        register = Register("extras")
        register.append("one")
        snapshot = register.snapshot()
        register.append("two")

        assert snapshot == ("one",)

    def test_concurrent_appends(self):
        register = Register("errors")

        def worker(prefix: int):
            for i in range(200):
                register.append(f"{prefix}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(register) == 1000
        assert len(set(register)) == 1000


class TestRunState:
    def test_record_merges_outcome(self):
        state = RunState()
        outcome = RunOutcome(
            unit=Path("features/a.feature"),
            exit_code=1,
            errors=("features/a.feature: exited with status 1",),
            extras=("--- Failed steps:",),
            counts=SummaryCounts(scenarios=1, scenarios_failed=1),
        )

        state.record(outcome)

        assert state.completed == 1
        assert state.errors.snapshot() == outcome.errors
        assert state.extras.snapshot() == outcome.extras
        assert state.summary.snapshot() == SummaryCounts(scenarios=1, scenarios_failed=1)

    def test_successful_outcome(self):
        outcome = RunOutcome(unit=Path("a.feature"), exit_code=0)

        assert outcome.success
        assert not RunOutcome(unit=Path("a.feature"), exit_code=0, errors=("x",)).success

    def test_record_error(self):
        state = RunState()
        state.record_error("unexpected")

        assert list(state.errors) == ["unexpected"]
        assert state.completed == 0
