# src/parabehat/runtime/scheduler.py

"""
Bounded fan-out of test units over worker threads.
"""

import threading
from collections.abc import Iterable
from pathlib import Path

import structlog

from parabehat.exceptions import ExecutionEnvironmentError
from parabehat.execution.protocols import UnitExecutor
from parabehat.state import RunState
from parabehat.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runtime.scheduler")


class Scheduler:
    """
    Runs every unit exactly once with at most `concurrency` in flight.

    A slot is taken before a worker starts and given back when it ends,
    whatever the outcome. One unit failing never affects another, except
    for an environment failure, which stops further dispatch and is raised
    once the in-flight units have finished.
    """

    def __init__(self, executor: UnitExecutor, state: RunState, concurrency: int):
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self.executor = executor
        self.state = state
        self.concurrency = concurrency
        self._slots = threading.BoundedSemaphore(concurrency)
        self._fatal_lock = threading.Lock()
        self._fatal: ExecutionEnvironmentError | None = None

    @property
    def aborted(self) -> bool:
        with self._fatal_lock:
            return self._fatal is not None

    def run(self, units: Iterable[Path]) -> int:
        """
        Executes all units and blocks until they are done.

        Returns:
            The number of units that were dispatched.

        Raises:
            ExecutionEnvironmentError: If any unit could not be started.
        """
        workers: list[threading.Thread] = []
        for index, unit in enumerate(units):
            self._slots.acquire()
            if self.aborted:
                self._slots.release()
                log.warning("Dispatch stopped after environment failure", remaining_from=str(unit))
                break
            worker = threading.Thread(target=self._work, args=(unit,), name=f"parabehat-worker-{index}")
            try:
                worker.start()
            except RuntimeError:
                self._slots.release()
                raise
            workers.append(worker)

        log.info("All units dispatched, waiting for workers", dispatched=len(workers), concurrency=self.concurrency)
        for worker in workers:
            worker.join()

        with self._fatal_lock:
            fatal = self._fatal
        if fatal is not None:
            raise fatal
        return len(workers)

    def _work(self, unit: Path) -> None:
        worker_log = log.bind(unit=str(unit))
        try:
            outcome = self.executor.execute(unit)
            self.state.record(outcome)
        except ExecutionEnvironmentError as e:
            worker_log.critical("Environment failure, aborting run", error=str(e))
            with self._fatal_lock:
                if self._fatal is None:
                    self._fatal = e
        except Exception as e:
            worker_log.exception("Unexpected error while executing unit")
            self.state.record_error(f"{unit}: unexpected error: {e}")
        finally:
            self._slots.release()


# 🔼⚙️
