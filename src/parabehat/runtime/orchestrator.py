# src/parabehat/runtime/orchestrator.py

"""
High-level coordinator for one parallel run.
Wires discovery, the scheduler and the reporter together.
"""

import time
from pathlib import Path

import structlog
from rich.console import Console

from parabehat.config import RunnerConfig
from parabehat.discovery import discover_test_units
from parabehat.execution import ProcessExecutor, UnitExecutor
from parabehat.state import RunState
from parabehat.telemetry import StructLogger

from .progress import ProgressPrinter
from .reporter import Reporter
from .scheduler import Scheduler

log: StructLogger = structlog.get_logger("runtime.orchestrator")


class RunOrchestrator:
    """Instantiates and coordinates all runtime components for the run command."""

    def __init__(
        self,
        config: RunnerConfig,
        console: Console | None = None,
        executor: UnitExecutor | None = None,
    ):
        self.config = config
        self.console = console or Console(highlight=False)
        self.state = RunState()
        self.progress = ProgressPrinter(self.console)
        self.executor = executor or ProcessExecutor(config, on_glyph=self.progress.emit)
        self.reporter = Reporter(self.console)

    def run(self, units: list[Path] | None = None) -> RunState:
        """
        Runs every unit (discovered from the config when not given) and
        prints the report.

        Raises:
            DiscoveryError: If the features directory cannot be walked.
            ExecutionEnvironmentError: If a test process cannot be started.
        """
        if units is None:
            units = discover_test_units(self.config.features_path)

        log.info("Run starting", units=len(units), concurrency=self.config.concurrency)
        start = time.perf_counter()
        scheduler = Scheduler(self.executor, self.state, self.config.concurrency)
        scheduler.run(units)
        elapsed = time.perf_counter() - start

        if units and self.state.summary.snapshot().is_empty:
            log.warning("No summary lines were recognized in any test output", units=len(units))
        self.reporter.report(self.state, elapsed)
        log.info(
            "Run complete",
            completed=self.state.completed,
            glyphs=self.progress.count,
            errors=len(self.state.errors),
            elapsed=round(elapsed, 3),
        )
        return self.state

# 🔼⚙️
