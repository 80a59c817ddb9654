#
# src/parabehat/execution/executor.py
#
"""
Runs one test unit in a child process and parses its progress output live.
"""
import subprocess
import threading
from collections.abc import Callable
from pathlib import Path
from typing import IO

import structlog
from attrs import field, mutable

from parabehat.config.models import RunnerConfig
from parabehat.exceptions import ExecutionEnvironmentError
from parabehat.execution.protocols import RunOutcome, UnitExecutor
from parabehat.protocol.glyphs import StepOutcome
from parabehat.protocol.stream_parser import ParseEvents, StreamParser
from parabehat.summary import SummaryCounts

log = structlog.get_logger("execution.executor")

READ_CHUNK_SIZE = 4096

GlyphCallback = Callable[[StepOutcome], None]


@mutable(slots=True)
class _StreamResult:
    """What the stdout reader thread hands back to the waiting worker."""
    counts: SummaryCounts = field(factory=SummaryCounts)
    extras: list[str] = field(factory=list)
    errors: list[str] = field(factory=list)
    failure: BaseException | None = field(default=None)
    echo: bool = field(default=True)


def _drain(stream: IO[bytes], chunks: list[bytes]) -> None:
    try:
        for chunk in iter(lambda: stream.read(READ_CHUNK_SIZE), b""):
            chunks.append(chunk)
    except OSError as e:
        log.warning("Failed to read child stderr", error=str(e))
    finally:
        stream.close()


def describe_exit(unit: Path, executable: Path, exit_code: int) -> str:
    if exit_code < 0:
        return f"{unit}: '{executable}' was terminated by signal {-exit_code}"
    return f"{unit}: '{executable}' exited with status {exit_code}"


class ProcessExecutor(UnitExecutor):
    """
    Implements the UnitExecutor protocol with subprocess.Popen.

    stdout is parsed on a reader thread while the calling thread waits for
    the process to exit; stderr is drained on a second thread. Neither pipe
    can fill up and stall the child.
    """

    def __init__(self, config: RunnerConfig, on_glyph: GlyphCallback | None = None):
        self.config = config
        self.on_glyph = on_glyph

    def execute(self, unit: Path) -> RunOutcome:
        command = self.config.command_for(unit)
        unit_log = log.bind(unit=str(unit))
        unit_log.debug("Starting test process", command=" ".join(command))

        try:
            process = subprocess.Popen(command, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except OSError as e:
            unit_log.error("Failed to start test process", executable=str(self.config.bin_path), error=str(e))
            raise ExecutionEnvironmentError(
                f"Failed to start test executable for '{unit}'",
                path=str(self.config.bin_path),
                details=e,
            ) from e

        result = _StreamResult()
        stderr_chunks: list[bytes] = []
        stdout_reader = threading.Thread(
            target=self._read_progress, args=(process.stdout, unit, result), name=f"stdout:{unit}", daemon=True
        )
        stderr_reader = threading.Thread(
            target=_drain, args=(process.stderr, stderr_chunks), name=f"stderr:{unit}", daemon=True
        )
        stdout_reader.start()
        stderr_reader.start()

        exit_code = process.wait()
        stdout_reader.join()
        stderr_reader.join()

        if result.failure is not None:
            raise result.failure

        stderr = b"".join(stderr_chunks).decode("utf-8", errors="replace")
        errors = list(result.errors)
        if exit_code != 0:
            message = describe_exit(unit, self.config.bin_path, exit_code)
            if stderr.strip():
                message += f"\n{stderr.rstrip()}"
            errors.append(message)
            unit_log.info("Test process failed", exit_code=exit_code)
        else:
            unit_log.debug("Test process finished", exit_code=exit_code)

        return RunOutcome(
            unit=unit,
            exit_code=exit_code,
            errors=tuple(errors),
            extras=tuple(result.extras),
            counts=result.counts,
            stderr=stderr,
        )

    def _read_progress(self, stream: IO[bytes], unit: Path, result: _StreamResult) -> None:
        parser = StreamParser()
        try:
            while True:
                try:
                    chunk = stream.read1(READ_CHUNK_SIZE)
                except OSError as e:
                    log.error("Error while reading test output", unit=str(unit), error=str(e))
                    result.errors.append(f"{unit}: output parsing stopped early: {e}")
                    self._apply(parser.abort(), unit, result)
                    return
                if not chunk:
                    break
                self._apply(parser.feed(chunk), unit, result)
            self._apply(parser.close(), unit, result)
        except Exception as e:
            log.exception("Unexpected failure while processing test output", unit=str(unit))
            result.failure = e
        finally:
            stream.close()

    def _apply(self, events: ParseEvents, unit: Path, result: _StreamResult) -> None:
        result.counts = result.counts + events.counts
        result.extras.extend(events.extras)
        if self.on_glyph is None or not result.echo:
            return
        try:
            for glyph in events.glyphs:
                self.on_glyph(glyph)
        except OSError as e:
            # The child keeps running and its summary is still collected.
            log.warning("Live progress output failed, no longer echoing glyphs", unit=str(unit), error=str(e))
            result.echo = False


# 🔼⚙️
