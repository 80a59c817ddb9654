# src/parabehat/runtime/progress.py

"""
Live, colorized glyph output shared by all workers.
"""

import threading

from rich.console import Console
from rich.text import Text

from parabehat.protocol.glyphs import StepOutcome

DEFAULT_WRAP_WIDTH = 70


class ProgressPrinter:
    """
    Prints step glyphs as they arrive, wrapping every `wrap_at` glyphs with
    the running count.

    The print and the column increment happen under one lock, so glyphs from
    different workers may interleave but are never lost or double counted.
    """

    def __init__(self, console: Console, wrap_at: int = DEFAULT_WRAP_WIDTH):
        if wrap_at <= 0:
            raise ValueError(f"wrap_at must be positive, got {wrap_at}")
        self.console = console
        self.wrap_at = wrap_at
        self._lock = threading.Lock()
        self._column = 0

    @property
    def count(self) -> int:
        with self._lock:
            return self._column

    def emit(self, outcome: StepOutcome) -> None:
        with self._lock:
            self.console.print(Text(outcome.glyph, style=outcome.style), end="", soft_wrap=True)
            self._column += 1
            if self._column % self.wrap_at == 0:
                self.console.print(f" {self._column}", highlight=False, soft_wrap=True)


# 🔼⚙️
