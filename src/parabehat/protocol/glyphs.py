#
# src/parabehat/protocol/glyphs.py
#
"""
Single-character step outcomes printed by the progress formatter.
"""
from enum import Enum


class StepOutcome(Enum):
    """Outcome of one step, keyed by the glyph the formatter prints for it."""

    PASSED = "."
    SKIPPED = "-"  # also used for pending steps
    FAILED = "F"
    UNDEFINED = "U"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def style(self) -> str:
        return OUTCOME_STYLES[self]


OUTCOME_STYLES: dict[StepOutcome, str] = {
    StepOutcome.PASSED: "green",
    StepOutcome.SKIPPED: "cyan",
    StepOutcome.FAILED: "red",
    StepOutcome.UNDEFINED: "yellow",
}

# Byte value -> outcome, for scanning raw output.
GLYPH_OUTCOMES: dict[int, StepOutcome] = {ord(outcome.value): outcome for outcome in StepOutcome}

# 🔼⚙️
