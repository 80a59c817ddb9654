#
# src/parabehat/protocol/summary_line.py
#
"""
Grammar for the summary lines printed after the glyph stream, e.g.

    5 scenarios (3 passed, 2 failed)
    7 steps (5 passed, 1 failed, 1 skipped)
"""
import re
from enum import Enum

from attrs import define, field

from parabehat.summary import SummaryCounts


class SummaryCategory(Enum):
    SCENARIO = "scenario"
    STEP = "step"


_CATEGORY_PATTERNS: dict[SummaryCategory, re.Pattern[str]] = {
    category: re.compile(rf"(\d+) {category.value}") for category in SummaryCategory
}
_PASSED_PATTERN = re.compile(r"(\d+) passed")
_FAILED_PATTERN = re.compile(r"(\d+) failed")
_SKIPPED_PATTERN = re.compile(r"(\d+) skipped")


@define(frozen=True, slots=True)
class SummaryLine:
    """One category total with the sub-counts found on the same line."""

    category: SummaryCategory = field()
    total: int = field()
    passed: int = field(default=0)
    failed: int = field(default=0)
    skipped: int = field(default=0)

    def to_counts(self) -> SummaryCounts:
        if self.category is SummaryCategory.SCENARIO:
            return SummaryCounts(
                scenarios=self.total,
                scenarios_passed=self.passed,
                scenarios_failed=self.failed,
                scenarios_skipped=self.skipped,
            )
        return SummaryCounts(
            steps=self.total,
            steps_passed=self.passed,
            steps_failed=self.failed,
            steps_skipped=self.skipped,
        )


def _first_int(pattern: re.Pattern[str], line: str) -> int:
    match = pattern.search(line)
    return int(match.group(1)) if match else 0


def parse_summary_line(line: str) -> tuple[SummaryLine, ...]:
    """
    Parses one summary line into zero or more records.

    Sub-counts are only looked up on the line that carries the category
    total. Lines that mention no category yield nothing.
    """
    records: list[SummaryLine] = []
    for category, pattern in _CATEGORY_PATTERNS.items():
        match = pattern.search(line)
        if not match:
            continue
        records.append(
            SummaryLine(
                category=category,
                total=int(match.group(1)),
                passed=_first_int(_PASSED_PATTERN, line),
                failed=_first_int(_FAILED_PATTERN, line),
                skipped=_first_int(_SKIPPED_PATTERN, line),
            )
        )
    return tuple(records)


# 🔼⚙️
