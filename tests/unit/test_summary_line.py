# tests/unit/test_summary_line.py

"""Unit tests for the summary line grammar."""

import pytest

from parabehat.protocol.summary_line import SummaryCategory, SummaryLine, parse_summary_line
from parabehat.summary import SummaryCounts


class TestParseSummaryLine:
    def test_scenario_line(self):
        assert parse_summary_line("5 scenarios (3 passed, 2 failed)") == (
            SummaryLine(category=SummaryCategory.SCENARIO, total=5, passed=3, failed=2, skipped=0),
        )

    def test_step_line(self):
        assert parse_summary_line("7 steps (5 passed, 1 failed, 1 skipped)") == (
            SummaryLine(category=SummaryCategory.STEP, total=7, passed=5, failed=1, skipped=1),
        )

    def test_singular_category(self):
        (record,) = parse_summary_line("1 scenario (1 passed)")
        assert record.category is SummaryCategory.SCENARIO
        assert record.total == 1

    def test_missing_subcategories_count_as_zero(self):
        (record,) = parse_summary_line("4 steps")
        assert (record.passed, record.failed, record.skipped) == (0, 0, 0)

    @pytest.mark.parametrize(
        "line",
        ["", "0m0.05s (9.63Mb)", "--- Failed steps:", "3 passed, 1 failed", "scenarios (3 passed)"],
    )
    def test_unrelated_lines_are_ignored(self, line: str):
        assert parse_summary_line(line) == ()

    def test_colored_clauses_still_match(self):
        (record,) = parse_summary_line("2 scenarios (\x1b[32m1 passed\x1b[0m, \x1b[31m1 failed\x1b[0m)")
        assert (record.total, record.passed, record.failed) == (2, 1, 1)

    def test_to_counts_routes_to_category(self):
        scenario = SummaryLine(category=SummaryCategory.SCENARIO, total=2, passed=1, skipped=1)
        step = SummaryLine(category=SummaryCategory.STEP, total=6, passed=4, failed=2)

        assert scenario.to_counts() == SummaryCounts(scenarios=2, scenarios_passed=1, scenarios_skipped=1)
        assert step.to_counts() == SummaryCounts(steps=6, steps_passed=4, steps_failed=2)
