#
# src/parabehat/__init__.py
#
"""
parabehat: run Behat feature files in parallel and aggregate their results.
"""

from parabehat.summary import SummaryAggregator, SummaryCounts

__all__ = [
    "SummaryAggregator",
    "SummaryCounts",
]

# 🔼⚙️
