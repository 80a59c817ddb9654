#
# src/parabehat/execution/__init__.py
#
"""
Test unit execution sub-package for parabehat.
"""
from .executor import ProcessExecutor
from .protocols import RunOutcome, UnitExecutor

__all__ = [
    "ProcessExecutor",
    "RunOutcome",
    "UnitExecutor",
]

# 🔼⚙️
