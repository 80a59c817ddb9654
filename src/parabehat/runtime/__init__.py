#
# src/parabehat/runtime/__init__.py
#
"""
Runtime components: scheduling, live progress and reporting.
"""
from .orchestrator import RunOrchestrator
from .progress import ProgressPrinter
from .reporter import Reporter
from .scheduler import Scheduler

__all__ = [
    "ProgressPrinter",
    "Reporter",
    "RunOrchestrator",
    "Scheduler",
]

# 🔼⚙️
