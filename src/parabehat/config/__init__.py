#
# config/__init__.py
#
"""
Configuration handling sub-package for parabehat.

Exports the loading function and core configuration model.
"""

from .loader import load_config
from .models import PROGRESS_FORMAT_ARGS, RunnerConfig, default_concurrency

__all__ = [
    "PROGRESS_FORMAT_ARGS",
    "RunnerConfig",
    "default_concurrency",
    "load_config",
]

# 🔼⚙️
