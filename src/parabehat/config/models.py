#
# config/models.py
#
"""
Attrs-based data model for the runner configuration.
"""

import os
from pathlib import Path
from typing import Any

from attrs import define, field

from parabehat.exceptions import ConfigurationError

DEFAULT_BIN_PATH = Path("bin/behat")
DEFAULT_FEATURES_PATH = Path("features")
PROGRESS_FORMAT_ARGS: tuple[str, ...] = ("-f", "progress")


def default_concurrency() -> int:
    """Number of CPUs on the host, never less than one."""
    return os.cpu_count() or 1


def _validate_positive_int(inst: Any, attr: Any, value: int) -> None:
    """Validator ensures integer is positive."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"Field '{attr.name}' must be positive integer, got {value}")


@define(frozen=True, slots=True)
class RunnerConfig:
    """Settings for one parallel run, passed explicitly to every component."""
    concurrency: int = field(factory=default_concurrency, validator=_validate_positive_int)
    bin_path: Path = field(default=DEFAULT_BIN_PATH, converter=Path)
    features_path: Path = field(default=DEFAULT_FEATURES_PATH, converter=Path)

    def command_for(self, unit: Path) -> list[str]:
        """Command line that runs a single test unit with progress output."""
        return [str(self.bin_path), *PROGRESS_FORMAT_ARGS, str(unit)]

    def validate(self) -> None:
        """
        Checks the paths exist and have the right kind.

        Raises:
            ConfigurationError: If the features path is not a directory or
                the executable is missing or is a directory.
        """
        try:
            if not self.features_path.is_dir():
                if self.features_path.exists():
                    raise ConfigurationError("Feature path is not a directory.", path=str(self.features_path))
                raise ConfigurationError("Feature path does not exist.", path=str(self.features_path))
            if not self.bin_path.exists():
                raise ConfigurationError("Test executable does not exist.", path=str(self.bin_path))
            if self.bin_path.is_dir():
                raise ConfigurationError("Test executable is not a file.", path=str(self.bin_path))
        except OSError as e:
            raise ConfigurationError("Unable to inspect configured paths.", details=e) from e


# 🔼⚙️
