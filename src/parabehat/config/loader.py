#
# config/loader.py
#
"""
Builds and validates a RunnerConfig from raw option values.
"""

from pathlib import Path

import structlog

from parabehat.config.models import DEFAULT_BIN_PATH, DEFAULT_FEATURES_PATH, RunnerConfig, default_concurrency
from parabehat.exceptions import ConfigurationError

log = structlog.get_logger("config.loader")


def load_config(
    concurrency: int | None = None,
    bin_path: Path | str | None = None,
    features_path: Path | str | None = None,
) -> RunnerConfig:
    """
    Creates a validated configuration; unset values fall back to defaults.

    Raises:
        ConfigurationError: If any value is invalid.
    """
    try:
        config = RunnerConfig(
            concurrency=concurrency if concurrency is not None else default_concurrency(),
            bin_path=bin_path if bin_path is not None else DEFAULT_BIN_PATH,
            features_path=features_path if features_path is not None else DEFAULT_FEATURES_PATH,
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration value: {e}") from e

    config.validate()
    log.debug(
        "Configuration loaded",
        concurrency=config.concurrency,
        bin_path=str(config.bin_path),
        features_path=str(config.features_path),
    )
    return config


# 🔼⚙️
