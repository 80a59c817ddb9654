# tests/unit/test_config.py

"""Unit tests for RunnerConfig and load_config."""

from pathlib import Path

import pytest

from parabehat.config import RunnerConfig, default_concurrency, load_config
from parabehat.exceptions import ConfigurationError


class TestRunnerConfig:
    def test_defaults(self):
        config = RunnerConfig()

        assert config.concurrency == default_concurrency()
        assert config.bin_path == Path("bin/behat")
        assert config.features_path == Path("features")

    def test_paths_are_converted(self):
        config = RunnerConfig(bin_path="vendor/bin/behat", features_path="tests/features")

        assert config.bin_path == Path("vendor/bin/behat")
        assert config.features_path == Path("tests/features")

    @pytest.mark.parametrize("value", [0, -1, True, "4"])
    def test_concurrency_must_be_positive_int(self, value):
        with pytest.raises(ConfigurationError, match="concurrency"):
            RunnerConfig(concurrency=value)

    def test_command_for(self):
        config = RunnerConfig(bin_path="bin/behat")

        assert config.command_for(Path("features/a.feature")) == [
            "bin/behat",
            "-f",
            "progress",
            "features/a.feature",
        ]


class TestValidate:
    def test_valid_paths(self, runner_config: RunnerConfig):
        runner_config.validate()

    def test_missing_features_path(self, fake_behat: Path, tmp_path: Path):
        config = RunnerConfig(bin_path=fake_behat, features_path=tmp_path / "missing")

        with pytest.raises(ConfigurationError, match="does not exist"):
            config.validate()

    def test_features_path_is_a_file(self, fake_behat: Path):
        config = RunnerConfig(bin_path=fake_behat, features_path=fake_behat)

        with pytest.raises(ConfigurationError, match="not a directory"):
            config.validate()

    def test_missing_executable(self, features_dir: Path, tmp_path: Path):
        config = RunnerConfig(bin_path=tmp_path / "nope", features_path=features_dir)

        with pytest.raises(ConfigurationError, match="does not exist"):
            config.validate()

    def test_executable_is_a_directory(self, features_dir: Path):
        config = RunnerConfig(bin_path=features_dir, features_path=features_dir)

        with pytest.raises(ConfigurationError, match="not a file"):
            config.validate()


class TestLoadConfig:
    def test_load_config_validates(self, fake_behat: Path, features_dir: Path):
        config = load_config(concurrency=3, bin_path=fake_behat, features_path=features_dir)

        assert config.concurrency == 3
        assert config.bin_path == fake_behat

    def test_load_config_falls_back_to_cpu_count(self, fake_behat: Path, features_dir: Path):
        config = load_config(bin_path=fake_behat, features_path=features_dir)

        assert config.concurrency == default_concurrency()

    def test_load_config_rejects_bad_paths(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            load_config(bin_path=tmp_path / "missing", features_path=tmp_path)
