import logging
import shlex
import stat
import sys
from pathlib import Path

import pytest
import structlog

from parabehat.config import RunnerConfig

FAKE_BEHAT_SCRIPT = '''
import sys
from pathlib import Path

if sys.argv[1:3] != ["-f", "progress"] or len(sys.argv) != 4:
    sys.stderr.write(f"unexpected arguments: {sys.argv[1:]}\\n")
    sys.exit(64)

feature = Path(sys.argv[3])
sys.stdout.buffer.write(feature.read_bytes())
sys.stdout.flush()

if "noisy" in feature.stem:
    sys.stderr.write("warning line\\n" * 20000)
if "fails" in feature.stem:
    sys.stderr.write("boom: feature crashed\\n")
    sys.exit(3)
'''

PASSING_OUTPUT = b"....F..\n\n5 scenarios (3 passed, 2 failed)\n7 steps (5 passed, 1 failed, 1 skipped)\n"


@pytest.fixture(autouse=True)
def reset_logging():
    """Keeps structlog/logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)


@pytest.fixture
def fake_behat(tmp_path: Path) -> Path:
    """
    An executable that echoes the feature file it is given to stdout.

    Features whose name contains 'fails' exit with status 3 after writing to
    stderr; 'noisy' features write a lot of stderr.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "fake_behat.py"
    script.write_text(FAKE_BEHAT_SCRIPT)
    wrapper = bin_dir / "behat"
    wrapper.write_text(
        f'#!/bin/sh\nexec {shlex.quote(sys.executable)} {shlex.quote(str(script))} "$@"\n'
    )
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return wrapper


@pytest.fixture
def features_dir(tmp_path: Path) -> Path:
    features = tmp_path / "features"
    (features / "nested").mkdir(parents=True)
    (features / "login.feature").write_bytes(PASSING_OUTPUT)
    (features / "nested" / "checkout.feature").write_bytes(
        b"..-U\n\n1 scenario (1 passed)\n4 steps (2 passed, 1 skipped)\n"
    )
    return features


@pytest.fixture
def runner_config(fake_behat: Path, features_dir: Path) -> RunnerConfig:
    return RunnerConfig(concurrency=2, bin_path=fake_behat, features_path=features_dir)
