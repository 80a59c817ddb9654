#
# src/parabehat/discovery.py
#
"""
Recursive discovery of test units below the features directory.
"""

import os
from pathlib import Path

import structlog

from parabehat.exceptions import DiscoveryError

log = structlog.get_logger("discovery")


def discover_test_units(root: Path) -> list[Path]:
    """
    Lists every non-directory entry below root, sorted by path.

    Symbolic links are never followed: a link to a directory is listed
    as a unit itself.

    Raises:
        DiscoveryError: If root is missing, not a directory, or any part of
            the tree cannot be read.
    """
    root = Path(root)
    if not root.is_dir():
        raise DiscoveryError("Test root is not a readable directory.", path=str(root))

    def _raise(error: OSError) -> None:
        raise error

    units: list[Path] = []
    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            units.extend(Path(dirpath) / name for name in filenames)
            # Symlinked directories are not followed; they are units like any other entry.
            units.extend(Path(dirpath) / name for name in dirnames if os.path.islink(os.path.join(dirpath, name)))
    except OSError as e:
        raise DiscoveryError("Failed to walk test directory.", path=str(root), details=e) from e

    units.sort()
    log.info("Discovered test units", root=str(root), count=len(units))
    return units


# 🔼⚙️
