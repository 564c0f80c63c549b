"""Root test configuration: deterministic keys and cleanup of runtime artifacts"""

import itertools
import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["dist"]


@pytest.fixture(name="keygen")
def keygen_fixture():
    """Deterministic key generator yielding k0, k1, k2, ..."""
    counter = itertools.count()
    return lambda: f"k{next(counter)}"


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove output directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)
