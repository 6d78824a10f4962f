"""Pytest configuration and fixtures for utcalc tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so utcalc can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from utcalc import Instant  # noqa: E402


@pytest.fixture
def now() -> Instant:
    """A fixed current instant: 2024-01-15T14:30:45Z (a Monday)."""
    return Instant.from_seconds(1705329045)


@pytest.fixture
def epoch() -> Instant:
    return Instant.epoch()
