"""Pytest configuration and fixtures for datefmt tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datefmt can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def sunday():
    """2010-10-03 14:05:09.007 UTC, a Sunday (day 276 of the year)."""
    from datefmt.core import DateTime

    return DateTime(2010, 10, 3, 14, 5, 9, 7)
