"""Pytest configuration for atmosphere tests."""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Add src/ to path before any test imports."""
    src_root = Path(__file__).parent.parent.parent
    if str(src_root) not in sys.path:
        sys.path.insert(0, str(src_root))


# Also do it at module level for import ordering
src_root = Path(__file__).parent.parent.parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


from atmosphere import OneShotNotice, REAL_DISCRIMINANT_NOTICE  # noqa: E402


class CountingSink:
    """Records every message a OneShotNotice hands to it."""

    def __init__(self):
        self.calls = []

    def __call__(self, message, category, stacklevel):
        self.calls.append((message, category))


@pytest.fixture
def sink():
    return CountingSink()


@pytest.fixture
def notice(sink):
    """Fresh notice that records into `sink` instead of warning."""
    return OneShotNotice("test notice", sink=sink)


@pytest.fixture
def rearmed_default_notice():
    """Process-wide notice, re-armed before and after the test."""
    REAL_DISCRIMINANT_NOTICE.reset()
    yield REAL_DISCRIMINANT_NOTICE
    REAL_DISCRIMINANT_NOTICE.reset()


# Reference coefficient set: V=2, A_s=0.5, c₁=1, Γ₁=1.6667
REFERENCE_COEFFS = (2.0, 0.5, 1.0, 1.6667)


@pytest.fixture
def reference_coeffs():
    return REFERENCE_COEFFS
