"""
classmonkey Test Suite - Shared Fixtures

Every test starts with an empty process-wide registry and leaves every
patched class exactly as it found it.
"""

from __future__ import annotations

import os
import sys

import pytest

# ---------------------------------------------------------------------------
# Ensure the project root is importable (tests.sample_classes)
# ---------------------------------------------------------------------------
sys.path.insert(
    0,
    os.path.dirname(
        os.path.dirname(os.path.abspath(__file__))
    ),
)


@pytest.fixture(autouse=True)
def clean_registry():
    """Unpatch everything a test left behind."""
    from classmonkey import reset_registry

    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def registry():
    from classmonkey import get_registry

    return get_registry()


@pytest.fixture
def calls():
    """A list modifiers can append to, to observe ordering."""
    return []
