"""Shared pytest fixtures for TimeProgress tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from timeprogress.periods.progress import build_records  # noqa: E402

from helpers import FRIDAY_NOON  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def records():
    """Day/Week/Month/Year records for Friday 2024-03-15 12:00."""
    return build_records(FRIDAY_NOON)


@pytest.fixture(autouse=True)
def no_family_override(monkeypatch):
    """Keep a developer's TIMEPROGRESS_FAMILY from leaking into tests."""
    monkeypatch.delenv("TIMEPROGRESS_FAMILY", raising=False)
