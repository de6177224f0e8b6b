"""Shared fixtures for the tracker tests."""

import pytest
from PySide6.QtCore import QCoreApplication


class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def db_file(tmp_path):
    return tmp_path / "tracker.db"


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Keep every test away from the real per-user data directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("STUDY_TRACKER_HOME", str(home))
    return home
