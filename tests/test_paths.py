"""Tests for data directory resolution."""

import os

import pytest

from BackEnd.core.paths import db_path, user_data_dir


def test_override_directory_is_created(isolated_data_dir):
    assert not isolated_data_dir.exists()
    assert user_data_dir() == isolated_data_dir
    assert isolated_data_dir.is_dir()


def test_db_path_inside_data_dir(isolated_data_dir):
    assert db_path() == isolated_data_dir / "tracker.db"


@pytest.mark.skipif(os.name != "posix", reason="XDG lookup is POSIX only")
def test_xdg_fallback(tmp_path, monkeypatch):
    monkeypatch.delenv("STUDY_TRACKER_HOME")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    assert user_data_dir() == tmp_path / "xdg" / "HSCStudyTracker"
