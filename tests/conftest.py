"""Shared pytest fixtures for FocusPad tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from focuspad.timer.engine import SessionTimer, CompletionMode

from helpers import SoundSpy


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch):
    """Keep settings and the sound cache out of the real home directory."""
    monkeypatch.setattr("focuspad.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("focuspad.audio.sounds.SOUNDS_DIR", tmp_path / "sounds")
    yield


@pytest.fixture
def spy():
    return SoundSpy()


@pytest.fixture
def timer(qapp, spy):
    """Dual-session timer that flips Work ⇄ Break and keeps running."""
    t = SessionTimer(parent=None, play_sound=spy)
    yield t
    t.pause()


@pytest.fixture
def timer_stop(qapp, spy):
    """Timer that pauses at 0 : 00 when a countdown finishes."""
    t = SessionTimer(parent=None, play_sound=spy, completion_mode=CompletionMode.STOP)
    yield t
    t.pause()


@pytest.fixture
def timer_single(qapp, spy):
    """Work-only timer."""
    t = SessionTimer(parent=None, play_sound=spy, dual_session=False)
    yield t
    t.pause()
