"""Pytest configuration for spotify-jukebox."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pytest

from spotify_jukebox.errors import JukeboxError
from spotify_jukebox.playback import PlaybackStatus


class DummyRemote:
    """In-memory stand-in for JukeboxClient that records every call."""

    def __init__(self, status: Optional[PlaybackStatus] = None) -> None:
        self.status = status or PlaybackStatus()
        self.calls: list[tuple[str, Any]] = []
        self.fail_with: Optional[JukeboxError] = None
        self.fail_on: Optional[str] = None

    def _record(self, name: str, value: Any = None) -> None:
        self.calls.append((name, value))
        if self.fail_with is not None and self.fail_on in (None, name):
            raise self.fail_with

    def fetch_status(self) -> PlaybackStatus:
        self._record("fetch_status")
        return self.status

    def start_playback(self, uri: str) -> None:
        self._record("start_playback", uri)

    def toggle_play_pause(self) -> None:
        self._record("toggle_play_pause")

    def skip_next(self) -> None:
        self._record("skip_next")

    def skip_previous(self) -> None:
        self._record("skip_previous")

    def set_volume(self, percent: int) -> None:
        self._record("set_volume", percent)

    def seek_to(self, milliseconds: int) -> None:
        self._record("seek_to", milliseconds)

    def set_shuffle(self, enabled: bool) -> None:
        self._record("set_shuffle", enabled)

    def enqueue_track(self, uri: str) -> None:
        self._record("enqueue_track", uri)


@pytest.fixture
def remote() -> DummyRemote:
    return DummyRemote()


@pytest.fixture(autouse=True)
def isolate_user_dirs(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "local"))
