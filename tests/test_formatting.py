from __future__ import annotations

import pytest

from spotify_jukebox.formatting import IDLE_MESSAGE, format_status, format_time
from spotify_jukebox.playback import PlaybackStatus, Track


@pytest.mark.parametrize(
    ("ms", "expected"),
    [
        (0, "0:00"),
        (999, "0:00"),
        (59999, "0:59"),
        (60000, "1:00"),
        (125000, "2:05"),
        (3_600_000, "60:00"),
        (-5, "0:00"),
    ],
)
def test_format_time(ms: int, expected: str) -> None:
    assert format_time(ms) == expected


def test_format_status_idle_when_stopped() -> None:
    status = PlaybackStatus(stopped=True, track=Track(name="x"))
    assert format_status(status) == IDLE_MESSAGE


def test_format_status_idle_without_track() -> None:
    assert format_status(PlaybackStatus(stopped=False)) == IDLE_MESSAGE


def test_format_status_lines() -> None:
    track = Track(
        name="Blue",
        artist_names=("Joni",),
        album_name="Blue (Remastered)",
        position=61000,
        duration=180500,
    )
    playing = format_status(PlaybackStatus(stopped=False, track=track))
    assert playing.splitlines() == [
        "♫ Joni — Blue",
        "  Blue (Remastered)",
        "  1:01 / 3:00  ▶ playing",
    ]
    paused = format_status(PlaybackStatus(stopped=False, paused=True, track=track))
    assert paused.endswith("⏸ paused")
