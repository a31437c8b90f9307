"""Plain-text formatting for playback snapshots."""

from __future__ import annotations

from spotify_jukebox.playback import PlaybackStatus, Track

IDLE_MESSAGE = "♫ Ready (nothing playing)"
PLAYING_LABEL = "▶ playing"
PAUSED_LABEL = "⏸ paused"


def format_time(ms: int) -> str:
    """Format milliseconds as M:SS, flooring to whole seconds."""
    total_seconds = max(0, ms) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def track_title(track: Track) -> str:
    artists = ", ".join(track.artist_names)
    return f"♫ {artists} — {track.name}"


def album_line(track: Track) -> str:
    return f"  {track.album_name}"


def state_label(status: PlaybackStatus) -> str:
    return PAUSED_LABEL if status.paused else PLAYING_LABEL


def progress_text(track: Track) -> str:
    return f"  {format_time(track.position)} / {format_time(track.duration)}  "


def format_status(status: PlaybackStatus) -> str:
    """Render a snapshot as the three-line now-playing block."""
    track = status.track
    if status.stopped or track is None:
        return IDLE_MESSAGE
    return "\n".join(
        [
            track_title(track),
            album_line(track),
            progress_text(track) + state_label(status),
        ]
    )
