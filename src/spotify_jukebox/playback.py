"""Playback snapshot model for the go-librespot status API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Track:
    """Currently loaded track as reported by the daemon."""

    uri: str = ""
    name: str = ""
    artist_names: tuple[str, ...] = field(default_factory=tuple)
    album_name: str = ""
    album_cover_url: Optional[str] = None
    position: int = 0
    duration: int = 0


@dataclass(frozen=True)
class PlaybackStatus:
    """Immutable snapshot of the remote player state."""

    stopped: bool = True
    paused: bool = False
    buffering: bool = False
    volume: int = 0
    volume_steps: int = 0
    shuffle_context: bool = False
    track: Optional[Track] = None

    @property
    def is_idle(self) -> bool:
        return self.stopped or self.track is None


def _get_bool(raw: dict[str, Any], key: str, default: bool = False) -> bool:
    value = raw.get(key, default)
    return value if isinstance(value, bool) else default


def _get_int(raw: dict[str, Any], key: str, default: int = 0) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _get_str(raw: dict[str, Any], key: str, default: str = "") -> str:
    value = raw.get(key, default)
    return value if isinstance(value, str) else default


def track_from_mapping(raw: dict[str, Any]) -> Track:
    """Build a Track from the daemon's JSON object."""
    artists = raw.get("artist_names") or []
    if not isinstance(artists, list):
        artists = []
    cover = raw.get("album_cover_url")
    return Track(
        uri=_get_str(raw, "uri"),
        name=_get_str(raw, "name"),
        artist_names=tuple(str(name) for name in artists),
        album_name=_get_str(raw, "album_name"),
        album_cover_url=cover if isinstance(cover, str) and cover else None,
        position=max(0, _get_int(raw, "position")),
        duration=max(0, _get_int(raw, "duration")),
    )


def status_from_mapping(raw: dict[str, Any]) -> PlaybackStatus:
    """Normalize the /status JSON payload into a PlaybackStatus."""
    track_raw = raw.get("track")
    track = track_from_mapping(track_raw) if isinstance(track_raw, dict) else None
    volume = max(0, min(100, _get_int(raw, "volume")))
    return PlaybackStatus(
        stopped=_get_bool(raw, "stopped"),
        paused=_get_bool(raw, "paused"),
        buffering=_get_bool(raw, "buffering"),
        volume=volume,
        volume_steps=_get_int(raw, "volume_steps"),
        shuffle_context=_get_bool(raw, "shuffle_context"),
        track=track,
    )
