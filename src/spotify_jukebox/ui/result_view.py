"""Rich styling for command results."""

from __future__ import annotations

from rich.text import Text

from spotify_jukebox.commands import CommandResult, ResultKind
from spotify_jukebox.formatting import (
    IDLE_MESSAGE,
    album_line,
    progress_text,
    state_label,
    track_title,
)
from spotify_jukebox.playback import PlaybackStatus

TRACK_STYLE = "bold color(212)"
ALBUM_STYLE = "color(243)"
PLAY_STYLE = "color(78)"
PAUSE_STYLE = "color(214)"
ERROR_STYLE = "color(196)"
PROMPT_STYLE = "bold color(99)"
HEADER_STYLE = "bold color(212)"

_ICONS: dict[str, str] = {
    "play": "▶",
    "pause": "⏯",
    "next": "⏭",
    "prev": "⏮",
    "vol": "🔊",
    "seek": "⏩",
    "shuffle": "🔀",
    "queue": "📋",
}


def render_status(status: PlaybackStatus) -> Text:
    track = status.track
    if status.stopped or track is None:
        return Text(IDLE_MESSAGE)
    content = Text()
    content.append(track_title(track), style=TRACK_STYLE)
    content.append("\n")
    content.append(album_line(track), style=ALBUM_STYLE)
    content.append("\n")
    content.append(progress_text(track))
    content.append(
        state_label(status), style=PAUSE_STYLE if status.paused else PLAY_STYLE
    )
    return content


def render_help(text: str) -> Text:
    header, _, body = text.partition("\n")
    content = Text()
    content.append(header, style=HEADER_STYLE)
    if body:
        content.append("\n" + body)
    return content


def render_result(result: CommandResult) -> Text:
    """Apply presentation styling to a dispatcher result."""
    if result.kind is ResultKind.ERROR:
        return Text(result.text, style=ERROR_STYLE)
    if result.kind is ResultKind.STATUS and result.status is not None:
        return render_status(result.status)
    if result.kind is ResultKind.HELP:
        return render_help(result.text)
    icon = _ICONS.get(result.command)
    label = f"{icon} {result.text}" if icon else result.text
    if result.command == "play":
        return Text(label, style=PLAY_STYLE)
    return Text(label)
