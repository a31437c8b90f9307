"""Command table and dispatcher for jukebox command lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable, Optional, Protocol, Sequence

from spotify_jukebox.errors import (
    JukeboxError,
    RemoteError,
    TransportError,
    UnknownCommandError,
    UsageError,
)
from spotify_jukebox.formatting import format_status, format_time
from spotify_jukebox.playback import PlaybackStatus

logger = logging.getLogger(__name__)

HELP_HEADER = "spotify-jukebox commands"


class RemoteControl(Protocol):
    def fetch_status(self) -> PlaybackStatus: ...

    def start_playback(self, uri: str) -> None: ...

    def toggle_play_pause(self) -> None: ...

    def skip_next(self) -> None: ...

    def skip_previous(self) -> None: ...

    def set_volume(self, percent: int) -> None: ...

    def seek_to(self, milliseconds: int) -> None: ...

    def set_shuffle(self, enabled: bool) -> None: ...

    def enqueue_track(self, uri: str) -> None: ...


class ResultKind(Enum):
    EMPTY = "empty"
    SUCCESS = "success"
    STATUS = "status"
    HELP = "help"
    ERROR = "error"


@dataclass(frozen=True)
class CommandResult:
    """Semantic outcome of one dispatched line; styling happens elsewhere."""

    command: str
    text: str
    kind: ResultKind = ResultKind.SUCCESS
    status: Optional[PlaybackStatus] = None
    error: Optional[JukeboxError] = None
    quit: bool = False

    @property
    def is_error(self) -> bool:
        return self.kind is ResultKind.ERROR


Handler = Callable[["CommandDispatcher", Sequence[str]], CommandResult]


@dataclass(frozen=True)
class Command:
    name: str
    handler: Handler
    summary: str
    aliases: tuple[str, ...] = ()
    arg_hint: str = ""

    @property
    def usage(self) -> str:
        names = ", ".join((self.name, *self.aliases))
        return f"{names} {self.arg_hint}" if self.arg_hint else names


def _first_arg(args: Sequence[str], usage: str) -> str:
    if not args:
        raise UsageError(usage)
    return args[0]


def _int_arg(value: str, message: str) -> int:
    # int() also accepts separators ("1_000") and non-ASCII digits.
    if "_" in value or not value.isascii():
        raise UsageError(message)
    try:
        return int(value)
    except ValueError:
        raise UsageError(message) from None


def _status(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    status = dispatcher.client.fetch_status()
    return CommandResult(
        "status", format_status(status), kind=ResultKind.STATUS, status=status
    )


def _play(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    uri = _first_arg(args, "Usage: play <spotify-uri>")
    dispatcher.client.start_playback(uri)
    logger.info("Started playback uri=%s", uri)
    return CommandResult("play", "Playing")


def _pause(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    dispatcher.client.toggle_play_pause()
    logger.info("Toggled play/pause")
    return CommandResult("pause", "Toggled play/pause")


def _next(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    dispatcher.client.skip_next()
    logger.info("Skipped to next track")
    return CommandResult("next", "Next track")


def _prev(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    dispatcher.client.skip_previous()
    logger.info("Skipped to previous track")
    return CommandResult("prev", "Previous track")


def _vol(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    raw = _first_arg(args, "Usage: vol <0-100>")
    volume = _int_arg(raw, "Volume must be 0-100")
    if not 0 <= volume <= 100:
        raise UsageError("Volume must be 0-100")
    dispatcher.client.set_volume(volume)
    logger.info("Volume set to %s", volume)
    return CommandResult("vol", f"Volume: {volume}%")


def _seek(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    raw = _first_arg(args, "Usage: seek <seconds>")
    message = "Seek position must be a positive number of seconds"
    seconds = _int_arg(raw, message)
    if seconds < 0:
        raise UsageError(message)
    position_ms = seconds * 1000
    dispatcher.client.seek_to(position_ms)
    logger.info("Seeked to %sms", position_ms)
    return CommandResult("seek", f"Seeked to {format_time(position_ms)}")


def _shuffle(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    # Read-then-toggle is not atomic; a change made elsewhere between the two
    # calls is overwritten.
    current = dispatcher.client.fetch_status().shuffle_context
    enabled = not current
    dispatcher.client.set_shuffle(enabled)
    logger.info("Shuffle set to %s", enabled)
    return CommandResult("shuffle", "Shuffle on" if enabled else "Shuffle off")


def _queue(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    uri = _first_arg(args, "Usage: queue <spotify-uri>")
    dispatcher.client.enqueue_track(uri)
    logger.info("Queued uri=%s", uri)
    return CommandResult("queue", "Added to queue")


def _help(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    return CommandResult("help", dispatcher.help_text(), kind=ResultKind.HELP)


def _quit(dispatcher: "CommandDispatcher", args: Sequence[str]) -> CommandResult:
    return CommandResult("quit", "Bye!", quit=True)


COMMANDS: tuple[Command, ...] = (
    Command("status", _status, "Show current track", aliases=("s",)),
    Command("play", _play, "Play a Spotify URI", arg_hint="<uri>"),
    Command("pause", _pause, "Toggle play/pause", aliases=("pp",)),
    Command("next", _next, "Next track", aliases=("n",)),
    Command("prev", _prev, "Previous track", aliases=("p",)),
    Command("vol", _vol, "Set volume", arg_hint="<0-100>"),
    Command("seek", _seek, "Seek to position", arg_hint="<seconds>"),
    Command("shuffle", _shuffle, "Toggle shuffle"),
    Command("queue", _queue, "Add track to queue", arg_hint="<uri>"),
    Command("help", _help, "Show this help", aliases=("h",)),
    Command("quit", _quit, "Exit", aliases=("q",)),
)


def build_command_table(commands: Sequence[Command]) -> dict[str, Command]:
    """Index commands by name and alias."""
    table: dict[str, Command] = {}
    for command in commands:
        for name in (command.name, *command.aliases):
            if name in table:
                raise ValueError(f"Duplicate command name: {name}")
            table[name] = command
    return table


def parse_line(line: str) -> tuple[str, list[str]]:
    """Split a line into a lowercased command name and positional args."""
    parts = line.split()
    if not parts:
        return "", []
    return parts[0].lower(), parts[1:]


class CommandDispatcher:
    """Route completed lines to the command table."""

    def __init__(
        self,
        client: RemoteControl,
        commands: Sequence[Command] = COMMANDS,
    ) -> None:
        self.client = client
        self._commands = tuple(commands)
        self._table = build_command_table(self._commands)

    def help_text(self) -> str:
        width = max(len(command.usage) for command in self._commands) + 3
        lines = [HELP_HEADER]
        for command in self._commands:
            lines.append(f"  {command.usage.ljust(width)}{command.summary}")
        return "\n".join(lines)

    def dispatch(self, line: str) -> CommandResult:
        """Run one line and return exactly one result."""
        name, args = parse_line(line)
        if not name:
            return CommandResult("", "", kind=ResultKind.EMPTY)
        command = self._table.get(name)
        try:
            if command is None:
                raise UnknownCommandError(name)
            logger.debug("Dispatching %s args=%s", command.name, args)
            return command.handler(self, args)
        except (UsageError, UnknownCommandError) as exc:
            logger.info("Rejected command %r: %s", line, exc)
            return CommandResult(
                command.name if command else name,
                str(exc),
                kind=ResultKind.ERROR,
                error=exc,
            )
        except (TransportError, RemoteError) as exc:
            logger.warning("Command %s failed: %s", name, exc)
            return CommandResult(
                command.name if command else name,
                f"Error: {exc}",
                kind=ResultKind.ERROR,
                error=exc,
            )
