"""Error types raised while running jukebox commands."""

from __future__ import annotations


class JukeboxError(Exception):
    """Base class for errors that end a single command."""


class UsageError(JukeboxError):
    """Malformed or missing command arguments."""


class UnknownCommandError(JukeboxError):
    """The command token is not in the command table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name} (type 'help' for commands)")
        self.name = name


class TransportError(JukeboxError):
    """The playback daemon could not be reached."""


class RemoteError(JukeboxError):
    """The playback daemon answered with a failure status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body
