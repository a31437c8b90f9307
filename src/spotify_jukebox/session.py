"""Per-session state binding the line editor to the dispatcher."""

from __future__ import annotations

import logging
from typing import Optional

from spotify_jukebox.commands import CommandDispatcher, CommandResult
from spotify_jukebox.line_editor import EditorEvent, InputBuffer, apply_event

logger = logging.getLogger(__name__)


class Session:
    """Owns the input buffer and the quitting flag for one console session.

    Lines are dispatched synchronously, so the buffer is never edited while a
    command is in flight.
    """

    def __init__(self, dispatcher: CommandDispatcher) -> None:
        self.dispatcher = dispatcher
        self.buffer = InputBuffer()
        self.last_result: Optional[CommandResult] = None
        self._quitting = False

    @property
    def quitting(self) -> bool:
        return self._quitting

    def handle_event(self, event: EditorEvent) -> Optional[CommandResult]:
        """Apply one input event; return a result when a line was run."""
        if self._quitting:
            return None
        outcome = apply_event(self.buffer, event)
        self.buffer = outcome.buffer
        if outcome.interrupted:
            logger.info("Session interrupted")
            self._quitting = True
            return None
        if outcome.line is None:
            return None
        return self.run_line(outcome.line)

    def run_line(self, line: str) -> CommandResult:
        """Dispatch a pre-assembled line, bypassing the editor."""
        result = self.dispatcher.dispatch(line)
        self.last_result = result
        if result.quit:
            logger.info("Quit requested")
            self._quitting = True
        return result
