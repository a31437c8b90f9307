"""Textual-based interactive console for the jukebox."""

from __future__ import annotations

import logging
from typing import Optional

try:
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import VerticalScroll
    from textual.widgets import Static
    from rich.text import Text
except Exception as exc:  # pragma: no cover - depends on environment
    raise RuntimeError(
        "Textual is required for the TUI. Install the 'textual' dependency."
    ) from exc

from spotify_jukebox.commands import CommandDispatcher, CommandResult, ResultKind
from spotify_jukebox.config import AppConfig
from spotify_jukebox.line_editor import EditKey, EditorEvent
from spotify_jukebox.session import Session
from spotify_jukebox.ui.prompt_line import PromptLine
from spotify_jukebox.ui.result_view import render_result

logger = logging.getLogger(__name__)

HINT_TEXT = "Enter: run  Ctrl+A/E: home/end  Ctrl+U/K: kill  Ctrl+C: quit"


class JukeboxApp(App):
    """Full-screen command console."""

    CSS_PATH = "app.tcss"
    TITLE = "spotify-jukebox"

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", priority=True),
    ]

    def __init__(self, session: Session, *, prompt: str = "jukebox> ") -> None:
        super().__init__()
        self.session = session
        self._prompt = prompt
        self._output: Optional[Static] = None
        self._prompt_line: Optional[PromptLine] = None
        self.output_text: Optional[Text] = None

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="output_scroll"):
            yield Static("", id="output")
        yield PromptLine(
            self._prompt,
            self.handle_editor_event,
            get_buffer=lambda: self.session.buffer,
            id="prompt_line",
        )
        yield Static(HINT_TEXT, id="hint")

    def on_mount(self) -> None:
        self._output = self.query_one("#output", Static)
        self._prompt_line = self.query_one("#prompt_line", PromptLine)
        self.set_focus(self._prompt_line)
        logger.info("TUI mounted")

    def handle_editor_event(self, event: EditorEvent) -> None:
        result = self.session.handle_event(event)
        if result is not None:
            self._show_result(result)
        if self._prompt_line:
            self._prompt_line.refresh()
        if self.session.quitting:
            logger.info("TUI exit requested")
            self.exit()

    def _show_result(self, result: CommandResult) -> None:
        if result.kind is ResultKind.EMPTY or self._output is None:
            return
        self.output_text = render_result(result)
        self._output.update(self.output_text)

    def action_interrupt(self) -> None:
        self.handle_editor_event(EditKey.INTERRUPT)


def run_tui(dispatcher: CommandDispatcher, config: AppConfig) -> int:
    """Run the interactive console and return an exit code."""
    logger.info("TUI start base_url=%s", config.base_url)
    app = JukeboxApp(Session(dispatcher), prompt=config.prompt)
    app.run()
    logger.info("TUI exit")
    return 0
