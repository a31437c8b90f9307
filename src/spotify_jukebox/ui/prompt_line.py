"""Prompt widget that feeds key presses to the session."""

from __future__ import annotations

from typing import Callable, Optional

from rich.text import Text
from textual import events
from textual.widget import Widget

from spotify_jukebox.line_editor import (
    EditorEvent,
    InputBuffer,
    event_from_key,
    event_from_paste,
)
from spotify_jukebox.ui.result_view import PROMPT_STYLE

CURSOR_STYLE = "reverse"


def render_prompt(prompt: str, buffer: InputBuffer) -> Text:
    """Render the prompt and buffer with the cursor cell in reverse video."""
    content = Text()
    content.append(prompt, style=PROMPT_STYLE)
    text, cursor = buffer.text, buffer.cursor
    if cursor < len(text):
        content.append(text[:cursor])
        content.append(text[cursor], style=CURSOR_STYLE)
        content.append(text[cursor + 1 :])
    else:
        content.append(text)
        content.append(" ", style=CURSOR_STYLE)
    return content


class PromptLine(Widget):
    """Single-line command prompt rendered from an InputBuffer."""

    can_focus = True

    DEFAULT_CSS = """
    PromptLine {
        height: 1;
    }
    """

    def __init__(
        self,
        prompt: str,
        on_event: Callable[[EditorEvent], None],
        *,
        get_buffer: Callable[[], InputBuffer],
        id: Optional[str] = None,
    ) -> None:
        super().__init__(id=id)
        self._prompt = prompt
        self._on_event = on_event
        self._get_buffer = get_buffer

    def render(self) -> Text:
        return render_prompt(self._prompt, self._get_buffer())

    def on_key(self, event: events.Key) -> None:
        editor_event = event_from_key(event.key, event.character)
        if editor_event is None:
            return
        event.stop()
        event.prevent_default()
        self._on_event(editor_event)

    def on_paste(self, event: events.Paste) -> None:
        event.stop()
        editor_event = event_from_paste(event.text)
        if editor_event is not None:
            self._on_event(editor_event)
