"""Line editing state machine for the command prompt.

The buffer is an immutable value; every input event produces a new buffer via
``apply_event``. Nothing here touches the terminal, so the same transitions
drive the Textual prompt and the unit tests.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from typing_extensions import TypeAlias


@dataclass(frozen=True)
class InputBuffer:
    """Command text and cursor index, ``0 <= cursor <= len(text)``."""

    text: str = ""
    cursor: int = 0

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


class EditKey(Enum):
    DELETE_BACK = "delete_back"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_HOME = "move_home"
    MOVE_END = "move_end"
    KILL_TO_START = "kill_to_start"
    KILL_TO_END = "kill_to_end"
    SUBMIT = "submit"
    INTERRUPT = "interrupt"


@dataclass(frozen=True)
class Insert:
    text: str


EditorEvent: TypeAlias = Union[Insert, EditKey]


@dataclass(frozen=True)
class EditResult:
    buffer: InputBuffer
    line: Optional[str] = None
    interrupted: bool = False


_KEY_EVENTS: dict[str, EditKey] = {
    "ctrl+c": EditKey.INTERRUPT,
    "enter": EditKey.SUBMIT,
    "backspace": EditKey.DELETE_BACK,
    "ctrl+h": EditKey.DELETE_BACK,
    "left": EditKey.MOVE_LEFT,
    "right": EditKey.MOVE_RIGHT,
    "home": EditKey.MOVE_HOME,
    "ctrl+a": EditKey.MOVE_HOME,
    "end": EditKey.MOVE_END,
    "ctrl+e": EditKey.MOVE_END,
    "ctrl+u": EditKey.KILL_TO_START,
    "ctrl+k": EditKey.KILL_TO_END,
}


def event_from_key(
    key: str, character: Optional[str] = None
) -> Optional[EditorEvent]:
    """Map a terminal key name (Textual naming) to an editor event."""
    mapped = _KEY_EVENTS.get(key)
    if mapped is not None:
        return mapped
    if character and character.isprintable():
        return Insert(character)
    return None


def event_from_paste(text: str) -> Optional[Insert]:
    """Turn pasted text into a single Insert, flattening it to one line."""
    flat = " ".join(text.splitlines())
    flat = "".join(ch for ch in flat if ch.isprintable())
    return Insert(flat) if flat else None


def apply_event(buffer: InputBuffer, event: EditorEvent) -> EditResult:
    """Return the buffer after ``event`` plus any completed line."""
    text, cursor = buffer.text, buffer.cursor
    if isinstance(event, Insert):
        spliced = text[:cursor] + event.text + text[cursor:]
        return EditResult(InputBuffer(spliced, cursor + len(event.text)))
    if event is EditKey.DELETE_BACK:
        if cursor == 0:
            return EditResult(buffer)
        return EditResult(InputBuffer(text[: cursor - 1] + text[cursor:], cursor - 1))
    if event is EditKey.MOVE_LEFT:
        return EditResult(replace(buffer, cursor=max(0, cursor - 1)))
    if event is EditKey.MOVE_RIGHT:
        return EditResult(replace(buffer, cursor=min(len(text), cursor + 1)))
    if event is EditKey.MOVE_HOME:
        return EditResult(replace(buffer, cursor=0))
    if event is EditKey.MOVE_END:
        return EditResult(replace(buffer, cursor=len(text)))
    if event is EditKey.KILL_TO_START:
        return EditResult(InputBuffer(text[cursor:], 0))
    if event is EditKey.KILL_TO_END:
        return EditResult(InputBuffer(text[:cursor], cursor))
    if event is EditKey.SUBMIT:
        if buffer.is_blank:
            return EditResult(buffer)
        return EditResult(InputBuffer(), line=text)
    # EditKey.INTERRUPT
    return EditResult(buffer, interrupted=True)
