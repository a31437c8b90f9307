"""UI tests for the interactive console."""

from __future__ import annotations

import asyncio

from textual import events

from conftest import DummyRemote
from spotify_jukebox import tui
from spotify_jukebox.commands import CommandDispatcher
from spotify_jukebox.config import AppConfig
from spotify_jukebox.line_editor import InputBuffer
from spotify_jukebox.session import Session


def _app(remote: DummyRemote) -> tui.JukeboxApp:
    return tui.JukeboxApp(Session(CommandDispatcher(remote)))


def test_typed_command_is_dispatched(remote: DummyRemote) -> None:
    app = _app(remote)

    async def runner() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("v", "o", "l", "space", "2", "0")
            assert app.session.buffer == InputBuffer("vol 20", 6)
            await pilot.press("enter")
            await pilot.pause()
            assert app.session.buffer == InputBuffer()

    asyncio.run(runner())
    assert remote.calls == [("set_volume", 20)]
    assert app.output_text is not None
    assert app.output_text.plain == "🔊 Volume: 20%"


def test_cursor_editing_keys(remote: DummyRemote) -> None:
    app = _app(remote)

    async def runner() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("n", "e", "e", "x", "t", "left", "left", "backspace")
            assert app.session.buffer == InputBuffer("next", 2)
            await pilot.press("ctrl+a")
            assert app.session.buffer.cursor == 0
            await pilot.press("ctrl+k")
            assert app.session.buffer == InputBuffer()
            await pilot.press("enter")
            await pilot.pause()

    asyncio.run(runner())
    assert remote.calls == []
    assert app.output_text is None


def test_paste_inserts_at_cursor(remote: DummyRemote) -> None:
    app = _app(remote)

    async def runner() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("p", "l", "a", "y", "space")
            app.query_one("#prompt_line").post_message(events.Paste("spotify:track:1"))
            await pilot.pause()
            assert app.session.buffer == InputBuffer("play spotify:track:1", 20)
            await pilot.press("enter")
            await pilot.pause()

    asyncio.run(runner())
    assert remote.calls == [("start_playback", "spotify:track:1")]


def test_quit_command_exits(remote: DummyRemote) -> None:
    app = _app(remote)

    async def runner() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("q", "enter")

    asyncio.run(runner())
    assert app.session.quitting
    assert app.output_text is not None
    assert app.output_text.plain == "Bye!"


def test_ctrl_c_interrupts_with_pending_input(remote: DummyRemote) -> None:
    app = _app(remote)

    async def runner() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("n", "e", "x", "t", "ctrl+c")

    asyncio.run(runner())
    assert app.session.quitting
    assert remote.calls == []


def test_run_tui_uses_configured_prompt(monkeypatch) -> None:
    ran: list[tui.JukeboxApp] = []
    monkeypatch.setattr(tui.JukeboxApp, "run", lambda self: ran.append(self))
    config = AppConfig(prompt="spotify> ")
    assert tui.run_tui(CommandDispatcher(DummyRemote()), config) == 0
    assert ran and ran[0]._prompt == "spotify> "
