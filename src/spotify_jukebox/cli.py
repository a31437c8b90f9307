"""Command-line interface for spotify-jukebox."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from types import TracebackType
from typing import Iterable, Optional, Tuple

from rich.console import Console

from spotify_jukebox.client import JukeboxClient
from spotify_jukebox.commands import CommandDispatcher, ResultKind
from spotify_jukebox.config import AppConfig, load_config
from spotify_jukebox.logging_setup import init_logging
from spotify_jukebox.session import Session
from spotify_jukebox.ui.result_view import render_result

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="jukebox", description="Console for a go-librespot player"
    )
    parser.add_argument(
        "-c",
        dest="command",
        nargs="+",
        default=None,
        metavar="COMMAND",
        help="Run a single command and exit",
    )
    return parser


def _install_exception_hooks() -> None:
    def excepthook(exc_type, exc, tb) -> None:
        logger.exception("Uncaught exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    def thread_hook(args: threading.ExceptHookArgs) -> None:
        exc_value = args.exc_value or RuntimeError("unknown")
        exc_info: Tuple[
            type[BaseException], BaseException, Optional[TracebackType]
        ] = (
            args.exc_type,
            exc_value,
            args.exc_traceback,
        )
        thread_name = args.thread.name if args.thread else "thread"
        logger.exception("Thread exception in %s", thread_name, exc_info=exc_info)

    threading.excepthook = thread_hook


def _run_once(
    dispatcher: CommandDispatcher, line: str, console: Optional[Console] = None
) -> int:
    result = Session(dispatcher).run_line(line)
    if result.kind is not ResultKind.EMPTY:
        (console or Console()).print(render_result(result))
    return 1 if result.is_error else 0


def _run_tui(dispatcher: CommandDispatcher, config: AppConfig) -> int:
    try:
        from spotify_jukebox.tui import run_tui
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return run_tui(dispatcher, config)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    one_shot = args.command is not None
    # One-shot output is the result line only; warnings go to the log file.
    init_logging(console_level=None if one_shot else logging.WARNING)
    logger.info("App start")
    _install_exception_hooks()
    config = load_config()

    with JukeboxClient(config.base_url, timeout=config.timeout_seconds) as client:
        dispatcher = CommandDispatcher(client)
        if one_shot:
            exit_code = _run_once(dispatcher, " ".join(args.command))
        else:
            exit_code = _run_tui(dispatcher, config)
    logger.info("App exit code=%s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
