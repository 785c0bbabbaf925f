#!/usr/bin/env python3
# Repl.py - interactive loop and script mode for mysh
import argparse
import logging
import os
import sys
from typing import Callable, Iterable, Optional, TextIO

from prompt_toolkit import PromptSession

from context import ShellContext
from dispatcher import Dispatcher
from model import OutcomeKind

logger = logging.getLogger(__name__)

PROMPT = "$ "

# A line reader returns one line per call and raises EOFError at end of input
LineReader = Callable[[], str]

# -----------------------
# Line readers
# -----------------------
def terminal_reader() -> LineReader:
    """prompt_toolkit session on a tty, plain input() otherwise."""
    if sys.stdin.isatty() and sys.stdout.isatty():
        session = PromptSession()
        return lambda: session.prompt(PROMPT)
    return lambda: input(PROMPT)

def iterable_reader(lines: Iterable[str]) -> LineReader:
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read

# -----------------------
# Main loop
# -----------------------
def run_loop(dispatcher: Dispatcher, read_line: LineReader,
             errors: Optional[TextIO] = None, skip_comments: bool = False) -> int:
    """Read, dispatch, report; returns the session's exit code."""
    if errors is None:
        errors = sys.stderr
    while True:
        try:
            line = read_line()
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            logger.debug("end of input")
            return 0

        if skip_comments and line.strip().startswith("#"):
            continue

        try:
            outcome = dispatcher.execute(line)
        except KeyboardInterrupt:
            print()
            continue
        except Exception as e:
            logger.debug("dispatch failed", exc_info=True)
            print(f"Runtime error: {e}", file=errors)
            continue

        if outcome.kind is OutcomeKind.CONTINUE_WITH_ERROR:
            print(outcome.message, file=errors)
        elif outcome.kind is OutcomeKind.TERMINATE:
            return outcome.exit_code

# -----------------------
# Script mode runner
# -----------------------
def run_script(path: str, dispatcher: Optional[Dispatcher] = None) -> int:
    if not os.path.exists(path):
        print(f"Script not found: {path}", file=sys.stderr)
        return 1
    dispatcher = dispatcher or Dispatcher()
    # undecodable bytes reach the dispatcher as-is instead of aborting the script
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            lines = [line.rstrip("\n") for line in f]
    except OSError as e:
        print(f"Cannot read script: {path}: {e.strerror or e}", file=sys.stderr)
        return 1
    return run_loop(dispatcher, iterable_reader(lines), skip_comments=True)

def run_interactive(dispatcher: Optional[Dispatcher] = None) -> int:
    return run_loop(dispatcher or Dispatcher(), terminal_reader())

# -----------------------
# Entry point
# -----------------------
def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mysh", description="A small interactive shell")
    parser.add_argument("script", nargs="?", help="run commands from this file instead of a prompt")
    parser.add_argument("--debug", action="store_true", help="log dispatch decisions to stderr")
    return parser

def main(argv=None) -> int:
    args = build_cli().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    dispatcher = Dispatcher(ShellContext())
    if args.script:
        return run_script(args.script, dispatcher)
    return run_interactive(dispatcher)

if __name__ == "__main__":
    sys.exit(main())
