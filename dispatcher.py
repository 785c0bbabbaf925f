# dispatcher.py - builtin-or-external decision for one command line
from __future__ import annotations

import logging
from typing import Optional

import argparser
from commands import BUILTINS
from context import ShellContext
from errors import CommandNotFoundError, ShellError
from external_runner import resolve_executable, run_external
from model import BuiltinKind, CommandLine, DispatchOutcome

logger = logging.getLogger(__name__)


class Dispatcher:
    """Runs command lines against one ShellContext.

    Builtin names always win: the search path is only consulted for names
    outside BuiltinKind. Every ShellError raised underneath is turned into a
    ContinueWithError outcome here.
    """

    def __init__(self, context: Optional[ShellContext] = None):
        self.context = context or ShellContext()
        self.parsers = argparser.build_parsers()

    def execute(self, text: str) -> DispatchOutcome:
        line = CommandLine.parse(text)
        if line is None:
            return DispatchOutcome.proceed()
        return self.dispatch(line)

    def dispatch(self, line: CommandLine) -> DispatchOutcome:
        try:
            kind = BuiltinKind.lookup(line.name)
            if kind is not None:
                return self._run_builtin(kind, line)
            return self._run_external(line)
        except ShellError as e:
            logger.debug("%s failed: %s", line.name, e)
            return DispatchOutcome.failed(str(e))

    def _run_builtin(self, kind: BuiltinKind, line: CommandLine) -> DispatchOutcome:
        logger.debug("builtin %s %r", kind.value, line.args)
        args = argparser.parse_builtin_args(self.parsers[kind], line.args)
        return BUILTINS[kind](args, self.context)

    def _run_external(self, line: CommandLine) -> DispatchOutcome:
        cwd = self.context.workdir.current()
        found = resolve_executable(line.name, self.context.environment.search_path(), cwd)
        if found is None:
            raise CommandNotFoundError(line.name)
        env = self.context.environment.variables()
        env["PWD"] = cwd
        self.context.stdout.flush()
        code, _, _ = run_external(line.argv, found.path, cwd=cwd, env=env)
        # the program's own status never changes the shell's control flow
        logger.debug("%s exited with %s", found.path, code)
        return DispatchOutcome.proceed()
