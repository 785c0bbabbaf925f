#!/usr/bin/env python3
# commands.py - builtins for mysh

import argparse
import logging
import re

from context import ShellContext
from errors import BuiltinUsageError
from external_runner import resolve_executable
from model import BuiltinKind, DispatchOutcome
from workdir import expand_tilde

logger = logging.getLogger(__name__)

# -----------------------
# Builtin commands
# Each function accepts argparse-style 'args' from argparser and the
# shell context, and returns a DispatchOutcome
# -----------------------
def exit_shell(args: argparse.Namespace, ctx: ShellContext) -> DispatchOutcome:
    code = 0
    if args.code is not None:
        # plain ASCII integers only; "+1", "1_0" or " 1" count as non-numeric
        if re.fullmatch(r"-?[0-9]+", args.code):
            # process status is one byte, as in sh
            code = int(args.code) & 0xFF
        else:
            logger.debug("exit: non-numeric code %r treated as 0", args.code)
    return DispatchOutcome.terminate(code)

def echo(args: argparse.Namespace, ctx: ShellContext) -> DispatchOutcome:
    ctx.write_line(" ".join(args.text))
    return DispatchOutcome.proceed()

def type_command(args: argparse.Namespace, ctx: ShellContext) -> DispatchOutcome:
    name = args.name
    if BuiltinKind.lookup(name) is not None:
        ctx.write_line(f"{name} is a shell builtin")
        return DispatchOutcome.proceed()
    found = resolve_executable(name, ctx.environment.search_path(), ctx.workdir.current())
    if found:
        ctx.write_line(f"{name} is {found.path}")
    else:
        ctx.write_line(f"{name}: not found")
    return DispatchOutcome.proceed()

def print_working_directory(args: argparse.Namespace, ctx: ShellContext) -> DispatchOutcome:
    if args.operands:
        raise BuiltinUsageError("pwd", "too many arguments")
    ctx.write_line(ctx.workdir.current())
    return DispatchOutcome.proceed()

def change_directory(args: argparse.Namespace, ctx: ShellContext) -> DispatchOutcome:
    path = expand_tilde(args.path, ctx.environment.home())
    # errors name the argument as the user typed it
    ctx.workdir.set(path, display=args.path)
    return DispatchOutcome.proceed()


BUILTINS = {
    BuiltinKind.EXIT: exit_shell,
    BuiltinKind.ECHO: echo,
    BuiltinKind.TYPE: type_command,
    BuiltinKind.PWD: print_working_directory,
    BuiltinKind.CD: change_directory,
}

_missing = set(BuiltinKind) - set(BUILTINS)
if _missing:
    raise RuntimeError(f"builtins without an implementation: {sorted(k.value for k in _missing)}")
