# argparser.py - argument parsers for the builtins
import argparse
from typing import Dict, List

from errors import BuiltinUsageError
from model import BuiltinKind


class BuiltinArgumentParser(argparse.ArgumentParser):
    """Raises BuiltinUsageError instead of printing usage and exiting."""

    def error(self, message):
        raise BuiltinUsageError(self.prog, message)


def _parser(kind: BuiltinKind) -> BuiltinArgumentParser:
    return BuiltinArgumentParser(prog=kind.value, add_help=False)


def build_parsers() -> Dict[BuiltinKind, BuiltinArgumentParser]:
    parsers = {}

    # kept as a string: a non-numeric code means 0, not a usage error
    exit_ = _parser(BuiltinKind.EXIT)
    exit_.add_argument("code", nargs="?", default=None)
    parsers[BuiltinKind.EXIT] = exit_

    echo = _parser(BuiltinKind.ECHO)
    echo.add_argument("text", nargs="*")
    parsers[BuiltinKind.ECHO] = echo

    type_ = _parser(BuiltinKind.TYPE)
    type_.add_argument("name")
    parsers[BuiltinKind.TYPE] = type_

    # operands are rejected by the builtin itself with a clearer message
    pwd = _parser(BuiltinKind.PWD)
    pwd.add_argument("operands", nargs="*")
    parsers[BuiltinKind.PWD] = pwd

    cd = _parser(BuiltinKind.CD)
    cd.add_argument("path", nargs="?", default="~")
    parsers[BuiltinKind.CD] = cd

    return parsers


def parse_builtin_args(parser: argparse.ArgumentParser, args: List[str]) -> argparse.Namespace:
    if any(arg.startswith("-") for arg in args):
        # keeps operands such as "-n" or "-foo" positional
        args = ["--", *args]
    return parser.parse_args(args)
