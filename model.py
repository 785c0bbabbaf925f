# model.py - value types shared by the dispatcher, builtins and REPL
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

# Ordered directories; the leftmost match wins.
SearchPath = List[str]


class BuiltinKind(enum.Enum):
    EXIT = "exit"
    ECHO = "echo"
    TYPE = "type"
    PWD = "pwd"
    CD = "cd"

    @classmethod
    def lookup(cls, name: str) -> Optional["BuiltinKind"]:
        """Exact-name match only; returns None for anything else."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> List[str]:
        return [kind.value for kind in cls]


@dataclass(frozen=True)
class CommandLine:
    name: str
    args: List[str] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Optional["CommandLine"]:
        """Whitespace tokenizer. Blank input gives None."""
        tokens = text.split()
        if not tokens:
            return None
        return cls(tokens[0], tokens[1:])

    @property
    def argv(self) -> List[str]:
        return [self.name, *self.args]


class OutcomeKind(enum.Enum):
    CONTINUE = "continue"
    CONTINUE_WITH_ERROR = "continue_with_error"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class DispatchOutcome:
    kind: OutcomeKind
    message: Optional[str] = None
    exit_code: int = 0

    @classmethod
    def proceed(cls) -> "DispatchOutcome":
        return cls(OutcomeKind.CONTINUE)

    @classmethod
    def failed(cls, message: str) -> "DispatchOutcome":
        return cls(OutcomeKind.CONTINUE_WITH_ERROR, message=message)

    @classmethod
    def terminate(cls, exit_code: int = 0) -> "DispatchOutcome":
        return cls(OutcomeKind.TERMINATE, exit_code=exit_code)

    @property
    def is_terminal(self) -> bool:
        return self.kind is OutcomeKind.TERMINATE
