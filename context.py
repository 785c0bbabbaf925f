# context.py - state a builtin may read (and, for cd, write)
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from environment import ShellEnvironment
from workdir import WorkingDirectory


@dataclass
class ShellContext:
    environment: ShellEnvironment = field(default_factory=ShellEnvironment)
    workdir: WorkingDirectory = field(default_factory=WorkingDirectory)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def write_line(self, text: str = "") -> None:
        print(text, file=self.stdout)
