# errors.py - exceptions raised below the dispatch boundary
"""
Every error here is caught by the Dispatcher and turned into a
ContinueWithError outcome, so none of them ends the interactive session.
"""
from __future__ import annotations


class ShellError(Exception):
    """Base class; str() is the diagnostic shown to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class CommandNotFoundError(ShellError):
    def __init__(self, command: str):
        super().__init__(f"{command}: command not found")
        self.command = command


class LaunchError(ShellError):
    """A resolved executable could not be started."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"{command}: {reason}")
        self.command = command
        self.reason = reason


class DirectoryChangeError(ShellError):
    def __init__(self, path: str, reason: str = "No such file or directory"):
        super().__init__(f"cd: {path}: {reason}")
        self.path = path
        self.reason = reason


class BuiltinUsageError(ShellError):
    """Wrong arity for a builtin, reported by its argument parser."""

    def __init__(self, builtin: str, details: str):
        super().__init__(f"{builtin}: {details}")
        self.builtin = builtin
