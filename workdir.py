# workdir.py - the shell's tracked working directory
from __future__ import annotations

import logging
import os
from typing import Optional

from errors import DirectoryChangeError

logger = logging.getLogger(__name__)


def expand_tilde(path: str, home: str) -> str:
    """Replace a leading "~" (bare or followed by "/") with home.

    Only that first character is touched; "foo~bar", "~user" and any later
    "~" are returned unchanged.
    """
    if path == "~" or path.startswith("~/"):
        return path.replace("~", home, 1)
    return path


class WorkingDirectory:
    """
    Holds the current directory for the session. External programs are
    started in it, so the interpreter never has to chdir itself.
    """

    def __init__(self, initial: Optional[str] = None):
        self._path = os.path.normpath(initial or os.getcwd())

    def current(self) -> str:
        return self._path

    def set(self, path: str, display: Optional[str] = None) -> str:
        """Move to path (relative paths resolve against current()).

        Raises DirectoryChangeError naming display (defaults to path) and
        leaves the directory unchanged when the target is missing, is not a
        directory, or cannot be entered.
        """
        shown = display if display is not None else path
        target = os.path.normpath(os.path.join(self._path, path))
        if not os.path.exists(target):
            raise DirectoryChangeError(shown)
        if not os.path.isdir(target):
            raise DirectoryChangeError(shown, "Not a directory")
        if not os.access(target, os.X_OK):
            raise DirectoryChangeError(shown, "Permission denied")
        logger.debug("cwd %s -> %s", self._path, target)
        self._path = target
        return target
