# environment.py - injected view over the environment variables the shell reads
from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from model import SearchPath

PATH_VAR = "PATH"
HOME_VAR = "HOME"


class ShellEnvironment:
    """
    Reads PATH and HOME fresh on every call so runtime changes are seen.
    Tests pass a plain dict instead of touching os.environ.
    """

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._variables = os.environ if variables is None else variables

    def search_path(self) -> SearchPath:
        raw = self._variables.get(PATH_VAR, "")
        if not raw:
            return []
        # POSIX: an empty entry means the current directory
        return [entry or "." for entry in raw.split(os.pathsep)]

    def home(self) -> str:
        return self._variables.get(HOME_VAR, "/")

    def variables(self) -> Dict[str, str]:
        return dict(self._variables)
