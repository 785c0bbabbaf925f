# external_runner.py - PATH lookup and launching of external programs
from __future__ import annotations
import logging
import os, stat, subprocess, sys
from typing import Mapping, NamedTuple, Optional, Sequence, Tuple

from errors import LaunchError
from model import SearchPath

logger = logging.getLogger(__name__)

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class ResolvedExecutable(NamedTuple):
    path: str        # "<directory>/<name>", as joined, not canonicalised
    directory: str


def is_executable(path: str) -> bool:
    """Regular file with at least one of the user/group/other execute bits."""
    try:
        st = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & EXEC_BITS)


def _on_disk(path: str, cwd: Optional[str]) -> str:
    if cwd is None or os.path.isabs(path):
        return path
    return os.path.join(cwd, path)


def resolve_executable(cmd: str, search_path: SearchPath,
                       cwd: Optional[str] = None) -> Optional[ResolvedExecutable]:
    """Return the first executable match for cmd, or None.
    If cmd contains '/', treat it as a direct path. Otherwise walk search_path
    left to right; relative entries are taken relative to cwd."""
    if "/" in cmd:
        if is_executable(_on_disk(cmd, cwd)):
            return ResolvedExecutable(cmd, os.path.dirname(cmd) or ".")
        return None

    for directory in search_path:
        candidate = os.path.join(directory, cmd)
        # missing or unreadable directories simply yield no candidate
        if is_executable(_on_disk(candidate, cwd)):
            logger.debug("resolved %s -> %s", cmd, candidate)
            return ResolvedExecutable(candidate, directory)
    logger.debug("%s not found in %d search path entries", cmd, len(search_path))
    return None


def run_external(argv: Sequence[str], executable: str, *, cwd: Optional[str] = None,
                 env: Optional[Mapping[str, str]] = None,
                 capture: bool = False) -> Tuple[int, str, str]:
    """Run an external program and wait for it.
    argv[0] is passed through as the program's own name; executable is the
    file actually started. Returns (exit_code, stdout_text, stderr_text).
    If capture=False, streams go straight to the terminal and the texts are
    empty. Raises LaunchError if the program could not be started at all."""
    name = argv[0]
    logger.debug("launching %s as %r in %s", executable, list(argv), cwd)
    # keep our own buffered output ahead of the child's
    sys.stdout.flush()
    try:
        if capture:
            cp = subprocess.run(list(argv), executable=executable, cwd=cwd, env=env,
                                text=True, capture_output=True)
            return cp.returncode, cp.stdout, cp.stderr
        else:
            cp = subprocess.run(list(argv), executable=executable, cwd=cwd, env=env)
            return cp.returncode, "", ""
    except PermissionError:
        raise LaunchError(name, "permission denied")
    except FileNotFoundError:
        raise LaunchError(name, "no such file or directory")
    except OSError as e:
        raise LaunchError(name, e.strerror or str(e))
