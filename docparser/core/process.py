"""Execution of external command line programs.

Every tool that shells out accepts a ``runner`` so tests and embedding
applications can replace the real process with their own callable.
"""

from __future__ import annotations

import shutil
import subprocess
from typing import Callable, Sequence

from .exceptions import ExternalCommandError
from .utils import get_logger

LOGGER = get_logger("docparser.core.process")

CommandRunner = Callable[[Sequence[str]], "subprocess.CompletedProcess[bytes]"]


def resolve_executable(name: str) -> str:
    """Return the absolute path of ``name`` when it is on ``PATH``."""

    return shutil.which(name) or name


def run_command(command: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
    """Run ``command`` and capture its output without raising on failure."""

    arguments = [str(part) for part in command]
    LOGGER.debug("Running %s", " ".join(arguments))
    try:
        return subprocess.run(arguments, check=False, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as exc:
        raise ExternalCommandError(arguments, f"Unable to start {arguments[0]}: {exc}") from exc


def describe_failure(completed: subprocess.CompletedProcess[bytes]) -> str:
    stderr = completed.stderr or b""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", "replace")
    stderr = stderr.strip()
    detail = stderr.splitlines()[-1] if stderr else "no error output"
    return f"exit status {completed.returncode}: {detail}"


__all__ = ["CommandRunner", "resolve_executable", "run_command", "describe_failure"]
