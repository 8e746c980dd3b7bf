"""Temporary file helpers.

Output files produced by the page extractors belong to the caller. Working
directories used for intermediate artefacts are scoped: they are created on
entry and removed on every exit path, and removal never raises.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Settings
from .utils import get_logger

LOGGER = get_logger("docparser.core.tempfiles")

TEMP_PREFIX = "docparser-"


def _temp_root() -> str | None:
    temp_dir = Settings.from_env().temp_dir
    if temp_dir is None:
        return None
    temp_dir.mkdir(parents=True, exist_ok=True)
    return str(temp_dir)


def make_temp_file(suffix: str = "") -> Path:
    """Create an empty uniquely named file and return its path."""

    handle, name = tempfile.mkstemp(suffix=suffix, prefix=TEMP_PREFIX, dir=_temp_root())
    os.close(handle)
    return Path(name)


def write_temp_file(data: bytes, suffix: str = "") -> Path:
    path = make_temp_file(suffix)
    try:
        path.write_bytes(data)
    except OSError:
        remove_quietly(path)
        raise
    return path


def remove_quietly(path: str | Path) -> None:
    """Remove a file or directory tree, ignoring every failure."""

    target = Path(path)
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink(missing_ok=True)
    except Exception as exc:
        LOGGER.debug("Ignoring cleanup failure for %s: %s", target, exc)


@contextmanager
def scoped_temp_dir(prefix: str = TEMP_PREFIX) -> Iterator[Path]:
    """Yield a fresh working directory that is removed when the block exits."""

    directory = Path(tempfile.mkdtemp(prefix=prefix, dir=_temp_root()))
    try:
        yield directory
    finally:
        remove_quietly(directory)


__all__ = ["make_temp_file", "write_temp_file", "remove_quietly", "scoped_temp_dir", "TEMP_PREFIX"]
