"""Environment driven configuration for docparser."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

ENV_PREFIX = "DOCPARSER_"

DEFAULT_SOFFICE = "soffice"
DEFAULT_MUTOOL = "mutool"
DEFAULT_PDFIMAGES = "pdfimages"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings.

    Settings are read from the environment on every call to :meth:`from_env`;
    nothing is cached between extraction calls.
    """

    soffice: str = DEFAULT_SOFFICE
    mutool: str = DEFAULT_MUTOOL
    pdfimages: str = DEFAULT_PDFIMAGES
    temp_dir: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        def _get(name: str, default: str) -> str:
            value = env.get(ENV_PREFIX + name)
            if value is None or not value.strip():
                return default
            return value.strip()

        temp_dir = _get("TMPDIR", "")
        return cls(
            soffice=_get("SOFFICE", DEFAULT_SOFFICE),
            mutool=_get("MUTOOL", DEFAULT_MUTOOL),
            pdfimages=_get("PDFIMAGES", DEFAULT_PDFIMAGES),
            temp_dir=Path(temp_dir).expanduser() if temp_dir else None,
            log_level=_get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


__all__ = ["Settings", "ENV_PREFIX"]
