"""Command line entry points for docparser."""

from __future__ import annotations

from .main import cli, content_command, pages_command

__all__ = ["cli", "content_command", "pages_command"]
