"""Namespace for pluggable docparser tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .pages import extract  # noqa: F401  # register the page extraction tool
    from .content import tool  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
