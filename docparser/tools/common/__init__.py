"""Shared building blocks for docparser tools."""

from __future__ import annotations

from .interfaces import BaseTool, ExtractionContext
from .pipeline import ToolRegistry, register_tool, registry

__all__ = ["BaseTool", "ExtractionContext", "ToolRegistry", "register_tool", "registry"]
