"""Tool registry used to look up and run extraction tools by name."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

from ...core.utils import get_logger
from .interfaces import BaseTool, ExtractionContext, ToolFactory

LOGGER = get_logger("docparser.tools.pipeline")


class ToolRegistry:
    """Maps tool names to :class:`BaseTool` subclasses."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def create(self, name: str, context: ExtractionContext) -> BaseTool:
        try:
            tool_class = self._tools[name]
        except KeyError as exc:
            known = ", ".join(self.names()) or "none"
            raise KeyError(f"Tool '{name}' is not registered (available: {known})") from exc
        return tool_class(context)

    def run(self, name: str, context: ExtractionContext) -> Any:
        """Create the tool ``name`` for ``context`` and return its result."""

        LOGGER.debug("Running tool %s on %s", name, context.input_path)
        result = self.create(name, context).run()
        context.resources.setdefault("result", result)
        return result

    def names(self) -> Iterable[str]:
        return sorted(self._tools)

    def get(self, name: str) -> type[BaseTool] | None:
        return self._tools.get(name)


registry = ToolRegistry()


def register_tool(name: str) -> Callable[[type[BaseTool]], type[BaseTool]]:
    """Class decorator adding a tool to the module level registry."""

    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool", "ExtractionContext", "BaseTool", "ToolFactory"]
