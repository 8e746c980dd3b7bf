"""Core interfaces and context objects shared by docparser tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from ...core.exceptions import UnsupportedDocumentError
from ...core.utils import resolve_path


@dataclass
class ExtractionContext:
    """Holds shared execution state for a tool invocation."""

    input_path: Path | None = None
    output_path: Path | None = None
    resources: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.input_path, (str, Path)) and self.input_path is not None:
            self.input_path = resolve_path(self.input_path)
        if isinstance(self.output_path, (str, Path)) and self.output_path is not None:
            self.output_path = resolve_path(self.output_path)

    def require_input(self) -> Path:
        if self.input_path is None:
            raise ValueError("ExtractionContext requires an input_path")
        return self.input_path

    def document_kind(self) -> str:
        """Return the lower-cased suffix of the input without the dot."""

        suffix = self.require_input().suffix.lower().lstrip(".")
        if not suffix:
            raise UnsupportedDocumentError(f"Cannot determine document type of {self.input_path}")
        return suffix

    def with_updates(
        self,
        *,
        input_path: str | Path | None = None,
        output_path: str | Path | None = None,
        config: dict[str, Any] | None = None,
    ) -> "ExtractionContext":
        data = ExtractionContext(
            input_path=input_path or self.input_path,
            output_path=output_path or self.output_path,
            resources=dict(self.resources),
            config=dict(self.config),
        )
        if config:
            data.config.update(config)
        return data


class BaseTool:
    """Base class for all pluggable docparser tools."""

    name: str

    def __init__(self, context: ExtractionContext) -> None:
        self.context = context

    def run(self) -> Any:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError


ToolFactory = Callable[[ExtractionContext], BaseTool]
