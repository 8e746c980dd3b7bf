"""In-memory access to ZIP based document packages (DOCX, EPUB)."""

from __future__ import annotations

import io
import zlib
from pathlib import Path
from typing import Iterator
from zipfile import ZIP_DEFLATED, ZIP_STORED, BadZipFile, ZipFile, ZipInfo

from ...core.utils import get_logger, resolve_path
from .exceptions import InvalidContainerError, MissingEntryError

LOGGER = get_logger("docparser.tools.archive")

# ZIP cannot represent timestamps before 1980.
ENTRY_TIMESTAMP = (1980, 1, 1, 0, 0, 0)
STORED_ENTRIES = frozenset({"mimetype"})

_READ_ERRORS = (BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError, ValueError)


class Container:
    """Mutable mapping of entry path to entry bytes backed by a ZIP archive.

    The source entry order and per-entry compression settings are kept so the
    serialized archive differs from the source only where entries were
    replaced or inserted. When a name occurs more than once the last entry
    wins, both for its bytes and for its settings.
    """

    def __init__(self) -> None:
        self._infos: dict[str, ZipInfo] = {}
        self._data: dict[str, bytes] = {}

    @classmethod
    def load(cls, data: bytes) -> "Container":
        """Parse ``data`` as a ZIP archive."""

        container = cls()
        try:
            with ZipFile(io.BytesIO(data)) as archive:
                for info in archive.infolist():
                    if info.is_dir():
                        continue
                    container._infos[info.filename] = info
                    container._data[info.filename] = archive.read(info)
        except _READ_ERRORS as exc:
            raise InvalidContainerError(f"Not a valid ZIP container: {exc}") from exc
        LOGGER.debug("Loaded container with %d entries", len(container._data))
        return container

    @classmethod
    def from_path(cls, path: str | Path) -> "Container":
        source = resolve_path(path)
        try:
            data = source.read_bytes()
        except OSError as exc:
            raise InvalidContainerError(f"Unable to read container {source}: {exc}") from exc
        return cls.load(data)

    def names(self) -> list[str]:
        return list(self._data)

    def __contains__(self, path: object) -> bool:
        return path in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def read_entry(self, path: str) -> bytes:
        try:
            return self._data[path]
        except KeyError as exc:
            raise MissingEntryError(path) from exc

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return self.read_entry(path).decode(encoding)

    def replace_entry(self, path: str, content: bytes | str) -> None:
        """Overwrite or insert ``path``; no validation of the content is done."""

        if isinstance(content, str):
            content = content.encode("utf-8")
        if path not in self._infos:
            info = ZipInfo(path, date_time=ENTRY_TIMESTAMP)
            info.compress_type = ZIP_STORED if path in STORED_ENTRIES else ZIP_DEFLATED
            info.external_attr = 0o644 << 16
            self._infos[path] = info
        self._data[path] = bytes(content)

    def serialize(self) -> bytes:
        """Return a new archive reflecting every replacement."""

        buffer = io.BytesIO()
        with ZipFile(buffer, "w", ZIP_DEFLATED) as archive:
            for path, payload in self._data.items():
                source_info = self._infos[path]
                info = ZipInfo(path, date_time=source_info.date_time)
                info.compress_type = source_info.compress_type
                info.external_attr = source_info.external_attr
                info.comment = source_info.comment
                archive.writestr(info, payload)
        return buffer.getvalue()

    def write(self, destination: str | Path) -> Path:
        target = Path(destination)
        target.write_bytes(self.serialize())
        return target


__all__ = ["Container", "ENTRY_TIMESTAMP"]
