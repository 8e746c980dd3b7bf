"""Page selection helpers shared by the PDF and DOCX extractors."""

from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from ...core.exceptions import InvalidPageNumberError
from ...core.utils import get_logger

LOGGER = get_logger("docparser.tools.pages")

T = TypeVar("T")


def coerce_page_numbers(pages: Iterable[int | str]) -> List[int]:
    """Convert ``pages`` to integers, keeping order and duplicates.

    Blank strings are ignored. Anything else that is not an integer raises
    :class:`InvalidPageNumberError`.
    """

    numbers: List[int] = []
    invalid: List[object] = []
    for page in pages:
        if isinstance(page, bool):
            invalid.append(page)
            continue
        if isinstance(page, int):
            numbers.append(page)
            continue
        if isinstance(page, str):
            if not page.strip():
                continue
            try:
                numbers.append(int(page.strip()))
            except ValueError:
                invalid.append(page)
            continue
        invalid.append(page)

    if invalid:
        raise InvalidPageNumberError(invalid)
    return numbers


def valid_indices(pages: Iterable[int], total_pages: int) -> List[int]:
    """Return zero-based indices for every in-range page, in request order.

    Out-of-range numbers are dropped silently; duplicates are kept.
    """

    indices: List[int] = []
    for number in pages:
        if 1 <= number <= total_pages:
            indices.append(number - 1)
        else:
            LOGGER.debug("Skipping page %s outside 1-%s", number, total_pages)
    return indices


def project(items: Sequence[T], pages: Iterable[int]) -> List[T]:
    """Select ``items`` by 1-based page number preserving order and multiplicity."""

    return [items[index] for index in valid_indices(pages, len(items))]


__all__ = ["coerce_page_numbers", "valid_indices", "project"]
