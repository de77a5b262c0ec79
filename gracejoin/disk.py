"""Simulated disk: an append-only array of pages."""

from __future__ import annotations

import os
from collections.abc import Iterable

from gracejoin.page import Page
from gracejoin.record import DISK_SIZE_IN_PAGE, Record


class DiskFullError(RuntimeError):
    """Raised when writing to a disk that has no free pages."""


class InvalidPageError(IndexError):
    """Raised when reading a page id that does not exist."""


class Disk:
    """A disk of at most ``capacity`` pages addressed by id."""

    def __init__(self, capacity: int = DISK_SIZE_IN_PAGE) -> None:
        self.capacity = capacity
        self._pages: list[Page] = []

    def __len__(self) -> int:
        return len(self._pages)

    def write(self, page: Page) -> int:
        """Store a copy of ``page`` and return its new disk page id."""
        if len(self._pages) >= self.capacity:
            raise DiskFullError("can not write to the disk due to out of disk space.")
        self._pages.append(page.copy())
        return len(self._pages) - 1

    def read(self, page_id: int) -> Page:
        """Return the page stored under ``page_id``."""
        if not 0 <= page_id < len(self._pages):
            raise InvalidPageError("accessing invalid disk page.")
        return self._pages[page_id]

    def format_page(self, page_id: int) -> str:
        """Text listing of one page's records."""
        return str(self.read(page_id))

    def __str__(self) -> str:
        return "".join(
            f"Disk page id: {page_id}\n{page}" for page_id, page in enumerate(self._pages)
        )

    def load_lines(self, lines: Iterable[str]) -> tuple[int, int]:
        """Load one relation from ``key data`` lines into fresh pages.

        Returns the half-open range of page ids that hold the relation.
        """
        start = len(self._pages)
        current = Page()
        self._pages.append(current)
        for line in lines:
            line = line.rstrip("\n")
            if current.full():
                current = Page()
                self._pages.append(current)
            key, sep, data = line.partition(" ")
            current.load_record(Record(key, data if sep else line))
        return start, len(self._pages)

    def read_data(self, path: str | os.PathLike[str]) -> tuple[int, int]:
        """Load one relation from a text file; see :meth:`load_lines`."""
        with open(path, encoding="utf-8") as handle:
            return self.load_lines(handle)