"""Fixed-capacity pages of records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from gracejoin.record import RECORDS_PER_PAGE, Record


class PageFullError(RuntimeError):
    """Raised when adding records to a page with no room for them."""


class Page:
    """A page holding up to RECORDS_PER_PAGE records."""

    capacity = RECORDS_PER_PAGE

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: list[Record] = []
        for record in records:
            self.load_record(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def empty(self) -> bool:
        """True if the page holds no records."""
        return not self._records

    def full(self) -> bool:
        """True if the page holds as many records as it can."""
        return len(self._records) == self.capacity

    def reset(self) -> None:
        """Remove all records."""
        self._records.clear()

    def load_record(self, record: Record) -> None:
        """Append one record."""
        if len(self._records) >= self.capacity:
            raise PageFullError("Can not add record into full page.")
        self._records.append(record)

    def load_pair(self, left: Record, right: Record) -> None:
        """Append a matching pair of records, taking two slots."""
        if len(self._records) >= self.capacity - 1:
            raise PageFullError("Can not add record into full page.")
        self._records.extend((left, right))

    def load_page(self, other: Page) -> None:
        """Replace this page's contents with a copy of another page's records."""
        self._records = list(other)

    def copy(self) -> Page:
        """Return an independent copy of this page."""
        duplicate = Page()
        duplicate.load_page(self)
        return duplicate

    def __str__(self) -> str:
        return "".join(f"{record}\n" for record in self._records)