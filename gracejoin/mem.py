"""Simulated main memory: a fixed set of page buffers."""

from __future__ import annotations

from gracejoin.disk import Disk
from gracejoin.page import Page
from gracejoin.record import MEM_SIZE_IN_PAGE


class Mem:
    """A fixed number of page buffers with disk I/O counters."""

    def __init__(self, size: int = MEM_SIZE_IN_PAGE) -> None:
        self._pages = [Page() for _ in range(size)]
        self.loads_from_disk = 0
        self.flushes_to_disk = 0

    def __len__(self) -> int:
        return len(self._pages)

    def reset(self) -> None:
        """Empty every memory page."""
        for page in self._pages:
            page.reset()

    def page(self, mem_page_id: int) -> Page:
        """The memory page with the given id."""
        return self._pages[mem_page_id]

    def load_from_disk(self, disk: Disk, disk_page_id: int, mem_page_id: int) -> None:
        """Copy a disk page into a memory page."""
        self._pages[mem_page_id].load_page(disk.read(disk_page_id))
        self.loads_from_disk += 1

    def flush_to_disk(self, disk: Disk, mem_page_id: int) -> int:
        """Write a memory page to disk, empty it, and return the new disk page id."""
        page = self._pages[mem_page_id]
        disk_page_id = disk.write(page)
        page.reset()
        self.flushes_to_disk += 1
        return disk_page_id

    def __str__(self) -> str:
        return "".join(
            f"PageID {page_id} in Mem:\n{page}" for page_id, page in enumerate(self._pages)
        )