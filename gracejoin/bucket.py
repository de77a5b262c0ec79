"""Partitions of both relations produced by the partition phase."""

from __future__ import annotations

from gracejoin.disk import Disk


class Bucket:
    """Disk page ids of the left and right relation that share a partition."""

    def __init__(self, disk: Disk) -> None:
        self._disk = disk
        self._left: list[int] = []
        self._right: list[int] = []
        self.num_left_rel_record = 0
        self.num_right_rel_record = 0

    def left_rel(self) -> list[int]:
        """Disk page ids of left-relation records in this bucket."""
        return list(self._left)

    def right_rel(self) -> list[int]:
        """Disk page ids of right-relation records in this bucket."""
        return list(self._right)

    def add_left_rel_page(self, page_id: int) -> None:
        """Add a left-relation disk page and count its records."""
        self._left.append(page_id)
        self.num_left_rel_record += len(self._disk.read(page_id))

    def add_right_rel_page(self, page_id: int) -> None:
        """Add a right-relation disk page and count its records."""
        self._right.append(page_id)
        self.num_right_rel_record += len(self._disk.read(page_id))