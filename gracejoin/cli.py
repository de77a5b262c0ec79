"""Command that joins two relation files and prints the result pages."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from gracejoin.disk import Disk, DiskFullError, InvalidPageError
from gracejoin.join import grace_hash_join
from gracejoin.mem import Mem
from gracejoin.page import PageFullError


def format_result(join_res: Sequence[int], disk: Disk) -> str:
    """Text listing of the join result pages."""
    parts = [f"Size of GHJ result: {len(join_res)} pages\n"]
    for index, disk_page_id in enumerate(join_res):
        parts.append(f"Page {index} with disk id = {disk_page_id}\n")
        parts.append(disk.format_page(disk_page_id))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the join on two relation files; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Error: Wrong command line usage.", file=sys.stderr)
        print("Usage: gracejoin left_rel.txt right_rel.txt", file=sys.stderr)
        return 1

    disk = Disk()
    mem = Mem()
    try:
        left_rel = disk.read_data(args[0])
        right_rel = disk.read_data(args[1])
        join_res = grace_hash_join(disk, mem, left_rel, right_rel)
    except (OSError, DiskFullError, InvalidPageError, PageFullError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(format_result(join_res, disk))
    return 0


if __name__ == "__main__":
    sys.exit(main())