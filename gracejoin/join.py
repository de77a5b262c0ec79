"""Grace hash join over the simulated disk and memory."""

from __future__ import annotations

from collections.abc import Sequence

from gracejoin.bucket import Bucket
from gracejoin.disk import Disk
from gracejoin.mem import Mem


def partition(
    disk: Disk, mem: Mem, left_rel: tuple[int, int], right_rel: tuple[int, int]
) -> list[Bucket]:
    """Hash both relations into ``len(mem) - 1`` buckets written back to disk.

    ``left_rel`` and ``right_rel`` are half-open ranges of disk page ids.
    """
    num_buckets = len(mem) - 1
    if num_buckets < 1:
        raise ValueError("partitioning needs at least two memory pages")
    input_id = num_buckets
    mem.reset()
    buckets = [Bucket(disk) for _ in range(num_buckets)]

    for (start, end), add_page in (
        (left_rel, Bucket.add_left_rel_page),
        (right_rel, Bucket.add_right_rel_page),
    ):
        for disk_page_id in range(start, end):
            mem.load_from_disk(disk, disk_page_id, input_id)
            for record in mem.page(input_id):
                index = record.partition_hash() % num_buckets
                output = mem.page(index)
                if output.full():
                    add_page(buckets[index], mem.flush_to_disk(disk, index))
                output.load_record(record)
        for index, bucket in enumerate(buckets):
            if not mem.page(index).empty():
                add_page(bucket, mem.flush_to_disk(disk, index))

    mem.reset()
    return buckets


def probe(disk: Disk, mem: Mem, partitions: Sequence[Bucket]) -> list[int]:
    """Join each bucket in memory and return the disk page ids of the result.

    Result pages hold matching pairs, left record first.
    """
    size = len(mem)
    if size < 3:
        raise ValueError("probing needs at least three memory pages")
    num_hash = size - 2
    input_id = size - 2
    output_id = size - 1
    mem.reset()
    output = mem.page(output_id)
    result: list[int] = []

    for bucket in partitions:
        if not bucket.num_left_rel_record or not bucket.num_right_rel_record:
            continue
        build_left = bucket.num_left_rel_record <= bucket.num_right_rel_record
        if build_left:
            build_pages, probe_pages = bucket.left_rel(), bucket.right_rel()
        else:
            build_pages, probe_pages = bucket.right_rel(), bucket.left_rel()

        for index in range(num_hash):
            mem.page(index).reset()

        for disk_page_id in build_pages:
            mem.load_from_disk(disk, disk_page_id, input_id)
            for record in mem.page(input_id):
                mem.page(record.probe_hash() % num_hash).load_record(record)

        for disk_page_id in probe_pages:
            mem.load_from_disk(disk, disk_page_id, input_id)
            for record in mem.page(input_id):
                for match in mem.page(record.probe_hash() % num_hash):
                    if match.key != record.key:
                        continue
                    left, right = (match, record) if build_left else (record, match)
                    if len(output) >= output.capacity - 1:
                        result.append(mem.flush_to_disk(disk, output_id))
                    output.load_pair(left, right)

    if not output.empty():
        result.append(mem.flush_to_disk(disk, output_id))
    mem.reset()
    return result


def grace_hash_join(
    disk: Disk, mem: Mem, left_rel: tuple[int, int], right_rel: tuple[int, int]
) -> list[int]:
    """Partition then probe; return disk page ids holding the join result."""
    return probe(disk, mem, partition(disk, mem, left_rel, right_rel))