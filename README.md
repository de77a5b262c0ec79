# gracejoin

`gracejoin` simulates a Grace hash join. It models a small database storage
layer: fixed-size pages of records, a disk with a fixed number of pages, and a
memory buffer with a fixed number of page frames. Every page that moves between
disk and memory is counted, so you can see how much I/O a join costs.

The defaults are 32 records per page, 16 memory pages and 999 disk pages
(`RECORDS_PER_PAGE`, `MEM_SIZE_IN_PAGE` and `DISK_SIZE_IN_PAGE` in
`gracejoin.record`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Each input file holds one record per line. A line is a key, a single space,
and the record's data:

```
1 alice
2 bob
3 carol
```

Join two such files on their keys:

```
gracejoin left_rel.txt right_rel.txt
```

The command prints how many pages the result takes up, and then each result
page with its disk page id. A result page holds matching pairs: each record
from the left relation comes right before its match from the right relation.

With the wrong number of arguments, a file that cannot be read, a full disk or
a full page, the command prints an error to standard error and exits with
status 1.

## Library use

```python
from gracejoin.disk import Disk
from gracejoin.mem import Mem
from gracejoin.join import partition, probe, grace_hash_join

disk = Disk()
mem = Mem()
left = disk.read_data("left_rel.txt")    # (first page id, end page id)
right = disk.read_data("right_rel.txt")

# Run the two phases one at a time...
buckets = partition(disk, mem, left, right)
result_pages = probe(disk, mem, buckets)

# ...or run both with a single call.
# result_pages = grace_hash_join(disk, mem, left, right)

for page_id in result_pages:
    print(disk.format_page(page_id))

print("pages loaded:", mem.loads_from_disk)
print("pages flushed:", mem.flushes_to_disk)
```

`Disk.load_lines` takes an iterable of lines in place of a file, which is
useful for small experiments and for tests.

`partition` splits both relations into `len(mem) - 1` buckets. `probe` builds
an in-memory hash table from the smaller side of each bucket, using
`len(mem) - 2` pages for it, one page for input and one for output. Both raise
`ValueError` if memory is too small for that.

### Building blocks

- `gracejoin.record.Record` is a key/data pair. `partition_hash()` and
  `probe_hash()` are two different deterministic hash functions over the key.
  Two records compare equal when their keys match. Comparing records whose
  probe hashes fall into different buckets raises `HashMismatchError`, because
  that comparison points to a bug in the join. `equal()` checks key and data;
  records sort by key, then data.
- `gracejoin.page.Page` is a sequence of records with a fixed capacity. Adding
  to a full page with `load_record` or `load_pair` raises `PageFullError`.
- `gracejoin.disk.Disk` stores copies of pages. `write` raises `DiskFullError`
  when the disk is full, and `read` raises `InvalidPageError` for a page id
  that does not exist.
- `gracejoin.mem.Mem` is the buffer pool. It moves pages with
  `load_from_disk` and `flush_to_disk`, and counts each transfer in
  `loads_from_disk` and `flushes_to_disk`.
- `gracejoin.bucket.Bucket` is one partition. It keeps the disk page ids of
  both relations (`left_rel()`, `right_rel()`) and the number of records from
  each (`num_left_rel_record`, `num_right_rel_record`).

## What it does not do

The disk is a simulation held in memory: pages are never written to real
files, and everything is lost when the process ends. Only equality joins on
the record key are supported.