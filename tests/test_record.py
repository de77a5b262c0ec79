import pytest

from gracejoin.record import MEM_SIZE_IN_PAGE, HashMismatchError, Record

BUCKETS = MEM_SIZE_IN_PAGE - 2


def _bucket(key):
    return Record(key, "").probe_hash() % BUCKETS


def _keys():
    return [str(i) for i in range(200)]


def test_hashes_are_deterministic_and_in_range():
    for key in _keys():
        a = Record(key, "x")
        b = Record(key, "y")
        assert a.partition_hash() == b.partition_hash()
        assert a.probe_hash() == b.probe_hash()
        assert 0 <= a.partition_hash() < 1000000
        assert 0 <= a.probe_hash() < 1000000


def test_partition_and_probe_hash_differ():
    assert any(
        Record(k, "").partition_hash() != Record(k, "").probe_hash() for k in _keys()
    )


def test_equality_uses_key_only():
    assert Record("7", "a") == Record("7", "b")


def test_equality_with_different_buckets_raises():
    keys = _keys()
    first = keys[0]
    other = next(k for k in keys if _bucket(k) != _bucket(first))
    with pytest.raises(HashMismatchError):
        _ = Record(first, "a") == Record(other, "b")


def test_equality_same_bucket_different_key_is_false():
    keys = _keys()
    first = keys[0]
    other = next(k for k in keys[1:] if _bucket(k) == _bucket(first))
    assert not (Record(first, "a") == Record(other, "a"))


def test_equality_with_other_type_is_false():
    assert (Record("k", "d") == "k") is False


def test_hash_consistent_with_equality():
    assert hash(Record("k", "a")) == hash(Record("k", "b"))


def test_ordering_by_key_then_data():
    records = [Record("b", "1"), Record("a", "2"), Record("a", "1")]
    ordered = [(r.key, r.data) for r in sorted(records)]
    assert ordered == [("a", "1"), ("a", "2"), ("b", "1")]


def test_equal_checks_key_and_data():
    assert Record("k", "d").equal(Record("k", "d"))
    assert not Record("k", "d").equal(Record("k", "e"))


def test_str():
    assert str(Record("k", "d")) == "Record with key=k and data=d"