"""Data records and the sizing constants shared by the join engine."""

from __future__ import annotations

from dataclasses import dataclass

RECORDS_PER_PAGE = 32
MEM_SIZE_IN_PAGE = 16
DISK_SIZE_IN_PAGE = 999

_MODULAR = 1_000_000
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _string_hash(text: str) -> int:
    """Deterministic 64-bit FNV-1a hash of a string's UTF-8 bytes."""
    value = _FNV_OFFSET
    for byte in text.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK64
    return value


class HashMismatchError(ValueError):
    """Raised when comparing records whose probe hashes fall in different buckets."""


@dataclass(frozen=True, eq=False)
class Record:
    """A key/data pair stored in pages."""

    key: str
    data: str

    def partition_hash(self) -> int:
        """Hash of the key used in the partition phase."""
        return _string_hash(self.key) % _MODULAR

    def probe_hash(self) -> int:
        """Hash of the key used in the probe phase, distinct from the partition hash."""
        return _string_hash("key:" + self.key) % _MODULAR

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        buckets = MEM_SIZE_IN_PAGE - 2
        if self.probe_hash() % buckets != other.probe_hash() % buckets:
            raise HashMismatchError(
                "Can not compare two records with different hash values(rhs) of key."
            )
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: Record) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return (self.key, self.data) < (other.key, other.data)

    def equal(self, other: Record) -> bool:
        """True if both key and data match."""
        return self.key == other.key and self.data == other.data

    def __str__(self) -> str:
        return f"Record with key={self.key} and data={self.data}"