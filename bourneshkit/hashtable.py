"""The fixed-size hash table behind the command hash."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain
from typing import Optional

HASHZAP = 0x03FF
CDMARK = 0x8000

NOTFOUND = 0x0000
BUILTIN = 0x0100
FUNCTION = 0x0200
COMMAND = 0x0400
REL_COMMAND = 0x0800
PATH_COMMAND = 0x1000
DOT_COMMAND = 0x8800

TYPE_MASK = 0x1F00
DATA_MASK = 0x00FF

FACTOR = 0o35761254233
TABLENGTH = 64
LOG2LEN = 6

_WORD = 0xFFFFFFFF
_SHIFT = 32 - LOG2LEN


@dataclass
class Entry:
    """A hashed name with its type/position word, hit count and search cost."""

    key: str
    data: int = 0
    hits: int = 0
    cost: int = 0


def crunch(key: str) -> int:
    """Sum of the key's bytes plus its length, as a 32-bit value."""
    raw = key.encode()
    return (sum(raw) + len(raw)) & _WORD


def bucket_index(key: str) -> int:
    """The bucket, 0 to 63, that *key* falls into."""
    return ((crunch(key) * FACTOR) & _WORD) >> _SHIFT


class HashTable:
    """Chained hash table of :class:`Entry` objects keyed by name."""

    def __init__(self) -> None:
        self._buckets: list[list[Entry]] = [[] for _ in range(TABLENGTH)]

    def find(self, key: str) -> Optional[Entry]:
        """Return the entry for *key*, or None."""
        return next((e for e in self._buckets[bucket_index(key)] if e.key == key), None)

    def enter(self, entry: Entry) -> Entry:
        """Add *entry* at the end of its bucket's chain and return it."""
        self._buckets[bucket_index(entry.key)].append(entry)
        return entry

    def scan(self) -> Iterator[Entry]:
        """Yield every entry, bucket by bucket, in chain order."""
        return chain.from_iterable(list(bucket) for bucket in self._buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)