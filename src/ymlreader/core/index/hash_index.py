# src/ymlreader/core/index/hash_index.py
"""
Typed index: a fixed-capacity chained hash table.

256 buckets, each a chain of Entry records. Keys are unique across the
table; inserting an existing key replaces that entry in place, so the most
recent assignment wins. There is no removal and no resize.
"""

import struct
from collections.abc import Iterator

from ymlreader.core.model.entry import Entry
from ymlreader.infrastructure.logging import get_logger

logger = get_logger(__name__)

BUCKET_COUNT = 256

_HASH_MASK = (1 << (struct.calcsize("N") * 8)) - 1


def key_hash(key: str | bytes) -> int:
    """
    Multiply-by-37 roll over the unsigned bytes of the key.

    Wraps at the platform word size like an unsigned machine word; the bucket
    is ``key_hash(key) % BUCKET_COUNT``. Deterministic within a process, not
    meant to be stable elsewhere.
    """
    if isinstance(key, str):
        key = key.encode("ascii")
    h = 0
    for byte in key:
        h = (37 * h + byte) & _HASH_MASK
    return h


def bucket_of(key: str | bytes) -> int:
    return key_hash(key) % BUCKET_COUNT


class HashIndex:
    """
    Chained hash table mapping keys to entries.

    Not synchronized: the reader builds one privately during parse and only
    publishes it once complete, after which it is never mutated.
    """

    def __init__(self) -> None:
        self._buckets: list[list[Entry]] = [[] for _ in range(BUCKET_COUNT)]
        self._count = 0

    def insert(self, entry: Entry) -> bool:
        """
        Store an entry, replacing any entry with the same key.

        Args:
            entry: Entry to store

        Returns:
            True if the key was new, False if an existing entry was replaced
        """
        index = bucket_of(entry.key)
        chain = self._buckets[index]
        for position, existing in enumerate(chain):
            if existing.key == entry.key:
                chain[position] = entry
                logger.warning(
                    f"Duplicate key '{entry.key}': {existing.kind.value} value replaced "
                    f"by {entry.kind.value} value"
                )
                return False
        chain.append(entry)
        self._count += 1
        logger.debug(f"Inserted '{entry.key}' in bucket {index} (chain length {len(chain)})")
        return True

    def lookup(self, key: str) -> Entry | None:
        """Return the entry stored under ``key``, or None when absent."""
        if not key.isascii():
            return None
        for entry in self._buckets[bucket_of(key)]:
            if entry.key == key:
                return entry
        return None

    def chain(self, index: int) -> tuple[Entry, ...]:
        """Snapshot of one bucket chain, head first."""
        return tuple(self._buckets[index])

    def chain_lengths(self) -> list[int]:
        return [len(chain) for chain in self._buckets]

    def keys(self) -> list[str]:
        return [entry.key for entry in self]

    def release(self) -> int:
        """
        Drop every chain.

        Returns:
            Number of entries released
        """
        released = 0
        for index, chain in enumerate(self._buckets):
            released += len(chain)
            self._buckets[index] = []
        self._count = 0
        return released

    def __iter__(self) -> Iterator[Entry]:
        for chain in self._buckets:
            yield from chain

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None
