"""
Index module - 256-bucket chained hash table of typed entries.
"""

from ymlreader.core.index.hash_index import BUCKET_COUNT, HashIndex, bucket_of, key_hash

__all__ = [
    "BUCKET_COUNT",
    "HashIndex",
    "bucket_of",
    "key_hash",
]
