# Fixed-size hash table (127 buckets) for parcel storage.
# Key: destination country (str). Each bucket holds the root of a weight-ordered BST (see bst.py),
# so parcels for a country sit in one tree, and countries that collide share that tree.

from __future__ import annotations

from typing import List, Optional, Tuple

import bst
from models import Node, Parcel

TABLE_SIZE = 127

_SEED = 5381
_MASK = 0xFFFFFFFFFFFFFFFF  # unsigned 64-bit wraparound


def djb2(key: str) -> int:
    """DJB2 accumulator over the UTF-8 bytes of `key`, wrapped to 64 bits."""
    acc = _SEED
    for c in key.encode('utf-8'):
        acc = ((acc << 5) + acc + c) & _MASK
    return acc


def bucket_index(key: str) -> int:
    """Bucket for a country name. Case-sensitive: 'France' and 'france' differ."""
    return djb2(key) % TABLE_SIZE


class ParcelIndex:
    def __init__(self):
        self._buckets: List[Optional[Node]] = [None] * TABLE_SIZE
        self._size = 0

    def __len__(self):
        return self._size

    def bucket_for(self, country: str) -> int:
        return bucket_index(country)

    def insert(self, country: str, parcel: Parcel) -> None:
        i = self.bucket_for(country)
        self._buckets[i] = bst.insert(self._buckets[i], parcel)
        self._size += 1

    def lookup(self, country: str) -> Optional[Node]:
        """Root of the tree for `country`'s bucket, or None if nothing hashed there."""
        return self._buckets[self.bucket_for(country)]

    # Helpers for the occupancy report
    def occupied_buckets(self) -> List[Tuple[int, int, int]]:
        """(bucket, parcel count, tree height) for every non-empty bucket."""
        return [
            (i, bst.size(root), bst.height(root))
            for i, root in enumerate(self._buckets)
            if root is not None
        ]
