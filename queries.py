"""queries.py

Per-country analytics over a loaded ParcelIndex.

Every query hashes the country, takes that bucket's tree, and walks it with bst.py.
An unknown country (empty bucket) gives an empty list, zero totals, or None; never an error.

Note: countries that collide share a bucket, so results come from the whole bucket tree.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import bst
from hash_table import ParcelIndex
from models import Direction, Parcel, Totals


def list_by_country(index: ParcelIndex, country: str) -> List[Parcel]:
    """All parcels for `country`, lightest first."""
    return bst.in_order(index.lookup(country))


def filter_by_weight(index: ParcelIndex, country: str, threshold: int,
                     direction: Direction) -> List[Parcel]:
    """Parcels strictly heavier (ABOVE) or strictly lighter (BELOW) than `threshold`, lightest first."""
    return bst.filter_by_weight(index.lookup(country), threshold, direction)


def totals(index: ParcelIndex, country: str) -> Totals:
    """Total load (grams) and valuation for `country`."""
    return bst.aggregate(index.lookup(country))


def price_extremes(index: ParcelIndex, country: str) -> Optional[Tuple[Parcel, Parcel]]:
    """(cheapest, most expensive) parcel for `country`, or None if it has no parcels."""
    root = index.lookup(country)
    if root is None:
        return None
    return bst.extremes_by_valuation(root)


def weight_extremes(index: ParcelIndex, country: str) -> Optional[Tuple[Parcel, Parcel]]:
    """(lightest, heaviest) parcel for `country`, or None if it has no parcels."""
    root = index.lookup(country)
    if root is None:
        return None
    return bst.min_by_weight(root), bst.max_by_weight(root)
