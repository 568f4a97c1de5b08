"""models.py

Dataclasses representing the core domain objects:

- Parcel: a courier item bound for a destination country, with a weight and a valuation.
- Node: one node of a bucket's weight-ordered binary search tree.

These are intentionally simple structures so the tree algorithms live in bst.py
and the hashing/bucket logic lives in hash_table.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class Parcel:
    """A parcel in the courier inventory."""

    destination: str         # country name, at most 20 characters after reading
    weight: int              # grams
    valuation: Decimal       # currency units


@dataclass
class Node:
    """A tree node. Lighter parcels live under `left`, equal or heavier under `right`."""

    parcel: Parcel
    left: Optional[Node] = None
    right: Optional[Node] = None

    @property
    def weight(self) -> int:
        return self.parcel.weight


class Totals(NamedTuple):
    """Aggregate load and valuation for one country."""

    weight: int
    valuation: Decimal


class Direction(Enum):
    """Which side of a weight threshold to keep."""

    ABOVE = 'above'
    BELOW = 'below'
