"""config.py

Load-time policy: value ranges a parcel must fall within and the accepted-record quota.

The defaults mirror the courier company's published limits:
- parcels weigh between 100 g and 50 000 g
- parcels are valued between $10 and $2000
- a data file must yield at least 2000 parcels, and at most 5000 are loaded
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LoadPolicy:
    """
    Validation ranges and quota for ingestion (immutable).

    All ranges are inclusive on both ends.

    Attributes:
        min_weight: Lightest accepted parcel, grams
        max_weight: Heaviest accepted parcel, grams
        min_valuation: Cheapest accepted parcel
        max_valuation: Most expensive accepted parcel
        min_records: Accepted records required for a successful load
        max_records: Hard cap; ingestion stops once this many are accepted
        max_destination_length: Destination names are truncated to this length by the reader
    """

    min_weight: int = 100
    max_weight: int = 50000
    min_valuation: Decimal = Decimal('10')
    max_valuation: Decimal = Decimal('2000')
    min_records: int = 2000
    max_records: int = 5000
    max_destination_length: int = 20

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.min_weight > self.max_weight:
            raise ValueError(f"min_weight exceeds max_weight: {self.min_weight} > {self.max_weight}")
        if self.min_valuation > self.max_valuation:
            raise ValueError(
                f"min_valuation exceeds max_valuation: {self.min_valuation} > {self.max_valuation}"
            )
        if self.min_records < 0:
            raise ValueError(f"min_records must be non-negative: {self.min_records}")
        if self.max_records <= 0:
            raise ValueError(f"max_records must be positive: {self.max_records}")
        if self.min_records > self.max_records:
            raise ValueError(f"min_records exceeds max_records: {self.min_records} > {self.max_records}")
        if self.max_destination_length <= 0:
            raise ValueError(f"max_destination_length must be positive: {self.max_destination_length}")

    def accepts(self, weight: int, valuation: Decimal) -> bool:
        """True when both weight and valuation are within range."""
        return (self.min_weight <= weight <= self.max_weight
                and self.min_valuation <= valuation <= self.max_valuation)


DEFAULT_POLICY = LoadPolicy()
