"""data_loader.py

Courier file reader and the ingestion pipeline that fills a ParcelIndex.

File format (no header), one parcel per line:
    destination,weight,valuation
e.g.
    Kenya,5000,200.0

- destination is truncated to 20 characters
- weight is whole grams
- valuation is a decimal amount

Ingestion rules:
- parcels outside the weight/valuation ranges are skipped and not counted
- reading stops as soon as 5000 parcels have been accepted
- fewer than 2000 accepted parcels fails the load, but whatever was accepted stays in the index
"""

from __future__ import annotations

import csv
import logging
import re
from contextlib import closing
from decimal import Decimal, InvalidOperation
from typing import Iterable, Iterator, NamedTuple, Optional, Union

from config import DEFAULT_POLICY, LoadPolicy
from hash_table import ParcelIndex
from models import Parcel

logger = logging.getLogger(__name__)

# Plain ASCII numbers only: no `_` separators, no non-ASCII digits, no NaN/Infinity.
_INT = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class RawRecord(NamedTuple):
    """A parsed but not yet validated line."""

    destination: str
    weight: int
    valuation: Decimal


class LoaderError(Exception):
    """Error loading parcels into the index."""
    pass


class InsufficientDataError(LoaderError):
    """Fewer parcels were accepted than the policy requires.

    The partially built index is attached so the caller can decide whether to keep it.
    """

    def __init__(self, accepted: int, required: int, index: ParcelIndex):
        super().__init__(f"Only {accepted} valid parcels loaded; at least {required} are required.")
        self.accepted = accepted
        self.required = required
        self.index = index


def _to_decimal(cell) -> Optional[Decimal]:
    """Parse a valuation cell; return None if not parseable."""
    if isinstance(cell, Decimal):
        return cell if cell.is_finite() else None
    # str() first so a float like 200.1 becomes Decimal('200.1'), not its binary expansion.
    s = str(cell).strip()
    if not _DECIMAL.fullmatch(s):
        return None
    try:
        return Decimal(s)
    except InvalidOperation:
        return None


def _to_int(cell) -> Optional[int]:
    if isinstance(cell, int):
        return cell
    s = str(cell).strip()
    if not _INT.fullmatch(s):
        return None
    return int(s)


def parse_record_line(line: str, max_destination_length: int = 20) -> Optional[RawRecord]:
    """Parse one `destination,weight,valuation` line.

    Returns None for blank or malformed lines. Range checks are not done here.
    """
    line = (line or '').strip()
    if not line:
        return None
    row = next(csv.reader([line]))
    if len(row) != 3:
        return None

    destination = row[0].strip()[:max_destination_length]
    weight = _to_int(row[1])
    valuation = _to_decimal(row[2])
    if not destination or weight is None or valuation is None:
        return None
    return RawRecord(destination, weight, valuation)


def read_records(path: str, policy: LoadPolicy = DEFAULT_POLICY) -> Iterator[RawRecord]:
    """Lazily yield records from a courier file, skipping malformed lines.

    The file stays open only while the caller keeps pulling, so an ingestion cap
    stops the read early.
    """
    with open(path, newline='', encoding='utf-8-sig') as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            record = parse_record_line(line, policy.max_destination_length)
            if record is None:
                logger.warning("Skipping malformed line %d in %s: %r", lineno, path, line.rstrip('\n'))
                continue
            yield record


def ingest(records: Iterable[Union[RawRecord, tuple]],
           index: Optional[ParcelIndex] = None,
           policy: LoadPolicy = DEFAULT_POLICY) -> ParcelIndex:
    """Validate records and insert the accepted ones into `index` (a new one if omitted).

    Returns the index on success.

    Raises:
        InsufficientDataError: fewer than `policy.min_records` parcels were accepted.
            The partially filled index is on the exception.
    """
    if index is None:
        index = ParcelIndex()

    accepted = 0
    rejected = 0
    malformed = 0

    # Nothing past the cap is pulled from `records`.
    for raw in records:
        destination, weight, valuation = raw
        weight = _to_int(weight)
        valuation = _to_decimal(valuation)
        if not destination or weight is None or valuation is None:
            malformed += 1
            logger.debug("Malformed record skipped: %r", raw)
            continue
        if not policy.accepts(weight, valuation):
            rejected += 1
            logger.debug("Out-of-range record skipped: %s %d g $%s", destination, weight, valuation)
            continue

        index.insert(destination, Parcel(destination, weight, valuation))
        accepted += 1
        if accepted >= policy.max_records:
            logger.info("Record cap of %d reached; remaining input ignored", policy.max_records)
            break

    logger.info("Loaded %d parcels (%d out of range, %d malformed)", accepted, rejected, malformed)

    if accepted < policy.min_records:
        raise InsufficientDataError(accepted, policy.min_records, index)
    return index


def load_index(path: str, policy: LoadPolicy = DEFAULT_POLICY) -> ParcelIndex:
    """Read a courier file and build its ParcelIndex."""
    with closing(read_records(path, policy)) as records:
        return ingest(records, policy=policy)
