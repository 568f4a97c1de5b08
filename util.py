"""util.py

Small, shared helpers used by the CLI.

This project intentionally uses the Python standard library only.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from models import Parcel


def money(amount: Decimal) -> str:
    """Format an amount as dollars with two decimals, e.g. '$2210.00'."""
    return f"${amount:.2f}"


def format_parcel(p: Parcel) -> str:
    """One-line parcel description used by every listing."""
    return f"Destination: {p.destination}, Weight: {p.weight}, Valuation: {p.valuation:.2f}"


def parse_int(s: str) -> Optional[int]:
    """Parse a whole number typed by the user; None if it isn't one."""
    s = (s or '').strip()
    try:
        return int(s)
    except ValueError:
        return None


def normalize_country(s: str, max_length: int = 20) -> str:
    """Trim a typed country name the same way the file reader does.

    Case is kept: bucket lookup is case-sensitive.
    """
    return (s or '').strip()[:max_length]
