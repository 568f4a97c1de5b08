"""cli.py

Interactive command-line interface for the courier parcel index.

Program flow when you run `python cli.py [courier-file]`:
  1) Read the courier file (default: data/courier.txt) and build the 127-bucket ParcelIndex.
  2) Refuse to continue if fewer than 2000 valid parcels were loaded.
  3) Provide a small menu of per-country queries.

Note:
- The CLI is intentionally small; most logic lives in data_loader.py, bst.py and queries.py.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, List, Optional

import queries
from config import DEFAULT_POLICY
from data_loader import InsufficientDataError, load_index
from hash_table import ParcelIndex
from models import Direction, Parcel
from util import format_parcel, money, normalize_country, parse_int


DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
DEFAULT_DATA_FILE = os.path.join(DATA_DIR, 'courier.txt')

MENU = (
    "\nMenu:\n"
    " 1) Display all parcels for a country\n"
    " 2) Display parcels heavier/lighter than a weight for a country\n"
    " 3) Display total parcel load and valuation for a country\n"
    " 4) Display cheapest and most expensive parcel for a country\n"
    " 5) Display lightest and heaviest parcel for a country\n"
    " 6) Show occupied hash table buckets\n"
    " 7) Exit"
)


def prompt_country(read: Callable[[str], str]) -> str:
    return normalize_country(read("Enter country name: "), DEFAULT_POLICY.max_destination_length)


def print_parcels(parcels: List[Parcel], country: str) -> None:
    if not parcels:
        print(f"No parcels found for country {country}")
        return
    for p in parcels:
        print(format_parcel(p))


def print_bucket_report(index: ParcelIndex) -> None:
    """Print each non-empty bucket with its parcel count and tree height."""
    rows = index.occupied_buckets()
    print(f"\n{len(rows)} of 127 buckets occupied, {len(index)} parcels total:\n")
    print(f"{'Bucket':>6}  {'Parcels':>7}  {'Height':>6}")
    print('-' * 25)
    for bucket, count, height in rows:
        print(f"{bucket:>6}  {count:>7}  {height:>6}")
    print()


def handle_choice(choice: int, index: ParcelIndex, read: Callable[[str], str]) -> bool:
    """Run one menu action. Returns False when the user asked to exit."""
    if 1 <= choice <= 5:
        country = prompt_country(read)
        if not country:
            print("Invalid input.")
            return True

    if choice == 1:
        print_parcels(queries.list_by_country(index, country), country)

    elif choice == 2:
        weight = parse_int(read("Enter weight: "))
        if weight is None:
            print("Invalid input.")
            return True
        option = parse_int(read("1. Higher than weight\n2. Lower than weight\n> "))
        if option == 1:
            direction = Direction.ABOVE
        elif option == 2:
            direction = Direction.BELOW
        else:
            print("Invalid input.")
            return True
        print_parcels(queries.filter_by_weight(index, country, weight, direction), country)

    elif choice == 3:
        total = queries.totals(index, country)
        print(f"Total Load: {total.weight} grams, Total Valuation: {money(total.valuation)}")

    elif choice == 4:
        found = queries.price_extremes(index, country)
        if found is None:
            print(f"No parcels found for country {country}")
        else:
            cheapest, priciest = found
            print(f"Cheapest Parcel - {format_parcel(cheapest)}")
            print(f"Most Expensive Parcel - {format_parcel(priciest)}")

    elif choice == 5:
        found = queries.weight_extremes(index, country)
        if found is None:
            print(f"No parcels found for country {country}")
        else:
            lightest, heaviest = found
            print(f"Lightest Parcel - {format_parcel(lightest)}")
            print(f"Heaviest Parcel - {format_parcel(heaviest)}")

    elif choice == 6:
        print_bucket_report(index)

    elif choice == 7:
        return False

    else:
        print("Invalid choice, try again.")
    return True


def run_cli(path: str = DEFAULT_DATA_FILE, read: Callable[[str], str] = input) -> int:
    """CLI entry point. Returns the process exit status."""
    print("Courier Parcel Index\n")

    try:
        index = load_index(path)
    except FileNotFoundError:
        print(f"Data file not found: {path}")
        print("Expected one parcel per line: destination,weight,valuation\n")
        return 1
    except InsufficientDataError as e:
        print(f"Not enough parcels provided in the file ({e.accepted} valid, {e.required} required).")
        return 1

    # ---- Interactive menu ----
    while True:
        print(MENU)
        try:
            choice = parse_int(read("Enter your choice: "))
            if choice is None:
                print("Invalid input, please enter a number.")
                continue
            if not handle_choice(choice, index, read):
                break
        except EOFError:
            break
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    return run_cli(argv[0] if argv else DEFAULT_DATA_FILE)


if __name__ == '__main__':
    sys.exit(main())
