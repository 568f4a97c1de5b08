"""bst.py

Weight-ordered binary search tree used inside each hash bucket.

Ordering rule (holds for the whole subtree, not just immediate children):
- every parcel under `left` is strictly lighter than the node
- every parcel under `right` is equal to or heavier than the node

The tree is never rebalanced, so sorted input produces a chain as long as the input
(up to 5000 nodes, deeper than the default recursion limit). Walks use an explicit stack.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from models import Direction, Node, Parcel, Totals


class EmptyBucketError(LookupError):
    """Raised when an extremes query runs against an empty tree."""
    pass


def insert(root: Optional[Node], parcel: Parcel) -> Node:
    """Insert a parcel and return the tree's root.

    Callers must store the returned value: inserting into an empty tree creates the root.
    """
    new_node = Node(parcel)
    if root is None:
        return new_node

    current = root
    while True:
        if parcel.weight < current.weight:
            if current.left is None:
                current.left = new_node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = new_node
                return root
            current = current.right


def iter_in_order(root: Optional[Node]) -> Iterator[Parcel]:
    """Yield parcels in ascending weight order (left, self, right)."""
    stack: List[Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.parcel
        current = current.right


def iter_pre_order(root: Optional[Node]) -> Iterator[Parcel]:
    """Yield parcels root first, then the left subtree, then the right subtree."""
    stack: List[Node] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.parcel
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def in_order(root: Optional[Node]) -> List[Parcel]:
    """All parcels in ascending weight order."""
    return list(iter_in_order(root))


def filter_by_weight(root: Optional[Node], threshold: int, direction: Direction) -> List[Parcel]:
    """Parcels strictly above or strictly below `threshold`, in ascending weight order.

    A parcel weighing exactly `threshold` is never returned.
    """
    if direction is Direction.ABOVE:
        return [p for p in iter_in_order(root) if p.weight > threshold]
    return [p for p in iter_in_order(root) if p.weight < threshold]


def aggregate(root: Optional[Node]) -> Totals:
    """Total weight and valuation of every parcel in the tree. (0, 0) when empty."""
    total_weight = 0
    total_valuation = Decimal('0')
    for p in iter_in_order(root):
        total_weight += p.weight
        total_valuation += p.valuation
    return Totals(total_weight, total_valuation)


def extremes_by_valuation(root: Optional[Node]) -> Tuple[Parcel, Parcel]:
    """Return (cheapest, priciest) over the whole tree.

    The walk is pre-order from the root and only a strictly better valuation replaces
    the current pick, so among equal valuations the first one visited wins.
    """
    if root is None:
        raise EmptyBucketError('no parcels in this bucket')

    cheapest = priciest = root.parcel
    for p in iter_pre_order(root):
        if p.valuation < cheapest.valuation:
            cheapest = p
        if p.valuation > priciest.valuation:
            priciest = p
    return cheapest, priciest


def min_by_weight(root: Optional[Node]) -> Parcel:
    """Lightest parcel: the leftmost node."""
    if root is None:
        raise EmptyBucketError('no parcels in this bucket')
    node = root
    while node.left is not None:
        node = node.left
    return node.parcel


def max_by_weight(root: Optional[Node]) -> Parcel:
    """Heaviest parcel: the rightmost node."""
    if root is None:
        raise EmptyBucketError('no parcels in this bucket')
    node = root
    while node.right is not None:
        node = node.right
    return node.parcel


def size(root: Optional[Node]) -> int:
    return sum(1 for _ in iter_pre_order(root))


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    if root is None:
        return 0
    best = 0
    stack: List[Tuple[Node, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return best
