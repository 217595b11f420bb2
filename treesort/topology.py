"""Position of a worker in the sorting tree, derived from its rank alone.

Workers are laid out as a complete binary tree in breadth-first order:
rank 0 is the root, rank r has children 2r+1 and 2r+2.
"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from treesort.errors import InvalidInputSize, InvalidTopology

LEAF = "leaf"
INTERNAL = "internal"


def children(rank: int) -> Tuple[int, int]:
    return rank * 2 + 1, rank * 2 + 2


def parent(rank: int) -> Optional[int]:
    if rank == 0:
        return None
    return (rank - 1) // 2


def split(length: int) -> Tuple[int, int]:
    # Right child takes the remainder
    left = length // 2
    return left, length - left


def depth(rank: int) -> int:
    return (rank + 1).bit_length() - 1


def tree_depth(size: int) -> int:
    return depth(size - 1)


def validate(size: int, root_len: int, even_split: bool = False, rank=None) -> None:
    """Reject a configuration before any message is sent.

    The worker count must be odd so every internal node has two children.
    With ``even_split`` the total length must also divide evenly down to the
    deepest level, so that sibling partitions never differ in size.
    """
    if size < 1 or size % 2 == 0:
        raise InvalidTopology(
            f"worker count must be odd, got {size}", rank)
    if root_len < 0:
        raise InvalidInputSize(
            f"element count must be non-negative, got {root_len}", rank)
    if even_split:
        width = 2 ** tree_depth(size)
        if root_len % width:
            raise InvalidInputSize(
                f"element count {root_len} is not divisible by {width}", rank)


@dataclass(frozen=True)
class Node:
    rank: int
    size: int
    parent: Optional[int]
    left: int
    right: int
    owned_length: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.rank == 0

    @property
    def is_leaf(self) -> bool:
        return self.right >= self.size

    @property
    def role(self) -> str:
        return LEAF if self.is_leaf else INTERNAL

    @property
    def depth(self) -> int:
        return depth(self.rank)

    @property
    def split_sizes(self) -> Optional[Tuple[int, int]]:
        if self.is_leaf or self.owned_length is None:
            return None
        return split(self.owned_length)

    def with_length(self, length: int) -> "Node":
        return replace(self, owned_length=length)


def resolve(rank: int, size: int, root_len: int) -> Node:
    validate(size, root_len, rank=rank)
    if not 0 <= rank < size:
        raise InvalidTopology(f"rank {rank} outside [0, {size})", rank)
    left, right = children(rank)
    # Non-root lengths are learned from the message received from the parent
    owned = root_len if rank == 0 else None
    return Node(rank, size, parent(rank), left, right, owned)
