import math

import pytest

from treesort.errors import InvalidInputSize, InvalidTopology
from treesort.topology import (
    INTERNAL,
    LEAF,
    children,
    depth,
    parent,
    resolve,
    split,
    tree_depth,
    validate,
)


@pytest.mark.parametrize("size", [1, 3, 5, 7, 9, 15, 31, 33])
def test_parent_is_lower_rank_with_matching_children(size):
    assert parent(0) is None
    for rank in range(1, size):
        p = parent(rank)
        assert 0 <= p < rank
        assert rank in children(p)


def test_children():
    assert children(0) == (1, 2)
    assert children(3) == (7, 8)


@pytest.mark.parametrize("size", [1, 3, 5, 7, 11])
def test_leaf_iff_right_child_out_of_range(size):
    for rank in range(size):
        node = resolve(rank, size, 10)
        assert node.is_leaf == (2 * rank + 2 >= size)
        assert node.role == (LEAF if node.is_leaf else INTERNAL)


def test_parent_is_not_power_of_two_approximation():
    # rank 5 sits under rank 2, rank 9 under rank 4
    assert parent(5) == 2
    assert parent(9) == 4
    assert parent(10) == 4


@pytest.mark.parametrize("length", range(0, 40))
def test_split_right_biased(length):
    left, right = split(length)
    assert left == length // 2
    assert left + right == length
    assert right - left in (0, 1)


def test_depth():
    assert [depth(r) for r in range(7)] == [0, 1, 1, 2, 2, 2, 2]
    assert tree_depth(1) == 0
    assert tree_depth(5) == 2
    for size in (1, 3, 5, 7, 9, 15, 17):
        bound = math.ceil(math.log2(size)) if size > 1 else 0
        assert tree_depth(size) <= bound


@pytest.mark.parametrize("size", [0, 2, 4, 8, -1])
def test_even_or_empty_worker_count_rejected(size):
    with pytest.raises(InvalidTopology):
        validate(size, 100)


def test_negative_length_rejected():
    with pytest.raises(InvalidInputSize):
        validate(3, -1)


def test_even_split_requires_divisible_length():
    validate(5, 8, even_split=True)
    with pytest.raises(InvalidInputSize):
        validate(5, 10, even_split=True)
    validate(5, 10)


def test_resolve_root_and_child():
    root = resolve(0, 3, 8)
    assert root.is_root and not root.is_leaf
    assert root.parent is None
    assert (root.left, root.right) == (1, 2)
    assert root.owned_length == 8
    assert root.split_sizes == (4, 4)

    child = resolve(2, 3, 8)
    assert not child.is_root and child.is_leaf
    assert child.parent == 0
    assert child.owned_length is None
    assert child.with_length(4).owned_length == 4


def test_single_worker_root_is_leaf():
    root = resolve(0, 1, 40)
    assert root.is_root and root.is_leaf
    assert root.split_sizes is None


def test_resolve_rejects_bad_input():
    with pytest.raises(InvalidTopology, match=r"\[rank 1\]"):
        resolve(1, 4, 8)
    with pytest.raises(InvalidTopology):
        resolve(5, 5, 8)
