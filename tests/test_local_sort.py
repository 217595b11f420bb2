import numpy as np
import pytest

from treesort.buffers import DTYPE, allocate, seed
from treesort.errors import AllocationFailure
from treesort.local_sort import bubble_sort, get_sorter, library_sort


@pytest.mark.parametrize("sorter", [bubble_sort, library_sort])
@pytest.mark.parametrize("values", [[], [1], [2, 1], [3, -1, 2, -1, 0], list(range(20, 0, -1))])
def test_sorts_in_place(sorter, values):
    arr = np.array(values, dtype=DTYPE)
    sorter(arr)
    assert arr.tolist() == sorted(values)


def test_get_sorter():
    assert get_sorter("bubble") is bubble_sort
    assert get_sorter("library") is library_sort
    with pytest.raises(ValueError):
        get_sorter("quick")


def test_seed_is_reverse_order():
    assert seed(5).tolist() == [5, 4, 3, 2, 1]
    assert seed(0).tolist() == []
    assert seed(3).dtype == DTYPE


def test_allocation_failure_reports_rank_and_count(monkeypatch):
    def fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(np, "empty", fail)
    with pytest.raises(AllocationFailure, match=r"\[rank 4\].*123") as info:
        allocate(123, rank=4)
    assert info.value.count == 123
    assert info.value.rank == 4
