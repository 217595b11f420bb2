import numpy as np

from treesort.errors import AllocationFailure

DTYPE = np.int32  # Data type for all communications


def allocate(count, rank=None):
    try:
        return np.empty(count, dtype=DTYPE)
    except MemoryError as exc:
        raise AllocationFailure(count, rank) from exc


def seed(length, rank=0):
    # Decreasing order to execute worst case
    values = allocate(length, rank)
    values[:] = np.arange(length, 0, -1, dtype=DTYPE)
    return values
