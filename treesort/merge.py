from treesort.buffers import allocate


def merge(left, right, out=None, rank=None):
    """Merge two ascending sequences into one ascending buffer.

    Single pass with one cursor per side. On equal keys the element from
    ``left`` is taken first. Once either side is exhausted the rest of the
    other side is copied as is.

    :param left: sorted sequence
    :param right: sorted sequence
    :param out: destination of length ``len(left) + len(right)``, allocated
        when omitted
    :param rank: worker reported on allocation failure
    :return: the destination buffer
    """
    n_left = len(left)
    n_right = len(right)
    total = n_left + n_right
    if out is None:
        out = allocate(total, rank)
    elif len(out) != total:
        raise ValueError(f"destination holds {len(out)} elements, need {total}")

    i = j = k = 0
    while i < n_left and j < n_right:
        if left[i] <= right[j]:
            out[k] = left[i]
            i += 1
        else:
            out[k] = right[j]
            j += 1
        k += 1

    # At most one of these copies anything
    out[k:k + n_left - i] = left[i:]
    k += n_left - i
    out[k:k + n_right - j] = right[j:]
    return out
