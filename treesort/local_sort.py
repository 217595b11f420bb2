def bubble_sort(values):
    n = len(values)
    for end in range(n - 1, 0, -1):
        swapped = False
        for i in range(end):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        if not swapped:
            break
    return values


def library_sort(values):
    values.sort()
    return values


SORTERS = {
    "bubble": bubble_sort,
    "library": library_sort,
}


def get_sorter(name):
    try:
        return SORTERS[name]
    except KeyError:
        raise ValueError(
            f"unknown sorter {name!r}, expected one of {sorted(SORTERS)}") from None
