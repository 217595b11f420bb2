class TreeSortError(Exception):
    def __init__(self, message, rank=None):
        self.rank = rank
        if rank is not None:
            message = f"[rank {rank}] {message}"
        super().__init__(message)


class InvalidTopology(TreeSortError):
    pass


class InvalidInputSize(TreeSortError):
    pass


class AllocationFailure(TreeSortError):
    def __init__(self, count, rank=None):
        self.count = count
        super().__init__(f"cannot allocate buffer of {count} elements", rank)


class ProtocolError(TreeSortError):
    pass
