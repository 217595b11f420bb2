"""Scatter-then-gather exchange run by every worker of the tree.

Each worker goes through the same four steps, in order:

1. acquire  - the root seeds the sequence, others receive from their parent
2. dispatch - internal workers send each half to a child; leaves sort locally
3. collect  - internal workers receive both halves back and merge them
4. report   - non-root workers send their sorted partition to their parent

A worker only ever talks to its parent and its two children.
"""
from treesort.buffers import seed
from treesort.errors import ProtocolError
from treesort.local_sort import bubble_sort
from treesort.merge import merge
from treesort.topology import resolve, split
from treesort.transport import ANY_SOURCE

TAG = 0


def log(rank, message):
    print(f"[rank {rank}] {message}", flush=True)


def acquire(transport, node):
    if node.is_root:
        return seed(node.owned_length, node.rank), node
    values, _ = transport.recv(node.parent, TAG)
    return values, node.with_length(len(values))


def dispatch(transport, node, values):
    left_len, _ = split(len(values))
    transport.send(node.left, TAG, values[:left_len])
    transport.send(node.right, TAG, values[left_len:])


def collect(transport, node):
    # Children may finish in either order
    parts = {}
    for _ in range(2):
        values, source = transport.recv(ANY_SOURCE, TAG)
        if source not in (node.left, node.right) or source in parts:
            raise ProtocolError(
                f"unexpected message from rank {source}", node.rank)
        parts[source] = values
    return merge(parts[node.left], parts[node.right], rank=node.rank)


def report(transport, node, values):
    if node.is_root:
        return values
    transport.send(node.parent, TAG, values)
    return None


def run_worker(transport, root_len, sorter=bubble_sort, verbose=False):
    """Run one worker of the tree to completion.

    :param transport: endpoint with ``rank``, ``size``, ``send`` and ``recv``
    :param root_len: number of elements seeded at the root
    :param sorter: in-place sort applied at the leaves
    :param verbose: print per-worker progress
    :return: the sorted sequence at the root, ``None`` on every other rank
    """
    node = resolve(transport.rank, transport.size, root_len)

    values, node = acquire(transport, node)
    if verbose:
        log(node.rank, f"{node.role} at depth {node.depth} owns {node.owned_length} elements")

    if node.is_leaf:
        sorter(values)
    else:
        dispatch(transport, node, values)
        if verbose:
            left_len, right_len = node.split_sizes
            log(node.rank, f"sent {left_len} to rank {node.left}, {right_len} to rank {node.right}")
        values = collect(transport, node)

    if verbose:
        log(node.rank, "partition sorted")
    return report(transport, node, values)
