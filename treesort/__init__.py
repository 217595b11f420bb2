from treesort.errors import (
    AllocationFailure,
    InvalidInputSize,
    InvalidTopology,
    ProtocolError,
    TreeSortError,
)
from treesort.merge import merge
from treesort.topology import Node, children, parent, resolve, split, validate

__version__ = "0.1.0"
