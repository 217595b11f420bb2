from mpi4py import MPI

from treesort.buffers import allocate
from treesort.transport import ANY_SOURCE


class MPITransport:
    """Transport over an MPI communicator, one process per worker."""

    def __init__(self, comm=None):
        self.comm = comm if comm is not None else MPI.COMM_WORLD
        self.rank = self.comm.Get_rank()
        self.size = self.comm.Get_size()

    def send(self, dest, tag, values):
        self.comm.Send([values, MPI.INT], dest=dest, tag=tag)

    def probe(self, source, tag):
        status = MPI.Status()
        if source is ANY_SOURCE:
            source = MPI.ANY_SOURCE
        self.comm.Probe(source=source, tag=tag, status=status)
        return status.Get_source(), status.Get_count(MPI.INT)

    def recv(self, source, tag):
        # Learn the element count before allocating the receive buffer
        source, count = self.probe(source, tag)
        values = allocate(count, self.rank)
        self.comm.Recv([values, MPI.INT], source=source, tag=tag)
        return values, source

    def abort(self, code=1):
        self.comm.Abort(code)
