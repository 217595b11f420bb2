"""Point-to-point transport for workers running as threads of one process.

Each rank owns a mailbox. A send copies the buffer into the destination
mailbox, so the sender may reuse its buffer right away. Messages between
one pair of ranks are matched in the order they were sent.
"""
import threading

from treesort.buffers import allocate

ANY_SOURCE = None


class LocalHub:
    def __init__(self, size):
        self.size = size
        self._mailboxes = [[] for _ in range(size)]
        self._cond = threading.Condition()

    def endpoint(self, rank):
        if not 0 <= rank < self.size:
            raise ValueError(f"rank {rank} outside [0, {self.size})")
        return LocalTransport(self, rank)

    def pending(self, rank):
        with self._cond:
            return len(self._mailboxes[rank])


class LocalTransport:
    def __init__(self, hub, rank):
        self.hub = hub
        self.rank = rank
        self.size = hub.size

    def _find(self, source, tag):
        mailbox = self.hub._mailboxes[self.rank]
        for index, (frame_source, frame_tag, _) in enumerate(mailbox):
            if frame_tag == tag and (source is ANY_SOURCE or frame_source == source):
                return index
        return None

    def _match(self, source, tag):
        index = self._find(source, tag)
        if index is None:
            return None
        return self.hub._mailboxes[self.rank][index]

    def send(self, dest, tag, values):
        if not 0 <= dest < self.size:
            raise ValueError(f"destination {dest} outside [0, {self.size})")
        payload = allocate(len(values), self.rank)
        payload[:] = values
        frame = (self.rank, tag, payload)
        with self.hub._cond:
            self.hub._mailboxes[dest].append(frame)
            self.hub._cond.notify_all()

    def probe(self, source, tag):
        with self.hub._cond:
            frame = self.hub._cond.wait_for(lambda: self._match(source, tag))
        frame_source, _, payload = frame
        return frame_source, len(payload)

    def recv(self, source, tag):
        frame_source, count = self.probe(source, tag)
        values = allocate(count, self.rank)
        with self.hub._cond:
            # Only this rank consumes its mailbox, so the probed frame is still first
            frame = self.hub._mailboxes[self.rank].pop(self._find(frame_source, tag))
        values[:] = frame[2]
        return values, frame_source
