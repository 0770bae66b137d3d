import io

import pyte


class PyteStreamWrapper(io.RawIOBase):
    """
    A binary stream feeding everything written to it into pyte, usable as a blessed terminal's stream.

    Every write() call is recorded in "writes", so tests can tell separate transfers apart.
    """

    def __init__(self, stream: pyte.ByteStream):
        super().__init__()
        self._stream = stream
        self.writes: list[bytes] = []

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        data = bytes(b)
        self.writes.append(data)
        self._stream.feed(data)
        return len(data)
