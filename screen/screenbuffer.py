from io import BytesIO, TextIOBase
from typing import Optional

import blessed

from .errors import StaleWriterError, UpdateError

CURSOR_HOME = "\x1b[H"
ERASE_SCREEN = "\x1b[2J"
CLEAR_SEQUENCE = CURSOR_HOME + ERASE_SCREEN


def _join_print(values: tuple) -> str:
    # operands are separated by a space only when neither side is a string
    parts = []
    for i, value in enumerate(values):
        if i > 0 and not isinstance(value, str) and not isinstance(values[i - 1], str):
            parts.append(" ")
        parts.append(str(value))
    return "".join(parts)


class BufferWriter:
    """
    Raw write handle bound to the accumulator that was current when it was handed out.

    A successful ScreenBuffer.update() closes that accumulator, after which the handle is stale
    and every write raises StaleWriterError. Ask the buffer for a new handle after each update.
    """

    def __init__(self, buffer: BytesIO):
        self._buffer = buffer

    @property
    def stale(self) -> bool:
        return self._buffer.closed

    def writable(self) -> bool:
        return not self.stale

    def write(self, data: bytes) -> int:
        if self.stale:
            raise StaleWriterError("Writer used after its screen buffer was updated")
        return self._buffer.write(data)


class ScreenBuffer:
    """
    Accumulates output in memory; nothing reaches the terminal until update() is called.

    Appending is bounded by available memory only. Running out of it raises MemoryError, which is
    left to propagate like any other interpreter-level failure.
    """

    def __init__(self, term: Optional[blessed.Terminal] = None, encoding: str = "utf-8"):
        self._term = term if term is not None else blessed.Terminal()
        self.encoding = encoding
        self.buffer = BytesIO()

    @property
    def term(self) -> blessed.Terminal:
        return self._term

    @property
    def pending(self) -> bytes:
        return self.buffer.getvalue()

    def __len__(self) -> int:
        return self.buffer.tell()

    def _append(self, text: str) -> int:
        return self.buffer.write(text.encode(self.encoding))

    def print(self, *values) -> int:
        return self._append(_join_print(values))

    def printf(self, format: str, *values) -> int:
        """
        Append format % values. "%%" always yields a single "%", with or without values.

        A format that does not match its values raises TypeError or ValueError before anything is appended.
        """
        return self._append(format % values)

    def println(self, *values) -> int:
        return self._append(" ".join(map(str, values)) + "\n")

    def clear(self):
        self._append(CLEAR_SEQUENCE)

    def writer(self) -> BufferWriter:
        return BufferWriter(self.buffer)

    def _sink(self):
        stream = self._term.stream
        binary = getattr(stream, "buffer", None)
        if binary is None:
            return stream
        # text written straight to the stream must come out before our bytes
        stream.flush()
        return binary

    def _transfer(self, data: bytes):
        sink = self._sink()
        if isinstance(sink, TextIOBase):
            # text stream without a binary layer
            sink.write(data.decode(self.encoding))
            sink.flush()
            return

        view = memoryview(data)
        while view:
            written = sink.write(view)
            if written is None:
                raise BlockingIOError("Output stream is not ready for writing")
            view = view[written:]
        sink.flush()

    def update(self):
        """
        Write everything accumulated so far to the terminal stream, then start over with an empty buffer.

        On failure the accumulated content is kept untouched, so calling update() again resends all of it;
        bytes that already made it out before the failure are not tracked.
        """
        data = self.buffer.getvalue()
        if data:
            try:
                self._transfer(data)
            except (OSError, TypeError, ValueError) as e:
                raise UpdateError(f"Could not write screen buffer to output: {e}") from e

        self.buffer.close()
        self.buffer = BytesIO()
