"""Line-by-line reading from file descriptors or binary streams."""

import os

BUFFER_SIZE = 1024
OPEN_MAX = 1024


class LineReader:
    """Read lines, newline included, from a file descriptor or a stream.

    The source is read in chunks of buffer_size bytes; whatever follows
    the returned line is kept for the next call.
    """

    def __init__(self, source, buffer_size=BUFFER_SIZE, encoding="utf-8"):
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self._source = source
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._pending = bytearray()

    def _read_chunk(self):
        if isinstance(self._source, int):
            return os.read(self._source, self.buffer_size)
        chunk = self._source.read(self.buffer_size)
        if isinstance(chunk, str):
            chunk = chunk.encode(self.encoding)
        return chunk or b""

    def read_line(self):
        """Return the next line, or None once the source is exhausted."""
        while b"\n" not in self._pending:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end == -1 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode(self.encoding)

    def __iter__(self):
        while (line := self.read_line()) is not None:
            yield line


_readers = {}


def get_next_line(fd):
    """Return the next line read from fd, or None at end of input.

    Each descriptor keeps its own pending data, so several descriptors
    may be read in turn.
    """
    if fd < 0 or fd > OPEN_MAX:
        raise ValueError(f"invalid file descriptor {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line