"""Line-by-line reading of a stream in fixed-size chunks."""

DEFAULT_BUFFER_SIZE = 4096


class LineReader:
    """Read lines, without their newline, from a stream read in chunks."""

    def __init__(self, stream, buffer_size=DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None
        self._newline = None

    def _fill(self):
        """Read chunks until the pending data holds a newline or the stream ends."""
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            if self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk
            if self._newline in chunk:
                return

    def read_line(self):
        """Return the next line, or None once the stream is exhausted."""
        if self._pending is None or self._newline not in self._pending:
            self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        line, sep, rest = pending.partition(self._newline)
        self._pending = rest if sep else None
        return line

    def __iter__(self):
        while (line := self.read_line()) is not None:
            yield line


def iter_lines(stream, buffer_size=DEFAULT_BUFFER_SIZE):
    """Yield each line of ``stream`` without its newline."""
    yield from LineReader(stream, buffer_size)