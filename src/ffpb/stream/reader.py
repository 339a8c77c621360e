"""Delimiter-framed reads over a raw byte stream."""

from typing import BinaryIO

from ffpb.models.errors import ReadError

NEWLINE = b"\n"
CARRIAGE_RETURN = b"\r"


class EndOfStream(Exception):
    """The source ran out before an exact-count read could be satisfied."""

    def __init__(self, partial: bytes = b""):
        super().__init__(f"stream ended after {len(partial)} bytes")
        self.partial = partial


class ByteCursorReader:
    """Reads delimiter-terminated records and fixed-size prefixes.

    Bytes handed out are consumed for good; the only buffering is the
    read-ahead kept between calls.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = 4096):
        self.stream = stream
        self.chunk_size = chunk_size
        self._buffer = bytearray()
        self._eof = False
        self._read = getattr(stream, "read1", stream.read)

    @property
    def exhausted(self) -> bool:
        return self._eof and not self._buffer

    def _fill(self) -> bool:
        """Pull the next chunk from the source. Returns False at end of input."""
        if self._eof:
            return False
        try:
            data = self._read(self.chunk_size)
        except (OSError, ValueError) as e:
            raise ReadError(
                f"failed to read ffmpeg output: {e}",
                details={"error": str(e)},
            )
        if not data:
            self._eof = True
            return False
        self._buffer.extend(data)
        return True

    def _take(self, size: int) -> bytes:
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        return data

    def read_until(self, delimiter: bytes) -> bytes:
        """Read through the next ``delimiter`` byte, delimiter included.

        At end of input the unterminated remainder is returned, which is
        ``b""`` once everything has been delivered.
        """
        start = 0
        while True:
            index = self._buffer.find(delimiter, start)
            if index >= 0:
                return self._take(index + 1)
            start = len(self._buffer)
            if not self._fill():
                return self._take(len(self._buffer))

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes or raise EndOfStream."""
        while len(self._buffer) < size:
            if not self._fill():
                raise EndOfStream(self._take(len(self._buffer)))
        return self._take(size)
