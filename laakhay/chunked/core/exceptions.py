"""Custom exception hierarchy."""

from __future__ import annotations


class ChunkedError(Exception):
    """Base exception for all library errors."""

    pass


class WriterFinalizedError(ChunkedError):
    """Write attempted after the terminating chunk was emitted.

    The terminator closes the chunked body on the wire, so any further
    chunk would be read by the peer as the start of the next message.
    """

    pass


class WriteZeroError(ChunkedError):
    """Sink accepted zero bytes of a non-empty write.

    Raised when a sink reports that it can take nothing more, e.g. a
    fixed-capacity buffer that is already full. The chunk being emitted is
    left incomplete in the sink.
    """

    def __init__(self, message: str, written: int = 0, expected: int = 0) -> None:
        super().__init__(message)
        self.written = written
        self.expected = expected
