"""Core components."""

from .exceptions import ChunkedError, WriteZeroError, WriterFinalizedError
from .framing import CRLF, TERMINATOR, chunk_header, write_all

__all__ = [
    # Framing
    "CRLF",
    "TERMINATOR",
    "chunk_header",
    "write_all",
    # Exceptions
    "ChunkedError",
    "WriterFinalizedError",
    "WriteZeroError",
]
