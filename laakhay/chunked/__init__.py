"""Laakhay Chunked - zero-copy HTTP/1.1 chunked transfer encoding writer."""

from .core import (
    CRLF,
    TERMINATOR,
    ChunkedError,
    WriterFinalizedError,
    WriteZeroError,
    chunk_header,
    write_all,
)
from .sinks import ByteSink, BytesLike, FixedBufferSink, SocketSink
from .writer import ChunkedWriter

__version__ = "0.1.0"

__all__ = [
    # Writer
    "ChunkedWriter",
    # Sinks
    "ByteSink",
    "BytesLike",
    "FixedBufferSink",
    "SocketSink",
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
