"""HTTP/1.1 chunked transfer coding primitives (RFC 7230 section 4.1).

Wire format produced by this library::

    chunk       = hex-length CRLF chunk-data CRLF
    hex-length  = lowercase hex digits, no leading zeros ("0" for empty)
    terminator  = "0" CRLF CRLF

No chunk extensions and no trailer fields are ever emitted.
"""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

from .exceptions import WriteZeroError

if TYPE_CHECKING:
    from ..sinks.base import ByteSink, BytesLike

CRLF = b"\r\n"
TERMINATOR = b"0\r\n\r\n"


def chunk_header(length: int) -> bytes:
    """Build the size line that opens a chunk.

    Args:
        length: Payload size in bytes

    Returns:
        Lowercase hex length followed by CRLF

    Raises:
        ValueError: If length is negative

    Examples:
        >>> chunk_header(26)
        b'1a\\r\\n'
        >>> chunk_header(0)
        b'0\\r\\n'
    """
    if length < 0:
        raise ValueError(f"chunk length must be non-negative, got {length}")
    return b"%x\r\n" % length


def write_all(sink: ByteSink, data: BytesLike) -> None:
    """Write every byte of data to sink, continuing after short writes.

    The payload is handed to the sink as a memoryview over the caller's
    object; the remainder after a short write is a sub-view, never a copy.

    Args:
        sink: Destination accepting bytes-like objects
        data: Bytes-like payload

    Raises:
        BlockingIOError: If the sink returns None (would block)
        WriteZeroError: If the sink accepts 0 bytes of a non-empty request
        Exception: Anything the sink raises, unchanged
    """
    view = memoryview(data).cast("B")
    expected = len(view)
    written = 0
    while written < expected:
        n = sink.write(view[written:])
        if n is None:
            raise BlockingIOError(
                errno.EAGAIN,
                "sink would block mid-chunk",
                written,
            )
        if n == 0:
            raise WriteZeroError(
                f"sink accepted 0 bytes ({written}/{expected} written)",
                written=written,
                expected=expected,
            )
        written += n
