"""Sink protocol consumed by the chunked writer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

BytesLike = bytes | bytearray | memoryview


@runtime_checkable
class ByteSink(Protocol):
    """Protocol for byte destinations a ChunkedWriter can frame into.

    Any object with a ``write`` method works: ``io.BytesIO``, an open binary
    file, ``socket.makefile("wb")``, or the sinks in this package.

    Design Decision:
        Only ``write`` is required. ``flush`` and ``close`` are optional and
        looked up with ``getattr`` when the writer needs them, so plain
        objects need no base class.
    """

    def write(self, data: memoryview) -> int | None:
        """Accept a prefix of data.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes accepted (may be fewer than ``len(data)``),
            0 if the sink can take nothing more, or None if it would block

        Raises:
            Exception: Any I/O failure; the writer propagates it unchanged
        """
        ...
