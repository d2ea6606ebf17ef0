"""Fixed-capacity buffer sink."""

from __future__ import annotations

from .base import BytesLike


class FixedBufferSink:
    """Sink writing into a pre-allocated buffer that never grows.

    Accepts as many bytes as still fit and reports that count, then 0 once
    the buffer is full. Nothing past the capacity is ever dropped silently:
    the writer turns the 0 into a WriteZeroError at the call that overflows.
    """

    def __init__(self, buffer: bytearray | memoryview) -> None:
        """Initialize sink.

        Args:
            buffer: Writable buffer to fill from the start

        Raises:
            TypeError: If buffer is read-only
        """
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise TypeError("FixedBufferSink requires a writable buffer")
        self._view = view
        self._position = 0

    @property
    def capacity(self) -> int:
        return len(self._view)

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._view) - self._position

    def write(self, data: BytesLike) -> int:
        src = memoryview(data).cast("B")
        n = min(len(src), self.remaining)
        self._view[self._position : self._position + n] = src[:n]
        self._position += n
        return n

    def getvalue(self) -> bytes:
        """Bytes written so far."""
        return self._view[: self._position].tobytes()
