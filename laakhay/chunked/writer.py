"""Chunked transfer encoding writer.

ChunkedWriter decorates a byte sink and re-emits every write as one HTTP/1.1
chunk, then appends the zero-length terminating chunk when the body is done.

Architecture:
    The writer is an ``io.RawIOBase`` so it plugs into the standard I/O
    stack. Each ``write`` call is framed on its own; there is no internal
    buffer. To cut the number of chunks (and sink writes) produced by many
    small writes, stack an ``io.BufferedWriter`` on top::

        body = io.BufferedWriter(ChunkedWriter(sock_sink))

    ``io.TextIOWrapper`` over that buffered writer gives a text interface.

Lifecycle:
    Active --write--> Active
    Active --finalize--> Finalized (terminator emitted)
    Finalized --finalize--> Finalized (no-op)
    Finalized --write--> WriterFinalizedError
    any --close--> Closed (finalized if possible, sink released)

Cleanup:
    ``close()`` and context-manager exit always try to emit the terminator
    before releasing the sink. When the writer is garbage collected while
    still open, the same happens but a failure can only be logged. Callers
    that must know the body was terminated call ``finalize()`` or
    ``close()`` themselves and check for an exception.

Zero-length writes:
    ``write(b"")`` emits ``0\\r\\n\\r\\n``, which is byte-identical to the
    terminator, and a peer will treat it as the end of the body. The writer
    does not special-case it and stays active. Do not write empty chunks
    unless early termination is intended.
"""

from __future__ import annotations

import io
import logging
from typing import Any

from .core.exceptions import WriterFinalizedError
from .core.framing import CRLF, TERMINATOR, chunk_header, write_all
from .sinks.base import ByteSink, BytesLike

logger = logging.getLogger(__name__)


class ChunkedWriter(io.RawIOBase):
    """Writes bytes to a sink in the HTTP chunked transfer encoding.

    Example:
        >>> buf = io.BytesIO()
        >>> with ChunkedWriter(buf) as body:
        ...     _ = body.write(b"hello ")
        ...     _ = body.write(b"1337")
        >>> buf.getvalue()
        b'6\\r\\nhello \\r\\n4\\r\\n1337\\r\\n0\\r\\n\\r\\n'

    Not safe for concurrent use.
    """

    def __init__(
        self,
        sink: ByteSink,
        *,
        flush_on_finalize: bool = True,
        close_sink: bool = False,
    ) -> None:
        """Attach to a sink. Performs no I/O.

        Args:
            sink: Destination for framed bytes; held exclusively until close
            flush_on_finalize: Flush the sink after the terminator, if it has
                a ``flush`` method
            close_sink: Close the sink when the writer is closed
        """
        super().__init__()
        self._sink: ByteSink | None = sink
        self._finalized = False
        self._flush_on_finalize = flush_on_finalize
        self._close_sink = close_sink

    @property
    def sink(self) -> ByteSink | None:
        """The held sink, or None once the writer has released it."""
        return self._sink

    @property
    def finalized(self) -> bool:
        """Whether the terminating chunk has been written."""
        return self._finalized

    def writable(self) -> bool:
        if self.closed:
            raise ValueError("I/O operation on closed writer")
        return True

    def write(self, data: BytesLike) -> int:
        """Send data as one chunk.

        The payload is forwarded to the sink as a view over ``data``. If the
        sink fails at any step the chunk is left incomplete and the error
        propagates unchanged.

        Args:
            data: Bytes-like payload, may be empty (see module docs)

        Returns:
            Number of payload bytes written, never the framed size

        Raises:
            ValueError: If the writer is closed
            WriterFinalizedError: If the terminator was already written
        """
        if self.closed:
            raise ValueError("I/O operation on closed writer")
        if self._finalized:
            raise WriterFinalizedError("cannot write a chunk after the terminating chunk")

        view = memoryview(data).cast("B")
        length = len(view)
        if length == 0:
            logger.debug("Zero-length write emitted a terminator-equivalent chunk")

        sink = self._sink
        write_all(sink, chunk_header(length))
        write_all(sink, view)
        write_all(sink, CRLF)
        return length

    def finalize(self) -> None:
        """Write the terminating chunk once.

        Later calls are no-ops. Attempted even if an earlier write failed;
        if the terminator write fails the writer stays unfinalized so the
        call may be retried.

        Raises:
            ValueError: If the sink was released before finalization
        """
        if self._finalized:
            return
        if self._sink is None:
            raise ValueError("I/O operation on closed writer")

        write_all(self._sink, TERMINATOR)
        self._finalized = True
        logger.debug("Terminating chunk written")

        if self._flush_on_finalize:
            self._flush_sink()

    def flush(self) -> None:
        """Flush the sink. Emits no framing bytes."""
        super().flush()
        self._flush_sink()

    def close(self) -> None:
        """Finalize, then release the sink.

        The writer is closed and the sink released even if finalization
        fails; the error then propagates to the caller.
        """
        if self.closed:
            return
        sink = self._sink
        try:
            self.finalize()
        finally:
            self._sink = None
            super().close()
            logger.debug(f"Released sink {sink.__class__.__name__}")
            if self._close_sink:
                close = getattr(sink, "close", None)
                if close is not None:
                    close()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Close on exit.

        When the block raised, a close failure is logged so that the
        block's own exception is the one that propagates.
        """
        if exc_type is None:
            self.close()
            return
        try:
            self.close()
        except Exception:
            logger.warning("Failed to terminate chunked body while unwinding", exc_info=True)

    def __del__(self) -> None:
        if self.closed:
            return
        try:
            self.close()
        except Exception:
            # No caller to report to from a finalizer.
            logger.warning("Failed to terminate chunked body during cleanup", exc_info=True)

    def _flush_sink(self) -> None:
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()
