"""Socket sink."""

from __future__ import annotations

import logging
import socket as _socket

from .base import BytesLike

logger = logging.getLogger(__name__)


class SocketSink:
    """Sink over a connected stream socket.

    ``write`` maps to ``socket.send`` and may accept only part of the data;
    the writer keeps sending the remainder. OS errors (reset, broken pipe,
    timeout) propagate unchanged.
    """

    def __init__(self, sock: _socket.socket) -> None:
        self._sock = sock

    @property
    def socket(self) -> _socket.socket:
        return self._sock

    def write(self, data: BytesLike) -> int:
        return self._sock.send(data)

    def close(self) -> None:
        """Close the underlying socket."""
        logger.debug(f"Closing socket sink fd={self._sock.fileno()}")
        self._sock.close()
