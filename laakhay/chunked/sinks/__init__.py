"""Byte sinks for the chunked writer."""

from .base import ByteSink, BytesLike
from .fixed import FixedBufferSink
from .socket import SocketSink

__all__ = ["ByteSink", "BytesLike", "FixedBufferSink", "SocketSink"]
