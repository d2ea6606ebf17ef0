"""Unit tests for chunk framing primitives."""

from __future__ import annotations

import pytest

from laakhay.chunked.core import CRLF, TERMINATOR, WriteZeroError, chunk_header, write_all


class ListSink:
    """Sink that records each write and accepts at most max_accept bytes."""

    def __init__(self, max_accept: int | None = None) -> None:
        self.max_accept = max_accept
        self.calls: list[bytes] = []

    def write(self, data):
        accepted = data if self.max_accept is None else data[: self.max_accept]
        self.calls.append(bytes(accepted))
        return len(accepted)


class TestChunkHeader:
    """Test chunk size line encoding."""

    @pytest.mark.parametrize(
        "length,expected",
        [
            (0, b"0\r\n"),
            (1, b"1\r\n"),
            (9, b"9\r\n"),
            (10, b"a\r\n"),
            (15, b"f\r\n"),
            (16, b"10\r\n"),
            (26, b"1a\r\n"),
            (255, b"ff\r\n"),
            (4096, b"1000\r\n"),
            (0xDEADBEEF, b"deadbeef\r\n"),
        ],
    )
    def test_lowercase_hex_without_leading_zeros(self, length, expected):
        """Test header is lowercase hex with no padding."""
        assert chunk_header(length) == expected

    def test_negative_length_rejected(self):
        """Test negative lengths raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            chunk_header(-1)

    def test_constants(self):
        """Test wire constants."""
        assert CRLF == b"\r\n"
        assert TERMINATOR == chunk_header(0) + CRLF


class TestWriteAll:
    """Test write_all short-write handling."""

    def test_single_call_when_sink_accepts_everything(self):
        """Test a cooperative sink gets one call."""
        sink = ListSink()
        write_all(sink, b"hello")
        assert sink.calls == [b"hello"]

    def test_continues_after_short_writes(self):
        """Test short writes are continued until every byte is sent."""
        sink = ListSink(max_accept=2)
        write_all(sink, b"hello")
        assert sink.calls == [b"he", b"ll", b"o"]

    def test_empty_data_makes_no_call(self):
        """Test nothing is written for empty data."""
        sink = ListSink()
        write_all(sink, b"")
        assert sink.calls == []

    def test_sink_receives_memoryview(self):
        """Test data is passed as a view over the caller's object."""
        payload = bytearray(b"abcdef")
        seen = []

        class ViewSink:
            def write(self, data):
                seen.append(data)
                return min(len(data), 4)

        write_all(ViewSink(), payload)
        assert all(isinstance(v, memoryview) for v in seen)
        assert all(v.obj is payload for v in seen)

    def test_none_raises_blocking_io_error(self):
        """Test would-block signal surfaces as BlockingIOError."""

        class BlockingSink:
            def __init__(self) -> None:
                self.calls = 0

            def write(self, data):
                self.calls += 1
                return 2 if self.calls == 1 else None

        with pytest.raises(BlockingIOError) as exc_info:
            write_all(BlockingSink(), b"hello")
        assert exc_info.value.characters_written == 2

    def test_zero_raises_write_zero_error(self):
        """Test a sink accepting nothing raises WriteZeroError."""

        class FullSink:
            def write(self, data):
                return 0

        with pytest.raises(WriteZeroError) as exc_info:
            write_all(FullSink(), b"hello")
        assert exc_info.value.written == 0
        assert exc_info.value.expected == 5

    def test_sink_error_propagates_unchanged(self):
        """Test sink exceptions are not wrapped."""
        error = ConnectionResetError("peer reset")

        class BrokenSink:
            def write(self, data):
                raise error

        with pytest.raises(ConnectionResetError) as exc_info:
            write_all(BrokenSink(), b"hello")
        assert exc_info.value is error
