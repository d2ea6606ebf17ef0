"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from laakhay.chunked.core import ChunkedError, WriterFinalizedError, WriteZeroError


def test_write_zero_error_with_progress():
    """Test WriteZeroError carries how far the write got."""
    error = WriteZeroError("sink full", written=3, expected=10)
    assert str(error) == "sink full"
    assert error.written == 3
    assert error.expected == 10
    assert isinstance(error, ChunkedError)


def test_write_zero_error_defaults():
    """Test WriteZeroError progress defaults to zero."""
    error = WriteZeroError("sink full")
    assert error.written == 0
    assert error.expected == 0


def test_writer_finalized_error_is_library_error():
    """Test WriterFinalizedError can be caught as ChunkedError."""
    error = WriterFinalizedError("done")
    assert isinstance(error, ChunkedError)
    assert not isinstance(error, WriteZeroError)
