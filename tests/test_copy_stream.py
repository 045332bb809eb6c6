from __future__ import annotations

import errno
import io
import os

import pytest

from conftest import BrokenSink, FailingSource, PartialSink, StalledSink
from core.config import DEFAULT_CHUNK_SIZE
from core.domain.models import FailureKind
from core.services.concat_pipeline import copy_stream


def _copy(payload: bytes, sink=None, chunk_size: int = DEFAULT_CHUNK_SIZE):
    sink = sink if sink is not None else io.BytesIO()
    copied, failure = copy_stream(
        io.BytesIO(payload), sink, name="input", buffer=bytearray(chunk_size)
    )
    return sink, copied, failure


@pytest.mark.parametrize("size", [0, 1, 4095, 4096, 4097, 3 * 4096 + 7])
def test_copies_bytes_exactly_around_chunk_boundaries(size):
    payload = os.urandom(size)

    sink, copied, failure = _copy(payload)

    assert failure is None
    assert copied == size
    assert sink.getvalue() == payload


def test_every_byte_value_survives():
    payload = bytes(range(256)) * 20

    sink, _, failure = _copy(payload)

    assert failure is None
    assert sink.getvalue() == payload


def test_partial_writes_are_completed():
    payload = b"abcdefghij" * 1000
    sink = PartialSink(limit=3)

    _, copied, failure = _copy(payload, sink=sink)

    assert failure is None
    assert copied == len(payload)
    assert sink.getvalue() == payload
    assert sink.calls > len(payload) // DEFAULT_CHUNK_SIZE


def test_small_buffer_still_copies_everything():
    payload = b"hello, world\n" * 3

    sink, _, failure = _copy(payload, chunk_size=5)

    assert failure is None
    assert sink.getvalue() == payload


def test_read_error_keeps_bytes_already_written():
    sink = io.BytesIO()

    copied, failure = copy_stream(
        FailingSource(b"partial"), sink, name="flaky", buffer=bytearray(4096)
    )

    assert sink.getvalue() == b"partial"
    assert copied == len(b"partial")
    assert failure is not None
    assert failure.kind is FailureKind.READ
    assert failure.operand == "flaky"
    assert failure.error_code == errno.EIO
    assert failure.reason == os.strerror(errno.EIO)


def test_write_error_is_reported_against_the_operand():
    _, copied, failure = _copy(b"data", sink=BrokenSink())

    assert copied == 0
    assert failure is not None
    assert failure.kind is FailureKind.WRITE
    assert failure.operand == "input"
    assert failure.reason == os.strerror(errno.EPIPE)


def test_sink_without_progress_is_a_write_failure():
    _, _, failure = _copy(b"data", sink=StalledSink())

    assert failure is not None
    assert failure.kind is FailureKind.WRITE
    assert failure.error_code == errno.EIO


def test_bytesio_satisfies_stream_contracts():
    from core.interfaces.streams import ByteSink, ByteSource

    assert isinstance(io.BytesIO(), ByteSource)
    assert isinstance(io.BytesIO(), ByteSink)


def test_nonblocking_source_with_nothing_ready_is_a_read_failure():
    class NotReady(io.BytesIO):
        def readinto(self, buffer):
            return None

    sink = io.BytesIO()
    copied, failure = copy_stream(NotReady(), sink, name="stdin", buffer=bytearray(16))

    assert copied == 0
    assert failure is not None
    assert failure.kind is FailureKind.READ
    assert failure.error_code == errno.EAGAIN
    assert failure.reason == os.strerror(errno.EAGAIN)
