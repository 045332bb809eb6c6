"""Concatenation pipeline.

This module holds the two moving parts of bobcat: the stream copier, which
moves bytes from one source to the output in fixed-size chunks, and the
operand dispatcher, which walks the operands in order and folds every
failure into a single `ConcatResult`. Neither touches the console; failures
are returned as values and, optionally, pushed to `PipelineHooks` as they
happen so a UI layer can print them next to the output they interrupt.
"""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass
from typing import Callable, Sequence

from adapters.stream_sources import OperandOpener, close_operand, open_operand
from core.config import AppSettings
from core.domain.models import (
    STDIN_OPERAND,
    ConcatResult,
    FailureKind,
    OperandFailure,
)
from core.interfaces.streams import ByteSink, ByteSource


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[OperandFailure], None] | None = None


def copy_stream(
    source: ByteSource,
    sink: ByteSink,
    *,
    name: str,
    buffer: bytearray,
) -> tuple[int, OperandFailure | None]:
    """Copy everything left in `source` to `sink`.

    Reads up to `len(buffer)` bytes at a time into the reusable `buffer` and
    writes each chunk completely, looping on partial writes, then flushes so
    the bytes are visible downstream before the next read.

    Returns the number of bytes written and the failure that stopped the copy,
    if any. End-of-data is not a failure; a `None` read (non-blocking source
    with nothing ready) is.
    """

    view = memoryview(buffer)
    copied = 0
    while True:
        try:
            count = source.readinto(view)
        except OSError as exc:
            return copied, OperandFailure.from_os_error(FailureKind.READ, name, exc)
        if count is None:
            # Non-blocking source with nothing ready: not end-of-data.
            return copied, OperandFailure(
                kind=FailureKind.READ,
                operand=name,
                error_code=errno.EAGAIN,
                reason=os.strerror(errno.EAGAIN),
            )
        if count == 0:
            return copied, None

        offset = 0
        try:
            while offset < count:
                written = sink.write(view[offset:count])
                if not written:
                    # A sink that makes no progress would spin forever.
                    return copied + offset, OperandFailure(
                        kind=FailureKind.WRITE,
                        operand=name,
                        error_code=errno.EIO,
                        reason=os.strerror(errno.EIO),
                    )
                offset += written
            sink.flush()
        except OSError as exc:
            return copied + offset, OperandFailure.from_os_error(FailureKind.WRITE, name, exc)
        copied += count


def concatenate(
    operands: Sequence[str],
    *,
    stdin: ByteSource,
    stdout: ByteSink,
    settings: AppSettings | None = None,
    opener: OperandOpener | None = None,
    hooks: PipelineHooks | None = None,
) -> ConcatResult:
    """Copy every operand to `stdout`, in order, and aggregate the outcome.

    An empty operand list means a single "-". Every operand is attempted
    regardless of earlier failures; standard input is never closed.
    """

    settings = settings or AppSettings()
    hooks = hooks or PipelineHooks()
    opener = opener or open_operand

    resolved = list(operands) or [STDIN_OPERAND]
    result = ConcatResult(operands=resolved)
    buffer = bytearray(settings.chunk_size)

    def report(failure: OperandFailure | None) -> None:
        if failure is None:
            return
        result.record(failure)
        if hooks.warning:
            hooks.warning(failure)

    for operand in resolved:
        if operand == STDIN_OPERAND:
            copied, failure = copy_stream(stdin, stdout, name=settings.stdin_name, buffer=buffer)
            result.bytes_written += copied
            report(failure)
            continue

        try:
            source = opener(operand)
        except OSError as exc:
            report(OperandFailure.from_os_error(FailureKind.OPEN, operand, exc))
            continue

        try:
            copied, failure = copy_stream(source, stdout, name=operand, buffer=buffer)
        finally:
            close_failure = close_operand(source, operand)
        result.bytes_written += copied
        report(failure)
        report(close_failure)

    return result
