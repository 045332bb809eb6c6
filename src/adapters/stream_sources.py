"""Binary stream adapters.

Why a separate module:
- bobcat's pipeline never calls `open()` or looks at `sys.std*`; tests hand
  it `io.BytesIO` objects or a fake opener instead.
- Standard streams are resolved on first use, so a closed stdin only matters
  when a "-" operand actually reads it.
"""

from __future__ import annotations

import sys
from typing import BinaryIO, Callable

from core.domain.models import FailureKind, OperandFailure


OperandOpener = Callable[[str], BinaryIO]


def open_operand(path: str) -> BinaryIO:
    """Open `path` read-only, unbuffered.

    Unbuffered so each `readinto` is a single read from the OS, the way a
    plain copy loop expects. Raises `OSError` on failure.
    """

    return open(path, "rb", buffering=0)


def close_operand(source: BinaryIO, name: str) -> OperandFailure | None:
    try:
        source.close()
    except OSError as exc:
        return OperandFailure.from_os_error(FailureKind.CLOSE, name, exc)
    return None


class StandardStream:
    """Lazy binary view of `sys.stdin` / `sys.stdout`.

    Resolution order, on first read or write:
    1) the raw (unbuffered) stream under `sys.<name>.buffer`, so a pipe or
       terminal read returns as soon as any bytes arrive;
    2) the binary buffer itself when there is no raw layer (e.g. test runners
       swapping in `BytesIO`);
    3) the bare file descriptor when Python started with it closed
       (`sys.<name>` is None). Opening it then raises EBADF, which surfaces
       as an ordinary read/write failure.

    Never closes the underlying descriptor.
    """

    def __init__(self, name: str, fd: int, mode: str) -> None:
        self.name = name
        self.fd = fd
        self.mode = mode
        self._stream: BinaryIO | None = None

    def _resolve(self) -> BinaryIO:
        if self._stream is None:
            text = getattr(sys, self.name, None)
            binary = getattr(text, "buffer", None)
            if binary is not None:
                self._stream = getattr(binary, "raw", binary)
            else:
                self._stream = open(self.fd, self.mode, buffering=0, closefd=False)
        return self._stream

    def readinto(self, buffer: bytearray | memoryview) -> int | None:
        return self._resolve().readinto(buffer)

    def write(self, data: bytes | memoryview) -> int | None:
        return self._resolve().write(data)

    def flush(self) -> None:
        self._resolve().flush()


def standard_input() -> StandardStream:
    return StandardStream("stdin", 0, "rb")


def standard_output() -> StandardStream:
    return StandardStream("stdout", 1, "wb")
