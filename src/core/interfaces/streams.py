"""Byte stream contracts.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Real files, the process standard streams and `io.BytesIO` in tests all
  satisfy it without adapters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Readable binary stream."""

    def readinto(self, buffer: bytearray | memoryview) -> int | None:
        """Fill `buffer` with up to `len(buffer)` bytes; 0 means end-of-data."""

        ...


@runtime_checkable
class ByteSink(Protocol):
    """Writable binary stream.

    `write` may transfer fewer bytes than requested and returns the count.
    """

    def write(self, data: bytes | memoryview) -> int | None:
        ...

    def flush(self) -> None:
        ...
