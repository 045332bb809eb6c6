from __future__ import annotations

import errno
import io

import pytest

from core.config import AppSettings


class PartialSink(io.BytesIO):
    """Accepts at most `limit` bytes per write call."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self.calls = 0

    def write(self, data) -> int:
        self.calls += 1
        return super().write(bytes(data[: self.limit]))


class StalledSink(io.BytesIO):
    def write(self, data) -> int:
        return 0


class BrokenSink(io.BytesIO):
    def write(self, data) -> int:
        raise BrokenPipeError(errno.EPIPE, "Broken pipe")


class FailingSource(io.BytesIO):
    """Yields its payload once, then fails the next read."""

    def __init__(self, payload: bytes = b"") -> None:
        super().__init__(payload)
        self._served = False

    def readinto(self, buffer) -> int:
        if not self._served:
            self._served = True
            return super().readinto(buffer)
        raise OSError(errno.EIO, "Input/output error")


class CloseFailingSource(io.BytesIO):
    def close(self) -> None:
        if self.closed:
            return
        super().close()
        raise OSError(errno.EIO, "Input/output error")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for name in ("BOBCAT_CHUNK_SIZE", "BOBCAT_STDIN_NAME", "BOBCAT_PROGRAM_NAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, payload: bytes):
        path = tmp_path / name
        path.write_bytes(payload)
        return path

    return _write
