"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest


class ControlledSerialPort:
    """Stand-in for ``SerialByteSource`` fed from the test thread."""

    def __init__(self) -> None:
        self.chunks: queue.Queue[bytes] = queue.Queue()
        self._pending = b""
        self.cancelled = False

    def __enter__(self) -> "ControlledSerialPort":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def write_sentence(self, sentence: bytes) -> None:
        self.chunks.put(sentence)

    @property
    def in_waiting(self) -> int:
        if self.cancelled:
            raise OSError("port cancelled")
        if not self._pending:
            try:
                self._pending = self.chunks.get_nowait()
            except queue.Empty:
                return 0
        return len(self._pending)

    def read(self, size: int = 1) -> bytes:
        data, self._pending = self._pending[:size], self._pending[size:]
        return data

    def cancel(self) -> None:
        self.cancelled = True


@pytest.fixture(autouse=True)
def serial_port(monkeypatch: pytest.MonkeyPatch) -> Iterator[ControlledSerialPort]:
    monkeypatch.setenv("NAVFIX_QUIESCENCE_SECONDS", "0")
    monkeypatch.setenv("NAVFIX_POLL_INTERVAL_SECONDS", "0.001")
    port = ControlledSerialPort()
    with patch("server.main.SerialByteSource", return_value=port):
        yield port
