"""Shared pytest fixtures for the gauge simulator test suite.

Copyright BINGO Collaboration
Last Modified: 2026-10-17
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

import pytest


class ScriptedPort:
    """In-memory port replaying scripted read results.

    Each script item is either a ``bytes`` chunk returned by one
    ``read`` call or an exception raised by it. Once the script runs out
    the port behaves like an unplugged device and raises ``OSError``.
    """

    def __init__(self, chunks: Iterable[object] = (), name: str = "/dev/ttyFAKE0") -> None:
        self.name = name
        self._chunks = deque(chunks)
        self.read_sizes: list[int] = []
        self.writes: list[bytes] = []
        self.write_error: Exception | None = None
        self.closed = False

    def read(self, size: int = 1) -> bytes:
        self.read_sizes.append(size)
        if not self._chunks:
            raise OSError("device disconnected")
        item = self._chunks.popleft()
        if isinstance(item, BaseException):
            raise item
        return item  # type: ignore[return-value]

    def write(self, data: bytes) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.writes.append(bytes(data))

    def close(self) -> None:
        self.closed = True


class ScriptedProvider:
    """Port provider handing out a fixed sequence of ports (or ``None``)."""

    def __init__(self, ports: Iterable[ScriptedPort | None]) -> None:
        self._ports = deque(ports)
        self.calls = 0

    def acquire_port(self) -> ScriptedPort | None:
        self.calls += 1
        if not self._ports:
            return None
        return self._ports.popleft()


def split_bytes(data: bytes, size: int) -> list[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)]


@pytest.fixture
def make_port():
    return ScriptedPort


@pytest.fixture
def make_provider():
    return ScriptedProvider


@pytest.fixture
def chunked():
    return split_bytes
