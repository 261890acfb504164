"""gaugesim/ports/__init__.py

Hexagonal architecture ports (abstract interfaces).

The session loop only ever talks to these contracts. The pyserial
adapter in :mod:`gaugesim.adapters.serial_port` provides the concrete
implementation; tests provide scripted fakes.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ByteStream(Protocol):
    """Blocking byte stream with a transport-defined read timeout."""

    def read(self, size: int = 1) -> bytes:  # pragma: no cover - structural
        """Return up to ``size`` bytes; ``b""`` means the read timed out.

        Raises ``OSError`` (or :class:`~gaugesim.domain.TransportError`)
        when the underlying transport fails.
        """

    def write(self, data: bytes) -> None:  # pragma: no cover - structural
        """Write all of ``data`` or raise."""


@runtime_checkable
class PortHandle(ByteStream, Protocol):
    """An open serial port exclusively owned by one session."""

    @property
    def name(self) -> str:  # pragma: no cover - structural
        """Device name used for logging (e.g. ``/dev/ttyUSB0``)."""

    def close(self) -> None:  # pragma: no cover - structural
        """Release the port. Safe to call more than once."""


@runtime_checkable
class PortProvider(Protocol):
    """Discovers and opens ports for the simulator runtime.

    Concrete implementation:
    :class:`gaugesim.adapters.serial_port.SerialConnectionManager`.
    """

    def acquire_port(self) -> Optional[PortHandle]:  # pragma: no cover - structural
        """Return an open port, or ``None`` when no port is usable right now."""


__all__ = ["ByteStream", "PortHandle", "PortProvider"]
