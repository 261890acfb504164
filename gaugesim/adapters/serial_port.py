"""gaugesim/adapters/serial_port.py

Blocking pyserial adapter: port discovery, open and byte I/O.

The simulator is strictly sequential, so the port is used directly from
the session loop with pyserial's own read timeout; a timed-out read
returns ``b""`` and the session simply keeps waiting.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

from typing import Callable, Optional

import serial
from serial.tools import list_ports

from ..constants import DEFAULT_BAUDRATE, DEFAULT_READ_TIMEOUT
from ..domain import TransportError
from ..logging_utils import logprintf


class SerialConnection:
    """An open serial port; implements :class:`gaugesim.ports.PortHandle`."""

    def __init__(self, ser: serial.Serial) -> None:
        self._serial = ser

    @property
    def name(self) -> str:
        return self._serial.port or "<unnamed>"

    @property
    def is_open(self) -> bool:
        return bool(self._serial.is_open)

    def read(self, size: int = 1) -> bytes:
        try:
            return self._serial.read(max(size, self._serial.in_waiting))
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"read failed on {self.name}: {exc}") from exc

    def write(self, data: bytes) -> None:
        try:
            self._serial.write(data)
            self._serial.flush()
        except (serial.SerialException, OSError) as exc:
            raise TransportError(f"write failed on {self.name}: {exc}") from exc

    def close(self) -> None:
        if not self._serial.is_open:
            return
        try:
            self._serial.close()
        except (serial.SerialException, OSError) as exc:
            logprintf(1, "Error closing port %s: %s", self.name, exc)
        else:
            logprintf(2, "Port %s closed", self.name)


class SerialConnectionManager:
    """Find and open the serial port the display is attached to.

    Implements :class:`gaugesim.ports.PortProvider`. With no explicit
    ``port_name`` the first port reported by
    :func:`serial.tools.list_ports.comports` is used.
    """

    def __init__(
        self,
        port_name: str | None = None,
        baudrate: int = DEFAULT_BAUDRATE,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        *,
        list_ports_fn: Callable[[], list] = list_ports.comports,
        serial_factory: Callable[..., serial.Serial] = serial.Serial,
    ) -> None:
        self._port_name = port_name
        self._baudrate = baudrate
        self._read_timeout = read_timeout
        self._list_ports = list_ports_fn
        self._serial_factory = serial_factory

    def discover(self) -> list[str]:
        """Return candidate device names, in enumeration order."""

        if self._port_name:
            return [self._port_name]
        return [p.device for p in self._list_ports()]

    def acquire_port(self) -> Optional[SerialConnection]:
        logprintf(3, "Searching for serial ports...")
        try:
            devices = self.discover()
        except (serial.SerialException, OSError) as exc:
            logprintf(1, "Serial port enumeration failed: %s", exc)
            return None

        if not devices:
            return None
        for device in devices:
            logprintf(3, "Found serial port %s", device)

        device = devices[0]
        try:
            ser = self._serial_factory(
                port=device,
                baudrate=self._baudrate,
                timeout=self._read_timeout,
            )
        except (serial.SerialException, OSError, ValueError) as exc:
            logprintf(1, "Failed to open port %s: %s", device, exc)
            return None

        try:
            # DTR wakes the display's USB-serial bridge
            ser.dtr = True
        except (serial.SerialException, OSError) as exc:
            logprintf(1, "Error activating port %s: %s", device, exc)
            try:
                ser.close()
            except (serial.SerialException, OSError):
                logprintf(3, "Ignoring close failure on %s", device)
            return None

        logprintf(2, "Port %s opened at %d baud", device, self._baudrate)
        return SerialConnection(ser)


__all__ = ["SerialConnection", "SerialConnectionManager"]
