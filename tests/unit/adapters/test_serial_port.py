from __future__ import annotations

from types import SimpleNamespace

import pytest
import serial

from gaugesim.adapters.serial_port import SerialConnection, SerialConnectionManager
from gaugesim.domain import TransportError


class FakeSerial:
    """Minimal stand-in for an open ``serial.Serial``."""

    def __init__(self, port=None, baudrate=9600, timeout=None, data=b"", dtr_error=None):
        self.port = port
        self.baudrate = baudrate
        self.timeout = timeout
        self.is_open = True
        self._data = data
        self._dtr = False
        self._dtr_error = dtr_error
        self.read_error: Exception | None = None
        self.write_error: Exception | None = None
        self.read_sizes: list[int] = []
        self.written = b""
        self.flushed = 0

    @property
    def dtr(self) -> bool:
        return self._dtr

    @dtr.setter
    def dtr(self, value: bool) -> None:
        if self._dtr_error is not None:
            raise self._dtr_error
        self._dtr = value

    @property
    def in_waiting(self) -> int:
        return len(self._data)

    def read(self, size=1):
        self.read_sizes.append(size)
        if self.read_error is not None:
            raise self.read_error
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk

    def write(self, data):
        if self.write_error is not None:
            raise self.write_error
        self.written += data
        return len(data)

    def flush(self):
        self.flushed += 1

    def close(self):
        self.is_open = False


def _ports(*devices):
    return lambda: [SimpleNamespace(device=d) for d in devices]


def test_acquire_port_none_when_no_ports() -> None:
    opened: list[str] = []
    mgr = SerialConnectionManager(
        list_ports_fn=_ports(),
        serial_factory=lambda **kw: opened.append(kw["port"]),
    )

    assert mgr.acquire_port() is None
    assert opened == []


def test_acquire_port_opens_first_port_with_fixed_settings() -> None:
    created: list[FakeSerial] = []

    def factory(**kwargs):
        created.append(FakeSerial(**kwargs))
        return created[-1]

    mgr = SerialConnectionManager(
        list_ports_fn=_ports("/dev/ttyUSB3", "/dev/ttyUSB4"),
        serial_factory=factory,
    )

    conn = mgr.acquire_port()

    assert isinstance(conn, SerialConnection)
    assert conn.name == "/dev/ttyUSB3"
    assert len(created) == 1
    ser = created[0]
    assert (ser.baudrate, ser.timeout) == (115200, 1.0)
    assert ser.dtr is True


def test_explicit_port_skips_enumeration() -> None:
    def fail_listing():
        raise AssertionError("should not enumerate")

    mgr = SerialConnectionManager(
        port_name="/dev/ttyACM0",
        baudrate=57600,
        read_timeout=0.5,
        list_ports_fn=fail_listing,
        serial_factory=lambda **kw: FakeSerial(**kw),
    )

    conn = mgr.acquire_port()
    assert conn is not None
    assert conn.name == "/dev/ttyACM0"


def test_open_failure_returns_none() -> None:
    def factory(**kwargs):
        raise serial.SerialException("could not open port")

    mgr = SerialConnectionManager(list_ports_fn=_ports("COM3"), serial_factory=factory)
    assert mgr.acquire_port() is None


def test_enumeration_failure_returns_none() -> None:
    def listing():
        raise OSError("udev unavailable")

    mgr = SerialConnectionManager(list_ports_fn=listing, serial_factory=FakeSerial)
    assert mgr.acquire_port() is None


def test_dtr_failure_closes_port_and_returns_none() -> None:
    created: list[FakeSerial] = []

    def factory(**kwargs):
        created.append(FakeSerial(dtr_error=OSError("EIO"), **kwargs))
        return created[-1]

    mgr = SerialConnectionManager(list_ports_fn=_ports("COM3"), serial_factory=factory)

    assert mgr.acquire_port() is None
    assert created[0].is_open is False


def test_connection_read_drains_waiting_bytes() -> None:
    ser = FakeSerial(port="COM1", data=b'\n{"type":1}\n')
    conn = SerialConnection(ser)

    assert conn.read(1) == b'\n{"type":1}\n'
    assert ser.read_sizes == [12]
    # timed-out read
    assert conn.read(1) == b""


def test_connection_read_error_is_transport_error() -> None:
    ser = FakeSerial(port="COM1")
    ser.read_error = serial.SerialException("device reports readiness to read but returned no data")
    conn = SerialConnection(ser)

    with pytest.raises(TransportError, match="COM1"):
        conn.read()


def test_connection_write_flushes_and_wraps_errors() -> None:
    ser = FakeSerial(port="COM1")
    conn = SerialConnection(ser)

    conn.write(b"\n{}\n")
    assert ser.written == b"\n{}\n"
    assert ser.flushed == 1

    ser.write_error = serial.SerialTimeoutException("Write timeout")
    with pytest.raises(TransportError):
        conn.write(b"x")


def test_connection_close_is_idempotent() -> None:
    ser = FakeSerial(port="COM1")
    conn = SerialConnection(ser)

    conn.close()
    conn.close()
    assert conn.is_open is False
