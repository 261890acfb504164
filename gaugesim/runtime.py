"""Runtime loop for the gauge simulator.

The runtime owns the outer connection lifecycle: wait for a port, hand
it to a :class:`~gaugesim.application.session.GaugeSession`, and once
that session faults go back to waiting for a port. Ports appear and
disappear only when somebody plugs a cable, so a fixed-interval polling
loop is all the reconnect logic needed.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from .adapters.serial_port import SerialConnectionManager
from .application.backoff import BackoffPolicy
from .application.session import GaugeSession
from .config import Settings
from .constants import AWAITING_PORT, HANDSHAKING
from .logging_utils import logprintf, set_debug, setup_file_logging
from .ports import PortHandle, PortProvider

SessionFactory = Callable[[PortHandle], GaugeSession]


class GaugeSimulator:
    """Acquire ports and run one session at a time, forever."""

    def __init__(
        self,
        provider: PortProvider,
        backoff: BackoffPolicy | None = None,
        *,
        session_factory: SessionFactory = GaugeSession,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._provider = provider
        self._backoff = backoff if backoff is not None else BackoffPolicy()
        self._session_factory = session_factory
        self._sleep = sleep
        self._state = AWAITING_PORT
        self.sessions = 0

    @property
    def state(self) -> int:
        return self._state

    def serve_forever(self, max_sessions: Optional[int] = None) -> int:
        """Run sessions until the backoff policy gives up.

        ``max_sessions`` bounds the number of sessions for bench runs;
        ``None`` keeps reconnecting indefinitely. Returns a POSIX exit
        code: 1 when no port could be acquired, 0 otherwise.
        """

        failures = 0
        while max_sessions is None or self.sessions < max_sessions:
            self._state = AWAITING_PORT
            port = self._provider.acquire_port()
            if port is None:
                failures += 1
                if not self._backoff.should_retry(failures):
                    logprintf(0, "No serial port after %d attempts; giving up", failures)
                    return 1
                logprintf(2, "Waiting for port...")
                self._backoff.wait(self._sleep)
                continue

            failures = 0
            self.sessions += 1
            self._state = HANDSHAKING
            try:
                session = self._session_factory(port)
                handled = session.run()
            finally:
                # the port is never reused once its session ends
                port.close()
            self._state = session.state
            logprintf(
                2,
                "Session on %s ended after %d messages (%d transient errors)",
                port.name,
                handled,
                session.transient_errors,
            )

        self._state = AWAITING_PORT
        return 0


def build_simulator(cfg: Settings) -> GaugeSimulator:
    manager = SerialConnectionManager(
        port_name=cfg.serial.port,
        baudrate=cfg.serial.baudrate,
        read_timeout=cfg.serial.read_timeout,
    )
    backoff = BackoffPolicy(
        interval=cfg.reconnect.interval,
        max_attempts=cfg.reconnect.max_attempts,
    )
    return GaugeSimulator(manager, backoff)


def main(cfg: Settings | None = None) -> int:
    """Execute the simulator and return a POSIX exit code."""

    if cfg is None:
        from .config import settings as cfg

    set_debug(cfg.logging.debug)
    if cfg.logging.logdir:
        logfile = setup_file_logging(cfg.logging.logdir)
        logprintf(2, "Logging to %s", logfile)

    logprintf(
        2,
        "Starting gauge simulator: port=%s baudrate=%d",
        cfg.serial.port or "<auto>",
        cfg.serial.baudrate,
    )
    simulator = build_simulator(cfg)
    try:
        return simulator.serve_forever()
    except KeyboardInterrupt:
        logprintf(2, "Interrupted; exiting")
        return 0
