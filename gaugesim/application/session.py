"""gaugesim/application/session.py

Protocol state machine for one opened serial port.

A session starts in ``HANDSHAKING``: the display never says hello, so the
simulator pushes its configuration first without reading anything. It
then stays in ``SERVING`` (read one message, dispatch, maybe reply) until
the transport fails, at which point it moves to ``FAULTED`` and drops the
port. Garbled messages are logged and skipped without leaving
``SERVING``.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

from typing import Callable, Optional

from ..constants import FAULTED, HANDSHAKING, SERVING, STATE_NAMES
from ..domain import (
    Configuration,
    ConfigurationResponse,
    DataResponse,
    EncodingError,
    NeedGaugeConfig,
    ProtocolError,
    Request,
    Response,
    TransportError,
)
from ..logging_utils import logprintf, preview_bytes
from ..ports import PortHandle
from .codec import decode_request, encode_response
from .dispatcher import handle_request
from .framing import MessageFramer

Dispatch = Callable[[Request], Optional[Response]]


class GaugeSession:
    """Drive the request/response exchange on a single port.

    The session owns ``port`` for its whole lifetime and closes it when
    it faults; a faulted session is never resumed.
    """

    def __init__(
        self,
        port: PortHandle,
        *,
        framer: MessageFramer | None = None,
        dispatch: Dispatch = handle_request,
    ) -> None:
        self._port = port
        self._framer = framer if framer is not None else MessageFramer()
        self._dispatch = dispatch
        self._state = HANDSHAKING
        self._configuration: Configuration | None = None
        self.messages_received = 0
        self.messages_sent = 0
        self.transient_errors = 0

    @property
    def state(self) -> int:
        return self._state

    @property
    def port(self) -> PortHandle:
        return self._port

    @property
    def configuration(self) -> Configuration | None:
        """Last configuration sent to the display in this session."""

        return self._configuration

    def _set_state(self, state: int) -> None:
        logprintf(
            3,
            "Session %s: %s -> %s",
            self._port.name,
            STATE_NAMES[self._state],
            STATE_NAMES[state],
        )
        self._state = state

    # --- transitions -------------------------------------------------------

    def handshake(self) -> None:
        """Push the configuration as if the display had asked for it."""

        if self._state != HANDSHAKING:
            raise RuntimeError(f"handshake in state {STATE_NAMES[self._state]}")
        logprintf(2, "Sending initial gauge configuration to %s", self._port.name)
        self._respond(NeedGaugeConfig())
        if self._state == HANDSHAKING:
            self._set_state(SERVING)

    def serve_once(self) -> None:
        """Handle exactly one inbound message."""

        if self._state != SERVING:
            raise RuntimeError(f"serve_once in state {STATE_NAMES[self._state]}")

        try:
            text = self._framer.read_message(self._port)
            request = decode_request(text)
        except TransportError as exc:
            self._fault(exc)
            return
        except EncodingError as exc:
            self._transient(exc, "raw bytes: %s" % preview_bytes(exc.raw))
            return
        except ProtocolError as exc:
            self._transient(exc)
            return

        self.messages_received += 1
        self._respond(request)

    def run(self) -> int:
        """Handshake, then serve until the transport fails.

        Returns the number of messages received from the display.
        """

        if self._state == HANDSHAKING:
            self.handshake()
        while self._state == SERVING:
            self.serve_once()
        return self.messages_received

    # --- helpers -----------------------------------------------------------

    def _respond(self, request: Request) -> None:
        logprintf(3, "InMessage: %s", request)
        response = self._dispatch(request)
        if response is None:
            return

        self._check_arity(response)
        text = encode_response(response)
        logprintf(3, "OutMessage: %s", text)
        try:
            self._port.write(self._framer.frame(text))
        except TransportError as exc:
            self._fault(exc)
            return
        except OSError as exc:
            self._fault(TransportError(f"write failed: {exc}"))
            return
        self.messages_sent += 1

    def _check_arity(self, response: Response) -> None:
        if isinstance(response, ConfigurationResponse):
            self._configuration = response.message
        elif isinstance(response, DataResponse) and self._configuration is not None:
            expected = self._configuration.arity()
            actual = response.message.arity()
            if actual != expected:
                raise RuntimeError(
                    f"data arity {actual} does not match configuration {expected}"
                )

    def _transient(self, exc: Exception, context: str = "") -> None:
        self.transient_errors += 1
        if context:
            logprintf(1, "Transient error while working with port: %s; %s", exc, context)
        else:
            logprintf(1, "Transient error while working with port: %s", exc)

    def _fault(self, exc: TransportError) -> None:
        logprintf(
            0,
            "IO error while working with port %s: %s; Abandoning port...",
            self._port.name,
            exc,
        )
        self._set_state(FAULTED)
        try:
            self._port.close()
        except OSError as close_exc:
            logprintf(3, "Ignoring error while closing %s: %s", self._port.name, close_exc)


__all__ = ["Dispatch", "GaugeSession"]
