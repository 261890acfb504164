"""gaugesim/domain/errors.py

Error taxonomy for a simulator session.

``TransportError`` means the wire broke and the port must be abandoned.
``EncodingError`` and ``ProtocolError`` mean one message was garbled;
the session drops it and keeps serving.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations


class GaugeSimError(Exception):
    """Base class for all simulator errors."""

    fatal: bool = False


class TransportError(GaugeSimError):
    """Read or write on the serial port failed (device gone, I/O error)."""

    fatal = True


class EncodingError(GaugeSimError):
    """Bytes between two delimiters are not valid UTF-8 text."""

    def __init__(self, raw: bytes, reason: str = "") -> None:
        self.raw = bytes(raw)
        self.reason = reason
        super().__init__(f"undecodable payload ({len(self.raw)} bytes): {reason}")


class ProtocolError(GaugeSimError):
    """Well-formed text that is not a request this simulator understands."""

    PREVIEW_LIMIT = 200

    def __init__(self, message: str, source_text: str) -> None:
        self.source_text = source_text
        super().__init__(message)

    def __str__(self) -> str:
        source = self.source_text
        if len(source) > self.PREVIEW_LIMIT:
            source = f"{source[: self.PREVIEW_LIMIT]}... ({len(source)} chars)"
        return f"{self.args[0]} source string: {source}"


__all__ = ["GaugeSimError", "TransportError", "EncodingError", "ProtocolError"]
