"""gaugesim/application/framing.py

Delimiter framing for the newline-bracketed JSON stream.

Every message on the wire looks like ``<delim><payload><delim>``. The
first delimiter of a read cycle marks the start of a payload and the next
one marks its end. Whatever arrives before the start delimiter is
discarded, which resynchronises the stream after a garbled or partial
message.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

from ..constants import MESSAGE_DELIMITER
from ..domain import EncodingError, TransportError
from ..ports import ByteStream


class MessageFramer:
    """Extract delimiter-bounded payloads from a blocking byte stream.

    The framer keeps the bytes that follow an end delimiter inside one
    transport chunk, so the result never depends on how the transport
    splits the stream into reads.
    """

    def __init__(self, delimiter: bytes = MESSAGE_DELIMITER, chunk_size: int = 1) -> None:
        if len(delimiter) != 1:
            raise ValueError("delimiter must be exactly one byte")
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self._delimiter = delimiter
        self._chunk_size = chunk_size
        self._pending = bytearray()

    @property
    def delimiter(self) -> bytes:
        return self._delimiter

    @property
    def pending(self) -> bytes:
        """Bytes already read from the transport but not yet consumed."""

        return bytes(self._pending)

    def reset(self) -> None:
        self._pending.clear()

    def _next_chunk(self, stream: ByteStream) -> bytes:
        if self._pending:
            chunk = bytes(self._pending)
            self._pending.clear()
            return chunk
        try:
            return stream.read(self._chunk_size) or b""
        except TransportError:
            raise
        except OSError as exc:
            raise TransportError(f"read failed: {exc}") from exc

    def read_payload(self, stream: ByteStream) -> bytes:
        """Block until one complete payload has been read and return it.

        A zero-byte read is the transport timing out and just means
        "keep waiting". Raises :class:`TransportError` on I/O failure.
        """

        payload = bytearray()
        found_start = False
        while True:
            data = self._next_chunk(stream)
            if not data:
                continue

            if not found_start:
                start = data.find(self._delimiter)
                if start < 0:
                    continue
                found_start = True
                data = data[start + 1 :]

            end = data.find(self._delimiter)
            if end < 0:
                payload += data
                continue

            payload += data[:end]
            self._pending += data[end + 1 :]
            return bytes(payload)

    def read_message(self, stream: ByteStream) -> str:
        """Read one payload and decode it as UTF-8 text.

        Raises :class:`EncodingError` carrying the raw bytes when the
        payload is not valid text; the frame itself was intact.
        """

        raw = self.read_payload(stream)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(raw, str(exc)) from exc

    def frame(self, text: str) -> bytes:
        """Bracket ``text`` with delimiters, ready to be written."""

        payload = text.encode("utf-8")
        if self._delimiter in payload:
            raise ValueError("payload must not contain the message delimiter")
        return self._delimiter + payload + self._delimiter


def extract_frames(data: bytes, delimiter: bytes = MESSAGE_DELIMITER) -> list[bytes]:
    """Split an in-memory buffer into payloads using the framer's rules.

    This helper is pure so the framing rules can be tested without a
    stream. A trailing incomplete payload is dropped.
    """

    frames: list[bytes] = []
    pos = 0
    while True:
        start = data.find(delimiter, pos)
        if start < 0:
            break
        end = data.find(delimiter, start + 1)
        if end < 0:
            break
        frames.append(bytes(data[start + 1 : end]))
        pos = end + 1
    return frames


__all__ = ["MessageFramer", "extract_frames"]
