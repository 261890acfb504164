"""gaugesim/application/codec.py

JSON codec for the gauge display messages.

Inbound messages are keyed by an integer ``type`` discriminant. An
unknown discriminant is a :class:`ProtocolError` like any other bad
payload, so one odd message never takes the session down.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

import json

from ..domain import (
    DebugMessage,
    NeedGaugeConfig,
    NeedGaugeData,
    ProtocolError,
    Request,
    Response,
)

_REQUEST_TYPES: dict[int, type] = {
    NeedGaugeConfig.TYPE: NeedGaugeConfig,
    NeedGaugeData.TYPE: NeedGaugeData,
}


def decode_request(text: str) -> Request:
    """Decode payload text into a request.

    Raises
    ------
    ProtocolError
        For invalid JSON, a non-object payload, a missing or non-integer
        ``type`` field, or a discriminant this simulator does not know.
    """

    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # deeply nested arrays exhaust the decoder stack
        raise ProtocolError(f"invalid JSON: {exc}", text) from exc

    if not isinstance(value, dict):
        raise ProtocolError("message must be a JSON object", text)

    type_ = value.get("type")
    # bool is an int subclass but never a valid discriminant
    if not isinstance(type_, int) or isinstance(type_, bool):
        raise ProtocolError(f"missing or non-integer type field: {type_!r}", text)

    cls = _REQUEST_TYPES.get(type_)
    if cls is not None:
        return cls()

    if type_ == DebugMessage.TYPE:
        message = value.get("message")
        if not isinstance(message, str):
            raise ProtocolError("debug message requires a text message field", text)
        return DebugMessage(message=message)

    raise ProtocolError(f"unsupported type {type_}", text)


def encode_response(response: Response) -> str:
    """Encode a response as compact JSON with a stable member order."""

    return json.dumps(
        response.model_dump(mode="json"),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


__all__ = ["decode_request", "encode_response"]
