"""gaugesim/application/__init__.py

Framing, codec, dispatch and session use cases for the simulator.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from .backoff import BackoffPolicy
from .codec import decode_request, encode_response
from .dispatcher import build_configuration, build_data, handle_request
from .framing import MessageFramer, extract_frames
from .session import GaugeSession

__all__ = [
    "BackoffPolicy",
    "GaugeSession",
    "MessageFramer",
    "build_configuration",
    "build_data",
    "decode_request",
    "encode_response",
    "extract_frames",
    "handle_request",
]
