"""gaugesim/domain/__init__.py

Domain models and errors for the gauge display simulator.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from .errors import EncodingError, GaugeSimError, ProtocolError, TransportError
from .models import (
    Configuration,
    ConfigurationResponse,
    Data,
    DataResponse,
    DebugMessage,
    DisplayConfiguration,
    DisplayData,
    GaugeConfig,
    GaugeData,
    GaugeTheme,
    NeedGaugeConfig,
    NeedGaugeData,
    Request,
    Response,
)

__all__ = [
    "Configuration",
    "ConfigurationResponse",
    "Data",
    "DataResponse",
    "DebugMessage",
    "DisplayConfiguration",
    "DisplayData",
    "EncodingError",
    "GaugeConfig",
    "GaugeData",
    "GaugeSimError",
    "GaugeTheme",
    "NeedGaugeConfig",
    "NeedGaugeData",
    "ProtocolError",
    "Request",
    "Response",
    "TransportError",
]
