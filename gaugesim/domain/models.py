"""gaugesim/domain/models.py

Pydantic domain models for the gauge display protocol.

Field declaration order is the member order on the wire, so the models
can be dumped straight to JSON by :mod:`gaugesim.application.codec`.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

from typing import ClassVar, Literal, Union

import numpy as np
from pydantic import BaseModel, Field, field_serializer

from ..constants import (
    COLOR_BLUE,
    COLOR_RED,
    COLOR_WARM,
    REQUEST_DEBUG,
    REQUEST_NEED_GAUGE_CONFIG,
    REQUEST_NEED_GAUGE_DATA,
    RESPONSE_CONFIGURATION,
    RESPONSE_DATA,
)

_FROZEN = {"frozen": True, "allow_inf_nan": False}


def to_float32(value: float) -> float:
    """Round ``value`` to the display's 32-bit float, keeping its shortest text.

    The firmware parses every number as a float32, so emitting the
    float64 digits would only send noise past the seventh digit.
    """

    return float(str(np.float32(value)))


class GaugeTheme(BaseModel):
    """Colors shared by every display, packed as 16-bit RGB565."""

    ok_color: int = Field(default=COLOR_WARM, ge=0, le=0xFFFF)
    low_color: int = Field(default=COLOR_BLUE, ge=0, le=0xFFFF)
    high_color: int = Field(default=COLOR_RED, ge=0, le=0xFFFF)
    alert_color: int = Field(default=COLOR_RED, ge=0, le=0xFFFF)

    model_config = _FROZEN


class GaugeConfig(BaseModel):
    """Static description of one gauge.

    Attributes
    ----------
    format:
        printf-style format the display applies to ``current_value``.
    low_value, high_value:
        Thresholds where the display switches to the low/high theme color.
    """

    name: str
    units: str
    format: str
    min: float
    max: float
    low_value: float
    high_value: float

    model_config = _FROZEN

    @field_serializer("min", "max", "low_value", "high_value")
    def serialize_float32(self, value: float) -> float:
        return to_float32(value)


class GaugeData(BaseModel):
    """Current reading of one gauge."""

    # Largest finite 32-bit float; reserved for "sensor offline".
    OFFLINE_VALUE: ClassVar[float] = 3.4028234663852886e38

    current_value: float

    model_config = _FROZEN

    @field_serializer("current_value")
    def serialize_float32(self, value: float) -> float:
        return to_float32(value)

    @classmethod
    def offline(cls) -> "GaugeData":
        return cls(current_value=cls.OFFLINE_VALUE)

    @property
    def is_offline(self) -> bool:
        return self.current_value == self.OFFLINE_VALUE


class DisplayConfiguration(BaseModel):
    gauges: tuple[GaugeConfig, ...] = ()

    model_config = _FROZEN


class DisplayData(BaseModel):
    gauges: tuple[GaugeData, ...] = ()

    model_config = _FROZEN


class Configuration(BaseModel):
    theme: GaugeTheme = Field(default_factory=GaugeTheme)
    display1: DisplayConfiguration = Field(default_factory=DisplayConfiguration)
    display2: DisplayConfiguration = Field(default_factory=DisplayConfiguration)
    display3: DisplayConfiguration = Field(default_factory=DisplayConfiguration)

    model_config = _FROZEN

    def displays(self) -> tuple[DisplayConfiguration, ...]:
        return (self.display1, self.display2, self.display3)

    def arity(self) -> tuple[int, ...]:
        """Number of gauges per display, in display order."""

        return tuple(len(d.gauges) for d in self.displays())


class Data(BaseModel):
    display1: DisplayData = Field(default_factory=DisplayData)
    display2: DisplayData = Field(default_factory=DisplayData)
    display3: DisplayData = Field(default_factory=DisplayData)

    model_config = _FROZEN

    def displays(self) -> tuple[DisplayData, ...]:
        return (self.display1, self.display2, self.display3)

    def arity(self) -> tuple[int, ...]:
        return tuple(len(d.gauges) for d in self.displays())


# --- requests (display -> simulator) -----------------------------------------


class NeedGaugeConfig(BaseModel):
    """The display asks for its gauge layout."""

    TYPE: ClassVar[int] = REQUEST_NEED_GAUGE_CONFIG

    model_config = _FROZEN

    def __str__(self) -> str:
        return "NeedGaugeConfig"


class NeedGaugeData(BaseModel):
    """The display asks for fresh gauge values."""

    TYPE: ClassVar[int] = REQUEST_NEED_GAUGE_DATA

    model_config = _FROZEN

    def __str__(self) -> str:
        return "NeedGaugeData"


class DebugMessage(BaseModel):
    """Informational text from the display firmware; never answered."""

    TYPE: ClassVar[int] = REQUEST_DEBUG

    message: str

    model_config = _FROZEN

    def __str__(self) -> str:
        return f"Debug({self.message!r})"


Request = Union[NeedGaugeConfig, NeedGaugeData, DebugMessage]


# --- responses (simulator -> display) ----------------------------------------


class ConfigurationResponse(BaseModel):
    type: Literal[1] = RESPONSE_CONFIGURATION
    message: Configuration

    model_config = _FROZEN


class DataResponse(BaseModel):
    type: Literal[2] = RESPONSE_DATA
    message: Data

    model_config = _FROZEN


Response = Union[ConfigurationResponse, DataResponse]


__all__ = [
    "Configuration",
    "ConfigurationResponse",
    "Data",
    "DataResponse",
    "DebugMessage",
    "DisplayConfiguration",
    "DisplayData",
    "GaugeConfig",
    "GaugeData",
    "GaugeTheme",
    "NeedGaugeConfig",
    "NeedGaugeData",
    "Request",
    "Response",
    "to_float32",
]
