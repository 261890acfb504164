"""gaugesim/application/dispatcher.py

Request handling for the simulated gauge controller.

Configuration and simulated data are both derived from the single
:data:`GAUGE_LAYOUT` table, which keeps the per-display gauge count of a
Data response identical to the Configuration the display was given.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Sequence

import numpy as np

from ..constants import DISPLAY_COUNT
from ..domain import (
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
from ..logging_utils import logprintf


class SimulatedGauge(NamedTuple):
    config: GaugeConfig
    # current_value = scale * factor, factor shared by all gauges
    scale: float


COOLANT = SimulatedGauge(
    config=GaugeConfig(
        name="COOLANT",
        units="C",
        format="%.0f",
        min=0.0,
        max=130.0,
        low_value=60.0,
        high_value=100.0,
    ),
    scale=77.0,
)

OIL = SimulatedGauge(
    config=GaugeConfig(
        name="OIL",
        units="bar",
        format="%.2f",
        min=0.0,
        max=10.0,
        low_value=1.0,
        high_value=8.0,
    ),
    scale=6.5,
)

GAUGE_LAYOUT: tuple[tuple[SimulatedGauge, ...], ...] = (
    (COOLANT,),
    (OIL,),
    (),
)

DEFAULT_THEME = GaugeTheme()

FactorSampler = Callable[[], float]

_rng = np.random.default_rng()


def sample_factor() -> float:
    """Draw one scaling factor in ``[0, 1)``."""

    return float(_rng.random())


def build_configuration(
    layout: Sequence[Sequence[SimulatedGauge]] = GAUGE_LAYOUT,
    theme: GaugeTheme = DEFAULT_THEME,
) -> Configuration:
    if len(layout) != DISPLAY_COUNT:
        raise ValueError(f"expected {DISPLAY_COUNT} displays, got {len(layout)}")
    d1, d2, d3 = (
        DisplayConfiguration(gauges=tuple(g.config for g in display))
        for display in layout
    )
    return Configuration(theme=theme, display1=d1, display2=d2, display3=d3)


def build_data(
    factor: float,
    layout: Sequence[Sequence[SimulatedGauge]] = GAUGE_LAYOUT,
) -> Data:
    if not 0.0 <= factor < 1.0:
        raise ValueError(f"factor must be in [0, 1), got {factor!r}")
    if len(layout) != DISPLAY_COUNT:
        raise ValueError(f"expected {DISPLAY_COUNT} displays, got {len(layout)}")
    d1, d2, d3 = (
        DisplayData(
            gauges=tuple(GaugeData(current_value=g.scale * factor) for g in display)
        )
        for display in layout
    )
    return Data(display1=d1, display2=d2, display3=d3)


def handle_request(
    request: Request,
    sample: FactorSampler = sample_factor,
) -> Optional[Response]:
    """Map a request to its response.

    Returns
    -------
    Response | None
        * ``ConfigurationResponse`` for :class:`NeedGaugeConfig`.
        * ``DataResponse`` for :class:`NeedGaugeData`, one factor per call.
        * ``None`` for requests that take no reply (debug messages);
          callers must not write anything in that case.
    """

    if isinstance(request, NeedGaugeConfig):
        return ConfigurationResponse(message=build_configuration())

    if isinstance(request, NeedGaugeData):
        return DataResponse(message=build_data(sample()))

    if isinstance(request, DebugMessage):
        logprintf(2, "Debug: %s", request.message)
        return None

    raise TypeError(f"unhandled request type: {type(request).__name__}")


__all__ = [
    "COOLANT",
    "DEFAULT_THEME",
    "GAUGE_LAYOUT",
    "OIL",
    "FactorSampler",
    "SimulatedGauge",
    "build_configuration",
    "build_data",
    "handle_request",
    "sample_factor",
]
