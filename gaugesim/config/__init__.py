"""
Configuration package for the gauge simulator.

Copyright BINGO Collaboration
Last Modified: 2026-10-17
"""

from .settings import LoggingSettings, ReconnectSettings, SerialSettings, Settings, settings

__all__ = [
    "LoggingSettings",
    "ReconnectSettings",
    "SerialSettings",
    "Settings",
    "settings",
]
