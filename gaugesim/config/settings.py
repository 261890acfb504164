"""
Configuration settings for the gauge simulator.
Path: gaugesim/config/settings.py
Copyright BINGO Collaboration
Last Modified: 2026-10-17
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from ..constants import DEFAULT_BAUDRATE, DEFAULT_READ_TIMEOUT, RECONNECT_INTERVAL


class SerialSettings(BaseSettings):
    """Serial link configuration."""

    port: Optional[str] = Field(
        default=None,
        description="Device to open; the first enumerated port when unset",
    )
    baudrate: int = Field(default=DEFAULT_BAUDRATE, ge=1)
    read_timeout: float = Field(
        default=DEFAULT_READ_TIMEOUT,
        gt=0.0,
        description="Seconds a read may block before returning no data",
    )

    model_config = {"env_prefix": "GAUGESIM_SERIAL_"}


class ReconnectSettings(BaseSettings):
    """Port acquisition retry policy."""

    interval: float = Field(default=RECONNECT_INTERVAL, ge=0.0)
    max_attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description="Give up after this many failed acquisitions (unset: never)",
    )

    model_config = {"env_prefix": "GAUGESIM_RECONNECT_"}


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    debug: bool = Field(default=False)
    logdir: Optional[str] = Field(
        default=None,
        description="Also log to gauge-sim.log in this directory",
    )

    model_config = {"env_prefix": "GAUGESIM_LOG_"}


class Settings(BaseSettings):
    """Main settings container."""

    serial: SerialSettings = Field(default_factory=SerialSettings)
    reconnect: ReconnectSettings = Field(default_factory=ReconnectSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "env_prefix": "GAUGESIM_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }


# Singleton instance
settings = Settings()
