"""gaugesim/adapters/__init__.py

Adapters that connect the simulator to external systems (serial ports).

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from .serial_port import SerialConnection, SerialConnectionManager

__all__ = ["SerialConnection", "SerialConnectionManager"]
