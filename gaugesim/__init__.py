"""gaugesim

Serial gauge display controller simulator for bench testing display
firmware without real sensors.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

__version__ = "0.1.0"
