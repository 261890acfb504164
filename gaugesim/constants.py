"""gaugesim/constants.py

Wire protocol constants and session states.

The values here follow the gauge display firmware so that the simulator
speaks the same on-wire protocol as a real controller.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

# Message framing: a single newline brackets every JSON payload
MESSAGE_DELIMITER: bytes = b"\n"

# Request discriminants (display -> simulator)
REQUEST_NEED_GAUGE_CONFIG: int = 1
REQUEST_NEED_GAUGE_DATA: int = 2
REQUEST_DEBUG: int = 3

# Response discriminants (simulator -> display)
RESPONSE_CONFIGURATION: int = 1
RESPONSE_DATA: int = 2

# Serial link defaults
DEFAULT_BAUDRATE: int = 115200
DEFAULT_READ_TIMEOUT: float = 1.0
RECONNECT_INTERVAL: float = 1.0

# 16-bit RGB565 packed colors understood by the OLED displays
COLOR_BLACK: int = 0x0000
COLOR_BLUE: int = 0x001F
COLOR_RED: int = 0xF800
COLOR_GREEN: int = 0x07E0
COLOR_CYAN: int = 0x07FF
COLOR_MAGENTA: int = 0xF81F
COLOR_YELLOW: int = 0xFFE0
COLOR_WARM: int = 0xFC00
COLOR_WHITE: int = 0xFFFF

DISPLAY_COUNT: int = 3

AWAITING_PORT: int = 0
HANDSHAKING: int = 1
SERVING: int = 2
FAULTED: int = 3

STATE_NAMES: dict[int, str] = {
    AWAITING_PORT: "AwaitingPort",
    HANDSHAKING: "Handshaking",
    SERVING: "Serving",
    FAULTED: "Faulted",
}
