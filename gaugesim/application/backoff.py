"""gaugesim/application/backoff.py

Polling reconnect policy used while waiting for a serial port.

Copyright BINGO Collaboration
Last modified: 2026-10-17
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from pydantic import BaseModel, Field

from ..constants import RECONNECT_INTERVAL


class BackoffPolicy(BaseModel):
    """Fixed-interval retry policy.

    Attributes
    ----------
    interval:
        Seconds to wait after a failed port acquisition.
    max_attempts:
        Consecutive failed acquisitions tolerated before giving up.
        ``None`` retries forever.
    """

    interval: float = Field(default=RECONNECT_INTERVAL, ge=0.0)
    max_attempts: Optional[int] = Field(default=None, ge=1)

    model_config = {"frozen": True}

    def should_retry(self, attempts: int) -> bool:
        return self.max_attempts is None or attempts < self.max_attempts

    def wait(self, sleep: Callable[[float], None] = time.sleep) -> None:
        sleep(self.interval)


__all__ = ["BackoffPolicy"]
