"""
Time sampler for the clock display
"""
from datetime import datetime, time
from typing import Callable, Optional

from config import CLOCK_CONFIG


def format_time(value: time) -> str:
    """Zero-padded 24-hour HH:MM:SS"""
    return value.strftime(CLOCK_CONFIG["time_format"])


class ClockTicker:
    """Samples local time once per tick and keeps the latest snapshot"""

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        self._now = now
        self.current: Optional[time] = None

    def tick(self) -> str:
        self.current = self._now().time()
        return self.text

    @property
    def text(self) -> str:
        if self.current is None:
            return ""
        return format_time(self.current)
