from datetime import datetime
from typing import Optional

from dateutil import tz

from hourcalc import AM, PM
from hourcalc.time_parser import TimeComponents


def current_time_components(now: Optional[datetime] = None) -> TimeComponents:
    """Current local wall-clock time as 12-hour components"""
    if now is None:
        now = datetime.now(tz.tzlocal())
    meridiem = AM if now.hour < 12 else PM
    return TimeComponents(now.hour % 12 or 12, now.minute, meridiem)
