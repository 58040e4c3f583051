from typing import NamedTuple, Optional

from hourcalc import RANGE_SEPARATOR, IMPLICIT_START, IMPLICIT_END
from hourcalc.conversion import meridiem_to_minutes
from hourcalc.errors import (TimeError, TimeFormatError, AmbiguousRangeError,
                             RangeOrderError)
from hourcalc.time_parser import TimeComponents, parse_time_components
from hourcalc.logger import setup_logger

logger = setup_logger('range_calc')


class RangeResolution(NamedTuple):
    """Meridiems chosen for each side of a range"""
    start: str
    end: str


class TimeRange(NamedTuple):
    raw_start: str
    raw_end: str
    start: TimeComponents
    end: TimeComponents
    resolution: RangeResolution
    start_minutes: int
    end_minutes: int

    @property
    def hours(self) -> float:
        return (self.end_minutes - self.start_minutes) / 60


def _parse_side(raw: str, side: str) -> TimeComponents:
    try:
        return parse_time_components(raw)
    except TimeError as e:
        e.side = side
        raise


def resolve_meridiems(raw: str, start_meridiem: Optional[str],
                      end_meridiem: Optional[str]) -> RangeResolution:
    """Pick the meridiem of each side.

    Both given: use them. Neither given: start is AM, end is PM, so
    "9:00-5:30" reads as a workday. Only one given: ambiguous, never guess.
    """
    if start_meridiem and end_meridiem:
        return RangeResolution(start_meridiem, end_meridiem)
    if not start_meridiem and not end_meridiem:
        return RangeResolution(IMPLICIT_START, IMPLICIT_END)
    raise AmbiguousRangeError(raw, start_meridiem, end_meridiem)


def resolve_range(range_str: str) -> TimeRange:
    """Parse "start-end" and resolve both sides to minutes since midnight"""
    parts = range_str.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        raise TimeFormatError(range_str, 'separator_count')

    raw_start, raw_end = (part.strip() for part in parts)
    if not raw_start or not raw_end:
        raise TimeFormatError(range_str, 'empty_side')

    start = _parse_side(raw_start, 'start')
    end = _parse_side(raw_end, 'end')
    resolution = resolve_meridiems(range_str, start.meridiem, end.meridiem)
    logger.debug(f"Resolved '{range_str}' as {resolution.start} to {resolution.end}")

    start_minutes = meridiem_to_minutes(start.hour12, start.minute, resolution.start, raw_start)
    end_minutes = meridiem_to_minutes(end.hour12, end.minute, resolution.end, raw_end)
    if end_minutes < start_minutes:
        raise RangeOrderError(range_str, raw_start, raw_end, start, end, resolution)

    return TimeRange(raw_start, raw_end, start, end, resolution, start_minutes, end_minutes)


def compute_range_difference_hours(range_str: str) -> float:
    """Elapsed hours between the two times of "start-end" within one day"""
    return resolve_range(range_str).hours
