"""Parse clock-time tokens such as "9:00AM", "09:00" or "10:30pm".

Tokenizing happens in two passes: an optional AM/PM suffix is stripped
first, then what remains is split into hour and minute fields on the colon.
"""
import re
from typing import NamedTuple, Optional, Tuple

from hourcalc import (MERIDIEMS, TIME_SEPARATOR, HOUR_BOUNDS, MINUTE_BOUNDS,
                      HOUR_WIDTHS, MINUTE_WIDTH)
from hourcalc.errors import TimeFormatError, TimeValueError
from hourcalc.logger import setup_logger

logger = setup_logger('time_parser')

_DIGITS = re.compile(r'[0-9]+')


class TimeComponents(NamedTuple):
    hour12: int
    minute: int
    meridiem: Optional[str] = None


def split_meridiem(candidate: str, raw: str) -> Tuple[str, Optional[str]]:
    """Strip a trailing AM/PM marker, returning (rest, marker or None)"""
    suffix = candidate[-2:].upper()
    if len(candidate) < 2 or suffix not in MERIDIEMS:
        return candidate, None
    if len(candidate) == 2:
        raise TimeFormatError(raw, 'meridiem_only')
    # "FOOAM" is not FOO + AM
    if candidate[-3].isalpha():
        return candidate, None
    return candidate[:-2], suffix


def split_fields(candidate: str, raw: str) -> Tuple[str, str]:
    """Split H:MM into its hour and minute tokens, checking their widths"""
    parts = candidate.split(TIME_SEPARATOR)
    if len(parts) != 2:
        raise TimeFormatError(raw, 'colon_count')

    hour_token, minute_token = parts
    low, high = HOUR_WIDTHS
    if not low <= len(hour_token) <= high:
        raise TimeFormatError(raw, 'hour_width', hour_token)
    if len(minute_token) != MINUTE_WIDTH:
        raise TimeFormatError(raw, 'minute_width', minute_token)
    return hour_token, minute_token


def _to_number(token: str, field: str, raw: str) -> int:
    if not _DIGITS.fullmatch(token):
        raise TimeValueError(raw, field, token)
    return int(token)


def _check_bounds(value: int, token: str, field: str, bounds: Tuple[int, int], raw: str):
    low, high = bounds
    if not low <= value <= high:
        raise TimeValueError(raw, field, token, value, bounds)


def parse_time_components(raw: str) -> TimeComponents:
    """Parse a 12-hour time token into hour, minute and optional meridiem.

    Raises TimeFormatError for structural problems and TimeValueError for
    non-numeric or out-of-range fields. Hours are 1-12 only; "13:00" is
    rejected rather than read as a 24-hour time.
    """
    candidate = raw.strip()
    candidate, meridiem = split_meridiem(candidate, raw)
    hour_token, minute_token = split_fields(candidate, raw)

    hour12 = _to_number(hour_token, 'hour', raw)
    minute = _to_number(minute_token, 'minute', raw)
    _check_bounds(hour12, hour_token, 'hour', HOUR_BOUNDS, raw)
    _check_bounds(minute, minute_token, 'minute', MINUTE_BOUNDS, raw)

    components = TimeComponents(hour12, minute, meridiem)
    logger.debug(f"Parsed '{raw}' as {components}")
    return components
