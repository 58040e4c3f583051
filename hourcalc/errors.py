"""Failures raised while parsing time strings and measuring ranges.

Every error raised by the parser, the converter and the range calculator
derives from ``TimeError``. Each variant keeps the raw text it was given
plus whatever was resolved before the failure, and renders its own message.
"""
from typing import Optional, Tuple

from hourcalc.utils import format_time


class TimeError(Exception):
    """Base class for all time parsing and range errors"""

    # False only for internal contract violations
    user_facing = True

    def __init__(self, raw: str):
        super().__init__(raw)
        self.raw = raw
        self.side: Optional[str] = None

    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        text = self.message()
        if self.side:
            return f"{self.side.capitalize()} time: {text}"
        return text


FORMAT_PROBLEMS = {
    'meridiem_only': "Invalid time format: '{raw}'. Time string is too short or just an AM/PM indicator.",
    'colon_count': "Invalid time format: '{raw}'. Expected H:MM or HH:MM (optionally followed by AM/PM). Missing or too many colons.",
    'hour_width': "Invalid hour format in '{raw}'. Hour part '{token}' must be 1 or 2 digits.",
    'minute_width': "Invalid minute format in '{raw}'. Minute part '{token}' must be 2 digits.",
    'separator_count': "Invalid input format: '{raw}'. Expected format is H(H):MM[am/pm]-H(H):MM[am/pm].",
    'empty_side': "Invalid input format: '{raw}'. Start or end time string is empty after splitting by '-'.",
    'meridiem_in_single_time': "For single time input '{raw}', do not specify AM/PM. The input time is assumed to be AM, and the end time is the current system time.",
}


class TimeFormatError(TimeError):
    """Structural problem: separators, field widths, empty pieces"""

    def __init__(self, raw: str, problem: str, token: Optional[str] = None):
        if problem not in FORMAT_PROBLEMS:
            raise ValueError(f"Unknown format problem: {problem}")
        super().__init__(raw)
        self.problem = problem
        self.token = token

    def message(self) -> str:
        return FORMAT_PROBLEMS[self.problem].format(raw=self.raw, token=self.token)


class TimeValueError(TimeError):
    """Well-formed field whose value is not a number or is out of bounds"""

    def __init__(self, raw: str, field: str, token: str,
                 value: Optional[int] = None, bounds: Optional[Tuple[int, int]] = None):
        super().__init__(raw)
        self.field = field
        self.token = token
        self.value = value
        self.bounds = bounds

    def message(self) -> str:
        label = self.field.capitalize()
        if self.value is None:
            return (f"Invalid {self.field} value: '{self.token}' in '{self.raw}'. "
                    f"{label} must be a number.")
        low, high = self.bounds
        clock = ' for 12-hour format' if self.field == 'hour' else ''
        return (f"Invalid {self.field}: {self.value}. "
                f"{label} must be between {low} and {high}{clock} in '{self.raw}'.")


class AmbiguousRangeError(TimeError):
    """Only one side of a range names AM/PM"""

    def __init__(self, raw: str, start_meridiem: Optional[str], end_meridiem: Optional[str]):
        super().__init__(raw)
        self.start_meridiem = start_meridiem
        self.end_meridiem = end_meridiem

    def message(self) -> str:
        if self.start_meridiem:
            given = f"start has {self.start_meridiem}, end has none"
        else:
            given = f"end has {self.end_meridiem}, start has none"
        return (f"Ambiguous time range: '{self.raw}' ({given}). "
                "Both times must specify AM/PM, or neither should. "
                "If neither, start is assumed AM and end is assumed PM.")


class RangeOrderError(TimeError):
    """Resolved end time falls before the resolved start time"""

    def __init__(self, raw: str, raw_start: str, raw_end: str, start, end, resolution):
        super().__init__(raw)
        self.raw_start = raw_start
        self.raw_end = raw_end
        self.start = start
        self.end = end
        self.resolution = resolution

    def message(self) -> str:
        start_text = format_time(self.start.hour12, self.start.minute, self.resolution.start)
        end_text = format_time(self.end.hour12, self.end.minute, self.resolution.end)
        return (f"End time {self.raw_end} (interpreted as {end_text}) is before "
                f"start time {self.raw_start} (interpreted as {start_text}). "
                "The range must be within a single day and end time must be after start time.")


class MeridiemConversionError(TimeError):
    """Converter received a meridiem other than AM or PM.

    The parser never produces one, so this always points at a caller bug
    rather than at bad input.
    """

    user_facing = False

    def __init__(self, raw: str, meridiem):
        super().__init__(raw)
        self.meridiem = meridiem

    def message(self) -> str:
        return (f"Internal error or invalid AM/PM indicator: '{self.meridiem}' "
                f"for time '{self.raw}'. Expected 'AM' or 'PM'.")
