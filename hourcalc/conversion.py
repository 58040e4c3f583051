from hourcalc import AM, PM
from hourcalc.errors import MeridiemConversionError


def meridiem_to_minutes(hour12: int, minute: int, meridiem: str, raw: str = '') -> int:
    """Convert 12-hour components to minutes since midnight (0-1439).

    12AM is midnight and 12PM is noon. ``meridiem`` must be exactly "AM"
    or "PM"; anything else raises MeridiemConversionError.
    """
    if meridiem == AM:
        hour_of_day = 0 if hour12 == 12 else hour12
    elif meridiem == PM:
        hour_of_day = hour12 if hour12 == 12 else hour12 + 12
    else:
        raise MeridiemConversionError(raw, meridiem)
    return hour_of_day * 60 + minute
