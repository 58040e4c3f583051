"""Compute elapsed hours between two 12-hour clock times of the same day."""

# Meridiem markers, always normalized to uppercase
AM = 'AM'
PM = 'PM'
MERIDIEMS = (AM, PM)

# Grammar pieces: H(H):MM[AM|PM] and Time-Time
TIME_SEPARATOR = ':'
RANGE_SEPARATOR = '-'

# Field bounds, inclusive
HOUR_BOUNDS = (1, 12)
MINUTE_BOUNDS = (0, 59)

# Field widths
HOUR_WIDTHS = (1, 2)
MINUTE_WIDTH = 2

# Assumed when neither side of a range names a meridiem
IMPLICIT_START = AM
IMPLICIT_END = PM
