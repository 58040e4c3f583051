from typing import Optional


def format_time(hour12: int, minute: int, meridiem: Optional[str] = None) -> str:
    """Render components as H:MM with an optional meridiem suffix"""
    return f"{hour12}:{minute:02d}{meridiem or ''}"


def format_hours(hours: float, decimal_places: int = 2) -> str:
    """Round an hour count for display"""
    return f"{hours:.{decimal_places}f} hours"
