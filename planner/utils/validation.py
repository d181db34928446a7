"""
Validation utilities
"""
import re

_TIME_OF_DAY_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def validate_time_of_day(value: str) -> tuple[bool, str | None]:
    """
    Validate a time-of-day string

    Args:
        value: Time string in HH:MM format (24h)

    Returns:
        (is_valid, error_message)

    Example:
        >>> validate_time_of_day("09:30")
        (True, None)
        >>> validate_time_of_day("25:00")
        (False, "Hour must be between 0 and 23")
    """
    if not isinstance(value, str):
        return False, "Time must be a string in HH:MM format"

    match = _TIME_OF_DAY_RE.match(value.strip())
    if not match:
        return False, "Time must be in HH:MM format"

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23:
        return False, "Hour must be between 0 and 23"
    if minutes > 59:
        return False, "Minute must be between 0 and 59"

    return True, None


def parse_time_of_day(value: str) -> int:
    """
    Parse HH:MM into minutes since midnight (raise exception on error)

    Args:
        value: Time string in HH:MM format

    Returns:
        Minutes since midnight, 0..1439

    Raises:
        ValueError: if validation fails

    Example:
        >>> parse_time_of_day("09:30")
        570
    """
    is_valid, error = validate_time_of_day(value)
    if not is_valid:
        raise ValueError(error)

    hours, minutes = value.strip().split(":")
    return int(hours) * 60 + int(minutes)
