class TriCalendarError(Exception):
    """Base error."""

class InvalidDateError(TriCalendarError, ValueError):
    """Raised when a civil date has an out-of-range month or day."""

class UnknownCalendarError(TriCalendarError, KeyError):
    """Raised for an unknown calendar, view or attribute name."""
