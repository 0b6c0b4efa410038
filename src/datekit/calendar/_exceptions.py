class DateError(Exception):
    """Base class for every error raised by datekit."""


class InvalidArgumentError(DateError, ValueError):
    """A month, day or date argument is not acceptable."""


class OutOfRangeError(DateError, ValueError):
    """A year or day count falls outside the supported calendar range."""
