"""Error hierarchy for the dining client."""


class DiningError(Exception):
    """Base class for every error raised by this package."""


class ParameterError(DiningError):
    """A caller-supplied argument was rejected before any request was made."""


class InvalidLocationError(ParameterError):
    """Location is not a member of the configured registry."""


class InvalidDayRangeError(ParameterError):
    """Day range end precedes its start."""


class InvalidDateError(ParameterError):
    """Date argument is not a date."""


class InvalidConcurrencyError(ParameterError):
    """Concurrency limit is not a positive integer."""


class UninitializedConfigError(ParameterError):
    """Config has no location registry."""


class RequestError(DiningError):
    """Upstream could not be reached or answered with a non-2xx status."""


class ParseError(DiningError):
    """Upstream body could not be decoded into the expected shape."""


class UnknownLocationError(InvalidLocationError, ParseError):
    """Upstream answered with an empty location field."""
