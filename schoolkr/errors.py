"""Exceptions raised by schoolkr."""


class SchoolError(Exception):
    """Base class for every schoolkr error."""


class ConfigurationError(SchoolError):
    """School identity is missing, unresolvable or already initialized."""


class NotInitializedError(SchoolError):
    """A query was issued against a School that was never initialized."""


class UnknownKindError(SchoolError, ValueError):
    """URL kind is neither meal nor calendar."""


class IncompleteDateError(SchoolError, ValueError):
    """Only one of year and month was given."""


class MonthRangeError(SchoolError, ValueError):
    """Month is not within 1 to 12."""


class ConflictingDateError(SchoolError, ValueError):
    """Positional year or month disagrees with the options object."""
