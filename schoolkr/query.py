"""Normalized year/month/default arguments for a single portal query."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ConflictingDateError, IncompleteDateError, MonthRangeError


@dataclass(frozen=True)
class DateQuery:
    year: Any = None
    month: int | None = None
    default: Any = ""

    @classmethod
    def fromArgs(cls, year=None, month=None, options=None) -> "DateQuery":
        """Fold the accepted call shapes into one DateQuery.

        The first argument may be an options object (a mapping or a
        DateQuery) instead of a year. An options object passed next to a
        positional year and month supplies the default, and may repeat
        year or month only with the same value. Validation runs on the
        folded result.
        """
        if isinstance(year, (Mapping, DateQuery)):
            if options is not None:
                raise ConflictingDateError("options object given twice")
            options, year = year, None

        if options is None:
            return cls(year, month).validated()

        if isinstance(options, DateQuery):
            optYear, optMonth, default = options.year, options.month, options.default
        else:
            optYear, optMonth, default = options.get("year"), options.get("month"), options.get("default", "")

        year = _merge("year", year, optYear)
        month = _merge("month", month, optMonth)
        return cls(year, month, default).validated()

    def validated(self) -> "DateQuery":
        if (self.year is None) != (self.month is None):
            raise IncompleteDateError("both year and month are required to select a date")

        if self.month is None:
            return self

        month = _monthNumber(self.month)
        if month == self.month:
            return self
        return DateQuery(self.year, month, self.default)

    @property
    def isBare(self) -> bool:
        return self.year is None and self.month is None


def _merge(field, positional, option):
    if positional is None:
        return option
    if option is not None and option != positional:
        raise ConflictingDateError(f"{field} given as {positional!r} and as option {option!r}")
    return positional


def _monthNumber(month) -> int:
    if isinstance(month, bool):
        raise MonthRangeError(f"month must be 1-12, got {month!r}")

    if isinstance(month, str):
        if not month.strip().isdecimal():
            raise MonthRangeError(f"month must be 1-12, got {month!r}")
        month = int(month)
    elif not isinstance(month, int):
        raise MonthRangeError(f"month must be 1-12, got {month!r}")

    if month < 1 or month > 12:
        raise MonthRangeError(f"month must be 1-12, got {month}")
    return month
