"""schoolkr - meal and academic calendar URLs for Korean schools.

Usage:
    from schoolkr import School

    school = School(School.Type.HIGH, School.Region.SEOUL, "B100000658",
                    mealFetcher=myMealFetcher)
    meal = await school.getMeal(2024, 5)
"""

from .const import Type, Region
from .errors import (
    SchoolError,
    ConfigurationError,
    NotInitializedError,
    UnknownKindError,
    IncompleteDateError,
    MonthRangeError,
    ConflictingDateError,
)
from .fetcher import Fetcher
from .query import DateQuery
from .school import School, monthFormat, resolveType, resolveRegion

__all__ = [
    "School",
    "Type",
    "Region",
    "Fetcher",
    "DateQuery",
    "monthFormat",
    "resolveType",
    "resolveRegion",
    "SchoolError",
    "ConfigurationError",
    "NotInitializedError",
    "UnknownKindError",
    "IncompleteDateError",
    "MonthRangeError",
    "ConflictingDateError",
]
