"""School identity and portal URL construction."""

from __future__ import annotations

from logging import getLogger
from typing import Any, Awaitable

from .const import KIND_URLS, MEAL, CALENDAR, Type, Region
from .errors import ConfigurationError, NotInitializedError, UnknownKindError
from .query import DateQuery

log = getLogger(__name__)


def resolveType(eduType) -> Type:
    return _resolve(Type, eduType, "institution type")


def resolveRegion(region) -> Region:
    return _resolve(Region, region, "region")


def _resolve(catalog, value, what):
    if isinstance(value, catalog):
        return value

    if isinstance(value, str):
        try:
            return catalog[value.strip().upper()]
        except KeyError:
            pass

    choices = ", ".join(member.name for member in catalog)
    raise ConfigurationError(f"Unknown {what} {value!r}, expected one of {choices}")


def monthFormat(month) -> str:
    """Return month as MM, or "" when it cannot be two digits."""
    month = str(month)

    if len(month) > 2:
        return ""

    if month == "" or len(month) == 2:
        return month

    return "0" + month


class School:
    """A single school on the education office portal.

    School(eduType, region, schoolCode) resolves eduType against Type and
    region against Region. The instance is frozen once constructed; meal
    and calendar queries build the portal URL and hand it to the injected
    fetchers.
    """

    Type = Type
    Region = Region

    def __init__(self, eduType, region, schoolCode: str, *, mealFetcher=None, calendarFetcher=None):

        if self.initialized:
            raise ConfigurationError(f"School is already initialized with [{self._schoolCode}]")

        if not (eduType and region and schoolCode):
            raise ConfigurationError("institution type, region and school code are required")

        resolvedType = resolveType(eduType)
        resolvedRegion = resolveRegion(region)

        # all or nothing, nothing is stored until every field resolved
        fields = {
            "_eduType": resolvedType,
            "_region": resolvedRegion,
            "_schoolCode": str(schoolCode),
            "_mealFetcher": mealFetcher,
            "_calendarFetcher": calendarFetcher,
        }
        for name, value in fields.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "_initialized", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if self.initialized:
            raise ConfigurationError(f"School [{self._schoolCode}] is immutable, cannot set {name}")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if self.initialized:
            raise ConfigurationError(f"School [{self._schoolCode}] is immutable, cannot delete {name}")
        object.__delattr__(self, name)

    def __repr__(self) -> str:
        if not self.initialized:
            return "<School uninitialized>"
        return f"<School {self._eduType.name} {self._region.name} {self._schoolCode}>"

    @property
    def initialized(self) -> bool:
        return self.__dict__.get("_initialized", False)

    @property
    def eduType(self) -> Type:
        self._checkInitialized()
        return self._eduType

    @property
    def region(self) -> Region:
        self._checkInitialized()
        return self._region

    @property
    def schoolCode(self) -> str:
        self._checkInitialized()
        return self._schoolCode

    def _checkInitialized(self):
        if not self.initialized:
            raise NotInitializedError("School instance is not initialized")

    def monthFormat(self, month) -> str:
        return monthFormat(month)

    def buildUrl(self, kind: str, year=None, month=None) -> str:
        """Build the portal URL of the meal or calendar page.

        kind is "meal" or "calendar", in any case. Absent year and month
        are sent empty, the portal then answers with the current month.
        The parameter order and the trailing "&" are what the portal
        expects and must not change.
        """
        self._checkInitialized()

        if not isinstance(kind, str) or kind.lower() not in KIND_URLS:
            raise UnknownKindError(f"Unknown kind {kind!r}, expected {MEAL} or {CALENDAR}")

        host = self._region.value
        code = self._eduType.value
        path = KIND_URLS[kind.lower()]

        url = f"https://{host}/{path}?"
        url += f"schulCode={self._schoolCode}&"
        url += f"schulCrseScCode={code}&"
        url += f"schulKndScCode=0{code}&"
        url += f"ay={'' if year is None else year}&"
        url += f"mm={monthFormat('' if month is None else month)}&"

        log.debug(f"Built {kind.lower()} url {url}")
        return url

    def getTargetURL(self, kind: str, year=None, month=None) -> str:
        query = DateQuery.fromArgs(year, month)
        return self.buildUrl(kind, query.year, query.month)

    def getMeal(self, year=None, month=None, options=None) -> Awaitable[Any]:
        """Fetch the meal page of the given month, or the current one.

        Arguments are validated when called, the returned awaitable
        resolves to whatever the meal fetcher returns.
        """
        query = DateQuery.fromArgs(year, month, options)
        return self._fetch(MEAL, query)

    def getCalendar(self, year=None, month=None, options=None) -> Awaitable[Any]:
        """Fetch the academic calendar page, see getMeal."""
        query = DateQuery.fromArgs(year, month, options)
        return self._fetch(CALENDAR, query)

    def _fetch(self, kind: str, query: DateQuery) -> Awaitable[Any]:
        url = self.buildUrl(kind, query.year, query.month)

        fetcher = self._mealFetcher if kind == MEAL else self._calendarFetcher
        if fetcher is None:
            raise ConfigurationError(f"No {kind} fetcher configured for [{self._schoolCode}]")

        if query.isBare:
            log.debug(f"Requesting current month {kind} for [{self._schoolCode}]")

        return fetcher.getData(url, query.default)
