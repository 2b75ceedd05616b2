import asyncio

import pytest

from schoolkr import (
    School,
    DateQuery,
    ConfigurationError,
    ConflictingDateError,
    NotInitializedError,
    IncompleteDateError,
    MonthRangeError,
)
from tests.helpers.test_helpers import make_school, RecordingFetcher, FailingFetcher, connection_error


def _school_with_fetchers():
    meal = RecordingFetcher(result=["rice", "kimchi"])
    calendar = RecordingFetcher(result={"2024-05-05": "Children's Day"})
    school = make_school(mealFetcher=meal, calendarFetcher=calendar)
    return school, meal, calendar


def test_get_meal_delegates_url_and_returns_result():
    school, meal, calendar = _school_with_fetchers()

    result = asyncio.run(school.getMeal(2024, 5))

    assert result == ["rice", "kimchi"]
    assert meal.calls == [(school.buildUrl("meal", 2024, 5), "")]
    assert calendar.calls == []


def test_get_calendar_delegates_url_and_returns_result():
    school, meal, calendar = _school_with_fetchers()

    result = asyncio.run(school.getCalendar(2024, 5))

    assert result == {"2024-05-05": "Children's Day"}
    assert calendar.calls == [(school.buildUrl("calendar", 2024, 5), "")]
    assert meal.calls == []


def test_bare_query_sends_empty_date():
    school, meal, _ = _school_with_fetchers()

    asyncio.run(school.getMeal())

    url, default = meal.calls[0]
    assert url.endswith("ay=&mm=&")
    assert default == ""


def test_options_object_matches_positional():
    school, meal, calendar = _school_with_fetchers()

    asyncio.run(school.getMeal({"year": 2024, "month": 5, "default": []}))
    asyncio.run(school.getMeal(2024, 5))

    assert meal.calls[0] == (meal.calls[1][0], [])
    assert meal.calls[1][1] == ""


def test_calendar_options_read_year():
    school, _, calendar = _school_with_fetchers()

    asyncio.run(school.getCalendar({"year": 2024, "month": 3}))

    assert calendar.calls[0][0].endswith("ay=2024&mm=03&")


def test_options_keyword_and_dataclass():
    school, meal, _ = _school_with_fetchers()

    asyncio.run(school.getMeal(options={"year": 2023, "month": 12, "default": None}))
    asyncio.run(school.getMeal(DateQuery(2023, 12, "none")))

    assert meal.calls[0] == (school.buildUrl("meal", 2023, 12), None)
    assert meal.calls[1] == (school.buildUrl("meal", 2023, 12), "none")


def test_partial_date_rejected():
    school, meal, _ = _school_with_fetchers()

    with pytest.raises(IncompleteDateError):
        school.getMeal(2024)
    with pytest.raises(IncompleteDateError):
        school.getCalendar(month=5)
    with pytest.raises(IncompleteDateError):
        school.getMeal({"year": 2024})

    assert meal.calls == []


@pytest.mark.parametrize("month", [0, 13, -1, "", "13", "may", "²", 5.5, True])
def test_month_out_of_range(month):
    school, meal, _ = _school_with_fetchers()

    with pytest.raises(MonthRangeError):
        school.getMeal(2024, month)
    with pytest.raises(MonthRangeError):
        school.getCalendar({"year": 2024, "month": month})

    assert meal.calls == []


def test_positional_date_with_options_default():
    school, meal, calendar = _school_with_fetchers()

    asyncio.run(school.getMeal(2024, 5, {"default": []}))
    asyncio.run(school.getCalendar(2024, 5, options=DateQuery(default="none")))

    assert meal.calls == [(school.buildUrl("meal", 2024, 5), [])]
    assert calendar.calls == [(school.buildUrl("calendar", 2024, 5), "none")]


def test_options_may_repeat_positional_date():
    school, meal, _ = _school_with_fetchers()

    asyncio.run(school.getMeal(2024, 5, options={"year": 2024, "month": 5, "default": []}))
    asyncio.run(school.getMeal({"year": 2024, "month": 5}, 5))
    asyncio.run(school.getMeal({"year": 2024}, 5))

    url = school.buildUrl("meal", 2024, 5)
    assert meal.calls == [(url, []), (url, ""), (url, "")]


@pytest.mark.parametrize(
    "args, kwargs",
    [
        ((2024, 5, {"year": 2023, "month": 5}), {}),
        ((2024, 5), {"options": {"month": 6}}),
        ((2024, 5), {"options": DateQuery(2023, 1)}),
        ((2024, 5, DateQuery(month=6)), {}),
        (({"year": 2024, "month": 5}, 6), {}),
        (({"year": 2024, "month": 5},), {"options": {"default": []}}),
    ],
)
def test_options_conflicting_with_positional(args, kwargs):
    school, meal, _ = _school_with_fetchers()

    with pytest.raises(ConflictingDateError):
        school.getMeal(*args, **kwargs)

    assert meal.calls == []


def test_query_on_uninitialized_school():
    school = School.__new__(School)

    with pytest.raises(NotInitializedError):
        school.getMeal()
    with pytest.raises(NotInitializedError):
        school.getCalendar(2024, 5)


def test_missing_fetcher():
    school = make_school()

    with pytest.raises(ConfigurationError, match="meal"):
        school.getMeal()
    with pytest.raises(ConfigurationError, match="calendar"):
        school.getCalendar()


def test_fetcher_errors_propagate_unchanged():
    err = connection_error()
    school = make_school(mealFetcher=FailingFetcher(err))

    with pytest.raises(type(err)) as caught:
        asyncio.run(school.getMeal(2024, 5))

    assert caught.value is err


def test_concurrent_queries_on_one_school():
    school, meal, _ = _school_with_fetchers()

    async def run():
        return await asyncio.gather(*(school.getMeal(2024, m) for m in range(1, 13)))

    results = asyncio.run(run())

    assert len(results) == 12
    assert sorted(url for url, _ in meal.calls) == sorted(school.buildUrl("meal", 2024, m) for m in range(1, 13))


def test_date_query_normalizes_month():
    query = DateQuery.fromArgs("2024", "05")

    assert query == DateQuery("2024", 5, "")
    assert DateQuery.fromArgs().isBare
    assert not query.isBare
