# src/weatherapp/tests/test_presenter.py
from datetime import date, datetime

import pytest

from conftest import WARSAW_CURRENT, WARSAW_FORECAST
from weatherapp.weather.presenter import (
    format_day,
    format_temperature,
    format_time,
    group_by_day,
    present_current,
    present_forecast,
)
from weatherapp.weather.types import CurrentWeather, Forecast, ForecastEntry, Main


def entry(dt_txt: str, temp: float = 0.0) -> ForecastEntry:
    return ForecastEntry(timestamp=datetime.strptime(dt_txt, "%Y-%m-%d %H:%M:%S"), main=Main(temp=temp))


def test_group_by_day_scenario():
    a = entry("2023-11-01 09:00:00")
    b = entry("2023-11-01 12:00:00")
    c = entry("2023-11-02 09:00:00")

    groups = group_by_day([a, b, c])

    assert [g.day for g in groups] == [date(2023, 11, 1), date(2023, 11, 2)]
    assert groups[0].entries == (a, b)
    assert groups[1].entries == (c,)


@pytest.mark.parametrize("entries", [[], None, ()])
def test_group_by_day_empty(entries):
    assert group_by_day(entries) == []


def test_group_by_day_orders_groups_but_keeps_order_within_group():
    # 입력이 날짜 순이 아니어도 그룹은 날짜 오름차순, 그룹 안은 입력 순서 그대로
    late = entry("2023-11-03 21:00:00", temp=1)
    first = entry("2023-11-01 18:00:00", temp=2)
    early_same_day = entry("2023-11-01 06:00:00", temp=3)
    middle = entry("2023-11-02 00:00:00", temp=4)

    groups = group_by_day([late, first, middle, early_same_day])

    assert [g.day for g in groups] == [date(2023, 11, 1), date(2023, 11, 2), date(2023, 11, 3)]
    assert groups[0].entries == (first, early_same_day)


def test_group_by_day_is_stable_partition():
    entries = [entry(f"2023-11-0{d} {h:02d}:00:00", temp=i)
               for i, (d, h) in enumerate([(1, 0), (1, 3), (2, 0), (1, 21), (3, 6), (2, 9), (3, 3)])]

    groups = group_by_day(entries)
    days = [g.day for g in groups]

    assert days == sorted(set(days))
    assert sum(len(g.entries) for g in groups) == len(entries)
    for g in groups:
        expected = [e for e in entries if e.timestamp.date() == g.day]
        assert list(g.entries) == expected


def test_group_by_day_skips_entries_without_timestamp():
    dated = entry("2023-11-01 09:00:00")
    groups = group_by_day([ForecastEntry(), dated])

    assert len(groups) == 1
    assert groups[0].entries == (dated,)


def test_format_day_polish():
    assert format_day(date(2023, 11, 1)) == "środa, 01.11.2023"
    assert format_day(date(2023, 11, 5)) == "niedziela, 05.11.2023"


def test_format_time():
    assert format_time(datetime(2023, 11, 1, 9, 0)) == "09:00"
    assert format_time(datetime(2023, 11, 1, 21, 30)) == "21:30"


@pytest.mark.parametrize("temp, expected", [
    (20.5, "21"), (20.4, "20"), (15.5, "16"), (-2.5, "-3"), (-0.4, "0"), (0.0, "0"), (None, ""),
])
def test_format_temperature(temp, expected):
    assert format_temperature(temp) == expected


def test_present_current():
    view = present_current(CurrentWeather.from_json(WARSAW_CURRENT))

    assert view.name == "Warsaw"
    assert view.temperature == "21"
    assert view.humidity == 65
    assert view.description == "Słonecznie"
    assert view.icon_url == "http://openweathermap.org/img/wn/01d@2x.png"


@pytest.mark.parametrize("payload", [{}, {"main": {"temp": 1}}, {"main": {"temp": 1}, "weather": []},
                                     {"weather": [{"description": "x"}]}])
def test_present_current_hidden_without_main_and_weather(payload):
    assert present_current(CurrentWeather.from_json(payload)) is None


def test_present_forecast():
    days = present_forecast(Forecast.from_json(WARSAW_FORECAST))

    assert [d.heading for d in days] == ["środa, 01.11.2023", "czwartek, 02.11.2023"]
    assert [e.time for e in days[0].entries] == ["09:00", "12:00"]
    assert [e.temperature for e in days[0].entries] == ["8", "11"]
    assert days[0].entries[0].icon_url == "http://openweathermap.org/img/wn/04d@2x.png"

    snow = days[1].entries[0]
    assert snow.temperature == "-3"
    assert snow.description == "śnieg"
    assert snow.icon_url is None


def test_present_forecast_without_list():
    assert present_forecast(Forecast.from_json({})) == []
    assert present_forecast(Forecast.from_json({"list": []})) == []
