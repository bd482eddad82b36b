from datetime import datetime

import pytest

from destinations.filters import (
    any_interest_selected,
    build_interest_query,
    filter_places,
    interest_selected,
    is_open,
    parse_time,
    should_show,
    sort_by_open_status,
    within_time_range,
)
from destinations.models import Interest, Location

MORNING = datetime(2026, 10, 19, 7, 30)
NIGHT = datetime(2026, 10, 19, 22, 0)


def test_interest_selected_requires_literal_true():
    assert interest_selected("churches", {"churches": "true"})
    assert not interest_selected("churches", {"churches": "1"})
    assert not interest_selected("churches", {})
    assert not interest_selected(None, {"churches": "true"})


def test_any_interest_selected_ignores_unknown_keys():
    assert not any_interest_selected({"city": "true"})
    assert any_interest_selected({"shopping": "true"})


def test_no_selection_shows_everything(places):
    assert filter_places(places, {}) == places


def test_selection_filters_by_type_keeping_order(places):
    shown = filter_places(places, {"churches": "true", "beaches": "true"})
    assert [place.title for place in shown] == ["Paoay Church", "Saud Beach", "Sarrat Church"]


def test_place_with_unknown_type_hidden_once_something_selected():
    odd = Location("Odd", 18.0, 120.0, type="casino")
    assert should_show(odd, {})
    assert not should_show(odd, {"churches": "true"})


def test_build_interest_query_keeps_selection_order():
    assert build_interest_query(["museums", "churches"]) == "museums=true&churches=true"


def test_build_interest_query_rejects_empty_and_unknown():
    with pytest.raises(ValueError):
        build_interest_query([])
    with pytest.raises(ValueError):
        build_interest_query(["casinos"])


def test_interest_labels():
    assert Interest.CUISINE.label == "Cuisine"
    assert len(list(Interest)) == 8


@pytest.mark.parametrize(
    "text, minutes",
    [("12:00 AM", 0), ("12:30 PM", 750), ("6:00 AM", 360), ("6:00 PM", 1080), ("11:59 PM", 1439)],
)
def test_parse_time(text, minutes):
    assert parse_time(text) == minutes


def test_within_time_range_is_inclusive():
    assert within_time_range(360, 360, 1080)
    assert within_time_range(1080, 360, 1080)
    assert not within_time_range(1081, 360, 1080)


def test_within_time_range_overnight():
    start, end = parse_time("6:00 PM"), parse_time("2:00 AM")
    assert within_time_range(parse_time("11:00 PM"), start, end)
    assert within_time_range(parse_time("1:00 AM"), start, end)
    assert not within_time_range(parse_time("10:00 AM"), start, end)


def test_is_open():
    assert is_open("Open 24 hours", NIGHT)
    assert is_open("6:00 AM - 6:00 PM", MORNING)
    assert not is_open("6:00 AM - 6:00 PM", NIGHT)
    assert not is_open("9:00 AM - 5:00 PM", MORNING)


@pytest.mark.parametrize("time_range", [None, "", "sometimes", "9 - 5", 930])
def test_is_open_treats_missing_or_garbled_hours_as_closed(time_range):
    assert not is_open(time_range, MORNING)


def test_sort_by_open_status_open_first_stable(places):
    ordered = sort_by_open_status(places, MORNING)
    # at 7:30 AM: both churches (6-6) and the 24h beach are open
    assert [place.title for place in ordered] == [
        "Paoay Church",
        "Saud Beach",
        "Sarrat Church",
        "Museo Ilocos Norte",
        "Herencia Cafe",
    ]
