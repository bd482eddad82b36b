"""
Purpose: Onboarding and browsing rules over the catalog.
What it does:
- Interest rules: which places to show for a given set of query parameters
  (?churches=true&beaches=true). No interest selected means show everything.
- Opening-hours rules: is a place open right now, and open-first ordering.

Rule: Pure predicates over Location + params. No I/O.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Mapping, Optional

from .models import Interest, Location

logger = logging.getLogger(__name__)

INTERESTS: List[Interest] = list(Interest)

OPEN_24_HOURS = "Open 24 hours"


# --- Interest rules ---

def interest_selected(interest_type: Optional[str], params: Mapping[str, str]) -> bool:
    return interest_type is not None and params.get(interest_type) == "true"


def any_interest_selected(params: Mapping[str, str]) -> bool:
    return any(interest_selected(interest.value, params) for interest in INTERESTS)


def matches_interest(place: Location, params: Mapping[str, str]) -> bool:
    return interest_selected(place.type, params)


def should_show(place: Location, params: Mapping[str, str]) -> bool:
    return not any_interest_selected(params) or matches_interest(place, params)


def filter_places(places: Iterable[Location], params: Mapping[str, str]) -> List[Location]:
    return [place for place in places if should_show(place, params)]


def build_interest_query(selected: List[str]) -> str:
    """
    Query string the onboarding screen navigates with, in selection order:
    ["churches", "beaches"] -> "churches=true&beaches=true"
    """
    if not selected:
        raise ValueError("select at least one interest")

    known = {interest.value for interest in INTERESTS}
    unknown = [item for item in selected if item not in known]
    if unknown:
        raise ValueError(f"unknown interests: {', '.join(unknown)}")

    # toggling the same card twice deselects it, so duplicates never reach here;
    # keep first occurrence
    ordered = list(dict.fromkeys(selected))
    return "&".join(f"{interest}=true" for interest in ordered)


# --- Opening hours rules ---

def is_open_24_hours(time_range: Optional[str]) -> bool:
    return time_range == OPEN_24_HOURS


def parse_time(time: str) -> int:
    """'8:30 PM' -> minutes since midnight (1230)."""
    hour_min, period = time.strip().split(" ")
    hours, minutes = (int(part) for part in hour_min.split(":"))
    period = period.upper()

    if period == "PM" and hours != 12:
        hours += 12
    if period == "AM" and hours == 12:
        hours = 0
    return hours * 60 + minutes


def current_time_in_minutes(now: Optional[datetime] = None) -> int:
    now = now or datetime.now()
    return now.hour * 60 + now.minute


def within_time_range(current: int, start: int, end: int) -> bool:
    if start <= end:
        return start <= current <= end
    # overnight range such as "6:00 PM - 2:00 AM"
    return current >= start or current <= end


def is_open(time_range: Optional[str], now: Optional[datetime] = None) -> bool:
    if is_open_24_hours(time_range):
        return True
    if not time_range:
        return False

    try:
        start, end = time_range.split(" - ")
        start_time = parse_time(start)
        end_time = parse_time(end)
    except (ValueError, AttributeError):
        logger.warning(f"Unparseable time range {time_range!r}, treating as closed")
        return False

    return within_time_range(current_time_in_minutes(now), start_time, end_time)


def sort_by_open_status(places: Iterable[Location], now: Optional[datetime] = None) -> List[Location]:
    """
    Open places first, closed after; input order kept inside each group.
    """
    now = now or datetime.now()
    return sorted(places, key=lambda place: not is_open(place.time_range, now))
