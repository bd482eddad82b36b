"""
Purpose: Closest-first ordering of destinations.
What it does:
Sorts destinations by the precomputed driving distance from the fixed origin
(user-distances.json). This is a single-key sort over offline edge weights,
no graph search happens at request time.
"""

from typing import List, Optional, Tuple

from destinations.models import Location, TravelCost, UserDistances


def get_distance_to_destination(destination_title: str, user_distances: UserDistances) -> Optional[TravelCost]:
    """
    "How far is Paoay Church from me?" -> TravelCost or None if not precomputed.
    """
    return user_distances.get(destination_title)


def _distance_key(place: Location, user_distances: UserDistances) -> Tuple[int, float]:
    cost = get_distance_to_destination(place.title, user_distances)
    if cost is None or cost.distance is None:
        # no precomputed value: after every known distance
        return (1, 0.0)
    return (0, cost.distance)


def sort_by_closest_distance(destinations: List[Location], user_distances: UserDistances) -> List[Location]:
    """
    Destinations sorted closest first. The sort is stable, so ties and the
    entries without a precomputed distance keep their input order.
    Returns a new list.
    """
    return sorted(destinations, key=lambda place: _distance_key(place, user_distances))


def get_closest_destinations(
        destinations: List[Location],
        user_distances: UserDistances,
        limit: int = 5,
) -> List[Location]:
    """
    The `limit` nearest destinations ("Show me the 5 nearest tourist spots").
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    return sort_by_closest_distance(destinations, user_distances)[:limit]
