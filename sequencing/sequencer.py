"""
Purpose: Walks the user through the closest-first destinations one hop at a time.
What it does:
Holds the current position in the tour and answers "where am I, where do I
drive next". Position 0 is the fixed origin, position k (1..n) is the k-th
closest destination. Navigation wraps around in both directions.

Each hop is fetched fresh from Mapbox (one outstanding request, triggered
by the user moving), nothing is prefetched or cached here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from destinations.models import Location, UserDistances
from routing.directions import RouteDirections, get_route_directions

from .ordering import sort_by_closest_distance

logger = logging.getLogger(__name__)

Hop = Tuple[Location, Location]
RouteFetcher = Callable[[Location, Location], Optional[RouteDirections]]


@dataclass
class TourSequencer:
    origin: Location
    destinations: List[Location] = field(default_factory=list)  # closest first
    index: int = 0

    @classmethod
    def from_user_distances(
            cls,
            destinations: List[Location],
            user_distances: UserDistances,
            index: int = 0,
    ) -> TourSequencer:
        ordered = sort_by_closest_distance(destinations, user_distances)
        sequencer = cls(origin=user_distances.user_location, destinations=ordered)
        sequencer.index = index if 0 <= index <= len(ordered) else 0
        return sequencer

    @property
    def size(self) -> int:
        return len(self.destinations)

    # --- navigation ---

    def go_next(self) -> Optional[int]:
        if not self.destinations:
            return None
        self.index = 0 if self.index == self.size else self.index + 1
        return self.index

    def go_previous(self) -> Optional[int]:
        if not self.destinations:
            return None
        self.index = self.size if self.index == 0 else self.index - 1
        return self.index

    def reset(self) -> None:
        self.index = 0

    def reset_if_changed(self, previous_size: Optional[int]) -> bool:
        """
        Back to the origin when the destination list changed length
        (e.g. the user picked different interests).
        """
        if previous_size is not None and previous_size != self.size:
            self.reset()
            return True
        return False

    # --- current state ---

    def current_hop(self) -> Optional[Hop]:
        """
        (from, to) for the current position:
        at the origin we preview the drive to the first destination.
        """
        if not self.destinations:
            return None

        if self.index <= 1:
            return (self.origin, self.destinations[0])

        return (self.destinations[self.index - 2], self.destinations[self.index - 1])

    def focus(self) -> Location:
        """Where the map should center."""
        if self.index == 0 or not self.destinations:
            return self.origin
        return self.destinations[self.index - 1]

    def current_title(self) -> str:
        return self.focus().title

    def position_label(self) -> str:
        return f"{self.index} of {self.size}"

    def fetch_current_route(self, fetch: RouteFetcher = get_route_directions) -> Optional[RouteDirections]:
        hop = self.current_hop()
        if hop is None:
            return None

        from_location, to_location = hop
        route = fetch(from_location, to_location)
        if route is None:
            logger.warning(f"No route for hop {from_location.title} -> {to_location.title}")
        return route
