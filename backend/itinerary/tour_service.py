from datetime import datetime
from pathlib import Path
import logging
from typing import Any, Dict, List, Mapping, Optional

from django.conf import settings

from destinations.catalog import (
    DISTANCE_GRAPH_FILE,
    LOCATIONS_FILE,
    USER_DISTANCES_FILE,
    load_distance_graph,
    load_locations,
    load_user_distances,
)
from destinations.filters import filter_places, sort_by_open_status
from destinations.models import Location, TravelCost, UserDistances
from routing.directions import RouteDirections, get_route_directions
from routing.matrix_adapter import PrecomputedMatrixProvider
from sequencing.ordering import get_closest_destinations, get_distance_to_destination
from sequencing.policy import TourPolicy, default_tour_policy
from sequencing.sequencer import TourSequencer

logger = logging.getLogger(__name__)

# session key holding {"index": int, "size": int}
TOUR_SESSION_KEY = "tour"


class TourService:
    """
    Glue between the flat-file catalog, the sequencing rules and Mapbox,
    used by the API views. Files are re-read per request; they are small and
    regenerated wholesale by the offline scripts.
    """
    def __init__(self, data_path=None, policy: Optional[TourPolicy] = None, route_fetcher=None):
        self.data_path = Path(data_path or settings.TOURISM_DATA_DIR)
        self.policy = policy or default_tour_policy()
        self.route_fetcher = route_fetcher or get_route_directions

    # --- catalog ---

    def places(self) -> List[Location]:
        return load_locations(self.data_path / LOCATIONS_FILE)

    def user_distances(self) -> UserDistances:
        return load_user_distances(self.data_path / USER_DISTANCES_FILE, default_origin=self.policy.origin)

    def matrix(self) -> PrecomputedMatrixProvider:
        return PrecomputedMatrixProvider(load_distance_graph(self.data_path / DISTANCE_GRAPH_FILE))

    def browse(self, params: Mapping[str, str], now: Optional[datetime] = None) -> List[Location]:
        """Interest-filtered places, open ones first."""
        return sort_by_open_status(filter_places(self.places(), params), now)

    def closest(self, params: Mapping[str, str], limit: Optional[int] = None):
        """
        [(place, TravelCost | None), ...] closest first for the current filter.
        """
        user_distances = self.user_distances()
        limit = self.policy.closest_limit if limit is None else limit
        nearest = get_closest_destinations(self.browse(params), user_distances, limit)
        return [(place, get_distance_to_destination(place.title, user_distances)) for place in nearest]

    def find_place(self, title: str) -> Optional[Location]:
        """Catalog lookup by title; the tour origin is addressable too."""
        origin = self.user_distances().user_location
        if title == origin.title:
            return origin
        return next((place for place in self.places() if place.title == title), None)

    def precomputed_cost(self, origin: Location, destination: Location) -> Optional[TravelCost]:
        user_distances = self.user_distances()
        if origin.title == user_distances.user_location.title:
            return get_distance_to_destination(destination.title, user_distances)
        return self.matrix().cost(origin.title, destination.title)

    # --- tour ---

    def sequencer(self, params: Mapping[str, str], state: Optional[Dict[str, Any]] = None) -> TourSequencer:
        """
        Rebuild the sequencer for this request from the session state.
        A changed destination count (different interests) resets to the origin.
        """
        state = state or {}
        sequencer = TourSequencer.from_user_distances(
            self.browse(params),
            self.user_distances(),
            index=int(state.get("index", 0)),
        )
        if sequencer.reset_if_changed(state.get("size")):
            logger.info(f"Destination count changed to {sequencer.size}, tour reset to origin")
        return sequencer

    @staticmethod
    def dump_state(sequencer: TourSequencer) -> Dict[str, int]:
        return {"index": sequencer.index, "size": sequencer.size}

    def route(self, origin: Location, destination: Location) -> Optional[RouteDirections]:
        return self.route_fetcher(origin, destination)

    def current_route(self, sequencer: TourSequencer) -> Optional[RouteDirections]:
        return sequencer.fetch_current_route(self.route_fetcher)
