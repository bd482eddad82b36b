#Purpose: Offline precomputation of travel costs.
#Builds the two flat tables the web app reads at request time:
#distance graph: every ordered pair of known locations -> {distance, duration}
#user distances: the fixed origin -> {distance, duration} for every location
#Typical responsibilities:
#one Mapbox call at a time, fixed delay between calls (rate limiting)
#failed lookups are logged and dropped, never retried
#progress reporting for long runs
#Output: plain dicts / UserDistances ready to be written by destinations.catalog.

import logging
import time
from typing import Callable, Dict, List, Optional

import requests

from destinations.models import Location, TravelCost, UserDistances
from routing.mapbox_client import MapboxError

logger = logging.getLogger(__name__)

DistanceGraph = Dict[str, Dict[str, TravelCost]]

# callback(completed, total)
ProgressCallback = Callable[[int, int], None]


def calculate_distance(client, origin: Location, destination: Location) -> TravelCost:
    """
    Cost of driving from origin to destination.
    Any API / network / parsing failure is logged and turned into an unknown cost.
    """
    try:
        return client.compute_pair(origin.coordinates, destination.coordinates)
    except (MapboxError, requests.exceptions.RequestException, ValueError, KeyError, IndexError) as e:
        logger.error(f"Error calculating distance {origin.title} -> {destination.title}: {e}")
        return TravelCost.unknown()


def build_distance_graph(
        client,
        locations: List[Location],
        *,
        delay_sec: float = 0.1,
        progress_every: int = 50,
        sleep: Callable[[float], None] = time.sleep,
        on_progress: Optional[ProgressCallback] = None,
) -> DistanceGraph:
    """
    All-pairs driving costs between the known locations.

    Args:
        client: MapboxClient (or anything with compute_pair)
        locations: catalog locations, titles must be unique
        delay_sec: pause after every request, successful or not
        progress_every: report progress every N requests (and on the last)
        sleep: injectable for tests
        on_progress: optional callback(completed, total)

    Returns:
        {origin title: {destination title: TravelCost}}, every title present
        as a key, failed pairs absent.
    """
    graph: DistanceGraph = {location.title: {} for location in locations}

    completed = 0
    total = len(locations) * (len(locations) - 1)

    for i, from_location in enumerate(locations):
        for j, to_location in enumerate(locations):
            if i == j:
                continue

            result = calculate_distance(client, from_location, to_location)

            if result.distance is not None:
                graph[from_location.title][to_location.title] = result

            completed += 1
            if completed % progress_every == 0 or completed == total:
                logger.info(f"Progress: {completed}/{total}")
                if on_progress:
                    on_progress(completed, total)

            # small delay to avoid rate limiting
            sleep(delay_sec)

    return graph


def build_user_distances(
        client,
        origin: Location,
        locations: List[Location],
        *,
        delay_sec: float = 0.15,
        sleep: Callable[[float], None] = time.sleep,
        on_result: Optional[Callable[[Location, TravelCost], None]] = None,
) -> UserDistances:
    """
    Driving cost from the fixed origin to each location, one request per location.
    """
    distances: Dict[str, TravelCost] = {}

    for location in locations:
        result = calculate_distance(client, origin, location)

        if result.distance is not None:
            distances[location.title] = result

        if on_result:
            on_result(location, result)

        sleep(delay_sec)

    return UserDistances(user_location=origin, distances=distances)

