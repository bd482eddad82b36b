#Purpose: Route computation for downstream use.
#Returns the "actual route" information needed by:
#navigation guidance (turn-by-turn steps)
#map display (geojson line geometry)
#distance / duration summaries for the directions panel
#Uses the Mapbox /directions endpoint (not the matrix).

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from destinations.models import Location
from routing.mapbox_client import MapboxClient, MapboxError

logger = logging.getLogger(__name__)

LEFT_MODIFIERS = ("left", "slight left", "sharp left")
RIGHT_MODIFIERS = ("right", "slight right", "sharp right")

# maneuver type -> icon name, turns are resolved by modifier first
MANEUVER_ICONS = {
    "depart": "depart",
    "arrive": "arrive",
    "merge": "merge",
    "roundabout": "roundabout",
    "rotary": "roundabout",
    "continue": "straight",
}


@dataclass(frozen=True)
class RouteDirections:
    """
    One point-to-point driving route, ready for the map and directions panel.
    """
    geometry: Dict[str, Any]  # geojson LineString to draw
    steps: List[Dict[str, Any]]  # Mapbox step objects, in order
    distance: float  # meters
    duration: float  # seconds
    from_title: str
    to_title: str


def get_route_directions(
        origin: Location,
        destination: Location,
        client: Optional[MapboxClient] = None,
) -> Optional[RouteDirections]:
    """
    Driving directions from origin to destination.

    Returns None when no token is configured, Mapbox finds no route,
    or the request fails (the failure is logged).
    """
    if client is None:
        try:
            client = MapboxClient()
        except ValueError as e:
            logger.error(f"Mapbox API key is missing: {e}")
            return None

    try:
        data = client.compute_route([origin.coordinates, destination.coordinates])
    except (MapboxError, requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"Error getting directions {origin.title} -> {destination.title}: {e}")
        return None

    routes = data.get("routes") or []
    if not routes:
        return None

    route = routes[0]
    leg = route["legs"][0]  # the journey from A to B

    return RouteDirections(
        geometry=route["geometry"],
        steps=leg["steps"],
        distance=route["distance"],
        duration=route["duration"],
        from_title=origin.title,
        to_title=destination.title,
    )


def format_step_instruction(step: Dict[str, Any]) -> str:
    """'Turn left onto Main Street' -> 'Turn left onto Main Street (2.50 km)'"""
    distance_km = step["distance"] / 1000
    return f"{step['maneuver']['instruction']} ({distance_km:.2f} km)"


def get_total_route_info(steps: Optional[List[Dict[str, Any]]]) -> Dict[str, float]:
    """
    Sum of step distances (meters) and durations (seconds).
    """
    if not steps:
        return {"distance": 0, "duration": 0}

    return {
        "distance": sum(step["distance"] for step in steps),
        "duration": sum(step["duration"] for step in steps),
    }


def format_distance(distance_in_meters: Optional[float]) -> str:
    """
    5420 -> '5.42 km', 850 -> '850 m'
    """
    if not distance_in_meters:
        return "0 km"

    kilometers = distance_in_meters / 1000
    if kilometers < 1:
        return f"{int(distance_in_meters + 0.5)} m"

    return f"{kilometers:.2f} km"


def format_duration(duration_in_seconds: Optional[float]) -> str:
    """
    1500 -> '25 min', 5400 -> '1h 30min', 3600 -> '1h'
    """
    if not duration_in_seconds:
        return "0 min"

    # halves round up (25.5 min -> 26), unlike round()
    total_minutes = int(duration_in_seconds / 60 + 0.5)

    if total_minutes < 60:
        return f"{total_minutes} min"

    hours, leftover_minutes = divmod(total_minutes, 60)
    if leftover_minutes == 0:
        return f"{hours}h"

    return f"{hours}h {leftover_minutes}min"


def get_maneuver_icon(maneuver: Dict[str, Any]) -> str:
    maneuver_type = maneuver.get("type")
    modifier = maneuver.get("modifier")

    if maneuver_type == "turn":
        if modifier in LEFT_MODIFIERS:
            return "turn-left"
        if modifier in RIGHT_MODIFIERS:
            return "turn-right"

    return MANEUVER_ICONS.get(maneuver_type, "straight")


def visible_steps(steps: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Steps shown in the directions panel; the closing 'arrive' step is dropped."""
    return [step for step in steps if step["maneuver"]["type"] != "arrive"]
