"""
Purpose: Core data models for the destinations domain.
What it does:
Defines the structure of a tourist Location, the interest categories a user
can pick during onboarding, and the travel cost records produced by the
offline builders.

Rule: No HTTP calls, no sorting logic. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

LatLon = Tuple[float, float]


class Interest(str, Enum):
    """
    The interest categories offered on the onboarding screen.
    The value doubles as the location `type` tag and the query parameter name.
    """
    CHURCHES = "churches"
    BEACHES = "beaches"
    MUSEUMS = "museums"
    CUISINE = "cuisine"
    NATURE = "nature"
    LANDMARKS = "landmarks"
    HISTORY = "history"
    SHOPPING = "shopping"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Location:
    """
    A named point of interest (or the fixed user origin) with coordinates.
    """
    title: str
    latitude: float
    longitude: float

    # Optional catalog attributes, the user origin carries none of them.
    type: Optional[str] = None
    rating: Optional[float] = None
    time_range: Optional[str] = None
    description: str = ""

    @property
    def coordinates(self) -> LatLon:
        return (self.latitude, self.longitude)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Location:
        return cls(
            title=data["title"],
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            type=data.get("type"),
            rating=data.get("rating"),
            time_range=data.get("timeRange"),
            description=data.get("description", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }
        if self.type is not None:
            data["type"] = self.type
            data["rating"] = self.rating
            data["timeRange"] = self.time_range
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class TravelCost:
    """
    Driving cost between two points as reported by the routing API.
    Both fields are None when the lookup failed.
    """
    distance: Optional[float]  # in meters
    duration: Optional[float]  # in seconds

    @property
    def is_known(self) -> bool:
        return self.distance is not None

    @classmethod
    def unknown(cls) -> TravelCost:
        return cls(distance=None, duration=None)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TravelCost:
        return cls(distance=data.get("distance"), duration=data.get("duration"))

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {"distance": self.distance, "duration": self.duration}


@dataclass
class UserDistances:
    """
    Precomputed costs from one fixed origin to every reachable destination.
    Destinations whose lookup failed are simply absent from `distances`.
    """
    user_location: Location
    distances: Dict[str, TravelCost] = field(default_factory=dict)

    def get(self, title: str) -> Optional[TravelCost]:
        return self.distances.get(title)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UserDistances:
        return cls(
            user_location=Location.from_dict(data["userLocation"]),
            distances={
                title: TravelCost.from_dict(cost)
                for title, cost in data.get("distances", {}).items()
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "userLocation": self.user_location.to_dict(),
            "distances": {title: cost.to_dict() for title, cost in self.distances.items()},
        }


# Mock user position used while live geolocation is not wired in (CCIS campus).
CCIS_ORIGIN = Location(
    title="Your Location (CCIS)",
    latitude=18.059779,
    longitude=120.545021,
)
