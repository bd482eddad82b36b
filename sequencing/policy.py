"""
Purpose: Central configuration for tour sequencing and the offline builders.
What it does:

Stores all tunable thresholds/caps:

GRAPH_REQUEST_DELAY_SEC = 0.1
USER_DISTANCE_REQUEST_DELAY_SEC = 0.15
CLOSEST_LIMIT = 5

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from destinations.models import CCIS_ORIGIN, Location


@dataclass(frozen=True)
class TourPolicy:
    """
    Central configuration for the tour walk and the routing API batch jobs.
    """

    # --- Fixed origin ---
    # Every tour starts (position 0) and user-distances are measured from here.
    origin: Location = field(default_factory=lambda: CCIS_ORIGIN)

    # --- Routing API pacing ---
    # Pause between sequential Mapbox calls to stay under the rate limit.
    graph_request_delay_sec: float = 0.1
    user_distance_request_delay_sec: float = 0.15

    # Report matrix-builder progress every N calls (and on the last one).
    progress_every: int = 50

    # --- Browsing ---
    # "Show me the 5 nearest tourist spots"
    closest_limit: int = 5

    # Map zoom level used when centering on the current stop.
    focus_zoom: int = 12

    # Mapbox routing profile (driving, walking, cycling, driving-traffic).
    profile: str = "driving"

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.graph_request_delay_sec < 0 or self.user_distance_request_delay_sec < 0:
            raise ValueError("request delays must be >= 0")

        if self.progress_every <= 0:
            raise ValueError("progress_every must be > 0")

        if self.closest_limit <= 0:
            raise ValueError("closest_limit must be > 0")

        if self.profile not in ("driving", "driving-traffic", "walking", "cycling"):
            raise ValueError(f"unsupported routing profile: {self.profile}")


def default_tour_policy() -> TourPolicy:
    """
    Convenience factory for the default policy.
    """
    p = TourPolicy()
    p.validate()
    return p
