#Expose the sequencing pieces:
#Closest-first ordering over the precomputed user distances
#The tour sequencer (one hop at a time)
#Tunable policy

from .ordering import sort_by_closest_distance, get_closest_destinations, get_distance_to_destination
from .sequencer import TourSequencer
from .policy import TourPolicy, default_tour_policy

__all__ = [
    "sort_by_closest_distance",
    "get_closest_destinations",
    "get_distance_to_destination",
    "TourSequencer",
    "TourPolicy",
    "default_tour_policy",
]
