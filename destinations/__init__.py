"""
Destinations domain package.

Public API:
- Domain models: Location, TravelCost, UserDistances, Interest
- Catalog loaders: load_locations, load_distance_graph, load_user_distances
- Browsing rules: filter_places, sort_by_open_status
"""
from .models import Interest, Location, TravelCost, UserDistances, CCIS_ORIGIN
from .catalog import load_locations, load_distance_graph, load_user_distances
from .filters import filter_places, sort_by_open_status

__all__ = ["Interest",
           "Location",
             "TravelCost",
               "UserDistances",
               "CCIS_ORIGIN",
               "load_locations",
               "load_distance_graph",
               "load_user_distances",
               "filter_places",
               "sort_by_open_status",
               ]
