#Marks routing as a package.
#Re-exports the public API (MapboxClient, builders, directions helpers)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .mapbox_client import MapboxClient, MapboxError
from .graph_builder import build_distance_graph, build_user_distances, calculate_distance
from .matrix_adapter import PrecomputedMatrixProvider
from .directions import RouteDirections, get_route_directions

__all__ = [
           "MapboxClient",
           "MapboxError",
             "build_distance_graph",
             "build_user_distances",
             "calculate_distance",
             "PrecomputedMatrixProvider",
             "RouteDirections",
             "get_route_directions",
             ]
