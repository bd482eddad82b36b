"""
Purpose: Flat-file storage for the destination catalog and the precomputed tables.
What it does:
- Resolves the data directory (TOURISM_DATA_DIR or destinations/data/)
- Loads locations.json (hand-maintained)
- Loads / saves distance-graph.json and user-distances.json (generated offline)

Generated files are optional at runtime: when missing we log a warning and
hand back an empty structure so the app still serves the catalog.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from .models import CCIS_ORIGIN, Location, TravelCost, UserDistances

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

LOCATIONS_FILE = "locations.json"
DISTANCE_GRAPH_FILE = "distance-graph.json"
USER_DISTANCES_FILE = "user-distances.json"

DistanceGraph = Dict[str, Dict[str, TravelCost]]


def data_dir() -> Path:
    configured = os.getenv("TOURISM_DATA_DIR")
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parent / "data"


def _resolve(path: Optional[PathLike], filename: str) -> Path:
    return Path(path) if path is not None else data_dir() / filename


def load_locations(path: Optional[PathLike] = None) -> List[Location]:
    file_path = _resolve(path, LOCATIONS_FILE)
    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return [Location.from_dict(item) for item in raw]


def load_distance_graph(path: Optional[PathLike] = None) -> DistanceGraph:
    file_path = _resolve(path, DISTANCE_GRAPH_FILE)
    if not file_path.exists():
        logger.warning(f"{file_path} not found, run `python -m scripts.generate_graph` to build it")
        return {}

    with open(file_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    return {
        origin: {destination: TravelCost.from_dict(cost) for destination, cost in edges.items()}
        for origin, edges in raw.items()
    }


def save_distance_graph(graph: DistanceGraph, path: Optional[PathLike] = None) -> Path:
    file_path = _resolve(path, DISTANCE_GRAPH_FILE)
    payload = {
        origin: {destination: cost.to_dict() for destination, cost in edges.items()}
        for origin, edges in graph.items()
    }
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return file_path


def load_user_distances(
        path: Optional[PathLike] = None,
        default_origin: Location = CCIS_ORIGIN,
) -> UserDistances:
    file_path = _resolve(path, USER_DISTANCES_FILE)
    if not file_path.exists():
        logger.warning(f"{file_path} not found, run `python -m scripts.generate_user_distances` to build it")
        return UserDistances(user_location=default_origin)

    with open(file_path, "r", encoding="utf-8") as f:
        return UserDistances.from_dict(json.load(f))


def save_user_distances(user_distances: UserDistances, path: Optional[PathLike] = None) -> Path:
    file_path = _resolve(path, USER_DISTANCES_FILE)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(user_distances.to_dict(), f, indent=2, ensure_ascii=False)
    return file_path
