from __future__ import annotations

import math
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from destinations.models import TravelCost


class PrecomputedMatrixProvider:
    """
    Read-only lookup over the offline distance graph
    ({origin title: {destination title: TravelCost}}).

    Mirrors the time-matrix provider interface: calling it with a list of
    titles returns the N x N duration matrix, so nothing at request time
    has to talk to Mapbox for pairwise costs.
    """
    def __init__(self, graph: Dict[str, Dict[str, TravelCost]]):
        self._graph = graph

    def titles(self) -> List[str]:
        return list(self._graph.keys())

    def cost(self, origin: str, destination: str) -> Optional[TravelCost]:
        return self._graph.get(origin, {}).get(destination)

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._graph.values())

    def __call__(self, titles: List[str]) -> List[List[float]]:
        num_titles = len(titles)
        if num_titles == 0:
            return []

        matrix = [[math.inf for _ in range(num_titles)] for _ in range(num_titles)]

        for src_idx, src in enumerate(titles):
            for dest_idx, dest in enumerate(titles):
                if src_idx == dest_idx:
                    matrix[src_idx][dest_idx] = 0.0
                    continue
                cost = self.cost(src, dest)
                if cost is not None and cost.duration is not None:
                    matrix[src_idx][dest_idx] = float(cost.duration)

        return matrix

    def to_frame(self, field: str = "distance") -> pd.DataFrame:
        """
        Square origin x destination table of `field` ("distance" or "duration").
        Unknown pairs are NaN, the diagonal is 0.
        """
        if field not in ("distance", "duration"):
            raise ValueError("field must be 'distance' or 'duration'")

        titles = self.titles()
        frame = pd.DataFrame(np.nan, index=titles, columns=titles, dtype=float)

        for origin, edges in self._graph.items():
            frame.loc[origin, origin] = 0.0
            for destination, cost in edges.items():
                value = getattr(cost, field)
                if value is not None and destination in frame.columns:
                    frame.loc[origin, destination] = float(value)

        return frame
