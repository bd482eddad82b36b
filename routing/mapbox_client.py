#Purpose: The Mapbox "adapter/client".
#Sole responsibility: talk to the Mapbox Directions / Matrix APIs via HTTP and return normalized outputs.
#Encapsulates Mapbox-specific details:
#coordinate formatting (lon,lat)
#URL construction (/directions-matrix, /directions)
#access token handling
#parsing response JSON into our internal shape
#It should not contain sequencing rules or presentation.


from dotenv import load_dotenv
import os
from typing import List, Tuple, Dict, Any, Optional
import requests

from destinations.models import TravelCost

# Read Mapbox settings from environment
# Example in .env:
# MAPBOX_ACCESS_TOKEN=pk.xxxxx
# MAPBOX_BASE_URL=https://api.mapbox.com
load_dotenv()
BASE_URL = os.getenv("MAPBOX_BASE_URL", "https://api.mapbox.com")

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class MapboxError(Exception):
    """Raised when Mapbox answers with a non-Ok code."""
    pass


class MapboxClient:
    """
    Mapbox Adapter / Client

    Sole responsibility:
    - Talk to Mapbox via HTTP
    - Convert internal (lat, lon) → Mapbox (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, access_token: Optional[str] = None, profile: str = "driving", timeout: int = 10):
        self.base_url = BASE_URL
        self.access_token = access_token or os.getenv("MAPBOX_ACCESS_TOKEN")
        self.timeout = timeout #seconds to wait for Mapbox before giving up
        self.profile = profile #driving, walking, cycling

        if not self.access_token:
            raise ValueError("Mapbox access token not set. Please set MAPBOX_ACCESS_TOKEN in the .env file.")

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to Mapbox format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        params = dict(params, access_token=self.access_token)
        response = requests.get(url, params=params, timeout=self.timeout)

        data = response.json()

        #validating Mapbox response
        if data.get("code") != "Ok":
            raise MapboxError(data.get("message") or data.get("code") or f"HTTP {response.status_code}")
        return data

    #----------------
    # matrix service
    #----------------
    def compute_table(self, sources: List[LatLon],
                      destinations: List[LatLon]
                      ) -> Dict[str, List[List[Optional[float]]]]:
        """
        calls the Mapbox /directions-matrix endpoint.

        returns :
        {
            "distances": [[meters, ...], ...],  # sources x destinations
            "durations": [[seconds, ...], ...],
        }
        unreachable pairs come back as None.
        """
        if not sources or not destinations:
            return {'durations': [], 'distances': []}

        # NxN matrix: do not duplicate the points in the URL.
        is_symmetric = (sources == destinations)

        if is_symmetric:
            coordinates = self.format_coordinates(sources)
            params = {"annotations": "distance,duration"}
        else:
            coordinates = self.format_coordinates(sources + destinations)
            params = {
                "sources": ";".join(str(i) for i in range(len(sources))),
                "destinations": ";".join(
                    str(i) for i in range(len(sources), len(sources) + len(destinations))
                ),
                "annotations": "distance,duration",
            }

        url = f"{self.base_url}/directions-matrix/v1/mapbox/{self.profile}/{coordinates}"
        data = self._get(url, params)

        return {
            "distances": data["distances"],
            "durations": data["durations"],
        }

    def compute_pair(self, origin: LatLon, destination: LatLon) -> TravelCost:
        """
        Single origin -> destination cost using the matrix endpoint
        with exactly two coordinates.
        """
        url = f"{self.base_url}/directions-matrix/v1/mapbox/{self.profile}/{self.format_coordinates([origin, destination])}"
        data = self._get(url, {"annotations": "distance,duration"})

        return TravelCost(
            distance=data["distances"][0][1],
            duration=data["durations"][0][1],
        )

    #----------------
    # directions service
    #----------------
    def compute_route(self, coordinates: List[LatLon]) -> Dict[str, Any]:
        """
        calls the Mapbox /directions endpoint with full turn-by-turn detail
        (geojson geometry, steps, banner and voice instructions) and returns
        the raw response body.
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

        url = f"{self.base_url}/directions/v5/mapbox/{self.profile}/{self.format_coordinates(coordinates)}"
        return self._get(
            url,
            {
                "geometries": "geojson",
                "steps": "true",
                "banner_instructions": "true",
                "voice_instructions": "true",
            },
        )
