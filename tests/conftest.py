import json
import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tourism_backend.settings")
django.setup()

from django.test.utils import setup_test_environment

# allows the "testserver" host used by APIClient
setup_test_environment()

from destinations.models import CCIS_ORIGIN, Location, TravelCost, UserDistances


@pytest.fixture
def places():
    return [
        Location("Paoay Church", 18.061389, 120.521944, "churches", 4.7, "6:00 AM - 6:00 PM", "Baroque church"),
        Location("Saud Beach", 18.616944, 120.918889, "beaches", 4.8, "Open 24 hours", "White sand"),
        Location("Museo Ilocos Norte", 18.195556, 120.591944, "museums", 4.5, "9:00 AM - 5:00 PM", "Museum"),
        Location("Herencia Cafe", 18.060278, 120.522778, "cuisine", 4.4, "8:00 AM - 9:00 PM", "Pizza"),
        Location("Sarrat Church", 18.158333, 120.648611, "churches", 4.5, "6:00 AM - 6:00 PM", "Big church"),
    ]


@pytest.fixture
def user_distances():
    # Sarrat Church intentionally missing
    return UserDistances(
        user_location=CCIS_ORIGIN,
        distances={
            "Paoay Church": TravelCost(3500.0, 420.0),
            "Saud Beach": TravelCost(98000.0, 6300.0),
            "Museo Ilocos Norte": TravelCost(19000.0, 1500.0),
            "Herencia Cafe": TravelCost(3400.0, 410.0),
        },
    )


@pytest.fixture
def data_dir(tmp_path, places, user_distances):
    """A data directory with locations.json, user-distances.json and a tiny distance graph."""
    with open(tmp_path / "locations.json", "w", encoding="utf-8") as f:
        json.dump([place.to_dict() for place in places], f)

    with open(tmp_path / "user-distances.json", "w", encoding="utf-8") as f:
        json.dump(user_distances.to_dict(), f)

    graph = {place.title: {} for place in places}
    graph["Paoay Church"]["Herencia Cafe"] = {"distance": 150.0, "duration": 40.0}
    with open(tmp_path / "distance-graph.json", "w", encoding="utf-8") as f:
        json.dump(graph, f)

    return tmp_path


def make_step(maneuver_type, instruction, distance, duration, modifier=None, name=""):
    maneuver = {"type": maneuver_type, "instruction": instruction}
    if modifier:
        maneuver["modifier"] = modifier
    return {"maneuver": maneuver, "distance": distance, "duration": duration, "name": name}


@pytest.fixture
def route_body():
    """Trimmed Mapbox /directions response."""
    return {
        "code": "Ok",
        "routes": [
            {
                "distance": 3500.0,
                "duration": 420.0,
                "geometry": {"type": "LineString", "coordinates": [[120.545021, 18.059779], [120.521944, 18.061389]]},
                "legs": [
                    {
                        "steps": [
                            make_step("depart", "Head west", 1200.0, 150.0, name="Batac-Paoay Road"),
                            make_step("turn", "Turn left onto Marcos Avenue", 2300.0, 270.0, modifier="left", name="Marcos Avenue"),
                            make_step("arrive", "You have arrived", 0.0, 0.0),
                        ]
                    }
                ],
            }
        ],
    }
