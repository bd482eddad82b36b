from datetime import datetime

import pytest
from django.test import override_settings
from rest_framework.test import APIClient

from routing.directions import RouteDirections
from itinerary import tour_service, views


@pytest.fixture
def api(data_dir, monkeypatch):
    monkeypatch.setattr(views, "local_now", lambda: datetime(2026, 10, 19, 7, 30))
    with override_settings(TOURISM_DATA_DIR=str(data_dir)):
        yield APIClient()


@pytest.fixture
def routes(monkeypatch, route_body):
    """Record every hop requested from Mapbox and answer with the canned route."""
    requested = []
    leg = route_body["routes"][0]

    def fake_route(origin, destination):
        requested.append((origin.title, destination.title))
        return RouteDirections(
            geometry=leg["geometry"],
            steps=leg["legs"][0]["steps"],
            distance=leg["distance"],
            duration=leg["duration"],
            from_title=origin.title,
            to_title=destination.title,
        )

    monkeypatch.setattr(tour_service, "get_route_directions", fake_route)
    return requested


def test_interests_list(api):
    response = api.get("/api/v1/interests/")

    assert response.status_code == 200
    assert response.json()[0] == {"id": "churches", "label": "Churches"}
    assert len(response.json()) == 8


def test_onboarding_builds_query(api):
    response = api.post("/api/v1/onboarding/", {"interests": ["beaches", "churches"]}, format="json")

    assert response.status_code == 200
    assert response.json() == {
        "query": "beaches=true&churches=true",
        "next": "/api/v1/tour/?beaches=true&churches=true",
    }


@pytest.mark.parametrize("payload", [{"interests": []}, {"interests": ["casinos"]}, {}])
def test_onboarding_rejects_bad_selection(api, payload):
    response = api.post("/api/v1/onboarding/", payload, format="json")
    assert response.status_code == 400


def test_destinations_filtered_open_first(api):
    response = api.get("/api/v1/destinations/", {"churches": "true", "cuisine": "true"})

    body = response.json()
    assert response.status_code == 200
    assert body["count"] == 3
    assert [(item["title"], item["isOpen"]) for item in body["results"]] == [
        ("Paoay Church", True),
        ("Sarrat Church", True),
        ("Herencia Cafe", False),
    ]
    assert body["results"][0]["timeRange"] == "6:00 AM - 6:00 PM"


def test_closest_destinations(api):
    response = api.get("/api/v1/destinations/closest/", {"limit": "3"})

    results = response.json()["results"]
    assert [item["title"] for item in results] == ["Herencia Cafe", "Paoay Church", "Museo Ilocos Norte"]
    assert results[0]["travel"] == {
        "distance": 3400.0,
        "duration": 410.0,
        "distanceText": "3.40 km",
        "durationText": "7 min",
    }


def test_closest_without_distance_has_null_travel(api):
    results = api.get("/api/v1/destinations/closest/", {"churches": "true"}).json()["results"]
    assert [item["title"] for item in results] == ["Paoay Church", "Sarrat Church"]
    assert results[1]["travel"] is None


@pytest.mark.parametrize("limit", ["many", "-1"])
def test_closest_rejects_bad_limit(api, limit):
    assert api.get("/api/v1/destinations/closest/", {"limit": limit}).status_code == 400


def test_tour_starts_at_origin(api, routes):
    body = api.get("/api/v1/tour/").json()

    assert body["index"] == 0
    assert body["total"] == 5
    assert body["position"] == "0 of 5"
    assert body["current"] == "Your Location (CCIS)"
    assert body["focus"] == {"latitude": 18.059779, "longitude": 120.545021, "zoom": 12}
    assert body["route"]["destination"] == "Herencia Cafe"
    assert routes == [("Your Location (CCIS)", "Herencia Cafe")]


def test_tour_route_payload(api, routes):
    route = api.get("/api/v1/tour/").json()["route"]

    assert route["distanceText"] == "3.50 km"
    assert route["durationText"] == "7 min"
    assert route["stepCount"] == 2
    assert route["stepTotals"] == {"distance": 3500.0, "duration": 420.0}
    assert [step["icon"] for step in route["steps"]] == ["depart", "turn-left"]
    assert [step["isLast"] for step in route["steps"]] == [False, True]
    assert route["steps"][1]["text"] == "Turn left onto Marcos Avenue (2.30 km)"


def test_tour_next_walks_and_wraps(api, routes):
    api.get("/api/v1/tour/")

    body = api.post("/api/v1/tour/next/").json()
    assert body["current"] == "Herencia Cafe"

    body = api.post("/api/v1/tour/next/").json()
    assert body["index"] == 2
    assert routes[-1] == ("Herencia Cafe", "Paoay Church")

    for _ in range(4):
        body = api.post("/api/v1/tour/next/").json()
    assert body["index"] == 0
    assert body["current"] == "Your Location (CCIS)"


def test_tour_previous_wraps_to_last(api, routes):
    body = api.post("/api/v1/tour/previous/").json()

    assert body["index"] == 5
    assert body["current"] == "Sarrat Church"
    assert routes[-1] == ("Saud Beach", "Sarrat Church")


def test_tour_resets_when_interests_change(api, routes):
    api.post("/api/v1/tour/next/")
    api.post("/api/v1/tour/next/")

    body = api.get("/api/v1/tour/", {"churches": "true"}).json()

    assert body["total"] == 2
    assert body["index"] == 0


def test_tour_without_route_still_answers(api, monkeypatch):
    monkeypatch.setattr(tour_service, "get_route_directions", lambda origin, destination: None)

    body = api.post("/api/v1/tour/next/").json()

    assert body["index"] == 1
    assert body["route"] is None


def test_directions_between_places(api, routes):
    response = api.get("/api/v1/directions/", {"from": "Paoay Church", "to": "Herencia Cafe"})

    body = response.json()
    assert response.status_code == 200
    assert body["origin"] == "Paoay Church"
    assert body["destination"] == "Herencia Cafe"
    assert body["precomputed"]["distanceText"] == "150 m"


def test_directions_from_origin_uses_user_distances(api, routes):
    body = api.get("/api/v1/directions/", {"from": "Your Location (CCIS)", "to": "Museo Ilocos Norte"}).json()
    assert body["precomputed"]["distance"] == 19000.0


def test_directions_unknown_pair_has_no_precomputed(api, routes):
    body = api.get("/api/v1/directions/", {"from": "Saud Beach", "to": "Paoay Church"}).json()
    assert body["precomputed"] is None


def test_directions_requires_both_ends(api):
    assert api.get("/api/v1/directions/", {"from": "Paoay Church"}).status_code == 400


def test_directions_unknown_place(api, routes):
    response = api.get("/api/v1/directions/", {"from": "Paoay Church", "to": "Atlantis"})

    assert response.status_code == 404
    assert "Atlantis" in response.json()["error"]
    assert routes == []


def test_directions_no_route(api, monkeypatch):
    monkeypatch.setattr(tour_service, "get_route_directions", lambda origin, destination: None)

    response = api.get("/api/v1/directions/", {"from": "Paoay Church", "to": "Herencia Cafe"})
    assert response.status_code == 502
