"""
Builds user-distances.json: driving distance/duration from the fixed user
origin (CCIS) to every catalog location, one Mapbox call per location.

Usage (from the repo root):
    python -m scripts.generate_user_distances [MAPBOX_TOKEN]
"""

import argparse
import logging
import os
import sys

import pandas as pd
from dotenv import load_dotenv

from destinations.catalog import load_locations, save_user_distances
from destinations.models import Location, TravelCost
from routing.graph_builder import build_user_distances
from routing.mapbox_client import MapboxClient
from sequencing.policy import default_tour_policy


def print_result(location: Location, result: TravelCost) -> None:
    if result.distance is not None:
        print(f"✓ {location.title}: {result.distance / 1000:.2f} km ({result.duration / 60:.0f} min)")
    else:
        print(f"✗ {location.title}: Failed to calculate")


def generate_user_distances(token: str) -> None:
    policy = default_tour_policy()
    origin = policy.origin
    locations = load_locations()

    print(f"Calculating distances from user location to {len(locations)} destinations...")
    print(f"User location: {origin.latitude}, {origin.longitude}\n")

    client = MapboxClient(access_token=token, profile=policy.profile)

    print("Calculating distances...\n")
    user_distances = build_user_distances(
        client,
        origin,
        locations,
        delay_sec=policy.user_distance_request_delay_sec,
        on_result=print_result,
    )

    print("\n✓ Distance calculations complete!")
    print(f"✓ Successfully calculated {len(user_distances.distances)} out of {len(locations)} distances")

    output_path = save_user_distances(user_distances)
    print(f"✓ Saved to: {output_path}")

    if not user_distances.distances:
        return

    # quick preview of the closest destinations
    df = pd.DataFrame(
        [
            {"title": title, "distance": cost.distance, "duration": cost.duration}
            for title, cost in user_distances.distances.items()
        ]
    )
    closest = df.sort_values("distance", kind="stable").head(policy.closest_limit)

    print(f"\nClosest {policy.closest_limit} destinations:")
    for rank, row in enumerate(closest.itertuples(index=False), 1):
        print(f"  {rank}. {row.title}: {row.distance / 1000:.2f} km ({row.duration / 60:.0f} min)")


def main(argv=None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    parser = argparse.ArgumentParser(description="Precompute driving distances from the user origin.")
    parser.add_argument("token", nargs="?", help="Mapbox access token (defaults to MAPBOX_ACCESS_TOKEN)")
    args = parser.parse_args(argv)

    token = args.token or os.getenv("MAPBOX_ACCESS_TOKEN")
    if not token:
        print("Error: Mapbox token not provided", file=sys.stderr)
        print("Usage: python -m scripts.generate_user_distances YOUR_MAPBOX_TOKEN", file=sys.stderr)
        print("Or set MAPBOX_ACCESS_TOKEN in the .env file", file=sys.stderr)
        return 1

    try:
        generate_user_distances(token)
    except (OSError, ValueError, KeyError) as e:
        print(f"\nError generating user distances: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
