"""
Builds distance-graph.json: driving distance/duration between every ordered
pair of catalog locations, one Mapbox matrix call per pair.

Usage (from the repo root):
    python -m scripts.generate_graph [MAPBOX_TOKEN] [--csv distance_matrix.csv]

The token falls back to MAPBOX_ACCESS_TOKEN from the environment / .env file.
"""

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from destinations.catalog import load_locations, save_distance_graph
from routing.graph_builder import build_distance_graph
from routing.mapbox_client import MapboxClient
from routing.matrix_adapter import PrecomputedMatrixProvider
from sequencing.policy import default_tour_policy


def print_progress(completed: int, total: int) -> None:
    percent = completed / total * 100
    sys.stdout.write(f"\rProgress: {completed}/{total} ({percent:.1f}%)   ")
    sys.stdout.flush()


def generate_graph(token: str, csv_path: Optional[str] = None) -> None:
    policy = default_tour_policy()
    locations = load_locations()
    print(f"Processing {len(locations)} locations...")

    client = MapboxClient(access_token=token, profile=policy.profile)

    print("Calculating distances between all location pairs...")
    print("This may take a few minutes...\n")

    graph = build_distance_graph(
        client,
        locations,
        delay_sec=policy.graph_request_delay_sec,
        progress_every=policy.progress_every,
        on_progress=print_progress,
    )

    print("\n\n✓ Distance calculations complete!")

    output_path = save_distance_graph(graph)
    provider = PrecomputedMatrixProvider(graph)
    total = len(locations) * (len(locations) - 1)

    print(f"✓ Saved to: {output_path}")
    print(f"✓ Graph contains {len(locations)} nodes with {provider.edge_count()} of {total} edges")

    if csv_path:
        provider.to_frame("distance").to_csv(csv_path)
        print(f"✓ Distance matrix exported to: {csv_path}")

    if not locations:
        return

    # a few sample distances for verification
    print("\nSample distances:")
    first_location = locations[0].title
    for destination, cost in list(graph[first_location].items())[:3]:
        print(f"  {first_location} → {destination}: {cost.distance / 1000:.2f} km ({cost.duration / 60:.0f} min)")


def main(argv=None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    parser = argparse.ArgumentParser(description="Precompute the all-pairs driving distance graph.")
    parser.add_argument("token", nargs="?", help="Mapbox access token (defaults to MAPBOX_ACCESS_TOKEN)")
    parser.add_argument("--csv", dest="csv_path", help="Also export the distance matrix as CSV")
    args = parser.parse_args(argv)

    token = args.token or os.getenv("MAPBOX_ACCESS_TOKEN")
    if not token:
        print("Error: Mapbox token not provided", file=sys.stderr)
        print("Usage: python -m scripts.generate_graph YOUR_MAPBOX_TOKEN", file=sys.stderr)
        print("Or set MAPBOX_ACCESS_TOKEN in the .env file", file=sys.stderr)
        return 1

    try:
        generate_graph(token, args.csv_path)
    except (OSError, ValueError, KeyError) as e:
        print(f"\nError generating graph: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
