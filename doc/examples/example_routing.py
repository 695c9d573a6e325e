"""Example routing script for experimentation.

Demonstrates how to programmatically create a RoutingConfig and run the calculator.
Uses the build_config() function instead of manually constructing config objects.
"""

import logging
from pathlib import Path

from sea_routing.app import RoutingResult, SeaRouteCalculator, build_config


def run_example() -> RoutingResult:
    """Configure and run a routing example on the bundled sample network."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = build_config(
        # Journey parameters
        journey_name="Brest-Skagen",
        origin=(-5.5, 48.5),
        destination=(8.2, 57.6),
        units="nm",
        speed_knots=12.0,
        # Network parameters
        snap_max_distance_km=500.0,
    )

    calculator = SeaRouteCalculator(config=config.network)
    result = calculator.run(config.journey)

    if result.found:
        route = result.route
        print(f"Snapped origin:      {result.snapped_origin}")
        print(f"Snapped destination: {result.snapped_destination}")
        print(f"Length: {route.length:.1f} {route.units}")
        print(f"Duration: {route.duration_hours:.1f} h")
        print(route.data_frame)
    else:
        print("No route found")

    output = Path(__file__).resolve().parent / "example_routing_result.json"
    result.dump_json(output)
    print(f"Results saved to {output}")
    return result


if __name__ == "__main__":
    run_example()
