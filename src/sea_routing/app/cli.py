"""Command-line interface for SeaRouteCalculator.

Provides a Click-based command and a programmatic build_config() function for
creating RoutingConfig objects from individual parameters.
"""

from pathlib import Path
from typing import Any, Optional
import json
import logging
import sys

import click

from .config import JourneyConfig, NetworkConfig, RoutingConfig
from .routing import RoutingResult, SeaRouteCalculator
from ..core.config import DEFAULT_UNITS, SNAP_MAX_DISTANCE_KM


def build_config(
    # Journey parameters
    origin: Optional[tuple[float, float]] = None,
    destination: Optional[tuple[float, float]] = None,
    journey_name: str = "Journey",
    units: str = DEFAULT_UNITS,
    speed_knots: Optional[float] = None,
    # Network parameters
    network_path: Optional[str] = None,
    snap_max_distance_km: float = SNAP_MAX_DISTANCE_KM,
    # Config file override
    config_dict: Optional[dict[str, Any]] = None,
) -> RoutingConfig:
    """Build RoutingConfig from individual parameters.

    Parameters are merged with defaults from config classes. Entries of
    config_dict (with "journey" and "network" sections) take precedence over
    individual parameters.

    Parameters
    ----------
    origin : tuple[float, float], optional
        Origin as (lon, lat)
    destination : tuple[float, float], optional
        Destination as (lon, lat)
    journey_name : str
        Human-readable name for the journey
    units : str
        Length units: nm, miles, kilometers or km
    speed_knots : float, optional
        Speed for the duration estimate
    network_path : str, optional
        GeoJSON network file, bundled sample network if None
    snap_max_distance_km : float
        Maximal distance between query points and network lines
    config_dict : dict, optional
        Configuration dictionary that overrides individual parameters

    Returns
    -------
    RoutingConfig
        Configured routing configuration object
    """
    journey_kwargs = {"name": journey_name, "units": units, "speed_knots": speed_knots}
    if origin is not None:
        journey_kwargs["origin"] = tuple(origin)
    if destination is not None:
        journey_kwargs["destination"] = tuple(destination)

    network_kwargs = {
        "path": network_path,
        "snap_max_distance_km": snap_max_distance_km,
    }

    if config_dict:
        journey_kwargs.update(config_dict.get("journey", {}))
        network_kwargs.update(config_dict.get("network", {}))

    return RoutingConfig(
        network=NetworkConfig(**network_kwargs),
        journey=JourneyConfig(**journey_kwargs),
    )


@click.command()
# Journey parameters
@click.option(
    "--journey-name",
    type=str,
    default="Journey",
    help="Human-readable name for this journey (e.g., 'Brest-Skagen').",
)
@click.option(
    "--origin",
    type=(float, float),
    required=True,
    help="Origin longitude and latitude (e.g., --origin -5.0 49.0).",
)
@click.option(
    "--destination",
    type=(float, float),
    required=True,
    help="Destination longitude and latitude (e.g., --destination 8.0 57.5).",
)
@click.option(
    "--units",
    type=click.Choice(["nm", "miles", "kilometers", "km"], case_sensitive=False),
    default=DEFAULT_UNITS,
    help="Units of the route length.",
)
@click.option(
    "--speed-knots",
    type=float,
    default=None,
    help="Ship speed in knots for a duration estimate (optional).",
)
# Network parameters
@click.option(
    "--network-path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="GeoJSON FeatureCollection of network lines (default: bundled sample).",
)
@click.option(
    "--snap-max-distance-km",
    type=float,
    default=SNAP_MAX_DISTANCE_KM,
    help="Maximal distance of query points from the network in km.",
)
# Output parameters
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the full routing result as JSON to this file.",
)
def main(
    journey_name,
    origin,
    destination,
    units,
    speed_knots,
    network_path,
    snap_max_distance_km,
    output,
) -> RoutingResult:
    """Calculate the shortest sea route and print it as GeoJSON."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = build_config(
        origin=origin,
        destination=destination,
        journey_name=journey_name,
        units=units.lower(),
        speed_knots=speed_knots,
        network_path=network_path,
        snap_max_distance_km=snap_max_distance_km,
    )

    calculator = SeaRouteCalculator(config=config.network)
    result = calculator.run(config.journey)

    if output:
        result.dump_json(Path(output))
        click.echo(f"Results saved to {output}", err=True)

    if not result.found:
        click.echo("No route found", err=True)
        sys.exit(1)

    click.echo(json.dumps(result.route.to_geojson()))
    return result


if __name__ == "__main__":
    main()
