"""User-facing/app layer: route calculation, configuration and CLI."""

from .routing import RoutingResult, SeaRouteCalculator
from .config import JourneyConfig, NetworkConfig, RoutingConfig
from .cli import build_config

__all__ = [
    "RoutingResult",
    "SeaRouteCalculator",
    "JourneyConfig",
    "NetworkConfig",
    "RoutingConfig",
    "build_config",
]
