"""
Shortest sea routes over a maritime traffic network.

Two-layer architecture:
- core: Distances, network graph, shortest paths, snapping, routes
- app: Route calculator, configuration and command-line interface

Examples
--------
>>> from sea_routing.app import SeaRouteCalculator
>>> calculator = SeaRouteCalculator()
>>> route = calculator.calculate_route((-5.0, 49.0), (8.0, 57.5), units="nm")
"""

__version__ = "2025dev"
