"""droute: every shortest delivery route from a central warehouse.

droute models a city as a directed graph of delivery locations joined by
roads with positive integer distances. From a single warehouse it computes the
shortest distance to every location and enumerates all routes tied for that
distance.

Primary API:
    WeightedDigraph - Road graph (networkx MultiDiGraph with validated weights)
    ShortestRouteEngine, compute_routes() - Route computation
    RouteResult - Per-location result
    Scenario - YAML scenario loader

Example:
    from droute import WeightedDigraph, compute_routes

    graph = WeightedDigraph()
    graph.add_edge(0, 1, 10)
    graph.add_edge(0, 2, 15)
    graph.add_edge(1, 2, 5)

    routes = compute_routes(graph, 0)
    routes[2].sequences  # ((0, 2), (0, 1, 2))
"""

from __future__ import annotations

from droute import cli, logging
from droute._version import __version__
from droute.engine import ShortestRouteEngine, compute_routes
from droute.exceptions import (
    ComputationAborted,
    InputValidationError,
    InvalidWeightError,
    RouteError,
    RouteInvariantError,
    UnknownSourceWarning,
)
from droute.graph.digraph import Edge, WeightedDigraph
from droute.report import format_result, render, render_text, results_to_dict
from droute.scenario import Scenario
from droute.types.base import OutputFormat
from droute.types.dto import RouteResult

__all__ = [
    # Version
    "__version__",
    # Model
    "WeightedDigraph",
    "Edge",
    "Scenario",
    # Computation
    "ShortestRouteEngine",
    "compute_routes",
    "RouteResult",
    # Rendering
    "OutputFormat",
    "format_result",
    "render",
    "render_text",
    "results_to_dict",
    # Errors
    "RouteError",
    "InvalidWeightError",
    "InputValidationError",
    "RouteInvariantError",
    "ComputationAborted",
    "UnknownSourceWarning",
    # Utilities
    "cli",
    "logging",
]
