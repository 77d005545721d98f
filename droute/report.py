"""Rendering of route results as text lines or JSON-ready dictionaries."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

from droute.config import ROUTE_CONFIG, RouteConfig
from droute.types.base import NodeID, NodePath, OutputFormat
from droute.types.dto import RouteResult


def format_route(sequence: NodePath, config: Optional[RouteConfig] = None) -> str:
    """Return ``"0 -> 1 -> 2"`` for the route ``(0, 1, 2)``."""
    config = config or ROUTE_CONFIG
    return config.route_separator.join(str(node) for node in sequence)


def format_result(result: RouteResult, config: Optional[RouteConfig] = None) -> str:
    """Return the one-line report for a single delivery location.

    Examples:
        "Delivery Location 2 - Shortest Route: 0 -> 2 or 0 -> 1 -> 2, Distance: 15"
    """
    config = config or ROUTE_CONFIG
    location = result.destination
    if not result.reachable:
        return (
            f"Delivery Location {location} - Shortest Route: No route exists, "
            f"Distance: Infinity (Location {location} is unreachable from the "
            "central warehouse)"
        )
    routes = config.alternative_separator.join(
        format_route(seq, config) for seq in result.sequences
    )
    return (
        f"Delivery Location {location} - Shortest Route: {routes}, "
        f"Distance: {result.distance}"
    )


def render_text(
    results: Mapping[NodeID, RouteResult], config: Optional[RouteConfig] = None
) -> str:
    """Render all results, one line per location ordered by location id."""
    lines: List[str] = [
        format_result(results[location], config) for location in sorted(results)
    ]
    return "\n".join(lines)


def results_to_dict(
    results: Mapping[NodeID, RouteResult], warehouse: NodeID
) -> Dict[str, Any]:
    """Return a JSON-serializable report of all results."""
    reachable = sum(1 for r in results.values() if r.reachable)
    return {
        "warehouse": warehouse,
        "summary": {
            "locations": len(results),
            "reachable": reachable,
            "unreachable": len(results) - reachable,
            "routes": sum(len(r.sequences) for r in results.values()),
        },
        "locations": [results[location].to_dict() for location in sorted(results)],
    }


def render(
    results: Mapping[NodeID, RouteResult],
    warehouse: NodeID,
    output_format: OutputFormat = OutputFormat.TEXT,
) -> str:
    """Render results in the requested format."""
    if output_format == OutputFormat.JSON:
        return json.dumps(results_to_dict(results, warehouse), indent=2)
    return render_text(results)
