"""Shared typing constructs for droute.

Type aliases for nodes, edges and distances plus the immutable
``RouteResult`` container returned by the engine. No runtime logic lives here.
"""

from droute.types.base import (
    Distance,
    EdgeID,
    NodeID,
    NodePath,
    OutputFormat,
    PathTuple,
)
from droute.types.dto import RouteResult

__all__ = [
    # Enums
    "OutputFormat",
    # Type aliases
    "NodeID",
    "EdgeID",
    "Distance",
    "NodePath",
    "PathTuple",
    # DTOs
    "RouteResult",
]
