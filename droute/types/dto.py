"""Immutable result containers returned by the route engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from droute.types.base import Distance, NodeID, NodePath


@dataclass(frozen=True)
class RouteResult:
    """Shortest-route outcome for one delivery location.

    A reachable location carries its shortest distance and every node
    sequence achieving it. An unreachable location has ``distance is None``
    and no sequences.

    Attributes:
        destination: The delivery location this result describes.
        distance: Shortest distance from the warehouse, or None if unreachable.
        sequences: Routes in the order backtracking discovered them. Each route
            starts at the warehouse and ends at ``destination``.
    """

    destination: NodeID
    distance: Optional[Distance] = None
    sequences: Tuple[NodePath, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.distance is None and self.sequences:
            raise ValueError(
                f"Unreachable location {self.destination} cannot carry routes."
            )
        if self.distance is not None and not self.sequences:
            raise ValueError(
                f"Reachable location {self.destination} needs at least one route."
            )

    @classmethod
    def unreachable(cls, destination: NodeID) -> "RouteResult":
        """Return the unreachable variant for ``destination``."""
        return cls(destination=destination)

    @property
    def reachable(self) -> bool:
        """True when at least one route from the warehouse exists."""
        return self.distance is not None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "destination": self.destination,
            "reachable": self.reachable,
            "distance": self.distance,
            "routes": [list(seq) for seq in self.sequences],
        }
