"""Per-node bookkeeping shared by the relaxation pass and the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from droute.types.base import Distance, EdgeID, NodeID


@dataclass
class NodeLabel:
    """Best known distance to a node together with its shortest-path predecessors.

    Distance and predecessors are kept in one record so that they can only be
    updated together.

    Attributes:
        distance: Shortest known distance from the source; None while unreached.
        predecessors: Maps each predecessor on some shortest path to the
            minimum-weight parallel edges from that predecessor. Keys are unique,
            so a predecessor reached over several equal parallel edges is
            recorded once.
    """

    distance: Optional[Distance] = None
    predecessors: Dict[NodeID, List[EdgeID]] = field(default_factory=dict)

    @property
    def reached(self) -> bool:
        return self.distance is not None

    def improve(
        self, distance: Distance, pred_node: NodeID, edges: List[EdgeID]
    ) -> None:
        """Record a strictly shorter distance; older predecessors are dropped."""
        self.distance = distance
        self.predecessors = {pred_node: edges}

    def add_tie(self, pred_node: NodeID, edges: List[EdgeID]) -> None:
        """Record another predecessor reaching this node at the same distance."""
        self.predecessors[pred_node] = edges
