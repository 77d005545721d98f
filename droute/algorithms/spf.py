"""Shortest-path-first (SPF) relaxation pass.

Dijkstra-like SPF that records every equal-distance predecessor of a node so
that all tied shortest routes can be enumerated afterwards. The frontier is a
binary heap with lazy deletion: stale entries are skipped when popped.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from droute.algorithms.base import NodeLabel
from droute.exceptions import InvalidWeightError, RouteInvariantError
from droute.graph.digraph import WEIGHT_ATTR, WeightedDigraph
from droute.types.base import Distance, EdgeID, NodeID


def _min_weight_edges(
    edges_map: Dict[EdgeID, Dict], multipath: bool
) -> Tuple[Optional[Distance], List[EdgeID]]:
    """Return the minimal weight among parallel edges and the edges carrying it."""
    min_weight: Optional[Distance] = None
    selected_edges: List[EdgeID] = []
    for e_id, e_attr in edges_map.items():
        weight = e_attr[WEIGHT_ATTR]
        if weight <= 0:
            raise InvalidWeightError(
                f"Edge {e_id} has non-positive distance {weight}; "
                "it was added without validation."
            )
        if min_weight is None or weight < min_weight:
            min_weight = weight
            selected_edges = [e_id]
        elif multipath and weight == min_weight:
            selected_edges.append(e_id)
    return min_weight, selected_edges


def spf(
    graph: WeightedDigraph,
    src_node: NodeID,
    multipath: bool = True,
) -> Dict[NodeID, NodeLabel]:
    """Compute shortest distances and predecessors from ``src_node``.

    Every node of ``graph`` gets a label; unreachable nodes keep
    ``distance=None``. A source that is not in the graph is treated as an
    isolated node at distance 0, so every other node stays unreached.

    Args:
        graph: The road graph. It must not be mutated during the call.
        src_node: The warehouse node.
        multipath: Whether to record multiple equal-distance predecessors.
            If False, the first predecessor found at the final distance wins.

    Returns:
        Maps each node (plus ``src_node``) to its final `NodeLabel`.

    Raises:
        InvalidWeightError: If a non-positive edge weight is met.
    """
    outgoing_adjacencies = graph._succ  # type: ignore[attr-defined]

    labels: Dict[NodeID, NodeLabel] = {node: NodeLabel() for node in graph.nodes}
    labels[src_node] = NodeLabel(distance=0)
    min_pq: List[Tuple[Distance, NodeID]] = [(0, src_node)]

    while min_pq:
        current_dist, node_id = heappop(min_pq)
        if current_dist > labels[node_id].distance:  # type: ignore[operator]
            continue

        for neighbor_id, edges_map in outgoing_adjacencies.get(node_id, {}).items():
            min_weight, selected_edges = _min_weight_edges(edges_map, multipath)
            if min_weight is None:
                continue

            new_dist = current_dist + min_weight
            label = labels[neighbor_id]
            if not label.reached or new_dist < label.distance:  # type: ignore[operator]
                label.improve(new_dist, node_id, selected_edges)
                heappush(min_pq, (new_dist, neighbor_id))
            elif multipath and new_dist == label.distance:
                label.add_tie(node_id, selected_edges)

    return labels


def check_predecessor_order(labels: Dict[NodeID, NodeLabel]) -> None:
    """Verify every predecessor lies strictly closer to the source than its successor.

    With positive weights this always holds, and it guarantees that walking
    predecessors terminates at the source.

    Raises:
        RouteInvariantError: If a predecessor is unreached or not strictly closer.
    """
    for node, label in labels.items():
        for pred_node in label.predecessors:
            pred_label = labels.get(pred_node)
            if (
                pred_label is None
                or not pred_label.reached
                or not label.reached
                or pred_label.distance >= label.distance  # type: ignore[operator]
            ):
                raise RouteInvariantError(
                    f"Predecessor {pred_node} of node {node} is not strictly closer "
                    "to the source."
                )
