"""Shortest-route engine.

Runs the tie-aware SPF pass from a warehouse and expands each location's
predecessor set into every route that achieves the shortest distance.

Notes:
    The number of tied routes can grow exponentially on dense graphs where
    many paths share the same length. This is a known scaling limit of
    enumerating all of them; embedders can bound the work with ``deadline``.
"""

from __future__ import annotations

import warnings
from time import perf_counter
from typing import Dict, List, Optional

from droute.algorithms.paths import resolve_to_node_paths
from droute.algorithms.spf import check_predecessor_order, spf
from droute.exceptions import ComputationAborted, UnknownSourceWarning
from droute.graph.digraph import WeightedDigraph
from droute.logging import get_logger
from droute.types.base import NodeID, NodePath
from droute.types.dto import RouteResult

logger = get_logger(__name__)


class ShortestRouteEngine:
    """Compute shortest routes from a warehouse to every delivery location.

    The engine keeps configuration only; each `compute` call allocates its own
    working state, so one engine can serve any number of graphs.

    Args:
        multipath: Report every tied shortest route. If False, a single route
            is reported per location.
        deadline: Optional time budget in seconds for one `compute` call. When
            exceeded, `ComputationAborted` is raised and no result is returned.
    """

    def __init__(self, multipath: bool = True, deadline: Optional[float] = None):
        if deadline is not None and deadline <= 0:
            raise ValueError(f"deadline must be positive, got {deadline}")
        self.multipath = multipath
        self.deadline = deadline

    def compute(
        self, graph: WeightedDigraph, source: NodeID
    ) -> Dict[NodeID, RouteResult]:
        """Return a `RouteResult` for every node of ``graph`` except ``source``.

        Results are ordered like ``graph.nodes``. If ``source`` is not in the
        graph an `UnknownSourceWarning` is issued and every node is reported
        unreachable.

        Raises:
            InvalidWeightError: If the graph holds a non-positive weight.
            ComputationAborted: If ``deadline`` is exceeded.
        """
        started = perf_counter()
        if source not in graph:
            message = f"Warehouse {source} is not in the graph; no location is reachable."
            logger.warning(message)
            warnings.warn(message, UnknownSourceWarning, stacklevel=2)

        labels = spf(graph, source, multipath=self.multipath)
        check_predecessor_order(labels)
        pred = {node: lbl.predecessors for node, lbl in labels.items() if lbl.reached}
        logger.debug(
            f"SPF from {source} settled {len(pred)} of {len(labels)} nodes "
            f"in {perf_counter() - started:.4f}s"
        )

        results: Dict[NodeID, RouteResult] = {}
        total_routes = 0
        for node in graph.nodes:
            if node == source:
                continue
            label = labels[node]
            if not label.reached:
                results[node] = RouteResult.unreachable(node)
                continue

            sequences: List[NodePath] = []
            for sequence in resolve_to_node_paths(source, node, pred):
                sequences.append(sequence)
                self._check_deadline(started)
            total_routes += len(sequences)
            results[node] = RouteResult(node, label.distance, tuple(sequences))

        logger.debug(
            f"Enumerated {total_routes} routes to {len(results)} locations "
            f"in {perf_counter() - started:.4f}s"
        )
        return results

    def _check_deadline(self, started: float) -> None:
        if self.deadline is None:
            return
        elapsed = perf_counter() - started
        if elapsed > self.deadline:
            raise ComputationAborted(
                f"Route enumeration exceeded {self.deadline}s (elapsed {elapsed:.3f}s)"
            )


def compute_routes(
    graph: WeightedDigraph,
    source: NodeID,
    multipath: bool = True,
    deadline: Optional[float] = None,
) -> Dict[NodeID, RouteResult]:
    """Shortcut for ``ShortestRouteEngine(...).compute(graph, source)``."""
    return ShortestRouteEngine(multipath=multipath, deadline=deadline).compute(
        graph, source
    )
