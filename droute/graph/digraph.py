"""Weighted multi-directed graph of delivery locations and roads.

`WeightedDigraph` extends `networkx.MultiDiGraph` with integer edge keys,
fail-fast validation of road distances, and helpers that expose outgoing
roads as lightweight `Edge` tuples. Unlike a plain MultiDiGraph it rejects
any edge whose ``weight`` is not a strictly positive integer.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

import networkx as nx

from droute.exceptions import InvalidWeightError
from droute.types.base import Distance, EdgeID, NodeID

#: Edge attribute holding the road distance.
WEIGHT_ATTR = "weight"


class Edge(NamedTuple):
    """A single directed road."""

    source: NodeID
    destination: NodeID
    key: EdgeID
    weight: Distance


def validate_weight(weight: Any) -> Distance:
    """Return ``weight`` if it is a strictly positive integer.

    Raises:
        InvalidWeightError: If ``weight`` is not an int (bools excluded) or is <= 0.
    """
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(
            f"Road distance must be an integer, got {type(weight).__name__} {weight!r}."
        )
    if weight <= 0:
        raise InvalidWeightError(f"Road distance must be positive, got {weight}.")
    return weight


class WeightedDigraph(nx.MultiDiGraph):
    """A multi-directed graph with positive integer edge weights.

    This class enforces:
      - Every edge carries a ``weight`` that is a strictly positive integer.
      - Each edge gets a unique, monotonically increasing integer key.
      - Adding an edge implicitly adds both endpoints.
      - Adding an existing node is a no-op.
      - Parallel edges and self-loops are kept as given.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        # Removed edges never give their id back.
        self._next_edge_id: int = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge ID.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def copy(self, as_view: bool = False, pickle: bool = True) -> WeightedDigraph:
        """Create a copy of this graph.

        By default, use pickle-based deep copying. If ``pickle=False``,
        call the parent class's copy, which supports views.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    #
    # Construction
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a location if it is not already present.

        Attributes given for an existing node are merged, as in NetworkX.
        """
        super().add_node(node_for_adding, **attr)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        weight: Distance,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed road from ``u_for_edge`` to ``v_for_edge``.

        Both endpoints are added if absent. An existing road between the same
        pair is left untouched; the new road becomes a parallel edge.

        Args:
            u_for_edge: Source location.
            v_for_edge: Destination location.
            weight: Road distance; must be a positive integer.
            key: Optional explicit edge key. Must not already be in use.
            **attr: Extra edge attributes.

        Returns:
            The key of the new edge.

        Raises:
            InvalidWeightError: If ``weight`` is not a positive integer.
            ValueError: If an explicit ``key`` is already in use.
        """
        validate_weight(weight)
        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if self.has_edge_key(key):
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1
        super().add_edge(u_for_edge, v_for_edge, key=key, weight=weight, **attr)
        return key

    def add_edges_from(self, ebunch_to_add: Iterable[Tuple], **attr: Any) -> List[EdgeID]:  # type: ignore[override]
        """Add several roads at once.

        Accepted tuple shapes:
          - ``(u, v, weight)`` with an integer weight,
          - ``(u, v, attr_dict)`` where ``attr_dict`` holds ``weight``,
          - ``(u, v, key, attr_dict)`` as produced by NetworkX internals.

        Returns:
            Keys of the added edges, in input order.
        """
        keys: List[EdgeID] = []
        for e in ebunch_to_add:
            key: Optional[EdgeID] = None
            if len(e) == 3:
                u, v, third = e
                if isinstance(third, dict):
                    data: Dict[str, Any] = dict(third)
                else:
                    data = {WEIGHT_ATTR: third}
            elif len(e) == 4:
                u, v, key, data = e
                data = dict(data)
            else:
                raise ValueError(f"Edge tuple {e} must be a 3-tuple or 4-tuple.")
            data = {**attr, **data}
            if WEIGHT_ATTR not in data:
                raise InvalidWeightError(f"Edge {u}->{v} has no '{WEIGHT_ATTR}'.")
            weight = data.pop(WEIGHT_ATTR)
            keys.append(self.add_edge(u, v, weight, key=key, **data))
        return keys

    def has_edge_key(self, key: EdgeID) -> bool:
        """Return True if any edge in the graph uses ``key``."""
        return any(
            key in keydict for nbrs in self._succ.values() for keydict in nbrs.values()
        )

    #
    # Read access
    #
    def outgoing_edges(self, node: NodeID) -> List[Edge]:
        """List roads leaving ``node``.

        Roads are grouped by neighbour (in the order each neighbour was first
        connected) and, within a neighbour, ordered by insertion. An unknown
        node has no roads.
        """
        if node not in self._succ:
            return []
        return [
            Edge(node, nbr, key, e_attr[WEIGHT_ATTR])
            for nbr, keydict in self._succ[node].items()
            for key, e_attr in keydict.items()
        ]

    def get_edges(self) -> List[Edge]:
        """Return every road in the graph."""
        return [edge for node in self._succ for edge in self.outgoing_edges(node)]

    @classmethod
    def from_roads(
        cls,
        roads: Iterable[Tuple[NodeID, NodeID, Distance]],
        locations: Optional[Iterable[NodeID]] = None,
    ) -> WeightedDigraph:
        """Build a graph from ``(source, destination, distance)`` triples.

        Args:
            roads: Road triples, added in order.
            locations: Extra locations to add after the roads, so that
                locations without any road still appear in the graph.
        """
        graph = cls()
        for src, dst, distance in roads:
            graph.add_edge(src, dst, distance)
        for node in locations or ():
            graph.add_node(node)
        return graph

    def to_dict(self) -> Dict[str, Any]:
        """Return a node-link style dictionary suitable for JSON serialization."""
        return {
            "graph": dict(self.graph),
            "nodes": [{"id": node, "attr": dict(data)} for node, data in self.nodes(data=True)],
            "links": [
                {
                    "source": edge.source,
                    "target": edge.destination,
                    "key": edge.key,
                    "weight": edge.weight,
                }
                for edge in self.get_edges()
            ],
        }
