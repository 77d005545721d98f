"""Graph primitives.

This package provides `WeightedDigraph`, the multi-directed graph of delivery
locations and roads consumed by the route engine.
"""

from droute.graph.digraph import Edge, WeightedDigraph, validate_weight

__all__ = ["Edge", "WeightedDigraph", "validate_weight"]
