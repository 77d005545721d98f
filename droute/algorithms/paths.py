"""Expansion of a predecessor map into concrete shortest routes.

Every route is rebuilt backwards from the destination by following recorded
predecessors until the source is reached. Parallel equal-weight edges between
two locations stay grouped in a single hop, so they never multiply routes.
"""

from __future__ import annotations

from typing import Iterator, List, Mapping, Sequence, Tuple

from droute.types.base import EdgeID, NodeID, NodePath, PathTuple

PredMap = Mapping[NodeID, Mapping[NodeID, Sequence[EdgeID]]]

# A hop is (node, ids of the edges leaving it toward the next node on the route)
_Hop = Tuple[NodeID, Tuple[EdgeID, ...]]


def resolve_to_paths(
    src_node: NodeID,
    dst_node: NodeID,
    pred: PredMap,
) -> Iterator[PathTuple]:
    """
    Enumerate all source->destination paths from a predecessor map.

    The walk is a depth-first backtrace over an explicit stack of
    ``[hop, next_predecessor_index]`` frames, so route length is not bounded
    by the interpreter's recursion limit. Paths come out in discovery order,
    which follows the insertion order of each predecessor map.

    The predecessor map must be acyclic (see
    ``droute.algorithms.spf.check_predecessor_order``); no cycle guard is kept.

    Args:
        src_node: Source node ID.
        dst_node: Destination node ID.
        pred: Predecessor map of reached nodes, ``{node: {pred: [edge_ids]}}``.

    Yields:
        A tuple of (nodeID, (edgeIDs,)) pairs from src_node to dst_node.
    """
    if dst_node not in pred:
        return

    frames: List[List[object]] = [[(dst_node, ()), 0]]

    while frames:
        frame = frames[-1]
        hop, idx = frame
        node = hop[0]  # type: ignore[index]

        if node == src_node:
            yield tuple(f[0] for f in reversed(frames))  # type: ignore[misc]
            frames.pop()
            continue

        preds = list(pred[node])
        if idx < len(preds):  # type: ignore[operator]
            frame[1] = idx + 1  # type: ignore[operator]
            prev = preds[idx]  # type: ignore[index]
            next_hop: _Hop = (prev, tuple(pred[node][prev]))
            frames.append([next_hop, 0])
        else:
            frames.pop()


def resolve_to_node_paths(
    src_node: NodeID,
    dst_node: NodeID,
    pred: PredMap,
) -> Iterator[NodePath]:
    """Enumerate all source->destination paths as plain node sequences."""
    for path in resolve_to_paths(src_node, dst_node, pred):
        yield tuple(node for node, _ in path)
