# pylint: disable=protected-access,invalid-name
import networkx as nx
import pytest

from droute.algorithms.base import NodeLabel
from droute.algorithms.spf import check_predecessor_order, spf
from droute.exceptions import InvalidWeightError, RouteInvariantError


def _distances(labels):
    return {node: label.distance for node, label in labels.items()}


def _preds(labels):
    return {node: label.predecessors for node, label in labels.items()}


class TestSPF:
    def test_spf_city_a(self, city_a):
        labels = spf(city_a, 0)
        assert _distances(labels) == {0: 0, 1: 10, 2: 15, 3: 27}
        assert _preds(labels) == {
            0: {},
            1: {0: [0]},
            2: {0: [1], 1: [2]},
            3: {2: [4]},
        }

    def test_spf_tie_keeps_discovery_order(self, city_a):
        labels = spf(city_a, 0)
        assert list(labels[2].predecessors) == [0, 1]

    def test_spf_shorter_path_resets_predecessors(self, city_a):
        # 3 is first reached through 1 at 30, then through 2 at 27.
        labels = spf(city_a, 0)
        assert 1 not in labels[3].predecessors

    def test_spf_unreached_nodes(self, city_a_isolated):
        labels = spf(city_a_isolated, 0)
        assert labels[4].distance is None
        assert not labels[4].reached
        assert labels[4].predecessors == {}

    def test_spf_direction_matters(self, one_way_back):
        labels = spf(one_way_back, 0)
        assert _distances(labels) == {0: 0, 1: None}

    def test_spf_parallel_equal_edges(self, parallel_equal):
        labels = spf(parallel_equal, 0)
        assert _distances(labels) == {0: 0, 1: 5}
        assert _preds(labels) == {0: {}, 1: {0: [0, 1]}}

    def test_spf_parallel_unequal_edges(self, parallel_unequal):
        labels = spf(parallel_unequal, 0)
        assert labels[1].distance == 5
        assert labels[1].predecessors == {0: [1]}

    def test_spf_self_loops_never_predecessors(self, self_loops):
        labels = spf(self_loops, 0)
        assert _distances(labels) == {0: 0, 1: 3, 2: 7}
        assert labels[0].predecessors == {}
        assert labels[1].predecessors == {0: [1]}
        assert labels[2].predecessors == {1: [3]}

    def test_spf_square_ties(self, square_ties):
        labels = spf(square_ties, 0)
        assert labels[3].distance == 2
        assert labels[3].predecessors == {1: [2], 2: [3]}

    def test_spf_single_path(self, square_ties, parallel_equal):
        labels = spf(square_ties, 0, multipath=False)
        assert labels[3].predecessors == {1: [2]}

        labels = spf(parallel_equal, 0, multipath=False)
        assert labels[1].predecessors == {0: [0]}

    def test_spf_cyclic_ties(self, cyclic_ties):
        labels = spf(cyclic_ties, 0)
        assert _distances(labels) == {0: 0, 1: 2, 2: 4}
        assert labels[2].predecessors == {0: [4], 1: [2]}
        # 1 -> 0 never improves the warehouse
        assert labels[0].predecessors == {}

    def test_spf_unknown_source(self, city_a):
        labels = spf(city_a, 42)
        assert labels[42].distance == 0
        assert all(not labels[node].reached for node in city_a.nodes)

    def test_spf_matches_networkx(self, city_a, cyclic_ties, diamond_chain):
        for graph in (city_a, cyclic_ties, diamond_chain):
            expected = nx.single_source_dijkstra_path_length(graph, 0, weight="weight")
            labels = spf(graph, 0)
            got = {n: lbl.distance for n, lbl in labels.items() if lbl.reached}
            assert got == expected

    def test_spf_rejects_unvalidated_weight(self, city_a):
        # Bypass WeightedDigraph validation through the base class
        nx.MultiDiGraph.add_edge(city_a, 3, 4, key=99, weight=0)
        with pytest.raises(InvalidWeightError):
            spf(city_a, 0)

    def test_spf_returns_fresh_labels(self, city_a):
        first = spf(city_a, 0)
        second = spf(city_a, 0)
        assert first is not second
        assert first[2] is not second[2]
        assert _preds(first) == _preds(second)


class TestPredecessorOrder:
    def test_valid_labels_pass(self, diamond_chain):
        check_predecessor_order(spf(diamond_chain, 0))

    def test_equal_distance_predecessor_rejected(self):
        labels = {
            0: NodeLabel(0),
            1: NodeLabel(3, {0: [0], 2: [1]}),
            2: NodeLabel(3, {0: [2]}),
        }
        with pytest.raises(RouteInvariantError):
            check_predecessor_order(labels)

    def test_cycle_rejected(self):
        labels = {
            0: NodeLabel(0),
            1: NodeLabel(2, {2: [0]}),
            2: NodeLabel(2, {1: [1]}),
        }
        with pytest.raises(RouteInvariantError):
            check_predecessor_order(labels)

    def test_unreached_predecessor_rejected(self):
        labels = {0: NodeLabel(0), 1: NodeLabel(None, {0: [0]})}
        with pytest.raises(RouteInvariantError):
            check_predecessor_order(labels)


class TestNodeLabel:
    def test_improve_resets_predecessors(self):
        label = NodeLabel()
        label.improve(10, 1, [0])
        label.add_tie(2, [1])
        label.improve(8, 3, [2])
        assert label.distance == 8
        assert label.predecessors == {3: [2]}

    def test_add_tie_appends(self):
        label = NodeLabel(5, {1: [0]})
        label.add_tie(2, [1, 2])
        assert label.predecessors == {1: [0], 2: [1, 2]}
