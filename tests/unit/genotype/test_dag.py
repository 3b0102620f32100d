"""
Unit tests for the DAG class.

Tests cover node creation, connection validation (self-loops, duplicates,
cycles, invalid indices), removal, ancestry and depth computation.
"""

import itertools
import logging
import random

import pytest

from dagneat.genotype.dag import DAG, DAGNode


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def chain_dag():
    """Nodes 0, 1, 2 with edges 0 -> 1 -> 2."""
    dag = DAG()
    for _ in range(3):
        dag.create_node()
    assert dag.create_connection(0, 1)
    assert dag.create_connection(1, 2)
    return dag


@pytest.fixture
def diamond_dag():
    """Nodes 0..3 with edges 0 -> {1, 2} -> 3."""
    dag = DAG()
    for _ in range(4):
        dag.create_node()
    dag.create_connection(0, 1)
    dag.create_connection(0, 2)
    dag.create_connection(1, 3)
    dag.create_connection(2, 3)
    return dag


# ============================================================================
# Test: Nodes
# ============================================================================

class TestDAGNode:

    def test_initial_state(self):
        node = DAGNode()
        assert node.incoming == 0
        assert node.depth == 0
        assert node.out == []
        assert node.out_connection_count == 0


class TestCreateNode:

    def test_returns_sequential_indices(self):
        dag = DAG()
        assert [dag.create_node() for _ in range(4)] == [0, 1, 2, 3]
        assert dag.node_count == 4

    def test_is_valid(self):
        dag = DAG()
        dag.create_node()
        assert dag.is_valid(0)
        assert not dag.is_valid(1)
        assert not dag.is_valid(-1)


# ============================================================================
# Test: create_connection
# ============================================================================

class TestCreateConnection:

    def test_valid_connection(self):
        dag = DAG()
        dag.create_node()
        dag.create_node()

        assert dag.create_connection(0, 1) is True
        assert dag.nodes[0].out == [1]
        assert dag.nodes[1].incoming == 1

    def test_self_loop_rejected(self):
        dag = DAG()
        dag.create_node()
        assert dag.create_connection(0, 0) is False
        assert dag.nodes[0].out == []
        assert dag.nodes[0].incoming == 0

    def test_duplicate_rejected(self, chain_dag):
        assert chain_dag.create_connection(0, 1) is False
        assert chain_dag.nodes[0].out == [1]
        assert chain_dag.nodes[1].incoming == 1

    def test_reverse_edge_rejected(self, chain_dag):
        assert chain_dag.create_connection(1, 0) is False

    def test_cycle_rejected(self, chain_dag):
        """Edge 2 -> 0 would close the cycle 0 -> 1 -> 2 -> 0."""
        assert chain_dag.create_connection(2, 0) is False
        assert chain_dag.nodes[2].out == []
        assert chain_dag.nodes[0].incoming == 0

    def test_shortcut_accepted(self, chain_dag):
        assert chain_dag.create_connection(0, 2) is True
        assert chain_dag.nodes[2].incoming == 2
        assert chain_dag.get_out_connection_count(0) == 2

    @pytest.mark.parametrize("from_node, to_node", [(0, 5), (5, 0), (-1, 1), (1, -1)])
    def test_invalid_index_rejected(self, chain_dag, from_node, to_node):
        assert chain_dag.create_connection(from_node, to_node) is False


# ============================================================================
# Test: remove_connection
# ============================================================================

class TestRemoveConnection:

    def test_remove_existing(self, chain_dag):
        chain_dag.remove_connection(0, 1)
        assert chain_dag.nodes[0].out == []
        assert chain_dag.nodes[1].incoming == 0

    def test_removed_edge_can_be_reversed(self, chain_dag):
        chain_dag.remove_connection(0, 1)
        assert chain_dag.create_connection(1, 0) is True

    def test_swap_remove_keeps_other_edges(self, diamond_dag):
        diamond_dag.remove_connection(0, 1)
        assert diamond_dag.nodes[0].out == [2]
        assert diamond_dag.nodes[1].incoming == 0
        assert diamond_dag.nodes[2].incoming == 1

    def test_missing_edge_warns(self, chain_dag, caplog):
        with caplog.at_level(logging.WARNING, logger="dagneat.genotype.dag"):
            chain_dag.remove_connection(0, 2)

        assert "not found" in caplog.text
        assert chain_dag.nodes[0].out == [1]
        assert chain_dag.nodes[2].incoming == 1

    def test_invalid_index_warns(self, chain_dag, caplog):
        with caplog.at_level(logging.WARNING, logger="dagneat.genotype.dag"):
            chain_dag.remove_connection(0, 10)
        assert "not found" in caplog.text


# ============================================================================
# Test: ancestry
# ============================================================================

class TestAncestry:

    def test_is_parent(self, chain_dag):
        assert chain_dag.is_parent(0, 1)
        assert not chain_dag.is_parent(0, 2)
        assert not chain_dag.is_parent(1, 0)

    def test_direct_parent_is_ancestor(self, chain_dag):
        assert chain_dag.is_ancestor(0, 1)

    def test_transitive_ancestor(self, chain_dag):
        assert chain_dag.is_ancestor(0, 2)

    def test_not_ancestor_backwards(self, chain_dag):
        assert not chain_dag.is_ancestor(2, 0)

    def test_node_is_not_its_own_ancestor(self, chain_dag):
        for i in range(3):
            assert not chain_dag.is_ancestor(i, i)

    @pytest.mark.parametrize("node1, node2", [(-1, 0), (0, -1), (3, 0), (0, 3), (-3, -1)])
    def test_invalid_index_is_not_related(self, chain_dag, node1, node2):
        chain_dag.create_connection(0, 2)
        assert not chain_dag.is_parent(node1, node2)
        assert not chain_dag.is_ancestor(node1, node2)

    def test_long_chain_does_not_recurse(self):
        """A chain much longer than the recursion limit."""
        dag = DAG()
        n = 5000
        for _ in range(n):
            dag.create_node()
        for i in range(n - 1):
            assert dag.create_connection(i, i + 1)

        assert dag.is_ancestor(0, n - 1)
        assert dag.create_connection(n - 1, 0) is False

    def test_random_insertions_stay_acyclic(self):
        rnd = random.Random(7)
        dag = DAG()
        for _ in range(12):
            dag.create_node()

        for _ in range(300):
            dag.create_connection(rnd.randrange(12), rnd.randrange(12))
            for x in range(12):
                assert not dag.is_ancestor(x, x)


# ============================================================================
# Test: compute_depth
# ============================================================================

class TestComputeDepth:

    def test_chain_depths(self, chain_dag):
        chain_dag.compute_depth()
        assert [n.depth for n in chain_dag.nodes] == [0, 1, 2]

    def test_longest_path_wins(self, chain_dag):
        """0 -> 2 is a shortcut; the depth of 2 follows the longest path."""
        chain_dag.create_connection(0, 2)
        chain_dag.compute_depth()
        assert chain_dag.nodes[2].depth == 2

    def test_isolated_nodes_at_zero(self):
        dag = DAG()
        for _ in range(3):
            dag.create_node()
        dag.compute_depth()
        assert [n.depth for n in dag.nodes] == [0, 0, 0]

    def test_depth_shrinks_after_removal(self, chain_dag):
        chain_dag.compute_depth()
        chain_dag.remove_connection(1, 2)
        chain_dag.compute_depth()
        assert [n.depth for n in chain_dag.nodes] == [0, 1, 0]

    def test_incoming_counts_untouched(self, diamond_dag):
        diamond_dag.compute_depth()
        assert [n.incoming for n in diamond_dag.nodes] == [0, 1, 1, 2]

    def test_edges_point_deeper(self):
        rnd = random.Random(3)
        dag = DAG()
        for _ in range(15):
            dag.create_node()
        for _ in range(200):
            dag.create_connection(rnd.randrange(15), rnd.randrange(15))

        dag.compute_depth()
        for a, node in enumerate(dag.nodes):
            for b in node.out:
                assert dag.nodes[b].depth > dag.nodes[a].depth


class TestTopologicalOrder:

    def test_sorted_by_depth(self, diamond_dag):
        diamond_dag.compute_depth()
        order = diamond_dag.get_topological_order()
        assert order[0] == 0
        assert order[-1] == 3
        assert sorted(order[1:3]) == [1, 2]

    def test_order_is_permutation(self, diamond_dag):
        diamond_dag.compute_depth()
        assert sorted(diamond_dag.get_topological_order()) == [0, 1, 2, 3]

    def test_ties_keep_index_order(self):
        dag = DAG()
        for _ in range(4):
            dag.create_node()
        dag.create_connection(3, 0)
        dag.compute_depth()
        assert dag.get_topological_order() == [1, 2, 3, 0]

    def test_order_respects_every_edge(self):
        dag = DAG()
        for _ in range(6):
            dag.create_node()
        for a, b in itertools.combinations(range(6), 2):
            if (a + b) % 2:
                dag.create_connection(b, a)

        dag.compute_depth()
        position = {node: i for i, node in enumerate(dag.get_topological_order())}
        for a, node in enumerate(dag.nodes):
            for b in node.out:
                assert position[b] > position[a]
