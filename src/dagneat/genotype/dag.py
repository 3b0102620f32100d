"""
DAG Module

This module implements the directed acyclic graph that backs every Genome.
It is the structural-validity substrate of the genotype: every connection
a genome holds is an edge accepted by its DAG.

Classes:
    DAGNode: A node of the graph (in-degree, depth, outgoing edges)
    DAG:     Directed acyclic graph rejecting cycles, self-loops and duplicates
"""

import logging

logger = logging.getLogger(__name__)

class DAGNode:
    """
    A node of the DAG.

    Public Attributes:
        incoming: Number of edges ending at this node
        depth:    Longest-path distance from a node without incoming edges
                  (only meaningful after DAG.compute_depth())
        out:      Indices of the nodes this node has an edge to
    """

    def __init__(self):
        self.incoming: int       = 0
        self.depth   : int       = 0
        self.out     : list[int] = []

    @property
    def out_connection_count(self) -> int:
        """The number of outgoing edges."""
        return len(self.out)

    def __repr__(self):
        return f"DAGNode(incoming={self.incoming}, depth={self.depth}, out={self.out})"

class DAG:
    """
    A directed acyclic graph over integer-indexed nodes.

    Nodes are identified by their position in 'nodes'. Indices are stable
    and never reused: nodes can be added but not removed (edges can).

    The graph is kept acyclic at insertion time: 'create_connection' refuses
    any edge that would close a cycle, a self-loop, or a duplicate edge.
    Refusals are reported by returning False, never by raising, since
    structural mutation proposes invalid edges routinely.

    Public Attributes:
        nodes: List of DAGNode objects (index = node ID)

    Public Methods:
        create_node():              Append a new node, return its index
        create_connection(from, to): Add an edge if legal, return whether it was added
        remove_connection(from, to): Remove an edge (warns if missing)
        get_out_connection_count(i): Number of edges leaving node 'i'
        is_valid(i):                Whether 'i' is an existing node index
        is_parent(a, b):            Whether there is an edge a -> b
        is_ancestor(a, b):          Whether b is reachable from a via one or more edges
        compute_depth():            Compute the longest-path depth of every node
        get_topological_order():    Node indices sorted by depth
    """

    def __init__(self):
        self.nodes: list[DAGNode] = []

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def create_node(self) -> int:
        """
        Append a node with no edges.

        Returns:
            the index of the new node
        """
        self.nodes.append(DAGNode())
        return len(self.nodes) - 1

    def create_connection(self, from_node: int, to_node: int) -> bool:
        """
        Add the edge 'from_node' -> 'to_node' if it keeps the graph a simple DAG.

        The edge is rejected if either index is invalid, if it is a self-loop,
        if 'to_node' is already an ancestor of 'from_node' (the edge would close
        a cycle) or if the edge already exists.

        Parameters:
            from_node: index of the source node
            to_node:   index of the target node

        Returns:
            whether the edge was added (False means the graph is unchanged)
        """
        if not self.is_valid(from_node) or not self.is_valid(to_node):
            return False

        if from_node == to_node:
            return False

        if self.is_ancestor(to_node, from_node):
            return False

        if self.is_parent(from_node, to_node):
            return False

        self.nodes[from_node].out.append(to_node)
        self.nodes[to_node].incoming += 1
        return True

    def remove_connection(self, from_node: int, to_node: int) -> None:
        """
        Remove the edge 'from_node' -> 'to_node'.

        The last outgoing edge of 'from_node' takes the place of the removed one,
        so the order of the remaining outgoing edges is not preserved.
        Removing an edge that does not exist logs a warning and changes nothing.

        Parameters:
            from_node: index of the source node
            to_node:   index of the target node
        """
        if not self.is_valid(from_node) or not self.is_valid(to_node):
            logger.warning("Connection %s -> %s not found (invalid node index)", from_node, to_node)
            return

        out = self.nodes[from_node].out
        for i, target in enumerate(out):
            if target == to_node:
                out[i] = out[-1]
                out.pop()
                self.nodes[to_node].incoming -= 1
                return

        logger.warning("Connection %s -> %s not found", from_node, to_node)

    def get_out_connection_count(self, i: int) -> int:
        return self.nodes[i].out_connection_count

    def is_valid(self, i: int) -> bool:
        return 0 <= i < len(self.nodes)

    def is_parent(self, node1: int, node2: int) -> bool:
        """Whether 'node1' has a direct edge to 'node2'."""
        if not self.is_valid(node1) or not self.is_valid(node2):
            return False

        return node2 in self.nodes[node1].out

    def is_ancestor(self, node1: int, node2: int) -> bool:
        """
        Whether 'node2' can be reached from 'node1' following one or more edges.

        Iterative depth-first search over outgoing edges; a direct parent
        counts as an ancestor. A node is never its own ancestor in a DAG.

        Parameters:
            node1: the candidate ancestor
            node2: the candidate descendant

        Returns:
            whether there is a path 'node1' -> ... -> 'node2'
        """
        if not self.is_valid(node1) or not self.is_valid(node2):
            return False

        visited = set()
        stack   = list(self.nodes[node1].out)

        while stack:
            current = stack.pop()
            if current == node2:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(self.nodes[current].out)

        return False

    def compute_depth(self) -> None:
        """
        Compute the depth of every node (longest path from a node without parents).

        Kahn's algorithm: nodes without incoming edges seed the worklist at
        depth 0; each popped node pushes its depth + 1 onto its children
        (keeping the maximum) and a child joins the worklist once all of its
        parents have been processed.
        """
        # Working copy of the in-degrees, consumed by the traversal
        incoming = [node.incoming for node in self.nodes]

        for node in self.nodes:
            node.depth = 0

        start_nodes = [i for i, node in enumerate(self.nodes) if node.incoming == 0]

        while start_nodes:
            idx  = start_nodes.pop()
            node = self.nodes[idx]
            for child_idx in node.out:
                incoming[child_idx] -= 1
                child = self.nodes[child_idx]
                child.depth = max(child.depth, node.depth + 1)
                if incoming[child_idx] == 0:
                    start_nodes.append(child_idx)

    def get_topological_order(self) -> list[int]:
        """
        Node indices sorted by depth (ascending).

        Nodes of equal depth keep their index order. This is only a valid
        execution order if depths are up to date (see 'compute_depth').
        """
        return sorted(range(len(self.nodes)), key=lambda i: self.nodes[i].depth)

    def __str__(self):
        edges = ", ".join(f"{i}->{o}" for i, node in enumerate(self.nodes) for o in node.out)
        return f"DAG(nodes={len(self.nodes)}, edges=[{edges}])"
