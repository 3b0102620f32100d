"""
Genome Connection Module

This module implements the GenomeConnection class, the per-connection
record of a Genome.

Classes:
    GenomeConnection: Weighted directed connection between two node indices
"""

class GenomeConnection:
    """
    A gene describing a weighted connection between two nodes.

    Every GenomeConnection held by a Genome corresponds to an edge of the
    genome's DAG. Connections are removed physically (there is no disabled
    state): splitting a connection replaces it with two new ones.

    Public Attributes:
        from_node: Index of the source node
        to_node:   Index of the target node
        weight:    Weight of the connection
    """

    def __init__(self, from_node: int, to_node: int, weight: float):
        self.from_node: int   = from_node
        self.to_node  : int   = to_node
        self.weight   : float = weight

    def __eq__(self, other):
        if not isinstance(other, GenomeConnection):
            return NotImplemented
        return (self.from_node, self.to_node, self.weight) == (other.from_node, other.to_node, other.weight)

    __hash__ = None

    def __repr__(self):
        return (f"GenomeConnection(from_node={self.from_node:03d}, to_node={self.to_node:03d}, "
                f"weight={self.weight:+.6f})")

    def __str__(self):
        return f"[{self.from_node:02d}=>{self.to_node:02d},{self.weight:+.02f}]"
