"""
Genome Node Module.

This module implements the GenomeNode class, the per-node record of a Genome.

Classes:
    GenomeNode: Activation kind, bias and depth of a single node
"""

from dagneat.activations import ActivationKind, activation_codes

class GenomeNode:
    """
    A gene describing a node of the network.

    The node computes its output as: activation(weighted_input + bias)

    A node does not know whether it is an input, output or hidden node: its
    role follows from its index in the genome (see Genome).

    Public Attributes:
        activation: Kind of activation function applied by the node
        bias:       Bias value added to the node's weighted input
        depth:      Depth of the node in the genome DAG (refreshed by Genome.compute_depth())
    """

    def __init__(self, activation: ActivationKind = ActivationKind.SIGMOID, bias: float = 0.0):
        self.activation: ActivationKind = activation
        self.bias      : float          = bias
        self.depth     : int            = 0

    def __repr__(self):
        return (f"GenomeNode(activation=ActivationKind.{self.activation.name}, "
                f"bias={self.bias}, depth={self.depth})")

    def __str__(self):
        return f"[{activation_codes[self.activation]},b={self.bias:+.2f},d={self.depth}]"
