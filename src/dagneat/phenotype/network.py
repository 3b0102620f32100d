"""
Network Module

This module implements the compiled, execution-ready form of a Genome.
A Network is produced once by the NetworkGenerator and then only executed.

Classes:
    NetworkNode:       A compiled node (activation, bias, fan-out count, accumulator)
    NetworkConnection: A compiled connection (target position, weight, last value)
    Network:           Flat arrays of nodes and connections evaluated in a single pass
"""

import logging
from typing import Callable, Sequence

import graphviz  # type: ignore

from dagneat.activations  import ActivationKind, activations, activation_codes
from dagneat.network_info import NetworkInfo

logger = logging.getLogger(__name__)

class NetworkNode:
    """
    A node of a compiled network.

    Public Attributes:
        activation:       Kind of activation function
        bias:             Bias added to the accumulated input
        connection_count: Number of outgoing connections (fan-out) in the flat connection array
        depth:            Depth of the node in the genome (diagnostics only)
        sum:              Accumulated weighted input (reset on every execution)
    """

    def __init__(self, activation: ActivationKind, bias: float, connection_count: int, depth: int = 0):
        self.activation      : ActivationKind = activation
        self.bias            : float          = bias
        self.connection_count: int            = connection_count
        self.depth           : int            = depth
        self.sum             : float          = 0.0
        self._function: Callable = activations[activation]

    def get_value(self) -> float:
        """The node output: activation(sum + bias)."""
        return self._function(self.sum + self.bias)

    def __repr__(self):
        return (f"NetworkNode(activation=ActivationKind.{self.activation.name}, bias={self.bias}, "
                f"connection_count={self.connection_count}, depth={self.depth})")

class NetworkConnection:
    """
    A connection of a compiled network.

    The source of a connection is implicit: connections are stored grouped
    by source node, in node order.

    Public Attributes:
        to:     Position of the target node in the compiled node array
        weight: Weight of the connection
        value:  Signal carried during the last execution (weight * source output)
    """

    def __init__(self, to: int, weight: float):
        self.to    : int   = to
        self.weight: float = weight
        self.value : float = 0.0

    def __repr__(self):
        return f"NetworkConnection(to={self.to}, weight={self.weight:+.6f})"

class Network:
    """
    An executable feedforward neural network compiled from a Genome.

    Nodes are stored in topological order and every node's outgoing connections
    are stored contiguously, in the same order, in a flat connection array.
    A forward pass is therefore a single linear scan: each node computes its
    output and pushes it along its 'connection_count' connections into nodes
    further down the array.

    The structure (activations, biases, weights) never changes after compilation;
    only the per-execution accumulators and connection values do.

    Public Properties:
        info:               Number of input, output and hidden nodes
        nodes:              Compiled nodes in execution order
        connections:        Compiled connections grouped by source node
        input_positions:    Compiled position of each input node
        output_positions:   Compiled position of each output node
        max_depth:          Depth of the last node in execution order
        number_nodes:       Total number of nodes
        number_connections: Total number of connections

    Public Methods:
        execute(inputs):      Run the network, return whether the inputs were accepted
        get_result():         Outputs of the last successful execution
        forward_pass(inputs): Run the network and return its outputs (raises on bad input)
        visualize(view):      Render the network with Graphviz
    """

    def __init__(self,
                 info            : NetworkInfo,
                 nodes           : list[NetworkNode],
                 connections     : list[NetworkConnection],
                 input_positions : list[int],
                 output_positions: list[int],
                 max_depth       : int = 0):
        """
        Parameters:
            info:             node counts of the genome the network was compiled from
            nodes:            compiled nodes in execution order
            connections:      compiled connections grouped by source node, in node order
            input_positions:  position in 'nodes' of each input node
            output_positions: position in 'nodes' of each output node
            max_depth:        depth of the deepest node
        """
        self._info             = info.copy()
        self._nodes            = nodes
        self._connections      = connections
        self._input_positions  = list(input_positions)
        self._output_positions = list(output_positions)
        self._max_depth        = max_depth
        self._output: list[float] = [0.0] * info.outputs

    @property
    def info(self) -> NetworkInfo:
        return self._info

    @property
    def nodes(self) -> Sequence[NetworkNode]:
        return tuple(self._nodes)

    @property
    def connections(self) -> Sequence[NetworkConnection]:
        return tuple(self._connections)

    @property
    def input_positions(self) -> list[int]:
        return list(self._input_positions)

    @property
    def output_positions(self) -> list[int]:
        return list(self._output_positions)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def number_nodes(self) -> int:
        return len(self._nodes)

    @property
    def number_connections(self) -> int:
        return len(self._connections)

    def execute(self, inputs: Sequence[float]) -> bool:
        """
        Perform a complete forward pass through the network.

        The results are stored and can be read with 'get_result'.
        If the number of inputs is wrong nothing is computed and the
        previous results are left untouched.

        Parameters:
            inputs: the network inputs (as many as input nodes)

        Returns:
            whether the inputs were accepted
        """
        if len(inputs) != self._info.inputs:
            logger.error("Input size mismatch (expected %d, got %d), aborting", self._info.inputs, len(inputs))
            return False

        for node in self._nodes:
            node.sum = 0.0

        for position, value in zip(self._input_positions, inputs):
            self._nodes[position].sum = value

        # Single pass in execution order: every target lies further down the array
        current_connection = 0
        for node in self._nodes:
            value = node.get_value()
            for connection in self._connections[current_connection:current_connection + node.connection_count]:
                connection.value = value * connection.weight
                self._nodes[connection.to].sum += connection.value
            current_connection += node.connection_count

        self._output = [float(self._nodes[position].get_value()) for position in self._output_positions]
        return True

    def get_result(self) -> list[float]:
        """The outputs computed by the last successful execution."""
        return list(self._output)

    def forward_pass(self, inputs: Sequence[float]) -> list[float]:
        """
        Run the network on 'inputs' and return its outputs.

        Raises:
            ValueError: if the number of inputs does not match the number of input nodes
        """
        if not self.execute(inputs):
            raise ValueError(f"Expected {self._info.inputs} inputs, got {len(inputs)}")
        return self.get_result()

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Nodes are labelled by their compiled position; edges by their weight.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        base_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        fill = {'input': 'lightgrey', 'hidden': 'lightblue', 'output': 'white'}

        inputs  = set(self._input_positions)
        outputs = set(self._output_positions)
        hidden  = [i for i in range(len(self._nodes)) if i not in inputs and i not in outputs]

        def add_nodes(cluster, positions, role):
            for i in positions:
                node  = self._nodes[i]
                attrs = dict(base_attrs, fillcolor=fill[role])
                attrs['label'] = f"{i}\\n{activation_codes[node.activation]}\\nb={node.bias:.2f}"
                cluster.node(str(i), **attrs)

        with dot.subgraph(name='cluster_input') as input_cluster:
            input_cluster.attr(rank='source', label='Inputs', style='invisible')
            add_nodes(input_cluster, self._input_positions, 'input')

        if hidden:
            with dot.subgraph(name='cluster_hidden') as hidden_cluster:
                hidden_cluster.attr(label='Hidden', style='invisible')
                add_nodes(hidden_cluster, hidden, 'hidden')

        with dot.subgraph(name='cluster_output') as output_cluster:
            output_cluster.attr(rank='sink', label='Outputs', style='invisible')
            add_nodes(output_cluster, self._output_positions, 'output')

        current_connection = 0
        for i, node in enumerate(self._nodes):
            for connection in self._connections[current_connection:current_connection + node.connection_count]:
                dot.edge(str(i), str(connection.to), label=f"w={connection.weight:.2f}",
                         fontsize='5', penwidth='0.5', arrowsize='0.5')
            current_connection += node.connection_count

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        node_info = [f"  Node {i}: {node.activation.value}, bias={node.bias:.2f}, "
                     f"fan-out={node.connection_count}, depth={node.depth}"
                     for i, node in enumerate(self._nodes)]
        conn_info = [f"  => {conn.to:02d}, w={conn.weight:+.2f}" for conn in self._connections]
        return "\n".join(node_info) + "\n\n" + "\n".join(conn_info)

    def __repr__(self):
        return (f"Network(nodes={len(self._nodes)}, hidden={self._info.hidden}, "
                f"connections={len(self._connections)}, max_depth={self._max_depth})")
