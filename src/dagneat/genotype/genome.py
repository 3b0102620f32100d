"""
Genome Module

This module implements the Genome class, the mutable blueprint from which
executable networks are compiled.

Classes:
    Genome: Nodes and connections of a neural network, backed by a DAG
"""

import logging

from dagneat.activations        import ActivationKind
from dagneat.genotype.connection_gene import GenomeConnection
from dagneat.genotype.dag       import DAG
from dagneat.genotype.node_gene import GenomeNode
from dagneat.network_info       import NetworkInfo

logger = logging.getLogger(__name__)

class Genome:
    """
    A genome describing a feedforward neural network as a list of nodes and a list of connections.

    The genome is the genotype-level representation: it is mutated from one
    generation to the next but never executed directly. To run it, compile it
    into a Network with a NetworkGenerator.

    Every genome owns a DAG whose node indices coincide with the genome's node
    indices. Each connection of the genome is an edge of the DAG, which is what
    keeps the network free of cycles, self-loops and duplicate connections.

    A new genome contains only input and output nodes and no connections.
    It grows by splitting connections (adding hidden nodes) and by adding
    connections between existing nodes.

    Node numbering convention:
        - Input nodes:  [0, inputs)                  identity activation
        - Output nodes: [inputs, inputs + outputs)   tanh activation
        - Hidden nodes: [inputs + outputs, ...)      always appended at the end
    A node's role is derived from its index alone.

    Public Attributes:
        info:        Number of input, output and hidden nodes
        nodes:       List of GenomeNode objects (index = node ID)
        connections: List of GenomeConnection objects

    Public Methods:
        create_node(activation, hidden):        Append a node
        create_connection(from, to, weight):    Add a connection known to be legal
        try_create_connection(from, to, weight): Add a connection if the DAG accepts it
        split_connection(i):                    Replace a connection by a hidden node and two connections
        remove_connection(i):                   Delete a connection
        compute_depth():                        Refresh the depth of every node
        get_order():                            Node indices sorted by depth
        is_input(i), is_output(i), is_hidden(i): Node role checks
        clone():                                Deep copy of the genome
        to_dict():                              Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict): Create a genome from a dictionary description
    """

    def __init__(self, inputs: int, outputs: int):
        """
        Initialize a minimal Genome (input and output nodes, no connections).

        Parameters:
            inputs:  number of input nodes
            outputs: number of output nodes

        Raises:
            ValueError: if there is not at least one input and one output node
        """
        if inputs < 1 or outputs < 1:
            raise ValueError(f"A genome needs at least one input and one output, got {inputs} and {outputs}")

        self.info       : NetworkInfo            = NetworkInfo(inputs, outputs)
        self.nodes      : list[GenomeNode]       = []
        self.connections: list[GenomeConnection] = []
        self._graph     : DAG                    = DAG()

        for _ in range(inputs):
            self.create_node(ActivationKind.IDENTITY, hidden=False)

        for _ in range(outputs):
            self.create_node(ActivationKind.TANH, hidden=False)

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a Genome from a dictionary description.

        Dictionary format:
            {
                "inputs":  2,
                "outputs": 1,
                "hidden":  1,
                "nodes": [
                    {"activation": "identity"},
                    {"activation": "identity"},
                    {"activation": "tanh",  "bias": 0.1},
                    {"activation": "relu",  "bias": 0.0}
                ],
                "connections": [
                    {"from": 0, "to": 3, "weight":  0.5},
                    {"from": 3, "to": 2, "weight": -1.5}
                ]
            }

        Nodes are listed in index order. The input and output entries may omit
        their activation (they get the default identity/tanh), hidden entries
        must specify it. Entries may be omitted entirely for the input/output
        block, in which case the defaults apply.

        "hidden" is the number of nodes beyond the input/output block that
        count as hidden nodes. It is optional and defaults to all of them.

        Parameters:
            genome_dict: Dictionary describing the genome structure

        Returns:
            A new Genome object with the specified structure

        Raises:
            ValueError: If the structure is invalid (bad node count, unknown activation,
                        connection rejected by the DAG, etc.)
            KeyError:   If required fields are missing from the dictionary
        """
        inputs     = genome_dict["inputs"]
        outputs    = genome_dict["outputs"]
        nodes_data = genome_dict.get("nodes", [])

        genome = cls(inputs, outputs)

        fixed = inputs + outputs
        if nodes_data and len(nodes_data) < fixed:
            raise ValueError(f"Expected at least {fixed} node entries, got {len(nodes_data)}")

        for i, node_data in enumerate(nodes_data):
            if i < fixed:
                node = genome.nodes[i]
                if "activation" in node_data:
                    node.activation = ActivationKind(node_data["activation"])
                node.bias = node_data.get("bias", 0.0)
            else:
                if "activation" not in node_data:
                    raise ValueError(f"No activation function specified for hidden node {i}.")
                idx = genome.create_node(ActivationKind(node_data["activation"]), hidden=False)
                genome.nodes[idx].bias = node_data.get("bias", 0.0)

        extra  = len(genome.nodes) - fixed
        hidden = genome_dict.get("hidden", extra)
        if not 0 <= hidden <= extra:
            raise ValueError(f"Hidden count {hidden} does not fit the {extra} nodes beyond inputs and outputs")
        genome.info.hidden = hidden

        for conn_data in genome_dict.get("connections", []):
            from_node = conn_data["from"]
            to_node   = conn_data["to"]
            if not genome.try_create_connection(from_node, to_node, conn_data["weight"]):
                raise ValueError(f"Connection from {from_node} to {to_node} is invalid "
                                 f"(unknown node, self-loop, duplicate or cycle)")

        return genome

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict().
        """
        return {
            "inputs" : self.info.inputs,
            "outputs": self.info.outputs,
            "hidden" : self.info.hidden,
            "nodes"  : [{"activation": node.activation.value, "bias": node.bias} for node in self.nodes],
            "connections": [{"from"  : conn.from_node,
                             "to"    : conn.to_node,
                             "weight": conn.weight} for conn in self.connections]
        }

    def clone(self) -> 'Genome':
        """
        Create a deep copy of this genome.

        The copy has its own nodes, connections and DAG; mutating it leaves
        this genome untouched. Every node is copied (including nodes appended
        with hidden=False), the hidden count is carried over as is, and the
        order of the connection list is preserved.
        """
        offspring = Genome(self.info.inputs, self.info.outputs)
        for node in self.nodes[len(offspring.nodes):]:
            offspring.create_node(node.activation, hidden=False)
        offspring.info.hidden = self.info.hidden

        for src, dst in zip(self.nodes, offspring.nodes):
            dst.activation = src.activation
            dst.bias       = src.bias
            dst.depth      = src.depth

        # Edges of a valid genome are legal by construction
        for conn in self.connections:
            offspring.create_connection(conn.from_node, conn.to_node, conn.weight)

        return offspring

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def connection_count(self) -> int:
        return len(self.connections)

    def create_node(self, activation: ActivationKind, hidden: bool = True) -> int:
        """
        Append a node (with zero bias) to the genome and to its DAG.

        Parameters:
            activation: activation function of the new node
            hidden:     whether the new node counts as a hidden node

        Returns:
            the index of the new node
        """
        self.nodes.append(GenomeNode(activation, bias=0.0))
        self._graph.create_node()

        if hidden:
            self.info.hidden += 1

        return len(self.nodes) - 1

    def try_create_connection(self, from_node: int, to_node: int, weight: float) -> bool:
        """
        Add a connection if the DAG accepts the corresponding edge.

        Parameters:
            from_node: index of the source node
            to_node:   index of the target node
            weight:    weight of the new connection

        Returns:
            whether the connection was added (invalid index, self-loop,
            duplicate or cycle all leave the genome unchanged)
        """
        if self._graph.create_connection(from_node, to_node):
            self.connections.append(GenomeConnection(from_node, to_node, weight))
            return True

        logger.debug("Rejected connection %s -> %s", from_node, to_node)
        return False

    def create_connection(self, from_node: int, to_node: int, weight: float) -> None:
        """
        Add a connection that the caller knows to be legal.

        The edge is still registered in the DAG (so depths and ancestry stay
        correct) but the DAG's verdict is not checked. Use it only for edges
        taken from an already-valid genome; otherwise use 'try_create_connection'.

        Parameters:
            from_node: index of the source node
            to_node:   index of the target node
            weight:    weight of the new connection
        """
        self._graph.create_connection(from_node, to_node)
        self.connections.append(GenomeConnection(from_node, to_node, weight))

    def split_connection(self, i: int) -> None:
        """
        Split connection 'i' by inserting a new hidden node in the middle.

        The connection (from, to, weight) is removed and replaced by a new ReLU
        hidden node 'h' with connections (from, h, weight) and (h, to, 1.0).

        Parameters:
            i: index of the connection in 'connections'

        Raises:
            IndexError: if 'i' is not a valid connection index (the genome is unchanged)
        """
        self._check_connection_index(i)

        conn      = self.connections[i]
        from_node = conn.from_node
        to_node   = conn.to_node
        weight    = conn.weight
        self.remove_connection(i)

        node_idx = self.create_node(ActivationKind.RELU)
        self.create_connection(from_node, node_idx, weight)
        self.create_connection(node_idx, to_node, 1.0)

    def remove_connection(self, i: int) -> None:
        """
        Remove connection 'i' from the genome and its edge from the DAG.

        The last connection takes the place of the removed one.

        Parameters:
            i: index of the connection in 'connections'

        Raises:
            IndexError: if 'i' is not a valid connection index (the genome is unchanged)
        """
        self._check_connection_index(i)

        conn = self.connections[i]
        self._graph.remove_connection(conn.from_node, conn.to_node)

        self.connections[i] = self.connections[-1]
        self.connections.pop()

    def _check_connection_index(self, i: int) -> None:
        if not 0 <= i < len(self.connections):
            logger.error("Invalid connection %s (genome has %d connections)", i, len(self.connections))
            raise IndexError(f"Invalid connection {i}: genome has {len(self.connections)} connections")

    def compute_depth(self) -> None:
        """
        Refresh the depth of every node from the DAG.

        Output nodes are then all moved to the last layer, at depth
        max(deepest node, 1), so that an output without incoming
        connections never shares depth 0 with the inputs.
        """
        self._graph.compute_depth()

        max_depth = 0
        for node, dag_node in zip(self.nodes, self._graph.nodes):
            node.depth = dag_node.depth
            max_depth  = max(max_depth, node.depth)

        output_depth = max(max_depth, 1)
        for i in range(self.info.inputs, self.info.inputs + self.info.outputs):
            self.nodes[i].depth = output_depth

    def get_order(self) -> list[int]:
        """
        Node indices sorted by depth (ascending); equal depths keep index order.

        Call 'compute_depth' first if the genome changed since the last call.
        """
        return sorted(range(len(self.nodes)), key=lambda i: self.nodes[i].depth)

    def is_input(self, i: int) -> bool:
        return 0 <= i < self.info.inputs

    def is_output(self, i: int) -> bool:
        return self.info.inputs <= i < self.info.inputs + self.info.outputs

    def is_hidden(self, i: int) -> bool:
        return self.info.inputs + self.info.outputs <= i < len(self.nodes)

    def __str__(self):
        nodes_str = ''.join(f"{i}{node}" for i, node in enumerate(self.nodes))
        conns_str = ''.join(str(conn) for conn in self.connections)
        return f"Nodes: {nodes_str}\nConns: {conns_str}"

    def __repr__(self):
        return (f"Genome(inputs={self.info.inputs}, outputs={self.info.outputs}, "
                f"hidden={self.info.hidden}, connections={len(self.connections)})")
