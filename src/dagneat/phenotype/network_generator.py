"""
Network Generator Module

This module compiles Genomes into executable Networks.

Classes:
    CompilationError: Raised when a genome cannot be laid out in topological order
    NetworkGenerator: Genome -> Network compiler
"""

import logging
from typing import TYPE_CHECKING

from dagneat.phenotype.network import Network, NetworkConnection, NetworkNode

if TYPE_CHECKING:
    from dagneat.genotype import Genome

logger = logging.getLogger(__name__)

class CompilationError(RuntimeError):
    """
    A connection does not point forward in the compiled node order.

    This signals a broken invariant (depths disagreeing with the edges of the
    genome), not a recoverable condition.
    """

class NetworkGenerator:
    """
    Compiles a Genome into a Network.

    Compilation lays the genome's nodes out in order of increasing depth and
    emits, right after each node, the connections leaving it. Every connection
    must then point to a node placed later in the array, which is checked
    during compilation.

    Public Methods:
        generate(genome): Compile 'genome' into a new Network
    """

    def generate(self, genome: 'Genome') -> Network:
        """
        Compile 'genome' into a Network.

        The genome's depths are recomputed first (the genome may have been
        mutated since the last compilation).

        Parameters:
            genome: the genome to compile (only its node depths are updated)

        Returns:
            a new Network equivalent to the genome

        Raises:
            CompilationError: if a connection does not point forward in the compiled order
        """
        genome.compute_depth()
        order = genome.get_order()

        # Genome node index => position in the compiled arrays
        index_to_order = [0] * len(order)
        for position, index in enumerate(order):
            index_to_order[index] = position

        # Outgoing connections of every node, in genome connection order
        outgoing: list[list] = [[] for _ in range(len(order))]
        for conn in genome.connections:
            outgoing[conn.from_node].append(conn)

        nodes       = []
        connections = []
        for position, index in enumerate(order):
            gene = genome.nodes[index]
            nodes.append(NetworkNode(gene.activation, gene.bias, len(outgoing[index]), gene.depth))

            for conn in outgoing[index]:
                target = index_to_order[conn.to_node]
                if target <= position:
                    logger.error("Invalid connection order: %d should be > %d (genome connection %d -> %d)",
                                 target, position, conn.from_node, conn.to_node)
                    raise CompilationError(f"Invalid connection order: {target} should be > {position} "
                                           f"(genome connection {conn.from_node} -> {conn.to_node})")
                connections.append(NetworkConnection(target, conn.weight))

        info             = genome.info
        input_positions  = [index_to_order[i] for i in range(info.inputs)]
        output_positions = [index_to_order[info.inputs + i] for i in range(info.outputs)]

        return Network(info,
                       nodes,
                       connections,
                       input_positions,
                       output_positions,
                       max_depth=nodes[-1].depth)
