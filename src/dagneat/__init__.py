"""
dagneat - NEAT-style neuroevolution of feedforward networks.

Genomes (nodes + connections) are kept acyclic by an embedded DAG, grow
through mutation, and are compiled into flat networks that execute in a
single linear pass.

Main components:
- genotype:    DAG, Genome, Mutator
- phenotype:   Network, NetworkGenerator
- run:         Config, RandomGenerator, parallel fitness evaluation
- activations: Activation functions for network nodes

Example:
    >>> from dagneat import Genome, Mutator, NetworkGenerator, RandomGenerator
    >>> genome = Genome(inputs=2, outputs=1)
    >>> genome.try_create_connection(0, 2, 0.5)
    True
    >>> Mutator(RandomGenerator(seed=1)).mutate(genome)
    >>> network = NetworkGenerator().generate(genome)
    >>> network.execute([1.0, 0.5])
    True
"""

import logging

__version__ = "0.1.0"

from dagneat.activations  import ActivationKind
from dagneat.network_info import NetworkInfo
from dagneat.genotype     import DAG, DAGNode, Genome, GenomeConnection, GenomeNode, Mutator
from dagneat.phenotype    import CompilationError, Network, NetworkConnection, NetworkGenerator, NetworkNode
from dagneat.run          import Config, RandomGenerator, evaluate_genome, evaluate_genomes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ActivationKind",
    "CompilationError",
    "Config",
    "DAG",
    "DAGNode",
    "Genome",
    "GenomeConnection",
    "GenomeNode",
    "Mutator",
    "Network",
    "NetworkConnection",
    "NetworkGenerator",
    "NetworkInfo",
    "NetworkNode",
    "RandomGenerator",
    "evaluate_genome",
    "evaluate_genomes",
]
