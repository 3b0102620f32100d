"""
Phenotype Package

This package implements the phenotype representation: genomes compiled into
flat, execution-ready networks.

Modules:
    network:           NetworkNode, NetworkConnection and Network classes
    network_generator: NetworkGenerator class and CompilationError

Exported Classes:
    Network:           Compiled feedforward neural network
    NetworkNode:       A compiled node
    NetworkConnection: A compiled connection
    NetworkGenerator:  Genome -> Network compiler
    CompilationError:  Raised when a genome cannot be compiled
"""

from dagneat.phenotype.network           import Network, NetworkConnection, NetworkNode
from dagneat.phenotype.network_generator import CompilationError, NetworkGenerator

__all__ = ['CompilationError',
           'Network',
           'NetworkConnection',
           'NetworkGenerator',
           'NetworkNode']
