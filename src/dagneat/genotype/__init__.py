"""
Genotype Package

This package implements the genotype representation: the mutable blueprint
of a neural network, its structural-validity graph, and its mutation.

Modules:
    dag:             DAGNode and DAG classes
    node_gene:       GenomeNode class
    connection_gene: GenomeConnection class
    genome:          Genome class
    mutator:         Mutator class

Exported Classes:
    DAG:              Directed acyclic graph guarding a genome's structure
    DAGNode:          Node of a DAG
    GenomeNode:       Gene encoding a single network node
    GenomeConnection: Gene encoding a weighted connection between nodes
    Genome:           Complete genome representing a neural network
    Mutator:          Applies random mutations to genomes
"""

from dagneat.genotype.connection_gene import GenomeConnection
from dagneat.genotype.dag             import DAG, DAGNode
from dagneat.genotype.genome          import Genome
from dagneat.genotype.mutator         import Mutator
from dagneat.genotype.node_gene       import GenomeNode

__all__ = ['DAG',
           'DAGNode',
           'Genome',
           'GenomeConnection',
           'GenomeNode',
           'Mutator']
