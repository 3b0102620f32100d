"""
Evaluation Module

This module evaluates the fitness of many genomes, optionally in parallel.

Functions:
    evaluate_genome:  Compile one genome and compute its fitness
    evaluate_genomes: Compile and evaluate a list of genomes with joblib
"""

from typing import Callable, Sequence, TYPE_CHECKING

from joblib import Parallel, delayed

from dagneat.phenotype import Network, NetworkGenerator

if TYPE_CHECKING:
    from dagneat.genotype import Genome

FitnessFunction = Callable[[Network], float]

def evaluate_genome(genome: 'Genome', fitness_function: FitnessFunction) -> float:
    """
    Compile 'genome' and return the fitness assigned to the resulting network.
    """
    network = NetworkGenerator().generate(genome)
    return fitness_function(network)

def evaluate_genomes(genomes         : Sequence['Genome'],
                     fitness_function: FitnessFunction,
                     num_jobs        : int = 1) -> list[float]:
    """
    Compute the fitness of every genome.

    Each genome is compiled into its own network and evaluated independently,
    so genomes can be spread over 'num_jobs' workers. Higher fitness is better
    by convention; no constraint is placed on sign or scale.

    Parameters:
        genomes:          the genomes to evaluate
        fitness_function: maps a compiled network to a scalar fitness
        num_jobs:         number of parallel jobs (1: sequential, -1: all CPUs)

    Returns:
        the fitness of each genome, in the order of 'genomes'
    """
    if num_jobs == 1:
        return [evaluate_genome(genome, fitness_function) for genome in genomes]

    return Parallel(num_jobs)(delayed(evaluate_genome)(genome, fitness_function) for genome in genomes)
