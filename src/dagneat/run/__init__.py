"""
Run Package

Collaborators of the evolutionary core: configuration, randomness and
fitness evaluation.

Modules:
    config:     Config class (INI-backed mutation configuration)
    rng:        RandomGenerator class
    evaluation: evaluate_genome / evaluate_genomes functions
"""

from dagneat.run.config     import Config
from dagneat.run.evaluation import evaluate_genome, evaluate_genomes
from dagneat.run.rng        import RandomGenerator

__all__ = ['Config',
           'RandomGenerator',
           'evaluate_genome',
           'evaluate_genomes']
