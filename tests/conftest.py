"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """A seeded random generator."""
    from dagneat.run.rng import RandomGenerator
    return RandomGenerator(seed=42)


@pytest.fixture
def simple_genome():
    """2 inputs, 1 output, connections (0,2,0.5) and (1,2,-0.3)."""
    from dagneat.genotype.genome import Genome
    genome = Genome(2, 1)
    genome.try_create_connection(0, 2, 0.5)
    genome.try_create_connection(1, 2, -0.3)
    return genome
