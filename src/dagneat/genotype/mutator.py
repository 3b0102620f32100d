"""
Mutator Module

This module implements the Mutator class, which applies parameter and
structural mutations to genomes.

Classes:
    Mutator: Stochastic weight/bias perturbation, node addition and connection addition
"""

from dagneat.genotype.genome import Genome
from dagneat.run.config      import Config
from dagneat.run.rng         import RandomGenerator

class Mutator:
    """
    Applies random mutations to a Genome, in place.

    The mutator holds no state besides its configuration (never modified)
    and the random number generator it was given. All structural legality
    is delegated to the genome and its DAG: a proposed connection that would
    create a cycle, a self-loop or a duplicate is simply not added.

    Public Methods:
        mutate(genome, config): Apply a round of mutations to 'genome'
    """

    def __init__(self, rng: RandomGenerator, config: Config | None = None):
        """
        Parameters:
            rng:    Source of randomness for every mutation decision
            config: Mutation probabilities and ranges (defaults if None)
        """
        self._rng    = rng
        self._config = config if config is not None else Config()

    @property
    def config(self) -> Config:
        return self._config

    def mutate(self, genome: Genome, config: Config | None = None) -> None:
        """
        Apply a round of mutations to 'genome'.

        The round consists of:
          + 'mutation_count' attempts, each happening with probability 0.25,
            to mutate either a random bias or a random weight (50/50)
          + with probability 'add_node_rate', and only while the genome has
            fewer than 'max_hidden_nodes' hidden nodes, splitting a random connection
          + with probability 'add_connection_rate', an attempt to add a connection

        Parameters:
            genome: the genome to mutate (modified in place)
            config: configuration overriding the mutator's own for this call
        """
        config = config if config is not None else self._config

        for _ in range(config.mutation_count):
            if self._rng.bernoulli(0.25):
                if self._rng.bernoulli(0.5):
                    self._mutate_bias(genome, config)
                else:
                    self._mutate_weight(genome, config)

        if self._rng.bernoulli(config.add_node_rate) and genome.info.hidden < config.max_hidden_nodes:
            self._mutate_add_node(genome)

        if self._rng.bernoulli(config.add_connection_rate):
            self._mutate_add_connection(genome, config)

    def _new_or_perturbed(self, value: float, config: Config) -> float:
        """
        Either replace 'value' by a new random value or perturb it.
        Perturbations are large 25% of the time and small (scaled by
        'weight_small_range') 75% of the time.
        """
        if self._rng.bernoulli(config.new_value_probability):
            return self._rng.uniform_range(config.weight_range)

        if self._rng.bernoulli(0.25):
            return value + self._rng.uniform_range(config.weight_range)
        return value + config.weight_small_range * self._rng.uniform_range(config.weight_range)

    def _mutate_bias(self, genome: Genome, config: Config) -> None:
        node = self._rng.pick_one(genome.nodes)
        node.bias = self._new_or_perturbed(node.bias, config)

    def _mutate_weight(self, genome: Genome, config: Config) -> None:
        if not genome.connections:
            return

        conn = self._rng.pick_one(genome.connections)
        conn.weight = self._new_or_perturbed(conn.weight, config)

    def _mutate_add_node(self, genome: Genome) -> None:
        """
        Split a randomly chosen connection (nothing happens if there are none).
        """
        if not genome.connections:
            return

        genome.split_connection(self._rng.random_index(len(genome.connections)))

    def _mutate_add_connection(self, genome: Genome, config: Config) -> None:
        """
        Attempt to add a connection from an input or hidden node to a hidden or output node.

        The source is drawn among the first (inputs + hidden) indices; a draw
        landing in the output block is shifted by the number of outputs into
        the hidden block (which favors hidden nodes as sources). The target is
        drawn among the hidden and output nodes. If the genome rejects the
        connection nothing happens; there is no retry.
        """
        info = genome.info

        from_node = self._rng.random_index(info.inputs + info.hidden)
        if genome.is_output(from_node):
            from_node += info.outputs

        to_node = self._rng.random_index(info.hidden + info.outputs) + info.inputs

        assert not genome.is_output(from_node), f"Node {from_node} should not be an output for source"
        assert not genome.is_input(to_node), f"Node {to_node} should not be an input for target"

        genome.try_create_connection(from_node, to_node, self._rng.uniform_range(config.weight_range))
