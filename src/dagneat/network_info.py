"""
Node counts shared by genomes and compiled networks.
"""

class NetworkInfo:
    """
    Number of input, output and hidden nodes of a genome or network.

    Nodes are laid out as a fixed block of inputs, followed by a fixed block
    of outputs, followed by hidden nodes (which are only ever appended).
    """

    def __init__(self, inputs: int = 0, outputs: int = 0, hidden: int = 0):
        self.inputs : int = inputs
        self.outputs: int = outputs
        self.hidden : int = hidden

    @property
    def node_count(self) -> int:
        """Total number of nodes."""
        return self.inputs + self.outputs + self.hidden

    def copy(self) -> 'NetworkInfo':
        return NetworkInfo(self.inputs, self.outputs, self.hidden)

    def __eq__(self, other):
        if not isinstance(other, NetworkInfo):
            return NotImplemented
        return (self.inputs, self.outputs, self.hidden) == (other.inputs, other.outputs, other.hidden)

    def __repr__(self):
        return f"NetworkInfo(inputs={self.inputs}, outputs={self.outputs}, hidden={self.hidden})"
