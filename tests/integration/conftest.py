"""
Shared fixtures for integration tests.
"""

import pytest


@pytest.fixture
def xor_inputs():
    """XOR inputs (list format)."""
    return [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]


@pytest.fixture
def xor_outputs():
    """XOR expected outputs (list format)."""
    return [0.0, 1.0, 1.0, 0.0]


@pytest.fixture
def config_file(tmp_path):
    """An INI file with structural mutation rates high enough to grow small networks quickly."""
    path = tmp_path / "config_xor.ini"
    path.write_text(
        "[NETWORK]\n"
        "num_inputs  = 2\n"
        "num_outputs = 1\n"
        "\n"
        "[MUTATION]\n"
        "mutation_count        = 3\n"
        "add_node_rate         = 0.1\n"
        "add_connection_rate   = 0.3\n"
        "new_value_probability = 0.1\n"
        "weight_range          = 2.0\n"
        "weight_small_range    = 0.1\n"
        "max_hidden_nodes      = 8\n"
        "\n"
        "[RANDOM]\n"
        "seed = 42\n")
    return str(path)
