"""
Unit tests for Config.

Tests cover default values, INI parsing, 'none' values, missing options
and missing files.
"""

import pytest

from dagneat.run.config import Config


@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "config.ini"
        path.write_text(text)
        return str(path)
    return _write


class TestDefaults:

    def test_default_values(self):
        config = Config()

        assert config.num_inputs is None
        assert config.num_outputs is None
        assert config.mutation_count == 3
        assert config.add_node_rate == 0.03
        assert config.add_connection_rate == 0.05
        assert config.new_value_probability == 0.1
        assert config.weight_range == 2.0
        assert config.weight_small_range == 0.1
        assert config.max_hidden_nodes == 50
        assert config.seed is None


class TestFromFile:

    def test_full_file(self, write_config):
        path = write_config(
            "[NETWORK]\n"
            "num_inputs  = 2\n"
            "num_outputs = 1\n"
            "\n"
            "[MUTATION]\n"
            "mutation_count        = 5\n"
            "add_node_rate         = 0.2\n"
            "add_connection_rate   = 0.4\n"
            "new_value_probability = 0.05\n"
            "weight_range          = 1.5\n"
            "weight_small_range    = 0.2\n"
            "max_hidden_nodes      = 10\n"
            "\n"
            "[RANDOM]\n"
            "seed = 1234\n")

        config = Config(path)

        assert config.num_inputs == 2
        assert config.num_outputs == 1
        assert config.mutation_count == 5
        assert config.add_node_rate == 0.2
        assert config.add_connection_rate == 0.4
        assert config.new_value_probability == 0.05
        assert config.weight_range == 1.5
        assert config.weight_small_range == 0.2
        assert config.max_hidden_nodes == 10
        assert config.seed == 1234

    def test_types(self, write_config):
        config = Config(write_config("[MUTATION]\nmutation_count = 4\nweight_range = 3\n"))
        assert isinstance(config.mutation_count, int)
        assert isinstance(config.weight_range, float)

    def test_missing_options_keep_defaults(self, write_config):
        config = Config(write_config("[MUTATION]\nadd_node_rate = 0.5\n"))

        assert config.add_node_rate == 0.5
        assert config.add_connection_rate == 0.05
        assert config.max_hidden_nodes == 50
        assert config.num_inputs is None
        assert config.seed is None

    def test_none_value(self, write_config):
        config = Config(write_config("[RANDOM]\nseed = None\n"))
        assert config.seed is None

    def test_empty_file(self, write_config):
        config = Config(write_config(""))
        assert config.mutation_count == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "does_not_exist.ini"))

    def test_bad_value(self, write_config):
        with pytest.raises(ValueError):
            Config(write_config("[MUTATION]\nmutation_count = many\n"))
