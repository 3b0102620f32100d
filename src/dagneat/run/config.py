import configparser
import os

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Every option has a default value; options missing from the file keep it.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding the default values.
        """

        # [NETWORK]

        # The number of input nodes, through which the network receives inputs.
        self.num_inputs = None

        # The number of output nodes, to which the network delivers outputs.
        self.num_outputs = None

        # [MUTATION]

        # The number of weight/bias perturbation attempts per call to 'mutate'.
        # Each attempt happens with probability 0.25.
        self.mutation_count = 3

        # The probability that mutation will add a new hidden node by
        # splitting an existing connection.
        self.add_node_rate = 0.03

        # The probability that mutation will attempt to add a connection
        # between two existing nodes.
        self.add_connection_rate = 0.05

        # The probability that a mutated weight/bias is replaced by a brand
        # new value instead of being perturbed.
        self.new_value_probability = 0.1

        # New weights and biases (and perturbations) are drawn uniformly
        # from [-weight_range, weight_range].
        self.weight_range = 2.0

        # Multiplier applied to small perturbations.
        self.weight_small_range = 0.1

        # The number of hidden nodes beyond which mutation stops adding nodes.
        self.max_hidden_nodes = 50

        # [RANDOM]

        # Seed for the random number generator (None: not reproducible).
        self.seed = None

        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Helper function to safely parse values
        def get_value(section, key, value_type, default):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                return default

        self.num_inputs  = get_value('NETWORK', 'num_inputs' , int, self.num_inputs)
        self.num_outputs = get_value('NETWORK', 'num_outputs', int, self.num_outputs)

        self.mutation_count        = get_value('MUTATION', 'mutation_count'       , int  , self.mutation_count)
        self.add_node_rate         = get_value('MUTATION', 'add_node_rate'        , float, self.add_node_rate)
        self.add_connection_rate   = get_value('MUTATION', 'add_connection_rate'  , float, self.add_connection_rate)
        self.new_value_probability = get_value('MUTATION', 'new_value_probability', float, self.new_value_probability)
        self.weight_range          = get_value('MUTATION', 'weight_range'         , float, self.weight_range)
        self.weight_small_range    = get_value('MUTATION', 'weight_small_range'   , float, self.weight_small_range)
        self.max_hidden_nodes      = get_value('MUTATION', 'max_hidden_nodes'     , int  , self.max_hidden_nodes)

        self.seed = get_value('RANDOM', 'seed', int, self.seed)
