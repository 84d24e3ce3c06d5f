import configparser
import numbers
import os
from phenonet.activations              import ActivationFunction
from phenonet.phenotype.layer_topology import LayerTopology

class Config:

    @staticmethod
    def _parse_int_list(raw_value):
        """
        Parse a comma-separated list of integers (e.g. "2, 4, 1").

        Parameters:
            raw_value: Either a comma-separated string or already a list

        Returns:
            List of integers

        Raises:
            ValueError: If a value is not an integer
        """
        if isinstance(raw_value, list):
            # bool is an Integral, but True/False are not layer sizes
            if any(isinstance(v, bool) or not isinstance(v, numbers.Integral) for v in raw_value):
                raise ValueError(f"Invalid layer_sizes {raw_value!r}, expected integers")
            return [int(v) for v in raw_value]
        if not raw_value.strip():
            return []
        try:
            return [int(v.strip()) for v in raw_value.split(',')]
        except ValueError:
            raise ValueError(f"Invalid layer_sizes '{raw_value}', expected comma-separated integers") from None

    @staticmethod
    def _parse_activations(raw_value):
        """
        Parse a comma-separated list of activation function names.

        Parameters:
            raw_value: Either a comma-separated string or already a list

        Returns:
            List of ActivationFunction members
        """
        if isinstance(raw_value, list):
            return [v if isinstance(v, ActivationFunction) else ActivationFunction.from_name(v)
                    for v in raw_value]
        if not raw_value.strip():
            return []
        return [ActivationFunction.from_name(v) for v in raw_value.split(',')]

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create an empty Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates an empty Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.layer_sizes          = []
            self.layer_activations    = []
            self.seed                 = None
            self.strict_genome_length = False
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
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
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [TOPOLOGY]

        # The number of neurons in each layer, starting with the input layer.
        # The first entry is the number of inputs of the network; every other
        # entry becomes a dense layer with that many neurons.
        self.layer_sizes = self._parse_int_list(get_value('TOPOLOGY', 'layer_sizes', str))

        # The activation function of each dense layer (one fewer entry than 'layer_sizes').
        # Allowed values: linear, relu, sigmoid, softmax
        self.layer_activations = self._parse_activations(get_value('TOPOLOGY', 'layer_activations', str))

        if len(self.layer_activations) != len(self.layer_sizes) - 1:
            raise ValueError(f"Expected {len(self.layer_sizes) - 1} layer_activations "
                             f"for {len(self.layer_sizes)} layer_sizes, got {len(self.layer_activations)}")

        # [INITIALIZATION]

        # Seed for the random generator used to initialize network weights.
        # Use "None" for a different initialization on every run.
        self.seed = get_value('INITIALIZATION', 'seed', int, default=None)

        # [GENOME]

        # Whether a genome must have exactly the length implied by the topology.
        # If 'False', trailing values beyond that length are ignored.
        self.strict_genome_length = get_value('GENOME', 'strict_genome_length', bool, default=False)

    @property
    def topology(self) -> list[LayerTopology]:
        """
        The network topology described by this configuration.

        The first entry describes the inputs (placeholder LINEAR activation).

        Raises:
            ValueError: If the layer sizes or activations are inconsistent
        """
        if len(self.layer_activations) != len(self.layer_sizes) - 1:
            raise ValueError(f"Expected {len(self.layer_sizes) - 1} layer_activations "
                             f"for {len(self.layer_sizes)} layer_sizes, got {len(self.layer_activations)}")

        activations = [ActivationFunction.LINEAR] + list(self.layer_activations)
        return [LayerTopology.validated(size, activation)
                for size, activation in zip(self.layer_sizes, activations)]

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse list-valued options when set.
        This allows users to write config.layer_sizes = "2, 4, 1" and
        config.layer_activations = "relu, sigmoid".
        """
        if name == 'layer_sizes':
            value = self._parse_int_list(value)
        elif name == 'layer_activations':
            value = self._parse_activations(value)
        super().__setattr__(name, value)
