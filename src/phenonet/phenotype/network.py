"""
Feed-Forward Network Module

This module implements a feed-forward neural network made of dense layers.
The network is the phenotype an external evolutionary optimizer evaluates:
it can be built from explicit layers, initialized randomly from a topology,
or rebuilt from a flat parameter vector (a "genome").

Genome layout:
    The genome is a 1D float32 array holding every trainable parameter of
    the network. For each layer, in network order, it contains the weights
    in row-major order (the incoming weights of the first neuron, then those
    of the second neuron, ...) followed by the biases in neuron order.
    Optimizers rely on this layout to mutate and recombine genomes, so it
    must not change.

    A genome together with the network topology fully determines a network:
        Network.from_genome(net.to_genome(), net.topology()) == net

Classes:
    Network: Feed-forward neural network (batch processing)
"""

import logging
import numpy as np
from typing import Sequence, TYPE_CHECKING
import graphviz  # type: ignore

from phenonet.activations              import ActivationFunction
from phenonet.phenotype.layer          import Layer
from phenonet.phenotype.layer_topology import LayerTopology

if TYPE_CHECKING:
    from phenonet.run.config import Config

logger = logging.getLogger(__name__)

class Network:
    """
    A feed-forward neural network: an ordered sequence of dense layers.

    The number of inputs of each layer equals the number of neurons of the
    previous one; this is checked at construction. A network never changes
    after construction.

    Public Properties:
        layers:          The layers of the network, in order
        number_layers:   Number of layers (excluding the input)
        input_size:      Number of inputs of the network
        output_size:     Number of outputs of the network
        parameter_count: Length of the network's genome

    Public Methods:
        random(topologies, rng):                Create a randomly initialized network
        from_genome(genome, topologies, strict): Rebuild a network from its genome
        from_config(config, genome, rng):       Create a network described by a Config
        genome_size(topologies):                Genome length implied by a topology
        predict(inputs):                        Process a batch through the network
                                                Input:  (batch_size, input_size)
                                                Output: (batch_size, output_size)
        predict_single(inputs):                 Process a single sample
                                                Input:  (input_size,)
                                                Output: (output_size,)
        topology():                             Describe the shape of the network
        to_genome():                            Flatten all parameters of the network
        visualize(view):                        Draw the network using Graphviz
    """

    def __init__(self, layers: Sequence[Layer]):
        """
        Initialize a network from its layers.

        Parameters:
            layers: The layers of the network, in order (at least one)

        Raises:
            ValueError: If there are no layers, or if the number of inputs of
                        a layer differs from the number of neurons of the
                        layer preceding it
            TypeError:  If an element of 'layers' is not a Layer
        """
        layers = tuple(layers)
        if not layers:
            raise ValueError("A network requires at least one layer")

        for idx, layer in enumerate(layers):
            if not isinstance(layer, Layer):
                raise TypeError(f"Layer {idx} must be a Layer, got {type(layer).__name__}")

        for idx in range(1, len(layers)):
            prev, curr = layers[idx - 1], layers[idx]
            if curr.input_count != prev.neuron_count:
                raise ValueError(f"Layer {idx} expects {curr.input_count} inputs but "
                                 f"layer {idx - 1} has {prev.neuron_count} neurons")

        self._layers: tuple[Layer, ...] = layers

    @classmethod
    def random(cls,
               topologies: Sequence[LayerTopology],
               rng       : np.random.Generator | None = None) -> 'Network':
        """
        Create a network with randomly initialized layers.

        One layer is created for each pair of consecutive topology entries.
        The first entry only supplies the number of inputs of the network:
        its activation is ignored and it gets no weights of its own.

        Parameters:
            topologies: Shapes of the input and of every layer (at least two entries)
            rng:        Source of randomness shared by all layers;
                        a fresh unseeded generator if None

        Raises:
            ValueError: If fewer than two topology entries are given
        """
        topologies = cls._check_topologies(topologies)

        if rng is None:
            rng = np.random.default_rng()

        layers = [Layer.random(prev.neuron_count, curr.neuron_count, curr.activation, rng)
                  for prev, curr in zip(topologies[:-1], topologies[1:])]

        logger.debug("Created random network with topology [%s]",
                     ", ".join(str(t) for t in topologies))
        return cls(layers)

    @classmethod
    def from_genome(cls,
                    genome    : Sequence[float] | np.ndarray,
                    topologies: Sequence[LayerTopology],
                    strict    : bool = False) -> 'Network':
        """
        Rebuild a network from its genome and topology.

        The genome is read sequentially: for each pair of consecutive topology
        entries, input_count * neuron_count values fill the weight matrix (row
        by row), then neuron_count values fill the bias vector.

        A genome longer than required is accepted unless 'strict' is set: the
        trailing values are left unused. This lets an optimizer keep fixed-size
        chromosomes for networks of different sizes.

        Parameters:
            genome:     Flat parameter vector (any 1D array-like)
            topologies: Shapes of the input and of every layer (at least two entries)
            strict:     If True, the genome length must match exactly

        Raises:
            ValueError: If the genome is not 1D, if it is too short for the
                        topology, or if it is too long and 'strict' is set
        """
        topologies = cls._check_topologies(topologies)

        genome = np.asarray(genome, dtype=np.float32)
        if genome.ndim != 1:
            raise ValueError(f"Genome must be a 1D array, got {genome.ndim}D")

        required = cls.genome_size(topologies)
        if genome.size < required:
            raise ValueError(f"Genome too short for topology: requires {required} values, got {genome.size}")
        if genome.size > required:
            if strict:
                raise ValueError(f"Genome too long for topology: requires {required} values, got {genome.size}")
            logger.debug("Ignoring %d trailing genome values (topology requires %d)",
                         genome.size - required, required)

        layers = []
        offset = 0
        for prev, curr in zip(topologies[:-1], topologies[1:]):
            num_weights = prev.neuron_count * curr.neuron_count
            weights = genome[offset : offset + num_weights].reshape(curr.neuron_count, prev.neuron_count)
            offset += num_weights

            biases  = genome[offset : offset + curr.neuron_count]
            offset += curr.neuron_count

            layers.append(Layer(weights, biases, curr.activation))

        return cls(layers)

    @classmethod
    def from_config(cls,
                    config: 'Config',
                    genome: Sequence[float] | np.ndarray | None = None,
                    rng   : np.random.Generator | None = None) -> 'Network':
        """
        Create a network with the topology described by a configuration.

        Without a genome the network is initialized randomly; if no random
        generator is given, one is seeded from 'config.seed'. With a genome
        the network is rebuilt from it, honoring 'config.strict_genome_length'.

        Parameters:
            config: Stores configuration parameters
            genome: Optional flat parameter vector
            rng:    Source of randomness (ignored when a genome is given)
        """
        if genome is not None:
            return cls.from_genome(genome, config.topology, strict=config.strict_genome_length)

        if rng is None:
            rng = np.random.default_rng(config.seed)
        return cls.random(config.topology, rng)

    @staticmethod
    def genome_size(topologies: Sequence[LayerTopology]) -> int:
        """
        Number of genome values required by a topology.

        This is the sum, over pairs of consecutive entries, of
        input_count * neuron_count + neuron_count.
        """
        return sum(prev.neuron_count * curr.neuron_count + curr.neuron_count
                   for prev, curr in zip(topologies[:-1], topologies[1:]))

    @staticmethod
    def _check_topologies(topologies: Sequence[LayerTopology]) -> list[LayerTopology]:
        topologies = list(topologies)
        if len(topologies) < 2:
            raise ValueError(f"A network topology requires at least 2 entries "
                             f"(inputs and one layer), got {len(topologies)}")
        for idx, topology in enumerate(topologies):
            if topology.neuron_count < 1:
                raise ValueError(f"Topology entry {idx} has {topology.neuron_count} neurons, expected at least 1")
        return topologies

    @property
    def layers(self) -> tuple[Layer, ...]:
        """The layers of the network, in order."""
        return self._layers

    @property
    def number_layers(self) -> int:
        """Number of layers (the input is not counted as a layer)."""
        return len(self._layers)

    @property
    def input_size(self) -> int:
        """Number of inputs of the network."""
        return self._layers[0].input_count

    @property
    def output_size(self) -> int:
        """Number of outputs of the network."""
        return self._layers[-1].neuron_count

    @property
    def parameter_count(self) -> int:
        """Number of trainable parameters, i.e. the length of the genome."""
        return sum(layer.parameter_count for layer in self._layers)

    def predict(self, inputs: np.ndarray) -> np.ndarray:
        """
        Process a batch of samples through every layer of the network.

        Parameters:
            inputs: Input values, shape (batch_size, input_size)

        Returns:
            Output values as a float32 array, shape (batch_size, output_size)

        Raises:
            ValueError: If inputs is not 2D or has the wrong number of columns
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.ndim != 2:
            raise ValueError(f"Input must be a 2D array, got {inputs.ndim}D")
        if inputs.shape[1] != self.input_size:
            raise ValueError(f"Expected {self.input_size} inputs, got {inputs.shape[1]}")

        outputs = inputs
        for layer in self._layers:
            outputs = layer.forward(outputs)
        return outputs

    def predict_single(self, inputs: np.ndarray) -> np.ndarray:
        """
        Process a single sample through the network.

        Same as predict() on a batch containing only this sample.

        Parameters:
            inputs: Input values, shape (input_size,)

        Returns:
            Output values as a float32 array, shape (output_size,)

        Raises:
            ValueError: If inputs is not 1D or has the wrong length
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.ndim != 1:
            raise ValueError(f"Input must be a 1D array, got {inputs.ndim}D")

        return self.predict(inputs.reshape(1, -1))[0]

    def topology(self) -> list[LayerTopology]:
        """
        Describe the shape of the network.

        Returns:
            List whose first entry describes the inputs (with a placeholder
            LINEAR activation), followed by the topology of each layer
        """
        return [LayerTopology(self.input_size, ActivationFunction.LINEAR)] + \
               [layer.topology() for layer in self._layers]

    def to_genome(self) -> np.ndarray:
        """
        Flatten all parameters of the network into its genome.

        Returns:
            1D float32 array: for each layer in order, its weights in
            row-major order followed by its biases
        """
        return np.concatenate([layer.to_genome() for layer in self._layers])

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Layers are drawn left to right, one cluster of neurons per layer.
        Each neuron is labelled with its bias, each edge with its weight.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        base_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        fill_colors = {'input': 'lightgrey', 'hidden': 'lightblue', 'output': 'white'}

        with dot.subgraph(name='cluster_0') as input_cluster:
            input_cluster.attr(rank='source', label='Inputs', style='invisible')
            for i in range(self.input_size):
                attrs = dict(base_attrs, fillcolor=fill_colors['input'], label=f"x{i}")
                input_cluster.node(f"0_{i}", **attrs)

        for layer_idx, layer in enumerate(self._layers, start=1):
            is_output = layer_idx == self.number_layers
            kind      = 'output' if is_output else 'hidden'
            with dot.subgraph(name=f'cluster_{layer_idx}') as layer_cluster:
                layer_cluster.attr(rank='sink' if is_output else 'same',
                                   label=f"{kind.capitalize()} ({layer.activation.code})",
                                   style='invisible')
                for j in range(layer.neuron_count):
                    attrs = dict(base_attrs, fillcolor=fill_colors[kind],
                                 label=f"n{j}\\nbias={layer.biases[j]:.2f}")
                    layer_cluster.node(f"{layer_idx}_{j}", **attrs)

        for layer_idx, layer in enumerate(self._layers, start=1):
            for j in range(layer.neuron_count):
                for i in range(layer.input_count):
                    dot.edge(f"{layer_idx - 1}_{i}", f"{layer_idx}_{j}",
                             label=f"w={layer.weights[j, i]:.2f}",
                             fontsize='5', penwidth='0.5', arrowsize='0.5', labelfloat='false')

        if view:
            dot.view(cleanup=True)

        return dot

    def __eq__(self, other):
        if not isinstance(other, Network):
            return NotImplemented
        return self._layers == other._layers

    __hash__ = None

    def __str__(self):
        """String representation showing network structure."""
        lines = [f"  Input: {self.input_size}"]
        for idx, layer in enumerate(self._layers):
            lines.append(f"  Layer {idx}: {layer.input_count:3d} => {layer.neuron_count:3d}, "
                         f"activation={layer.activation.code}")
        return "\n".join(lines)

    def __repr__(self):
        """Short representation for debugging."""
        return (f"Network(topology=[{', '.join(str(t) for t in self.topology())}], "
                f"parameters={self.parameter_count})")
