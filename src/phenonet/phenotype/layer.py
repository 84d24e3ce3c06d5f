"""
Dense Layer Module

This module implements a fully-connected (dense) layer: an affine transform
of its inputs followed by an activation function.

Classes:
    Layer: Weight matrix, bias vector and activation function of a dense layer
"""

import numpy as np

from phenonet.activations                import ActivationFunction
from phenonet.phenotype.layer_topology   import LayerTopology

class Layer:
    """
    A dense layer computing activation(inputs @ weights.T + biases).

    Row j of the weight matrix holds the incoming weights of neuron j, so the
    weight matrix has shape (neuron_count, input_count) and the bias vector
    has shape (neuron_count,). Both are stored as contiguous float32 arrays
    owned exclusively by the layer and marked read-only: a layer never changes
    after construction. To alter its parameters, build a new layer.

    Public Properties:
        weights:         Read-only weight matrix, shape (neuron_count, input_count)
        biases:          Read-only bias vector, shape (neuron_count,)
        activation:      Activation function applied after the affine transform
        input_count:     Number of inputs the layer expects
        neuron_count:    Number of neurons (outputs) of the layer
        parameter_count: Number of trainable parameters (weights + biases)

    Public Methods:
        random(input_count, neuron_count, activation, rng): Create a randomly initialized layer
        forward(inputs): Process a batch through the layer
        topology():      Describe the shape of the layer
        to_genome():     Flatten the layer's parameters
    """

    def __init__(self, weights: np.ndarray, biases: np.ndarray, activation: ActivationFunction):
        """
        Initialize a layer from explicit parameters.

        The parameters are copied, so the caller's arrays are never aliased.

        Parameters:
            weights:    Weight matrix, shape (neuron_count, input_count)
            biases:     Bias vector, shape (neuron_count,)
            activation: Activation function applied by the layer

        Raises:
            ValueError: If the shapes of weights and biases are inconsistent
        """
        weights = np.array(weights, dtype=np.float32, order='C', copy=True)
        biases  = np.array(biases , dtype=np.float32, order='C', copy=True)

        if weights.ndim != 2:
            raise ValueError(f"Weights must be a 2D array, got {weights.ndim}D")
        if biases.ndim != 1:
            raise ValueError(f"Biases must be a 1D array, got {biases.ndim}D")
        if weights.shape[0] == 0 or weights.shape[1] == 0:
            raise ValueError(f"Weights must have at least one row and one column, got shape {weights.shape}")
        if weights.shape[0] != biases.shape[0]:
            raise ValueError(f"Weight matrix has {weights.shape[0]} rows (neurons) "
                             f"but bias vector has {biases.shape[0]} entries")
        if not isinstance(activation, ActivationFunction):
            raise TypeError(f"activation must be an ActivationFunction, got {type(activation).__name__}")

        weights.setflags(write=False)
        biases.setflags(write=False)

        self._weights   : np.ndarray         = weights
        self._biases    : np.ndarray         = biases
        self._activation: ActivationFunction = activation

    @classmethod
    def random(cls,
               input_count : int,
               neuron_count: int,
               activation  : ActivationFunction,
               rng         : np.random.Generator | None = None) -> 'Layer':
        """
        Create a layer with zero biases and randomly initialized weights.

        The weight distribution depends on the activation function
        (see ActivationFunction.initial_weights).

        Parameters:
            input_count:  Number of inputs feeding the layer
            neuron_count: Number of neurons in the layer
            activation:   Activation function applied by the layer
            rng:          Source of randomness; a fresh unseeded generator if None
        """
        weights = activation.initial_weights(input_count, neuron_count, rng)
        biases  = np.zeros(neuron_count, dtype=np.float32)
        return cls(weights, biases, activation)

    # Views of the read-only buffers: a view cannot be made writeable again
    @property
    def weights(self) -> np.ndarray:
        """Weight matrix, shape (neuron_count, input_count)."""
        return self._weights.view()

    @property
    def biases(self) -> np.ndarray:
        """Bias vector, shape (neuron_count,)."""
        return self._biases.view()

    @property
    def activation(self) -> ActivationFunction:
        """Activation function applied after the affine transform."""
        return self._activation

    @property
    def input_count(self) -> int:
        """Number of inputs the layer expects."""
        return self.weights.shape[1]

    @property
    def neuron_count(self) -> int:
        """Number of neurons (outputs) of the layer."""
        return self.weights.shape[0]

    @property
    def parameter_count(self) -> int:
        """Number of weights plus number of biases."""
        return self.weights.size + self.biases.size

    def forward(self, inputs: np.ndarray) -> np.ndarray:
        """
        Process a batch of inputs through the layer.

        Parameters:
            inputs: Input values, shape (batch_size, input_count)

        Returns:
            Output values as a float32 array, shape (batch_size, neuron_count)

        Raises:
            ValueError: If inputs is not 2D or has the wrong number of columns
        """
        inputs = np.asarray(inputs, dtype=np.float32)
        if inputs.ndim != 2:
            raise ValueError(f"Input must be a 2D array, got {inputs.ndim}D")
        if inputs.shape[1] != self.input_count:
            raise ValueError(f"Expected {self.input_count} inputs, got {inputs.shape[1]}")

        # Each output row is weights @ input_row + biases
        z = inputs @ self.weights.T + self.biases
        return self.activation.forward(z)

    def topology(self) -> LayerTopology:
        """Shape of this layer (number of neurons and activation function)."""
        return LayerTopology(self.neuron_count, self.activation)

    def to_genome(self) -> np.ndarray:
        """
        Flatten the parameters of the layer.

        Returns:
            1D float32 array: the weights in row-major order
            (one neuron after the other) followed by the biases
        """
        return np.concatenate((self.weights.ravel(order='C'), self.biases))

    def __eq__(self, other):
        if not isinstance(other, Layer):
            return NotImplemented
        # NaN parameters compare equal to themselves
        return (self._activation == other._activation and
                np.array_equal(self._weights, other._weights, equal_nan=True) and
                np.array_equal(self._biases , other._biases , equal_nan=True))

    __hash__ = None

    def __repr__(self):
        return (f"Layer(inputs={self.input_count}, neurons={self.neuron_count}, "
                f"activation={self.activation.code})")
