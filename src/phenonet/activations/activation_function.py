"""
Activation Function Module.

This module implements the closed set of activation functions available to
a dense layer, together with the weight initialization policy matched to
each of them.

Every activation operates row-wise on a 2D array whose rows are the samples
of a batch and whose columns are the neurons of a layer. All functions are
pure: they never modify their input and always return a new float32 array.

Classes:
    ActivationFunction: Enumeration of the supported activation functions
"""

import numpy as np
from enum import Enum

def linear_activation(z):
    return np.array(z, dtype=np.float32, copy=True)

def relu_activation(z):
    return np.maximum(np.float32(0.0), z).astype(np.float32, copy=False)

def sigmoid_activation(z):
    z = np.asarray(z, dtype=np.float32)
    # exp(-z) overflows to inf for very negative z, which correctly yields 0
    with np.errstate(over='ignore'):
        return (1.0 / (1.0 + np.exp(-z))).astype(np.float32, copy=False)

def softmax_activation(z):
    z = np.asarray(z, dtype=np.float32)
    # Subtract the row maximum so that exp() cannot overflow
    shifted = z - np.max(z, axis=-1, keepdims=True)
    exp_z   = np.exp(shifted)
    return (exp_z / np.sum(exp_z, axis=-1, keepdims=True)).astype(np.float32, copy=False)

activations = {
    "linear" : linear_activation,
    "relu"   : relu_activation,
    "sigmoid": sigmoid_activation,
    "softmax": softmax_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "linear" : "LIN",
    "relu"   : "RLU",
    "sigmoid": "SIG",
    "softmax": "SMX"
    }

class ActivationFunction(Enum):
    """
    The activation functions a layer can apply after its affine transform.

    The set is closed: each member knows both how to transform a batch of
    pre-activations and how to draw the initial weights of a layer using it.
    Initial weights matter even though networks are never trained here: they
    define the distribution of the initial genomes an optimizer starts from.

    Members:
        LINEAR:  identity
        RELU:    max(0, z)
        SIGMOID: 1 / (1 + exp(-z))
        SOFTMAX: row-wise normalized exponential

    Public Properties:
        code: 3-letter identifier of the activation function

    Public Methods:
        forward(z):                                       Apply the activation to a batch
        initial_weights(input_count, neuron_count, rng): Draw an initial weight matrix
        from_name(name):                                  Look up a member by name
    """
    LINEAR  = "linear"
    RELU    = "relu"
    SIGMOID = "sigmoid"
    SOFTMAX = "softmax"

    @property
    def code(self) -> str:
        """3-letter identifier, used in string representations."""
        return activation_codes[self.value]

    @classmethod
    def from_name(cls, name: str) -> 'ActivationFunction':
        """
        Look up an activation function by its (case-insensitive) name.

        Parameters:
            name: Name of the activation function, e.g. 'relu'

        Returns:
            The matching ActivationFunction member

        Raises:
            ValueError: If no activation function has this name
        """
        key = name.strip().lower()
        if key not in activations:
            raise ValueError(f"Invalid activation function '{name}', "
                             f"expected one of {list(activations.keys())}")
        return cls(key)

    def forward(self, z: np.ndarray) -> np.ndarray:
        """
        Apply the activation function to a batch of pre-activations.

        Parameters:
            z: Pre-activation values, shape (batch_size, num_neurons)

        Returns:
            Activated values as a new float32 array with the same shape as z
        """
        return activations[self.value](z)

    def initial_weights(self,
                        input_count : int,
                        neuron_count: int,
                        rng         : np.random.Generator | None = None) -> np.ndarray:
        """
        Draw the initial weight matrix for a layer using this activation.

        LINEAR and RELU layers use He-style scaling: values are drawn from
        U[-1, 1] and then multiplied by sqrt(2 / input_count). SIGMOID and
        SOFTMAX layers use Glorot-style scaling: values are drawn from
        U[-limit, limit] with limit = sqrt(6 / (input_count + neuron_count)).

        Parameters:
            input_count:  Number of inputs feeding the layer
            neuron_count: Number of neurons in the layer
            rng:          Source of randomness; a fresh unseeded generator if None

        Returns:
            float32 array of shape (neuron_count, input_count)

        Raises:
            ValueError: If input_count or neuron_count is smaller than 1
        """
        if input_count < 1 or neuron_count < 1:
            raise ValueError(f"Layer dimensions must be positive, got "
                             f"input_count={input_count}, neuron_count={neuron_count}")

        if rng is None:
            rng = np.random.default_rng()

        shape = (neuron_count, input_count)
        if self in (ActivationFunction.LINEAR, ActivationFunction.RELU):
            weights = rng.uniform(-1.0, 1.0, size=shape) * np.sqrt(2.0 / input_count)
        else:
            limit   = np.sqrt(6.0 / (input_count + neuron_count))
            weights = rng.uniform(-limit, limit, size=shape)

        return weights.astype(np.float32)

    def __str__(self):
        return self.code
