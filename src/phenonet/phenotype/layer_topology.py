"""
Layer Topology Module

This module implements LayerTopology, a lightweight description of the shape
of a layer (how many neurons it has and which activation function it applies)
that carries none of its numeric parameters.

A sequence of LayerTopology values describes a whole network. The first entry
of such a sequence only supplies the input dimensionality of the network.

Classes:
    LayerTopology: Neuron count and activation function of a layer
"""

import numbers
from typing import NamedTuple

from phenonet.activations import ActivationFunction

class LayerTopology(NamedTuple):
    """
    The shape of a layer: number of neurons and activation function.

    Immutable and comparable by value. Used both to specify networks to be
    built and to describe the layers of existing networks.

    Public Attributes:
        neuron_count: Number of neurons in the layer (>= 1)
        activation:   Activation function applied by the layer
    """
    neuron_count: int
    activation  : ActivationFunction = ActivationFunction.LINEAR

    @classmethod
    def validated(cls,
                  neuron_count: int,
                  activation  : ActivationFunction = ActivationFunction.LINEAR) -> 'LayerTopology':
        """
        Create a LayerTopology, checking its attributes.

        Raises:
            TypeError:  If neuron_count is not an integer or activation is
                        not an ActivationFunction
            ValueError: If neuron_count is smaller than 1
        """
        if isinstance(neuron_count, bool) or not isinstance(neuron_count, numbers.Integral):
            raise TypeError(f"neuron_count must be an integer, got {type(neuron_count).__name__}")
        if not isinstance(activation, ActivationFunction):
            raise TypeError(f"activation must be an ActivationFunction, got {type(activation).__name__}")
        if neuron_count < 1:
            raise ValueError(f"neuron_count must be at least 1, got {neuron_count}")

        return cls(int(neuron_count), activation)

    def __str__(self):
        return f"{self.neuron_count}:{self.activation.code}"
