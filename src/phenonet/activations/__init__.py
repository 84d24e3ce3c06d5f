"""
Activations Package

This package provides the activation functions available to dense layers.

Exported:
    ActivationFunction: Enumeration of activation functions (forward transform
                        and matching weight initialization policy)
    activations:        Dictionary mapping activation function names to functions
    activation_codes:   Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: linear_activation, relu_activation,
                                     sigmoid_activation, softmax_activation
"""

from phenonet.activations.activation_function import (
    ActivationFunction,
    activations,
    activation_codes,
    linear_activation,
    relu_activation,
    sigmoid_activation,
    softmax_activation
)

__all__ = [
    'ActivationFunction',
    'activations',
    'activation_codes',
    'linear_activation',
    'relu_activation',
    'sigmoid_activation',
    'softmax_activation'
]
