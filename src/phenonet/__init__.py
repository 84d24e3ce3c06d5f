"""
phenonet - feed-forward network phenotypes for evolutionary optimizers.

This package provides minimal dense neural networks for inference only. An
external evolutionary optimizer creates candidate networks, extracts their
parameters as a flat vector (genome), mutates and recombines genomes, and
rebuilds networks from them to score their fitness.

Main components:
- activations: Activation functions and their weight initialization policies
- phenotype:   Layer topologies, dense layers and networks (genome encode/decode)
- run:         Configuration and batch evaluation of many networks

Example:
    >>> import numpy as np
    >>> from phenonet import ActivationFunction, LayerTopology, Network
    >>> topology = [LayerTopology(2), LayerTopology(4, ActivationFunction.RELU),
    ...             LayerTopology(1, ActivationFunction.SIGMOID)]
    >>> net = Network.random(topology, np.random.default_rng(0))
    >>> genome = net.to_genome()
    >>> Network.from_genome(genome, net.topology()) == net
    True
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from phenonet.activations import ActivationFunction
from phenonet.phenotype   import Layer, LayerTopology, Network
from phenonet.run         import Config, predict_many

__all__ = [
    "ActivationFunction",
    "LayerTopology",
    "Layer",
    "Network",
    "Config",
    "predict_many",
]
