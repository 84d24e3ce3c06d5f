"""
Phenotype Package

This package implements feed-forward neural networks used as the phenotype
of candidates evolved by an external optimizer. Networks are built from
dense layers, process batches of samples, and can be converted to and from
a flat parameter vector (the genome) that the optimizer mutates and
recombines without knowing the network's internal layout.

Modules:
    layer_topology: Shape of a layer (neuron count and activation function)
    layer:          Dense layer (weights, biases, activation function)
    network:        Feed-forward network with genome encoding/decoding

Exported Classes:
    LayerTopology: Neuron count and activation function of a layer
    Layer:         A dense layer
    Network:       A feed-forward network of dense layers (batch processing)
"""

from phenonet.phenotype.layer_topology import LayerTopology
from phenonet.phenotype.layer          import Layer
from phenonet.phenotype.network        import Network

__all__ = ['LayerTopology',
           'Layer',
           'Network']
