"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible initialization."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_topology():
    """Topology with 3 inputs, a hidden RELU layer and a SOFTMAX output."""
    from phenonet.activations import ActivationFunction
    from phenonet.phenotype import LayerTopology

    return [LayerTopology(3, ActivationFunction.LINEAR),
            LayerTopology(5, ActivationFunction.RELU),
            LayerTopology(4, ActivationFunction.SIGMOID),
            LayerTopology(2, ActivationFunction.SOFTMAX)]


@pytest.fixture
def sample_network(sample_topology, rng):
    """A randomly initialized network with the sample topology."""
    from phenonet.phenotype import Network
    return Network.random(sample_topology, rng)
