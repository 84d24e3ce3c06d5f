"""
Integration tests: networks driven through their genome, the way an
evolutionary optimizer uses them.

A tiny (1+1) evolution strategy mutates genomes, rebuilds networks from
them and keeps improvements. It must make progress on XOR, which shows the
genome layout, the topology and the prediction path fit together.
"""

import pytest
import numpy as np

from phenonet import ActivationFunction, LayerTopology, Network, predict_many


@pytest.fixture
def xor_inputs():
    return np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]], dtype=np.float32)


@pytest.fixture
def xor_outputs():
    return np.array([[0.0], [1.0], [1.0], [0.0]], dtype=np.float32)


@pytest.fixture
def xor_topology():
    return [LayerTopology(2),
            LayerTopology(4, ActivationFunction.SIGMOID),
            LayerTopology(1, ActivationFunction.SIGMOID)]


def fitness(network, inputs, outputs):
    """4.0 minus the sum of squared errors."""
    return 4.0 - float(np.sum((network.predict(inputs) - outputs) ** 2))


class TestGenomeEvolution:
    """Test networks evolved through their genome."""

    def test_round_trip_preserves_predictions(self, xor_topology, xor_inputs):
        """Test that rebuilding from a genome preserves predictions exactly."""
        network = Network.random(xor_topology, np.random.default_rng(0))
        rebuilt = Network.from_genome(network.to_genome(), network.topology())
        np.testing.assert_array_equal(rebuilt.predict(xor_inputs), network.predict(xor_inputs))

    def test_fixed_size_chromosome(self, xor_topology, xor_inputs):
        """Test that one fixed-length chromosome serves topologies of different sizes."""
        smaller = [LayerTopology(2), LayerTopology(1, ActivationFunction.SIGMOID)]
        chromosome = np.random.default_rng(1).normal(size=Network.genome_size(xor_topology))

        large = Network.from_genome(chromosome, xor_topology)
        small = Network.from_genome(chromosome, smaller)

        assert large.parameter_count == chromosome.size
        assert small.parameter_count == Network.genome_size(smaller)
        np.testing.assert_array_equal(small.to_genome(),
                                      chromosome[:small.parameter_count].astype(np.float32))

    def test_hill_climbing_improves_fitness(self, xor_topology, xor_inputs, xor_outputs):
        """Test that mutating genomes and keeping the best improves XOR fitness."""
        rng = np.random.default_rng(42)
        parent = Network.random(xor_topology, rng)
        parent_fitness = initial_fitness = fitness(parent, xor_inputs, xor_outputs)

        for _ in range(300):
            genome = parent.to_genome()
            children = [Network.from_genome(genome + rng.normal(0.0, 0.5, size=genome.size),
                                            parent.topology(), strict=True)
                        for _ in range(4)]
            outputs = predict_many(children, xor_inputs)
            scores  = [4.0 - float(np.sum((o - xor_outputs) ** 2)) for o in outputs]

            best = int(np.argmax(scores))
            if scores[best] >= parent_fitness:
                parent, parent_fitness = children[best], scores[best]

        assert parent_fitness > initial_fitness
        assert parent_fitness == pytest.approx(fitness(parent, xor_inputs, xor_outputs))
