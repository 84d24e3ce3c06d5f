"""
Unit tests for batch evaluation of many networks.
"""

import pytest
import numpy as np
from unittest.mock import patch

from phenonet.phenotype import Network
from phenonet.run.evaluation import predict_many


@pytest.fixture
def population(sample_topology):
    """Five networks sharing the sample topology."""
    return [Network.random(sample_topology, np.random.default_rng(seed)) for seed in range(5)]


@pytest.fixture
def inputs():
    return np.random.default_rng(0).normal(size=(4, 3)).astype(np.float32)


class TestPredictMany:
    """Test predict_many()."""

    def test_serial_matches_predict(self, population, inputs):
        """Test that each result is the prediction of the matching network."""
        results = predict_many(population, inputs)
        assert len(results) == len(population)
        for network, result in zip(population, results):
            np.testing.assert_array_equal(result, network.predict(inputs))

    def test_serial_does_not_use_joblib(self, population, inputs):
        """Test that num_jobs=1 evaluates in-process."""
        with patch('phenonet.run.evaluation.Parallel') as mock_parallel:
            predict_many(population, inputs, num_jobs=1)
        mock_parallel.assert_not_called()

    def test_parallel_matches_serial(self, population, inputs):
        """Test that parallel evaluation gives the same results in the same order."""
        serial   = predict_many(population, inputs, num_jobs=1)
        parallel = predict_many(population, inputs, num_jobs=2)
        for s, p in zip(serial, parallel):
            np.testing.assert_array_equal(s, p)

    def test_parallel_uses_joblib(self, population, inputs):
        """Test that num_jobs != 1 dispatches through joblib."""
        with patch('phenonet.run.evaluation.Parallel') as mock_parallel:
            mock_parallel.return_value.return_value = iter([])
            predict_many(population, inputs, num_jobs=-1)
        mock_parallel.assert_called_once_with(-1)

    def test_empty_population(self, inputs):
        """Test that at least one network is required."""
        with pytest.raises(ValueError, match="At least one network"):
            predict_many([], inputs)

    def test_input_mismatch(self, population):
        """Test that shape errors propagate."""
        with pytest.raises(ValueError, match="Expected 3 inputs, got 2"):
            predict_many(population, np.zeros((4, 2)))
