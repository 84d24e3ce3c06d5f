"""
Batch Evaluation Module

Helpers to run many candidate networks on the same batch of inputs, the way
an evolutionary optimizer scores a population. Evaluation can be serial or
spread over several processes using joblib; the results are the same.
"""

import numpy as np
from joblib import Parallel, delayed
from typing import Sequence

from phenonet.phenotype.network import Network

def _predict(network: Network, inputs: np.ndarray) -> np.ndarray:
    return network.predict(inputs)

def predict_many(networks: Sequence[Network],
                 inputs  : np.ndarray,
                 num_jobs: int = 1) -> list[np.ndarray]:
    """
    Run every network on the same batch of inputs.

    Parameters:
        networks: The networks to evaluate (at least one)
        inputs:   Input values, shape (batch_size, input_size)
        num_jobs: Number of parallel processes
                   1 = serial (default)
                  -1 = use all available CPU cores
                  >1 = use specified number of processes

    Returns:
        List of output arrays, one per network, in the order of 'networks'

    Raises:
        ValueError: If no networks are given, or if the inputs do not
                    match the input size of some network
    """
    networks = list(networks)
    if not networks:
        raise ValueError("At least one network is required")

    inputs = np.asarray(inputs, dtype=np.float32)

    if num_jobs == 1:
        return [_predict(network, inputs) for network in networks]

    return list(Parallel(num_jobs)(delayed(_predict)(network, inputs) for network in networks))
