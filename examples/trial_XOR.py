"""
XOR Problem with Genome Hill Climbing

This example evolves the weights of a fixed-topology network to solve the
classic XOR problem. It plays the part of the external optimizer: it never
looks inside the network, it only mutates genomes, rebuilds networks from
them and scores their predictions.

The XOR Problem:
    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact outputs.

Usage:
    python examples/trial_XOR.py [num_jobs]
"""

import sys
import numpy as np
from pathlib import Path

from phenonet import Config, Network, predict_many

XOR_INPUTS  = np.array([[0.0, 0.0],
                        [0.0, 1.0],
                        [1.0, 0.0],
                        [1.0, 1.0]], dtype=np.float32)
XOR_OUTPUTS = np.array([[0.0],
                        [1.0],
                        [1.0],
                        [0.0]], dtype=np.float32)

# Search parameters
NUM_OFFSPRING     = 20
MUTATION_STRENGTH = 0.5
MAX_GENERATIONS   = 500
FITNESS_THRESHOLD = 3.9

def evaluate_fitness(outputs: np.ndarray) -> float:
    errors = outputs - XOR_OUTPUTS        # calculate errors
    return 4.0 - float(np.sum(errors ** 2))  # errors cause the fitness to decrease

def run(config: Config, num_jobs: int = 1) -> Network:
    """
    Evolve a network solving XOR.

    Parameters:
        config:   Configuration holding the topology and the seed
        num_jobs: Number of parallel processes for fitness evaluation

    Returns:
        The fittest network found
    """
    rng = np.random.default_rng(config.seed)

    champion = Network.from_config(config, rng=rng)
    champion_fitness = evaluate_fitness(champion.predict(XOR_INPUTS))

    for generation in range(1, MAX_GENERATIONS + 1):

        # Offspring are mutated copies of the champion's genome
        genome    = champion.to_genome()
        offspring = [Network.from_config(config, genome=genome + rng.normal(0.0, MUTATION_STRENGTH, genome.size))
                     for _ in range(NUM_OFFSPRING)]

        outputs = predict_many(offspring, XOR_INPUTS, num_jobs)
        scores  = [evaluate_fitness(o) for o in outputs]

        best = int(np.argmax(scores))
        if scores[best] > champion_fitness:
            champion, champion_fitness = offspring[best], scores[best]
            print(f"Generation {generation:4d}: fitness = {champion_fitness:.4f}")

        if champion_fitness >= FITNESS_THRESHOLD:
            break

    return champion

def report(network: Network):
    """Display the XOR truth table computed by the network."""
    print(f"\n{network}\n")
    print("  x0   x1  | target  output")
    for inputs, target in zip(XOR_INPUTS, XOR_OUTPUTS):
        output = network.predict_single(inputs)[0]
        print(f"  {inputs[0]:.0f}    {inputs[1]:.0f}   |   {target[0]:.0f}     {output:.4f}")

if __name__ == '__main__':
    num_jobs    = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    config_file = Path(__file__).parent / "configs" / "config_xor.ini"

    config   = Config(str(config_file))
    champion = run(config, num_jobs)
    report(champion)
