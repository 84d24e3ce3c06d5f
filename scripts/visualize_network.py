#!/usr/bin/env python3
"""
Utility script to visualize a network stored as a genome.

The genome is a 1D array saved with numpy.save(); the configuration file
supplies the topology needed to rebuild the network from it.

Usage:
    python scripts/visualize_network.py --config examples/configs/config_xor.ini --genome champion.npy
"""

import sys
import argparse
import numpy as np
from pathlib import Path

# Add source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from phenonet import Config, Network


def visualize_genome(genome, config, output_file='network', format='png', view=True):
    """
    Render the network encoded by a genome.

    Args:
        genome: Flat parameter vector of the network
        config: Configuration holding the network topology
        output_file: Output filename (without extension)
        format: Output format (png, pdf, svg, etc.)
        view: Whether to automatically open the generated file
    """
    network = Network.from_config(config, genome=genome)
    dot = network.visualize(view=False)
    dot.format = format
    dot.render(output_file, view=view, cleanup=True)
    print(f"Network visualization saved to {output_file}.{format}")


def main():
    parser = argparse.ArgumentParser(description='Visualize a network stored as a genome')
    parser.add_argument('--config', type=str, required=True,
                        help='Path to the INI configuration file describing the topology')
    parser.add_argument('--genome', type=str, required=True,
                        help='Path to the genome file (.npy)')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    config = Config(args.config)
    genome = np.load(args.genome)

    try:
        visualize_genome(genome, config, args.output, args.format, not args.no_view)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
