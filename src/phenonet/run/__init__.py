"""
Run Package

Configuration and evaluation utilities for phenonet networks.

Exported:
    Config:       Configuration parsed from an INI file
    predict_many: Run many networks on the same batch, serially or in parallel
"""

from phenonet.run.config     import Config
from phenonet.run.evaluation import predict_many

__all__ = ['Config',
           'predict_many']
