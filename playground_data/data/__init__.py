"""
Synthetic dataset generation for the playground classification problems.

This subpackage exposes the dataset containers, the per-kind sampler and the
stateful ``DatasetGenerator``.
"""

from .datasets import Dataset, DatasetKind, LabeledPoint, generate_dataset
from .errors import InvalidKind, NoDataAvailable, NoTrainingData
from .generator import DatasetGenerator

__all__ = [
    "Dataset",
    "DatasetKind",
    "LabeledPoint",
    "generate_dataset",
    "DatasetGenerator",
    "InvalidKind",
    "NoTrainingData",
    "NoDataAvailable",
]
