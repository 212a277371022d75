"""
Top-level package for the playground dataset generator.

This package synthesizes small labeled 2D classification problems (circle,
XOR, Gaussian clusters, spiral) with train/test splits and mini-batching.
"""

from importlib.metadata import PackageNotFoundError, version

from .data import (
    Dataset,
    DatasetGenerator,
    DatasetKind,
    InvalidKind,
    LabeledPoint,
    NoDataAvailable,
    NoTrainingData,
    generate_dataset,
)
from .utils import GeneratorConfig, NoiseConfig


def get_version() -> str:
    """
    Return the installed package version if available.

    This is safe to call even when the project is not installed
    as a package; in that case a default string is returned.

    Returns:
        str: Semantic version string or a fallback value.
    """
    try:
        return version("playground-data")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "get_version",
    "Dataset",
    "DatasetGenerator",
    "DatasetKind",
    "LabeledPoint",
    "generate_dataset",
    "GeneratorConfig",
    "NoiseConfig",
    "InvalidKind",
    "NoTrainingData",
    "NoDataAvailable",
]
