"""
Utility modules for the playground dataset generator.

This subpackage provides:
    - random generator construction
    - configuration dataclasses
"""

from .configs import GeneratorConfig, NoiseConfig
from .seed import SeedLike, create_rng

__all__ = [
    "create_rng",
    "SeedLike",
    "GeneratorConfig",
    "NoiseConfig",
]
