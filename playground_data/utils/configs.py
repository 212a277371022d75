"""
Configuration dataclasses for synthetic dataset generation.

These dataclasses centralize the point counts, shape constants and noise
levels so that the samplers do not rely on hard-coded constants spread
throughout the codebase.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NoiseConfig:
    """
    Noise settings applied on top of each dataset shape.

    Args:
        circle (float): Standard deviation of coordinate noise for circles.
        xor (float): Standard deviation of coordinate noise for XOR.
        gaussian (float): Extra coordinate noise added to the Gaussian blobs.
        spiral (float): Standard deviation of coordinate noise for spirals.
        label_flip (float): Probability of flipping each circle label.
    """

    circle: float = 0.5
    xor: float = 0.3
    gaussian: float = 0.3
    spiral: float = 0.3
    label_flip: float = 0.0

    def __post_init__(self) -> None:
        for name in ("circle", "xor", "gaussian", "spiral"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"NoiseConfig.{name} must be non-negative, got {value}.")
        if not (0.0 <= self.label_flip < 0.5):
            raise ValueError(f"NoiseConfig.label_flip must lie in [0, 0.5), got {self.label_flip}.")


@dataclass
class GeneratorConfig:
    """
    Configuration for a ``DatasetGenerator``.

    Args:
        n_train (int): Number of training samples, shared by every kind.
        n_test (int): Number of test samples, shared by every kind.
        batch_size (int): Default mini-batch size.
        radius (float): Outer radius of the circle and spiral shapes and the
            half-width of the XOR square.
        xor_padding (float): Gap kept between XOR samples and the axes.
        gaussian_center (float): Blob centers sit at ``(c, c)`` and ``(-c, -c)``.
        gaussian_std (float): Standard deviation of each Gaussian blob.
        spiral_turns (float): Number of full turns made by each spiral arm.
        noise (NoiseConfig): Per-kind noise settings.
    """

    n_train: int = 200
    n_test: int = 200
    batch_size: int = 32
    radius: float = 5.0
    xor_padding: float = 0.3
    gaussian_center: float = 2.0
    gaussian_std: float = 1.0
    spiral_turns: float = 1.75
    noise: NoiseConfig = field(default_factory=NoiseConfig)

    def __post_init__(self) -> None:
        for name in ("n_train", "n_test", "batch_size"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"GeneratorConfig.{name} must be positive, got {value}.")
        if self.radius <= 0:
            raise ValueError(f"GeneratorConfig.radius must be positive, got {self.radius}.")
        if not (0.0 <= self.xor_padding < self.radius):
            raise ValueError(
                f"GeneratorConfig.xor_padding must lie in [0, radius), got {self.xor_padding}."
            )
        if self.gaussian_std <= 0:
            raise ValueError(f"GeneratorConfig.gaussian_std must be positive, got {self.gaussian_std}.")
        if self.spiral_turns <= 0:
            raise ValueError(f"GeneratorConfig.spiral_turns must be positive, got {self.spiral_turns}.")
