"""
Synthetic 2D binary classification datasets.

This module provides the labeled point and dataset containers together with
samplers for the four playground shapes (circle, XOR, Gaussian clusters, and
spiral). Every sampler returns balanced classes with coordinates bounded to
roughly ``[-6, 6]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np
import torch
from torch import Tensor

from playground_data.data.errors import InvalidKind
from playground_data.utils.configs import GeneratorConfig
from playground_data.utils.seed import SeedLike, create_rng

logger = logging.getLogger(__name__)


class DatasetKind(IntEnum):
    """Selector for the dataset shape; values match the historical ordinals."""

    CIRCLE = 0
    XOR = 1
    GAUSSIAN = 2
    SPIRAL = 3

    @property
    def dataset_name(self) -> str:
        return _KIND_NAMES[self]

    @property
    def description(self) -> str:
        return _KIND_DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: Union["DatasetKind", int, str]) -> "DatasetKind":
        """
        Resolve a dataset kind from a member, an ordinal, or a name.

        Args:
            value (Union[DatasetKind, int, str]): Kind selector. Names are
                matched case-insensitively (``"gaussians"`` is accepted as an
                alias of ``"gaussian"``).

        Returns:
            DatasetKind: The matching kind.

        Raises:
            InvalidKind: If ``value`` does not name a known kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for kind, name in _KIND_NAMES.items():
                if key in (name, f"{name}s"):
                    return kind
            raise InvalidKind(f"Unknown dataset kind {value!r}.")
        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                pass
        raise InvalidKind(f"Unknown dataset kind {value!r}; expected one of 0-{len(cls) - 1}.")


_KIND_NAMES: Dict[DatasetKind, str] = {
    DatasetKind.CIRCLE: "circle",
    DatasetKind.XOR: "xor",
    DatasetKind.GAUSSIAN: "gaussian",
    DatasetKind.SPIRAL: "spiral",
}

_KIND_DESCRIPTIONS: Dict[DatasetKind, str] = {
    DatasetKind.CIRCLE: "Circle classification dataset",
    DatasetKind.XOR: "XOR logic gate dataset",
    DatasetKind.GAUSSIAN: "Gaussian clusters dataset",
    DatasetKind.SPIRAL: "Spiral classification dataset",
}


@dataclass(frozen=True)
class LabeledPoint:
    """A single 2D coordinate with its binary label."""

    x: float
    y: float
    label: int


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Aligned input matrix and label vector.

    Args:
        inputs (Tensor): Float tensor of shape (N, 2).
        labels (Tensor): Integer tensor of shape (N,) with values in {0, 1}.
    """

    inputs: Tensor
    labels: Tensor

    def __post_init__(self) -> None:
        if self.inputs.ndim != 2 or self.inputs.size(1) != 2:
            raise ValueError(f"inputs must have shape (N, 2), got {tuple(self.inputs.shape)}.")
        if self.labels.ndim != 1:
            raise ValueError(f"labels must have shape (N,), got {tuple(self.labels.shape)}.")
        if self.inputs.size(0) != self.labels.size(0):
            raise ValueError(
                f"inputs and labels disagree in length: {self.inputs.size(0)} vs {self.labels.size(0)}."
            )
        if self.labels.numel() and not bool(((self.labels == 0) | (self.labels == 1)).all()):
            raise ValueError("labels must be binary (0 or 1).")

    def __len__(self) -> int:
        return int(self.labels.size(0))

    @classmethod
    def from_points(cls, points: Iterable[LabeledPoint]) -> "Dataset":
        points = list(points)
        inputs = torch.tensor([[p.x, p.y] for p in points], dtype=torch.float32).reshape(-1, 2)
        labels = torch.tensor([p.label for p in points], dtype=torch.int64)
        return cls(inputs=inputs, labels=labels)

    def points(self) -> Tuple[LabeledPoint, ...]:
        coords = self.inputs.tolist()
        return tuple(
            LabeledPoint(x=float(x), y=float(y), label=int(label))
            for (x, y), label in zip(coords, self.labels.tolist())
        )

    def subset(self, indices: Sequence[int]) -> "Dataset":
        """
        Select rows by index, keeping inputs and labels aligned.

        Args:
            indices (Sequence[int]): Row indices into this dataset.

        Returns:
            Dataset: New dataset holding the selected rows in the given order.
        """
        index = torch.as_tensor(np.asarray(indices, dtype=np.int64))
        return Dataset(inputs=self.inputs[index].clone(), labels=self.labels[index].clone())

    def copy(self) -> "Dataset":
        """Return a dataset whose tensors do not share storage with this one."""
        return Dataset(inputs=self.inputs.clone(), labels=self.labels.clone())

    def label_fraction(self) -> float:
        """Share of points labeled 1; 0.0 for an empty dataset."""
        if len(self) == 0:
            return 0.0
        return float(self.labels.float().mean())

    def tensors(self) -> Tuple[Tensor, Tensor]:
        return self.inputs, self.labels


def _class_counts(n: int) -> Tuple[int, int]:
    n0 = n // 2
    return n0, n - n0


def _sample_circle(n: int, config: GeneratorConfig, rng: np.random.Generator) -> Tuple[np.ndarray, np.ndarray]:
    n0, n1 = _class_counts(n)

    # Inner disc and outer ring are separated by a gap of 0.2 * radius.
    radii = np.concatenate(
        [
            config.radius * rng.uniform(0.0, 0.5, size=n0),
            config.radius * rng.uniform(0.7, 1.0, size=n1),
        ]
    )
    angles = rng.uniform(0.0, 2 * np.pi, size=n)

    data = np.c_[radii * np.cos(angles), radii * np.sin(angles)]
    labels = np.concatenate([np.zeros(n0), np.ones(n1)])

    data += rng.normal(scale=config.noise.circle, size=data.shape)

    if config.noise.label_flip > 0:
        flips = rng.random(n) < config.noise.label_flip
        labels[flips] = 1 - labels[flips]

    return data, labels


def _sample_xor(n: int, config: GeneratorConfig, rng: np.random.Generator) -> Tuple[np.ndarray, np.ndarray]:
    # Quadrants alternate between labels so a remainder stays balanced.
    signs = np.array(
        [
            [1.0, 1.0],
            [1.0, -1.0],
            [-1.0, -1.0],
            [-1.0, 1.0],
        ]
    )
    counts = [n // 4 + (1 if q < n % 4 else 0) for q in range(4)]

    data_list = []
    labels_list = []
    for sign, count in zip(signs, counts):
        magnitudes = rng.uniform(config.xor_padding, config.radius, size=(count, 2))
        data_list.append(magnitudes * sign)
        labels_list.append(np.full(count, float(sign[0] != sign[1])))

    data = np.vstack(data_list)
    labels = np.concatenate(labels_list)

    data += rng.normal(scale=config.noise.xor, size=data.shape)
    return data, labels


def _sample_gaussian(n: int, config: GeneratorConfig, rng: np.random.Generator) -> Tuple[np.ndarray, np.ndarray]:
    n0, n1 = _class_counts(n)
    center = np.full(2, config.gaussian_center)

    data = np.vstack(
        [
            rng.normal(loc=center, scale=config.gaussian_std, size=(n0, 2)),
            rng.normal(loc=-center, scale=config.gaussian_std, size=(n1, 2)),
        ]
    )
    labels = np.concatenate([np.zeros(n0), np.ones(n1)])

    data += rng.normal(scale=config.noise.gaussian, size=data.shape)
    return data, labels


def _sample_spiral(n: int, config: GeneratorConfig, rng: np.random.Generator) -> Tuple[np.ndarray, np.ndarray]:
    data_list = []
    labels_list = []
    for arm, count in enumerate(_class_counts(n)):
        t = rng.uniform(0.0, 1.0, size=count)
        radii = config.radius * t
        angles = config.spiral_turns * 2 * np.pi * t + arm * np.pi
        data_list.append(np.c_[radii * np.cos(angles), radii * np.sin(angles)])
        labels_list.append(np.full(count, float(arm)))

    data = np.vstack(data_list)
    labels = np.concatenate(labels_list)

    data += rng.normal(scale=config.noise.spiral, size=data.shape)
    return data, labels


_SAMPLERS: Dict[DatasetKind, Callable[[int, GeneratorConfig, np.random.Generator], Tuple[np.ndarray, np.ndarray]]] = {
    DatasetKind.CIRCLE: _sample_circle,
    DatasetKind.XOR: _sample_xor,
    DatasetKind.GAUSSIAN: _sample_gaussian,
    DatasetKind.SPIRAL: _sample_spiral,
}


def _to_dataset(data: np.ndarray, labels: np.ndarray, rng: np.random.Generator) -> Dataset:
    order = rng.permutation(data.shape[0])
    inputs = torch.from_numpy(data[order].astype(np.float32))
    targets = torch.from_numpy(labels[order].astype(np.int64))
    return Dataset(inputs=inputs, labels=targets)


def generate_dataset(
    kind: Union[DatasetKind, int, str],
    n: int,
    config: Optional[GeneratorConfig] = None,
    rng: SeedLike = None,
) -> Dataset:
    """
    Sample a single shuffled dataset of the given kind.

    Args:
        kind (Union[DatasetKind, int, str]): Dataset kind, ordinal, or name.
        n (int): Number of points to draw.
        config (Optional[GeneratorConfig]): Shape and noise settings;
            defaults to ``GeneratorConfig()``.
        rng (SeedLike): Seed or generator used for sampling.

    Returns:
        Dataset: ``n`` labeled points with a balanced label split.

    Raises:
        InvalidKind: If ``kind`` is not a recognized dataset kind.
    """
    resolved = DatasetKind.parse(kind)
    if n <= 0:
        raise ValueError(f"Number of samples must be positive, got {n}.")
    config = config if config is not None else GeneratorConfig()
    generator = create_rng(rng)

    data, labels = _SAMPLERS[resolved](n, config, generator)
    logger.debug("Sampled %d %s points (label-1 share %.3f)", n, resolved.dataset_name, labels.mean())
    return _to_dataset(data, labels, generator)
