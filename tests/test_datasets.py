"""
Unit tests for the synthetic dataset samplers and containers.
"""

from __future__ import annotations

import math

import pytest
import torch

from playground_data.data import (
    Dataset,
    DatasetKind,
    InvalidKind,
    LabeledPoint,
    generate_dataset,
)
from playground_data.utils.configs import GeneratorConfig, NoiseConfig


def _basic_dataset_checks(dataset: Dataset, n: int) -> None:
    assert len(dataset) == n
    assert dataset.inputs.shape == (n, 2)
    assert dataset.labels.shape == (n,)
    assert dataset.inputs.dtype == torch.float32
    assert dataset.labels.dtype == torch.int64
    assert torch.all(torch.isfinite(dataset.inputs))
    assert set(dataset.labels.unique().tolist()) <= {0, 1}


@pytest.mark.parametrize("kind", list(DatasetKind))
def test_generate_dataset_shapes_and_bounds(kind: DatasetKind) -> None:
    dataset = generate_dataset(kind, 200, rng=0)
    _basic_dataset_checks(dataset, 200)
    assert float(dataset.inputs.abs().max()) < 8.0


@pytest.mark.parametrize("kind", list(DatasetKind))
def test_generate_dataset_labels_are_balanced(kind: DatasetKind) -> None:
    for seed in range(5):
        dataset = generate_dataset(kind, 200, rng=seed)
        assert 0.4 <= dataset.label_fraction() <= 0.6


@pytest.mark.parametrize("kind", list(DatasetKind))
def test_generate_dataset_odd_size_splits_classes_evenly(kind: DatasetKind) -> None:
    dataset = generate_dataset(kind, 101, rng=4)
    _basic_dataset_checks(dataset, 101)
    ones = int(dataset.labels.sum())
    assert abs(ones - (101 - ones)) <= 1


def test_generate_dataset_is_shuffled() -> None:
    dataset = generate_dataset(DatasetKind.GAUSSIAN, 200, rng=0)
    first_half = dataset.labels[:100]
    assert 0 < int(first_half.sum()) < 100


def test_circle_inner_points_are_closer_to_origin() -> None:
    dataset = generate_dataset(DatasetKind.CIRCLE, 400, rng=1)
    dist = dataset.inputs.norm(dim=1)
    inner = dist[dataset.labels == 0].mean()
    outer = dist[dataset.labels == 1].mean()
    assert inner < outer
    assert float(outer - inner) > 1.5


def test_circle_label_flip_mislabels_a_fraction_of_points() -> None:
    config = GeneratorConfig(noise=NoiseConfig(circle=0.0, label_flip=0.2))
    dataset = generate_dataset(DatasetKind.CIRCLE, 1000, config, rng=2)
    dist = dataset.inputs.norm(dim=1)
    inner_labels = dataset.labels[dist <= 0.5 * config.radius].float()
    flipped = float(inner_labels.mean())
    assert 0.1 < flipped < 0.3


def test_circle_labels_stay_balanced_with_label_flip() -> None:
    config = GeneratorConfig(noise=NoiseConfig(label_flip=0.1))
    for seed in range(5):
        dataset = generate_dataset(DatasetKind.CIRCLE, 200, config, rng=seed)
        assert 0.4 <= dataset.label_fraction() <= 0.6


def test_xor_labels_follow_quadrant_signs_without_noise() -> None:
    config = GeneratorConfig(noise=NoiseConfig(xor=0.0))
    dataset = generate_dataset(DatasetKind.XOR, 200, config, rng=3)
    x, y = dataset.inputs[:, 0], dataset.inputs[:, 1]
    expected = (x * y < 0).long()
    assert torch.equal(dataset.labels, expected)
    assert float(dataset.inputs.abs().min()) >= config.xor_padding - 1e-6


def test_xor_labels_mostly_follow_quadrant_signs_with_noise() -> None:
    dataset = generate_dataset(DatasetKind.XOR, 400, rng=5)
    x, y = dataset.inputs[:, 0], dataset.inputs[:, 1]
    expected = (x * y < 0).long()
    agreement = float((dataset.labels == expected).float().mean())
    assert agreement >= 0.9


def test_gaussian_classes_form_separate_clusters() -> None:
    dataset = generate_dataset(DatasetKind.GAUSSIAN, 400, rng=6)
    class0 = dataset.inputs[dataset.labels == 0]
    class1 = dataset.inputs[dataset.labels == 1]
    gap = float((class0.mean(dim=0) - class1.mean(dim=0)).norm())
    spread = max(float(class0.std(dim=0).max()), float(class1.std(dim=0).max()))
    assert gap > 3 * spread


def test_spiral_arms_are_half_a_turn_apart() -> None:
    config = GeneratorConfig(noise=NoiseConfig(spiral=0.0))
    dataset = generate_dataset(DatasetKind.SPIRAL, 400, config, rng=7)
    coords = dataset.inputs.double()
    radius = torch.hypot(coords[:, 0], coords[:, 1])
    keep = radius > 1e-2

    expected_angle = config.spiral_turns * 2 * math.pi * radius / config.radius
    phase = torch.cos(torch.atan2(coords[:, 1], coords[:, 0]) - expected_angle)
    labels = dataset.labels

    assert torch.all(phase[keep & (labels == 0)] > 0.99)
    assert torch.all(phase[keep & (labels == 1)] < -0.99)


def test_generate_dataset_accepts_names_and_ordinals() -> None:
    by_name = generate_dataset("spiral", 50, rng=8)
    by_ordinal = generate_dataset(3, 50, rng=8)
    assert torch.equal(by_name.inputs, by_ordinal.inputs)
    assert torch.equal(by_name.labels, by_ordinal.labels)


def test_generate_dataset_rejects_bad_arguments() -> None:
    with pytest.raises(InvalidKind):
        generate_dataset(99, 10)
    with pytest.raises(ValueError):
        generate_dataset(DatasetKind.CIRCLE, 0)


def test_dataset_kind_parse() -> None:
    assert DatasetKind.parse(0) is DatasetKind.CIRCLE
    assert DatasetKind.parse(DatasetKind.XOR) is DatasetKind.XOR
    assert DatasetKind.parse("Gaussians") is DatasetKind.GAUSSIAN
    assert DatasetKind.SPIRAL.dataset_name == "spiral"
    assert DatasetKind.XOR.description == "XOR logic gate dataset"
    for bad in (99, -1, "moons", True, 1.5, None):
        with pytest.raises(InvalidKind):
            DatasetKind.parse(bad)


def test_dataset_validates_alignment_and_labels() -> None:
    with pytest.raises(ValueError):
        Dataset(inputs=torch.zeros(3, 2), labels=torch.zeros(2, dtype=torch.int64))
    with pytest.raises(ValueError):
        Dataset(inputs=torch.zeros(3, 3), labels=torch.zeros(3, dtype=torch.int64))
    with pytest.raises(ValueError):
        Dataset(inputs=torch.zeros(2, 2), labels=torch.tensor([0, 2]))


def test_dataset_points_round_trip_and_subset() -> None:
    points = [LabeledPoint(0.5, -1.0, 0), LabeledPoint(2.0, 3.0, 1), LabeledPoint(-4.0, 0.25, 1)]
    dataset = Dataset.from_points(points)
    assert dataset.points() == tuple(points)
    assert dataset.label_fraction() == pytest.approx(2 / 3)

    picked = dataset.subset([2, 0])
    assert picked.points() == (points[2], points[0])

    empty = dataset.subset([])
    assert len(empty) == 0
    assert empty.label_fraction() == 0.0


def test_labeled_point_is_immutable() -> None:
    point = LabeledPoint(1.0, 2.0, 1)
    with pytest.raises(AttributeError):
        point.label = 0  # type: ignore[misc]
