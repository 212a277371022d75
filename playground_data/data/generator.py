"""
Stateful dataset generator.

A ``DatasetGenerator`` owns the current train, test and mini-batch datasets
for one caller. Generation replaces the stored train and test sets; batching
draws distinct training rows into the stored batch. Instances are not
thread-safe; use one generator per worker.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
from torch import Tensor
from torch.utils.data import TensorDataset

from playground_data.data.datasets import Dataset, DatasetKind, generate_dataset
from playground_data.data.errors import NoDataAvailable, NoTrainingData
from playground_data.utils.configs import GeneratorConfig
from playground_data.utils.seed import SeedLike, create_rng

logger = logging.getLogger(__name__)

_SPLITS = ("train", "test", "batch")


def _copy_or_none(dataset: Optional[Dataset]) -> Optional[Dataset]:
    return dataset.copy() if dataset is not None else None


class DatasetGenerator:
    """
    Generate, store and sample synthetic 2D classification data.

    Args:
        config (Optional[GeneratorConfig]): Point counts, batch size and noise
            settings. Defaults to ``GeneratorConfig()``.
        rng (SeedLike): Integer seed or NumPy generator for reproducible
            draws. ``None`` uses fresh OS entropy.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: SeedLike = None) -> None:
        self.config = config if config is not None else GeneratorConfig()
        self._rng = create_rng(rng)
        self._kind: Optional[DatasetKind] = None
        self._train: Optional[Dataset] = None
        self._test: Optional[Dataset] = None
        self._batch: Optional[Dataset] = None
        self._batch_indices: Optional[Tuple[int, ...]] = None

    @property
    def kind(self) -> Optional[DatasetKind]:
        return self._kind

    @property
    def train(self) -> Optional[Dataset]:
        return _copy_or_none(self._train)

    @property
    def test(self) -> Optional[Dataset]:
        return _copy_or_none(self._test)

    @property
    def batch(self) -> Optional[Dataset]:
        return _copy_or_none(self._batch)

    @property
    def batch_indices(self) -> Optional[Tuple[int, ...]]:
        """Training-set rows the current batch was drawn from."""
        return self._batch_indices

    @property
    def is_ready(self) -> bool:
        return self._train is not None and self._test is not None

    @property
    def has_batch(self) -> bool:
        return self._batch is not None

    def generate_random_data(self, kind: Union[DatasetKind, int, str]) -> Tuple[Dataset, Dataset]:
        """
        Draw fresh train and test sets of the selected kind.

        The two sets are sampled independently from the same distribution and
        replace any previously stored train and test data. A stored batch is
        left as is until the next ``generate_mini_batch()`` call replaces it.

        Args:
            kind (Union[DatasetKind, int, str]): Kind, ordinal ``0-3``, or name.

        Returns:
            Tuple[Dataset, Dataset]: Copies of the new ``(train, test)`` datasets.

        Raises:
            InvalidKind: If ``kind`` is not a recognized dataset kind.
        """
        resolved = DatasetKind.parse(kind)
        train = generate_dataset(resolved, self.config.n_train, self.config, self._rng)
        test = generate_dataset(resolved, self.config.n_test, self.config, self._rng)

        self._kind = resolved
        self._train = train
        self._test = test

        logger.debug(
            "Generated %s data: %d train / %d test points",
            resolved.dataset_name,
            len(train),
            len(test),
        )
        return train.copy(), test.copy()

    def generate_mini_batch(self, batch_size: Optional[int] = None) -> Dataset:
        """
        Sample a mini-batch of distinct rows from the current train set.

        Args:
            batch_size (Optional[int]): Number of points; defaults to
                ``config.batch_size`` and is clamped to the train set size.

        Returns:
            Dataset: A copy of the new batch, which is also stored on the generator.

        Raises:
            NoTrainingData: If no train set has been generated yet.
            ValueError: If ``batch_size`` is not a positive integer.
        """
        if self._train is None:
            raise NoTrainingData("No training data; call generate_random_data() before generate_mini_batch().")

        if batch_size is None:
            size = self.config.batch_size
        elif isinstance(batch_size, (int, np.integer)) and not isinstance(batch_size, bool):
            size = int(batch_size)
        else:
            raise ValueError(f"batch_size must be an integer, got {batch_size!r}.")
        if size <= 0:
            raise ValueError(f"batch_size must be positive, got {size}.")
        size = min(size, len(self._train))

        indices = self._rng.choice(len(self._train), size=size, replace=False)
        self._batch = self._train.subset(indices)
        self._batch_indices = tuple(int(i) for i in indices)

        logger.debug("Drew mini-batch of %d from %d training points", size, len(self._train))
        return self._batch.copy()

    def _require(self, split: str) -> Dataset:
        if split not in _SPLITS:
            raise ValueError(f"Unknown split {split!r}; expected one of {_SPLITS}.")
        dataset = getattr(self, f"_{split}")
        if dataset is None:
            step = "generate_mini_batch()" if split == "batch" else "generate_random_data()"
            raise NoDataAvailable(f"No {split} data available; call {step} first.")
        return dataset

    def get_train_data(self) -> Tensor:
        return self._require("train").inputs.clone()

    def get_test_data(self) -> Tensor:
        return self._require("test").inputs.clone()

    def get_batch_data(self) -> Tensor:
        return self._require("batch").inputs.clone()

    def get_train_label(self) -> Tensor:
        return self._require("train").labels.clone()

    def get_test_label(self) -> Tensor:
        return self._require("test").labels.clone()

    def get_batch_label(self) -> Tensor:
        return self._require("batch").labels.clone()

    def get_train_length(self) -> int:
        return len(self._require("train"))

    def get_test_length(self) -> int:
        return len(self._require("test"))

    def get_batch_length(self) -> int:
        return len(self._require("batch"))

    def tensor_dataset(self, split: str = "train") -> TensorDataset:
        """
        Wrap a stored split for use with a ``DataLoader``.

        Args:
            split (str): One of ``"train"``, ``"test"`` or ``"batch"``.

        Returns:
            TensorDataset: Dataset yielding ``(input, label)`` pairs.
        """
        dataset = self._require(split)
        return TensorDataset(dataset.inputs.clone(), dataset.labels.clone())

    def metadata(self) -> Dict[str, Any]:
        """
        Describe the current train/test pair.

        Returns:
            Dict[str, Any]: ``name``, ``description``, input/output dims,
            ``num_classes`` and the train/test sizes.
        """
        train = self._require("train")
        test = self._require("test")
        assert self._kind is not None
        return {
            "name": self._kind.dataset_name,
            "description": self._kind.description,
            "input_dim": 2,
            "output_dim": 1,
            "num_classes": 2,
            "train_size": len(train),
            "test_size": len(test),
        }
