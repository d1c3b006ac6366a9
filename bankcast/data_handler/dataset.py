"""
In-memory Campaign Dataset.

Holds the encoded population as two aligned NumPy arrays (features and
binary labels) and exposes it both as an ordered sequence of
`LabeledExample` and as a PyTorch `Dataset` for mini-batch training.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from typing import Iterator, NamedTuple, Sequence

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np
import torch
from torch.utils.data import Dataset

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .encoder import INPUT_SIZE


class LabeledExample(NamedTuple):
    """One encoded record: 16 normalized features and a 0.0/1.0 label."""
    features: np.ndarray
    label: float


class MarketingDataset(Dataset):
    """
    Ordered, duplicate-preserving collection of encoded records.

    Attributes:
        features (np.ndarray): float32 array of shape (n, 16).
        labels (np.ndarray): float32 array of shape (n,).
        name (str): Human-readable origin (usually the file name).
    """

    def __init__(
        self,
        features: np.ndarray,
        labels: np.ndarray,
        name: str = "dataset",
    ):
        features = np.asarray(features, dtype=np.float32).reshape(-1, INPUT_SIZE)
        labels = np.asarray(labels, dtype=np.float32).reshape(-1)

        if len(features) != len(labels):
            raise ValueError(
                f"Features ({len(features)}) and labels ({len(labels)}) are misaligned"
            )

        self.features = features
        self.labels = labels
        self.name = name

    @classmethod
    def from_examples(
        cls,
        examples: Sequence[LabeledExample],
        name: str = "dataset",
    ) -> "MarketingDataset":
        """Builds a dataset from already encoded examples, keeping their order."""
        if not examples:
            return cls(np.empty((0, INPUT_SIZE), dtype=np.float32), np.empty(0), name=name)

        features = np.stack([np.asarray(ex.features, dtype=np.float32) for ex in examples])
        labels = np.array([ex.label for ex in examples], dtype=np.float32)
        return cls(features, labels, name=name)

    @property
    def positives(self) -> int:
        """Number of records labeled 'yes'."""
        return int((self.labels > 0.5).sum())

    def examples(self) -> Iterator[LabeledExample]:
        """Yields examples in file order."""
        for features, label in zip(self.features, self.labels):
            yield LabeledExample(features, float(label))

    def __len__(self) -> int:
        return len(self.labels)

    def __getitem__(self, idx: int) -> tuple[torch.Tensor, torch.Tensor]:
        x = torch.from_numpy(self.features[idx])
        y = torch.tensor([self.labels[idx]], dtype=torch.float32)
        return x, y

    def __repr__(self) -> str:
        return f"MarketingDataset(name={self.name!r}, size={len(self)}, positives={self.positives})"
