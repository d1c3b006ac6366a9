"""
Classifier Capability.

The evaluation and reporting layers only depend on this narrow contract:
something that can be trained on a `MarketingDataset` and that maps one
16-feature vector to a probability in [0, 1]. Any learning algorithm (or a
deterministic stub in tests) can be plugged in.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np

if TYPE_CHECKING:
    from ..core.config import TrainingConfig
    from ..data_handler import MarketingDataset


@dataclass(frozen=True)
class Hyperparameters:
    """
    Backpropagation recipe handed to `Classifier.train`.

    Attributes:
        max_iterations: Upper bound on training epochs.
        max_error: Training stops once the epoch error reaches this value.
        learning_rate: Gradient step size.
        batch_size: Samples per weight update.
        shuffle: Reshuffle rows every epoch.
        seed: Seed for the shuffling generator.
    """
    max_iterations: int = 5000
    max_error: float = 0.02
    learning_rate: float = 0.1
    batch_size: int = 16
    shuffle: bool = True
    seed: int = 42

    @classmethod
    def from_config(cls, training: "TrainingConfig") -> "Hyperparameters":
        return cls(
            max_iterations=training.max_iterations,
            max_error=training.max_error,
            learning_rate=training.learning_rate,
            batch_size=training.batch_size,
            shuffle=training.shuffle,
            seed=training.seed,
        )


@runtime_checkable
class Classifier(Protocol):
    """Train-then-predict capability consumed by the evaluation engine."""

    def train(
        self, dataset: "MarketingDataset", hyperparameters: Hyperparameters
    ) -> "Classifier":
        ...

    def predict(self, features: np.ndarray) -> float:
        ...
