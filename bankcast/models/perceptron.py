"""
Multilayer Perceptron Classifier.

Feed-forward network used to predict whether a client will subscribe to the
term deposit. Every layer, output included, uses a sigmoid transfer function,
so the single output unit is directly read as a probability.

Default topology: 16 → 32 → 16 → 1.

`PerceptronClassifier` wraps the `nn.Module` behind the `Classifier`
capability (train / predict) and owns weight persistence.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import threading
from pathlib import Path
from typing import Optional, Sequence

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np
import torch
import torch.nn as nn

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.paths import LOGGER_NAME
from ..data_handler import INPUT_SIZE, MarketingDataset, get_train_loader
from ..trainer import IterationCallback, ModelTrainer, TrainingHistory
from .classifier import Hyperparameters

logger = logging.getLogger(LOGGER_NAME)

OUTPUT_SIZE = 1
DEFAULT_HIDDEN_LAYERS = (32, 16)

# =========================================================================== #
#                               MODEL DEFINITION                              #
# =========================================================================== #

class MultiLayerPerceptron(nn.Module):
    """
    Fully connected sigmoid network.

    Args:
        in_features: Width of the input layer.
        hidden_layers: Widths of the hidden layers.
        out_features: Width of the output layer.
    """

    def __init__(
        self,
        in_features: int = INPUT_SIZE,
        hidden_layers: Sequence[int] = DEFAULT_HIDDEN_LAYERS,
        out_features: int = OUTPUT_SIZE,
    ):
        super().__init__()
        self.in_features = in_features
        self.hidden_layers = tuple(hidden_layers)

        widths = (in_features, *self.hidden_layers, out_features)
        layers: list[nn.Module] = []
        for fan_in, fan_out in zip(widths[:-1], widths[1:]):
            layers += [nn.Linear(fan_in, fan_out), nn.Sigmoid()]
        self.net = nn.Sequential(*layers)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self.net(x)

# =========================================================================== #
#                               CLASSIFIER                                    #
# =========================================================================== #

class PerceptronClassifier:
    """
    `Classifier` implementation backed by `MultiLayerPerceptron`.

    Attributes:
        network (MultiLayerPerceptron): The underlying torch module.
        device (torch.device): Where training and inference run.
        history (Optional[TrainingHistory]): Set after `train`.
    """

    def __init__(
        self,
        hidden_layers: Sequence[int] = DEFAULT_HIDDEN_LAYERS,
        device: Optional[torch.device] = None,
        network: Optional[MultiLayerPerceptron] = None,
    ):
        self.device = device or torch.device("cpu")
        if network is None:
            network = MultiLayerPerceptron(hidden_layers=hidden_layers)
        self.network = network.to(self.device)
        self.history: Optional[TrainingHistory] = None

    @property
    def hidden_layers(self) -> tuple[int, ...]:
        return self.network.hidden_layers

    def train(
        self,
        dataset: MarketingDataset,
        hyperparameters: Hyperparameters,
        on_iteration: Optional[IterationCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        log_interval: int = 100,
        use_tqdm: bool = True,
    ) -> "PerceptronClassifier":
        """
        Fits the network by backpropagation. Blocks until a stopping
        criterion is met; failures propagate to the caller.

        Returns:
            PerceptronClassifier: self, trained in place.
        """
        loader = get_train_loader(
            dataset,
            batch_size=hyperparameters.batch_size,
            shuffle=hyperparameters.shuffle,
            seed=hyperparameters.seed,
        )
        trainer = ModelTrainer(
            model=self.network,
            train_loader=loader,
            device=self.device,
            max_iterations=hyperparameters.max_iterations,
            max_error=hyperparameters.max_error,
            learning_rate=hyperparameters.learning_rate,
            on_iteration=on_iteration,
            cancel_event=cancel_event,
            log_interval=log_interval,
            use_tqdm=use_tqdm,
        )
        self.history = trainer.train()
        return self

    def predict(self, features: np.ndarray) -> float:
        """
        Probability that the client subscribes.

        Raises:
            ValueError: If the vector does not have 16 features.
        """
        features = np.asarray(features, dtype=np.float32)
        if features.shape != (self.network.in_features,):
            raise ValueError(
                f"Expected a feature vector of shape ({self.network.in_features},), "
                f"got {features.shape}"
            )
        return float(self.predict_batch(features[None, :])[0])

    def predict_batch(self, features: np.ndarray) -> np.ndarray:
        """Probabilities for an (n, 16) matrix, in row order."""
        features = np.asarray(features, dtype=np.float32)
        if features.ndim != 2 or features.shape[1] != self.network.in_features:
            raise ValueError(
                f"Expected a feature matrix of shape (n, {self.network.in_features}), "
                f"got {features.shape}"
            )

        self.network.eval()
        with torch.no_grad():
            outputs = self.network(torch.from_numpy(features).to(self.device))
        return outputs.squeeze(1).cpu().numpy().astype(np.float64)

    def save(self, path: Path) -> Path:
        """Persists topology and weights as a torch checkpoint."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        torch.save(
            {
                "hidden_layers": list(self.hidden_layers),
                "state_dict": self.network.state_dict(),
            },
            path,
        )
        logger.info(f"Network saved → {path}")
        return path

    @classmethod
    def load(cls, path: Path, device: Optional[torch.device] = None) -> "PerceptronClassifier":
        """
        Restores a classifier written by `save`.

        Raises:
            FileNotFoundError: If the checkpoint does not exist.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Checkpoint not found: {path}")

        device = device or torch.device("cpu")
        checkpoint = torch.load(path, map_location=device, weights_only=True)
        classifier = cls(hidden_layers=checkpoint["hidden_layers"], device=device)
        classifier.network.load_state_dict(checkpoint["state_dict"])
        logger.info(f"Network restored from {path.name}")
        return classifier
