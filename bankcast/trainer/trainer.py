"""
Model Trainer Module

This module defines the ModelTrainer class which drives backpropagation
epochs until one of the stopping criteria is met:

    * the epoch network error falls to `max_error`, or
    * `max_iterations` epochs have run.

Training is blocking; callers can observe progress through an
`on_iteration(iteration, error)` callback and interrupt it between epochs
with a `threading.Event` cancel token.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import math
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import torch
import torch.nn as nn
from torch.utils.data import DataLoader
from tqdm import tqdm

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.paths import LOGGER_NAME
from .engine import network_error, train_one_epoch

# =========================================================================== #
#                                TRAINING LOGIC                               #
# =========================================================================== #
logger = logging.getLogger(LOGGER_NAME)

IterationCallback = Callable[[int, float], None]


class TrainingCancelled(RuntimeError):
    """Raised when the cancel token is set while training is in progress."""


@dataclass
class TrainingHistory:
    """Per-epoch network error and the reason training stopped."""
    errors: List[float] = field(default_factory=list)
    converged: bool = False

    @property
    def iterations(self) -> int:
        return len(self.errors)

    @property
    def final_error(self) -> float:
        return self.errors[-1] if self.errors else float("nan")


class ModelTrainer:
    """
    Encapsulates the backpropagation loop and its stopping logic.
    """
    def __init__(
        self,
        model: nn.Module,
        train_loader: DataLoader,
        device: torch.device,
        max_iterations: int,
        max_error: float,
        learning_rate: float,
        on_iteration: Optional[IterationCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        log_interval: int = 100,
        use_tqdm: bool = True,
    ):
        self.model = model
        self.train_loader = train_loader
        self.device = device
        self.max_iterations = max_iterations
        self.max_error = max_error
        self.on_iteration = on_iteration
        self.cancel_event = cancel_event
        self.log_interval = log_interval
        self.use_tqdm = use_tqdm

        self.criterion = nn.MSELoss()
        self.optimizer = torch.optim.SGD(model.parameters(), lr=learning_rate)
        self.history = TrainingHistory()

    def train(self) -> TrainingHistory:
        """
        Executes the main training loop.

        Returns:
            TrainingHistory: Error curve and convergence flag.

        Raises:
            TrainingCancelled: If the cancel token was set.
            FloatingPointError: If the network error becomes non-finite.
        """
        logger.info(
            f"Backpropagation started: max {self.max_iterations} iterations, "
            f"target error {self.max_error}"
        )

        with tqdm(total=self.max_iterations, desc="Training", leave=False,
                  disable=not self.use_tqdm) as pbar:
            for iteration in range(1, self.max_iterations + 1):
                if self.cancel_event is not None and self.cancel_event.is_set():
                    raise TrainingCancelled(f"Training cancelled before iteration {iteration}")

                epoch_loss = train_one_epoch(
                    model=self.model,
                    loader=self.train_loader,
                    criterion=self.criterion,
                    optimizer=self.optimizer,
                    device=self.device,
                )
                error = network_error(epoch_loss)
                if not math.isfinite(error):
                    raise FloatingPointError(f"Network error diverged at iteration {iteration}")

                self.history.errors.append(error)
                pbar.update(1)
                pbar.set_postfix(error=f"{error:.5f}")

                if self.on_iteration is not None:
                    self.on_iteration(iteration, error)

                if self.log_interval and iteration % self.log_interval == 0:
                    logger.info(f"Iteration {iteration:>5}/{self.max_iterations} | Error: {error:.5f}")

                if error <= self.max_error:
                    self.history.converged = True
                    break

        if self.history.converged:
            logger.info(
                f"Training converged after {self.history.iterations} iterations "
                f"(error {self.history.final_error:.5f} <= {self.max_error})"
            )
        else:
            logger.warning(
                f"Iteration limit reached ({self.max_iterations}); "
                f"final error {self.history.final_error:.5f}"
            )
        return self.history
