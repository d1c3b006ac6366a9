"""
Trainer Package

Backpropagation engine and the epoch-level training driver.
"""

from .engine import network_error, train_one_epoch
from .trainer import IterationCallback, ModelTrainer, TrainingCancelled, TrainingHistory

__all__ = [
    "network_error",
    "train_one_epoch",
    "IterationCallback",
    "ModelTrainer",
    "TrainingCancelled",
    "TrainingHistory",
]
