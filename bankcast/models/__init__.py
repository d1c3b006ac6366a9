"""
Models Package

The `Classifier` capability and its multilayer perceptron implementation.
"""

from .classifier import Classifier, Hyperparameters
from .perceptron import MultiLayerPerceptron, PerceptronClassifier

__all__ = [
    "Classifier",
    "Hyperparameters",
    "MultiLayerPerceptron",
    "PerceptronClassifier",
]
