"""
Configuration Package.

Exposes the root `Config` manifest and its domain sub-manifests.
"""

from .dataset_config import DatasetConfig
from .engine import Config
from .evaluation_config import EvaluationConfig
from .hardware_config import HardwareConfig
from .telemetry_config import TelemetryConfig
from .training_config import TrainingConfig

__all__ = [
    "Config",
    "DatasetConfig",
    "EvaluationConfig",
    "HardwareConfig",
    "TelemetryConfig",
    "TrainingConfig",
]
