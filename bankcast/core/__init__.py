"""
Core Package.

Configuration, CLI, logging, filesystem layout and run orchestration shared
by every phase of the pipeline.
"""

from .cli import build_parser, parse_args
from .config import (
    Config,
    DatasetConfig,
    EvaluationConfig,
    HardwareConfig,
    TelemetryConfig,
    TrainingConfig,
)
from .environment import describe_device, resolve_device, set_seed, to_device_obj
from .io import load_config_from_yaml, save_config_as_yaml
from .logger import Logger, LogStyle, Reporter
from .orchestrator import RootOrchestrator
from .paths import LOGGER_NAME, PROJECT_ROOT, RunPaths

__all__ = [
    "Config",
    "DatasetConfig",
    "EvaluationConfig",
    "HardwareConfig",
    "TelemetryConfig",
    "TrainingConfig",
    "build_parser",
    "parse_args",
    "describe_device",
    "resolve_device",
    "set_seed",
    "to_device_obj",
    "load_config_from_yaml",
    "save_config_as_yaml",
    "Logger",
    "LogStyle",
    "Reporter",
    "RootOrchestrator",
    "LOGGER_NAME",
    "PROJECT_ROOT",
    "RunPaths",
]
