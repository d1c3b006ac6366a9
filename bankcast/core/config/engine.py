"""
Global Configuration Engine.

Aggregates the domain manifests (dataset, training, hardware, telemetry,
evaluation) into a single immutable `Config`, hydrated either from parsed CLI
arguments or from a YAML recipe. It acts as the Single Source of Truth (SSOT)
for every phase of the pipeline.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import argparse
from pathlib import Path

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from .dataset_config import DatasetConfig
from .evaluation_config import EvaluationConfig
from .hardware_config import HardwareConfig
from .telemetry_config import TelemetryConfig
from .training_config import TrainingConfig
from ..io import load_config_from_yaml

# =========================================================================== #
#                                ROOT MANIFEST                                #
# =========================================================================== #

class Config(BaseModel):
    """
    Immutable root manifest of a BankCast run.

    Attributes:
        dataset (DatasetConfig): Input populations and ingestion policy.
        training (TrainingConfig): Backpropagation hyperparameters.
        hardware (HardwareConfig): Compute device policy.
        system (TelemetryConfig): Outputs, logging and persistence.
        evaluation (EvaluationConfig): Report emission policy.
        model_path (Path | None): Pre-trained weights; skips training when set.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)
    hardware: HardwareConfig = Field(default_factory=HardwareConfig)
    system: TelemetryConfig = Field(default_factory=TelemetryConfig)
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)
    model_path: Path | None = None

    @property
    def run_slug(self) -> str:
        """Short identifier used for run directories."""
        return f"{self.dataset.dataset_name}_mlp"

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "Config":
        """
        Hydrates the manifest from a YAML recipe.

        Raises:
            FileNotFoundError: If the recipe does not exist.
            pydantic.ValidationError: If any section violates its schema.
        """
        data = load_config_from_yaml(Path(yaml_path))
        return cls.model_validate(data)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        """
        Builds the manifest from CLI arguments.

        When ``--config`` is provided the YAML recipe takes precedence over
        every other CLI argument.
        """
        config_path = getattr(args, "config", None)
        if config_path:
            return cls.from_yaml(Path(config_path))

        model_path = getattr(args, "model_path", None)

        return cls(
            dataset=DatasetConfig.from_args(args),
            training=TrainingConfig.from_args(args),
            hardware=HardwareConfig.from_args(args),
            system=TelemetryConfig.from_args(args),
            evaluation=EvaluationConfig.from_args(args),
            model_path=Path(model_path) if model_path else None,
        )
