"""
Optimization Configuration Schema.

Declarative schema for the backpropagation lifecycle of the campaign
perceptron. The defaults reproduce the reference training recipe:
5000 iterations, a 0.02 error target and a 0.1 learning rate on a
16 → 32 → 16 → 1 sigmoid network.

Out-of-range step sizes or error targets are rejected when the manifest is
built, long before the first weight update.
"""

import argparse

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import ErrorTarget, LayerWidths, LearningRate, NonNegativeInt, PositiveInt


# TRAINING CONFIGURATION
class TrainingConfig(BaseModel):
    """
    Backpropagation hyperparameters and reproducibility settings.

    Attributes:
        seed: Random seed for weight initialization and shuffling.
        max_iterations: Upper bound on training epochs.
        max_error: Stop as soon as the epoch error drops to this value.
        learning_rate: SGD step size.
        batch_size: Samples per weight update (1 = pure online learning).
        hidden_layers: Widths of the hidden sigmoid layers.
        shuffle: Reshuffle training rows every epoch.
        log_interval: Epochs between progress log lines (0 disables them).
        use_tqdm: Enable progress bar display.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # ==================== Reproducibility ====================
    seed: int = Field(default=42, description="Random seed")

    # ==================== Stopping Criteria ====================
    max_iterations: PositiveInt = Field(default=5000, description="Maximum epochs")
    max_error: ErrorTarget = Field(default=0.02, description="Target epoch error")

    # ==================== Optimization ====================
    learning_rate: LearningRate = Field(default=0.1, description="Initial learning rate")
    batch_size: PositiveInt = Field(default=16, description="Samples per update")
    shuffle: bool = Field(default=True, description="Shuffle rows each epoch")

    # ==================== Architecture ====================
    hidden_layers: LayerWidths = Field(default=(32, 16), description="Hidden layer widths")

    # ==================== Telemetry ====================
    log_interval: NonNegativeInt = Field(default=100, description="Epochs between logs")
    use_tqdm: bool = Field(default=True, description="Show the epoch progress bar")

    @model_validator(mode="after")
    def validate_batch_size(self) -> "TrainingConfig":
        """
        Rejects batch sizes that turn SGD into a handful of updates per run.

        Raises:
            ValueError: If batch_size exceeds 1024.

        Returns:
            Validated TrainingConfig instance.
        """
        if self.batch_size > 1024:
            raise ValueError(
                f"Batch size too large ({self.batch_size}). Reduce to <=1024."
            )
        return self

    # ==================== Factory Method ====================
    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TrainingConfig":
        """
        Maps parsed CLI flags onto the schema.

        Flags left unset (None) keep the schema default.

        Args:
            args: Namespace produced by the CLI parser.

        Returns:
            TrainingConfig populated from the flags.
        """
        args_dict = vars(args)
        valid_fields = cls.model_fields.keys()
        params = {k: v for k, v in args_dict.items() if k in valid_fields and v is not None}
        return cls(**params)
