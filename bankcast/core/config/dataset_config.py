"""
Dataset Manifest.

Declares where the training and held-out populations live and which
ingestion policy the loader applies to malformed records.

Key Responsibilities:
    * Input resolution: Training and test CSV locations (';'-delimited).
      Relative locations are anchored at the project root, like output_dir.
    * Ingestion policy: Lenient (skip malformed rows) or strict (fail fast).
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import argparse
from pathlib import Path

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field, field_validator

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from ..paths import DEFAULT_TEST_FILE, DEFAULT_TRAIN_FILE, PROJECT_ROOT

# =========================================================================== #
#                          Dataset Configuration                              #
# =========================================================================== #

class DatasetConfig(BaseModel):
    """
    Validated manifest for the two input populations.

    Attributes:
        train_path: CSV used to fit the network.
        test_path: CSV used for the held-out evaluation.
        strict: Raise on malformed numeric fields instead of skipping the row.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    train_path: Path = Field(
        default=DEFAULT_TRAIN_FILE,
        description="Training records (';'-delimited, header on first line)"
    )
    test_path: Path = Field(
        default=DEFAULT_TEST_FILE,
        description="Held-out records used for evaluation"
    )
    strict: bool = Field(
        default=False,
        description="Fail on unparsable numeric fields instead of skipping"
    )

    @field_validator("train_path", "test_path", mode="before")
    @classmethod
    def anchor_path(cls, v):
        """Expands '~' and resolves relative paths against the project root."""
        path = Path(v).expanduser()
        return path if path.is_absolute() else PROJECT_ROOT / path

    @property
    def dataset_name(self) -> str:
        """Slug derived from the training file name (e.g., 'bank')."""
        return self.train_path.stem

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "DatasetConfig":
        """
        Factory method to map CLI arguments to the DatasetConfig schema.
        """
        schema_fields = cls.model_fields.keys()

        params = {
            k: getattr(args, k)
            for k in schema_fields
            if hasattr(args, k) and getattr(args, k) is not None
        }

        return cls(**params)
