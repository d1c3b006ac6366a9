"""
Telemetry & Persistence Manifest.

Where a run writes its artifacts, how verbose its log is and whether the
trained network is kept. Relative output directories are anchored to the
project root, so launching from another working directory does not scatter
run folders around the filesystem.
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
from .types import LogLevel, ValidatedPath
from ..paths import OUTPUTS_ROOT, PROJECT_ROOT

# =========================================================================== #
#                          Telemetry Configuration                            #
# =========================================================================== #

class TelemetryConfig(BaseModel):
    """
    Attributes:
        output_dir: Parent of every run directory (created on validation).
        log_level: Minimum level for console and file logs.
        save_model: Persist the trained network under models/.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    output_dir: ValidatedPath = Field(default=OUTPUTS_ROOT, description="Run outputs root")
    log_level: LogLevel = Field(default="INFO", description="Log verbosity")
    save_model: bool = Field(default=True, description="Persist trained weights")

    @field_validator("output_dir", mode="before")
    @classmethod
    def anchor_output_dir(cls, v):
        path = Path(v).expanduser()
        return path if path.is_absolute() else PROJECT_ROOT / path

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TelemetryConfig":
        params = {
            name: getattr(args, name)
            for name in cls.model_fields
            if getattr(args, name, None) is not None
        }
        return cls(**params)
