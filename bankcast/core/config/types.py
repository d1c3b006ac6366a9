"""
Shared Constraint Types for the Configuration Manifests.

Annotated aliases carry the bounds of every tunable so that an invalid CLI
flag or YAML value fails at startup, with a pydantic error naming the field,
instead of deep inside training.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from pathlib import Path
from typing import Annotated, Literal

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import AfterValidator, Field

# =========================================================================== #
#                                VALIDATORS                                   #
# =========================================================================== #

def _materialize_dir(v: Path) -> Path:
    """Creates the directory and returns its absolute form."""
    v.mkdir(parents=True, exist_ok=True)
    return v.resolve()

# =========================================================================== #
#                                TYPE ALIASES                                 #
# =========================================================================== #

# Filesystem
ValidatedPath = Annotated[Path, AfterValidator(_materialize_dir)]

# Counts
PositiveInt = Annotated[int, Field(gt=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]

# Backpropagation
LearningRate = Annotated[float, Field(gt=0.0, lt=1.0)]
ErrorTarget = Annotated[float, Field(ge=0.0, lt=1.0)]
LayerWidths = Annotated[tuple[PositiveInt, ...], Field(min_length=1)]

# Rendering
Dpi = Annotated[int, Field(ge=36, le=600)]

DeviceType = Literal["auto", "cpu", "cuda", "mps"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
ReportFormat = Literal["xlsx", "csv", "json"]
