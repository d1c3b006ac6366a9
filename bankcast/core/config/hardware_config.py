"""
Hardware Manifest.

Stores the compute device as a concrete name. The policy given on the CLI or
in YAML ('auto', or an accelerator this host may not have) is resolved at
validation time, so a recipe written on a GPU workstation replays on a laptop.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import argparse

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field, field_validator

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from .types import DeviceType
from ..environment import resolve_device

# =========================================================================== #
#                          Hardware Configuration                             #
# =========================================================================== #

class HardwareConfig(BaseModel):
    """
    Attributes:
        device: 'cpu', 'cuda' or 'mps' after resolution of the requested policy.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    device: DeviceType = Field(default="auto", validate_default=True, description="Device policy")

    @field_validator("device")
    @classmethod
    def negotiate_device(cls, v: DeviceType) -> DeviceType:
        return resolve_device(v)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "HardwareConfig":
        device = getattr(args, "device", None)
        return cls(device=device) if device is not None else cls()
