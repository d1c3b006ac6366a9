"""
Reproducibility & Compute Device Helpers.

The campaign network is small enough that CPU training is the common case.
Accelerators are used when present, and a configuration naming one this host
lacks is silently downgraded to the CPU.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import os
import random

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np
import torch

ACCELERATORS = ("cuda", "mps")

# =========================================================================== #
#                               REPRODUCIBILITY                               #
# =========================================================================== #

def set_seed(seed: int) -> None:
    """
    Locks every RNG that influences a run: weight initialization (torch),
    batch shuffling (torch generator, seeded separately by the loader) and
    any NumPy / Python sampling.
    """
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)

    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)
        torch.backends.cudnn.deterministic = True
        torch.backends.cudnn.benchmark = False

# =========================================================================== #
#                               DEVICE NEGOTIATION                            #
# =========================================================================== #

def accelerator_available(name: str) -> bool:
    if name == "cuda":
        return torch.cuda.is_available()
    if name == "mps":
        return torch.backends.mps.is_available()
    return False


def detect_best_device() -> str:
    """First available accelerator (CUDA before MPS), else 'cpu'."""
    return next((name for name in ACCELERATORS if accelerator_available(name)), "cpu")


def resolve_device(requested: str) -> str:
    """
    Turns a device policy into a concrete device name.

    'auto' picks the best available device; an unavailable accelerator
    falls back to 'cpu'.
    """
    requested = requested.lower()
    if requested == "auto":
        return detect_best_device()
    if requested in ACCELERATORS and not accelerator_available(requested):
        return "cpu"
    return requested


def describe_device(device: torch.device) -> str:
    """Label used in the run log, with the GPU model when there is one."""
    if device.type == "cuda" and torch.cuda.is_available():
        return f"CUDA ({torch.cuda.get_device_name(device)})"
    return device.type.upper()


def to_device_obj(device_str: str) -> torch.device:
    return torch.device(device_str)
