"""
Input/Output & Persistence Utilities.

This module manages the pipeline's interaction with the filesystem for
configuration serialization (YAML). Network weights are persisted by the
classifier itself.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from pathlib import Path
from typing import Any

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import yaml

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .paths import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def save_config_as_yaml(data: dict[str, Any], yaml_path: Path) -> Path:
    """
    Serializes a configuration dictionary to YAML.

    Args:
        data: JSON-compatible mapping (e.g., ``cfg.model_dump(mode='json')``).
        yaml_path: Destination file.

    Returns:
        Path: The written file.
    """
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, default_flow_style=False)
    logger.debug(f"Configuration snapshot saved → {yaml_path}")
    return yaml_path


def load_config_from_yaml(yaml_path: Path) -> dict[str, Any]:
    """
    Reads a YAML recipe into a plain dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping.
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping, got {type(data).__name__}")
    return data
