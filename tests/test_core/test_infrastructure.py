"""
Test Suite for Core Infrastructure.

Covers the run workspace layout, YAML persistence, the logging bootstrap,
the environment reporter and reproducibility helpers.
"""

# =========================================================================== #
#                         Standard Imports                                    #
# =========================================================================== #
import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock

# =========================================================================== #
#                         Third-Party Imports                                 #
# =========================================================================== #
import numpy as np
import pytest
import torch

# =========================================================================== #
#                         Internal Imports                                    #
# =========================================================================== #
from bankcast.core import (
    Config,
    Logger,
    Reporter,
    RunPaths,
    load_config_from_yaml,
    save_config_as_yaml,
    set_seed,
    to_device_obj,
)
from bankcast.core.logger import ColorFormatter, LogStyle

# =========================================================================== #
#                    RUN PATHS                                                #
# =========================================================================== #


@pytest.mark.unit
def test_run_paths_layout(tmp_path):
    """Every run gets logs/models/figures/reports subdirectories."""
    paths = RunPaths(slug="bank_mlp", base_dir=tmp_path, run_id="run_1")

    assert paths.root == tmp_path / "run_1"
    for sub in ("logs", "models", "figures", "reports"):
        assert (paths.root / sub).is_dir()

    assert paths.model_path.name == "bank_prediction_network.pth"
    assert paths.figure_path.name == "bank_prediction_visualization.png"
    assert paths.text_report_path.name == "evaluation_report.txt"
    assert paths.summary_path("json").name == "evaluation_summary.json"
    assert paths.get_config_path() == paths.root / "config.yaml"


@pytest.mark.unit
def test_run_id_contains_slug(tmp_path):
    assert RunPaths(slug="bank_mlp", base_dir=tmp_path).run_id.endswith("_bank_mlp")

# =========================================================================== #
#                    YAML I/O                                                 #
# =========================================================================== #


@pytest.mark.unit
def test_yaml_round_trip(tmp_path):
    data = {"training": {"seed": 1, "hidden_layers": [32, 16]}, "model_path": None}

    path = save_config_as_yaml(data, tmp_path / "nested" / "config.yaml")

    assert load_config_from_yaml(path) == data


@pytest.mark.unit
def test_load_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError, match="mapping"):
        load_config_from_yaml(path)


@pytest.mark.unit
def test_load_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config_from_yaml(tmp_path / "nope.yaml")

# =========================================================================== #
#                    LOGGING                                                  #
# =========================================================================== #


@pytest.mark.unit
def test_logger_setup_console_and_file(tmp_path):
    """Console and rotating file handlers; file receives messages."""
    logger = Logger.setup(name="bankcast_test_file", log_dir=tmp_path, level="debug")

    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)

    logger.info("hello campaign")
    for handler in logger.handlers:
        handler.flush()

    assert "hello campaign" in (tmp_path / "run.log").read_text(encoding="utf-8")


@pytest.mark.unit
def test_logger_setup_is_idempotent(tmp_path):
    """Repeated setup replaces handlers instead of stacking them."""
    Logger.setup(name="bankcast_test_idem", log_dir=tmp_path)
    logger = Logger.setup(name="bankcast_test_idem", log_dir=tmp_path)

    assert len(logger.handlers) == 2


@pytest.mark.unit
def test_logger_console_only():
    logger = Logger.setup(name="bankcast_test_console")

    assert len(logger.handlers) == 1


@pytest.mark.unit
def test_color_formatter_restores_levelname():
    """Colors are applied to the output only, not to the record."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
    output = ColorFormatter("%(levelname)s %(message)s").format(record)

    assert LogStyle.YELLOW in output
    assert record.levelname == "WARNING"


@pytest.mark.unit
def test_reporter_logs_sections(tmp_path):
    """The initial status covers hardware, dataset, strategy and filesystem."""
    cfg = Config(system={"output_dir": str(tmp_path)}, hardware={"device": "cpu"})
    paths = RunPaths(slug=cfg.run_slug, base_dir=tmp_path, run_id="r")
    logger = MagicMock()

    Reporter().log_initial_status(logger, cfg, paths, torch.device("cpu"))

    messages = " ".join(str(c.args[0]) for c in logger.info.call_args_list)
    for section in ("[HARDWARE]", "[DATASET]", "[STRATEGY]", "[HYPERPARAMETERS]", "[FILESYSTEM]"):
        assert section in messages
    assert "16 → 32 → 16 → 1" in messages

# =========================================================================== #
#                    ENVIRONMENT                                              #
# =========================================================================== #


@pytest.mark.unit
def test_set_seed_is_reproducible():
    set_seed(123)
    a = (np.random.rand(), torch.rand(1).item())
    set_seed(123)
    b = (np.random.rand(), torch.rand(1).item())

    assert a == b


@pytest.mark.unit
def test_to_device_obj():
    assert to_device_obj("cpu") == torch.device("cpu")
