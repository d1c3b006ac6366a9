"""
Tests suite for RootOrchestrator.

Covers the initialization sequence, __enter__/__exit__ semantics and
device caching through dependency injection and mocking.
"""

# =========================================================================== #
#                         Standard Imports                                    #
# =========================================================================== #
from unittest.mock import MagicMock, patch

# =========================================================================== #
#                         Third-Party Imports                                 #
# =========================================================================== #
import pytest
import torch

# =========================================================================== #
#                         Internal Imports                                    #
# =========================================================================== #
from bankcast.core import LOGGER_NAME, Config, RootOrchestrator, RunPaths

# =========================================================================== #
#                    ORCHESTRATOR: INITIALIZATION                             #
# =========================================================================== #


@pytest.mark.unit
def test_orchestrator_init_is_lazy():
    """Nothing is created before entering the context."""
    mock_cfg = MagicMock()

    orch = RootOrchestrator(cfg=mock_cfg)

    assert orch.cfg == mock_cfg
    assert orch.paths is None
    assert orch.run_logger is None
    assert orch._device_cache is None

# =========================================================================== #
#                    CONTEXT MANAGER                                          #
# =========================================================================== #


@pytest.mark.unit
def test_context_manager_enter():
    """__enter__ calls initialize_core_services and returns self."""
    orch = RootOrchestrator(cfg=MagicMock())
    orch.initialize_core_services = MagicMock(return_value=MagicMock())

    result = orch.__enter__()

    orch.initialize_core_services.assert_called_once()
    assert result is orch


@pytest.mark.unit
def test_context_manager_enter_exception_cleanup():
    """__enter__ cleans up and re-raises when initialization fails."""
    orch = RootOrchestrator(cfg=MagicMock())
    orch.initialize_core_services = MagicMock(side_effect=RuntimeError("Init failed"))
    orch.cleanup = MagicMock()

    with pytest.raises(RuntimeError, match="Init failed"):
        orch.__enter__()

    orch.cleanup.assert_called_once()


@pytest.mark.unit
def test_context_manager_exit_propagates():
    """__exit__ cleans up and never swallows exceptions."""
    orch = RootOrchestrator(cfg=MagicMock())
    orch.cleanup = MagicMock()

    assert orch.__exit__(ValueError, ValueError("x"), None) is False
    orch.cleanup.assert_called_once()


@pytest.mark.unit
def test_cleanup_flushes_handlers():
    orch = RootOrchestrator(cfg=MagicMock())
    handler = MagicMock()
    orch.run_logger = MagicMock(handlers=[handler])

    orch.cleanup()

    handler.flush.assert_called_once()

# =========================================================================== #
#                    INITIALIZATION SEQUENCE                                  #
# =========================================================================== #


@pytest.mark.integration
@patch("bankcast.core.orchestrator.set_seed")
def test_initialize_core_services(mock_seed, tmp_path):
    """Seeds, builds the workspace, logs and snapshots the config."""
    cfg = Config(system={"output_dir": str(tmp_path)}, hardware={"device": "cpu"})
    mock_logger = MagicMock()
    log_initializer = MagicMock(return_value=mock_logger)
    orch = RootOrchestrator(cfg=cfg, log_initializer=log_initializer)
    orch.reporter = MagicMock()

    paths = orch.initialize_core_services()

    mock_seed.assert_called_once_with(42)
    assert isinstance(paths, RunPaths)
    assert paths.root.parent == tmp_path.resolve()
    assert paths.root.name.endswith("bank_mlp")
    assert paths.get_config_path().exists()

    log_initializer.assert_called_once_with(name=LOGGER_NAME, log_dir=paths.logs, level="INFO")
    orch.reporter.log_initial_status.assert_called_once()
    assert orch.run_logger is mock_logger


@pytest.mark.unit
def test_get_device_is_cached():
    mock_cfg = MagicMock()
    mock_cfg.hardware.device = "cpu"
    orch = RootOrchestrator(cfg=mock_cfg)

    with patch("bankcast.core.orchestrator.to_device_obj", return_value=torch.device("cpu")) as to_dev:
        first = orch.get_device()
        second = orch.get_device()

    assert first == second == torch.device("cpu")
    to_dev.assert_called_once_with(device_str="cpu")
