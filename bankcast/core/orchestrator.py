"""
Run Lifecycle Orchestration.

`RootOrchestrator` turns a validated `Config` into a live run: seeded RNGs, a
fresh timestamped workspace, the run logger, a YAML snapshot of the
configuration and the opening environment report. Used as a context manager,
it releases what it acquired on every exit path and never swallows the
exception that ended the run.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from typing import Callable, Optional

# =========================================================================== #
#                             Third-Party Imports                             #
# =========================================================================== #
import torch

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from .config import Config
from .environment import set_seed, to_device_obj
from .io import save_config_as_yaml
from .logger import Logger, LogStyle, Reporter
from .paths import LOGGER_NAME, RunPaths, setup_static_directories

LogInitializer = Callable[..., logging.Logger]

# =========================================================================== #
#                              Root Orchestrator                              #
# =========================================================================== #

class RootOrchestrator:
    """
    Context manager owning the run environment.

    Attributes:
        cfg (Config): Validated run configuration.
        reporter (Reporter): Emits the opening environment summary.
        paths (Optional[RunPaths]): Run workspace, set on entry.
        run_logger (Optional[logging.Logger]): Configured run logger, set on entry.
    """

    def __init__(self, cfg: Config, log_initializer: LogInitializer = Logger.setup):
        self.cfg = cfg
        self.reporter = Reporter()
        self._log_initializer = log_initializer
        self.paths: Optional[RunPaths] = None
        self.run_logger: Optional[logging.Logger] = None
        self._device_cache: Optional[torch.device] = None

    def __enter__(self) -> "RootOrchestrator":
        try:
            self.initialize_core_services()
        except Exception:
            self.cleanup()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.cleanup()
        return False

    def initialize_core_services(self) -> RunPaths:
        """
        Brings the run environment up, in order: RNG seeds, output root,
        run workspace, logger, configuration snapshot, environment report.

        Returns:
            RunPaths: The workspace of this run.
        """
        set_seed(self.cfg.training.seed)
        setup_static_directories()

        self.paths = RunPaths(slug=self.cfg.run_slug, base_dir=self.cfg.system.output_dir)

        self.run_logger = self._log_initializer(
            name=LOGGER_NAME,
            log_dir=self.paths.logs,
            level=self.cfg.system.log_level,
        )

        # Replaying this file with --config reproduces the run
        save_config_as_yaml(
            data=self.cfg.model_dump(mode="json"),
            yaml_path=self.paths.get_config_path(),
        )

        self.reporter.log_initial_status(
            logger=self.run_logger,
            cfg=self.cfg,
            paths=self.paths,
            device=self.get_device(),
        )
        return self.paths

    def cleanup(self) -> None:
        """Releases accelerator memory and flushes the run log to disk."""
        if torch.cuda.is_available():
            torch.cuda.empty_cache()

        if self.run_logger is None:
            return
        self.run_logger.debug(f"{LogStyle.SUCCESS} Run environment released")
        for handler in self.run_logger.handlers:
            handler.flush()

    def get_device(self) -> torch.device:
        """Compute device of the run, resolved once."""
        if self._device_cache is None:
            self._device_cache = to_device_obj(device_str=self.cfg.hardware.device)
        return self._device_cache
