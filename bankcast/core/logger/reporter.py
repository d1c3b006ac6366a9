"""
Run Banner & Environment Summary.

`Reporter` writes the block of lines that opens every run log: the compute
device, the two CSV populations and their parsing policy, the network
topology with its backpropagation settings, and the run directory. Keeping
this formatting here leaves the orchestrator free of presentation details.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from typing import TYPE_CHECKING

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import torch
from pydantic import BaseModel, ConfigDict

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..environment import describe_device
from .styles import LogStyle

if TYPE_CHECKING:
    from ..config import Config
    from ..paths import RunPaths

# =========================================================================== #
#                             REPORTER DEFINITION                             #
# =========================================================================== #

class Reporter(BaseModel):
    """
    Formats the opening summary of a campaign run.

    Stateless; the orchestrator calls it once, right after the run logger
    is configured.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    def log_initial_status(
        self,
        logger: logging.Logger,
        cfg: "Config",
        paths: "RunPaths",
        device: torch.device
    ) -> None:
        """
        Emits the banner followed by one block per concern.

        Args:
            logger: Run logger receiving the lines.
            cfg: Validated run configuration.
            paths: Workspace of the current run.
            device: Device the network will live on.
        """
        header = (
            f"\n{LogStyle.HEAVY}\n"
            f"{' BANK MARKETING CAMPAIGN PREDICTION ':^80}\n"
            f"{LogStyle.HEAVY}"
        )
        logger.info(header)

        self._log_hardware_section(logger, cfg, device)
        logger.info("")

        self._log_dataset_section(logger, cfg)
        logger.info("")

        self._log_strategy_section(logger, cfg)

        logger.info("[FILESYSTEM]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Run Root:     {paths.root}")

    def _log_hardware_section(self, logger, cfg, device):
        """Logs the resolved device and whether training stays on the CPU."""
        logger.info("[HARDWARE]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Device:       {describe_device(device)}")
        if device.type == "cpu":
            logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Threads:      {torch.get_num_threads()}")

    def _log_dataset_section(self, logger, cfg):
        """Logs input populations and ingestion policy."""
        ds = cfg.dataset

        logger.info("[DATASET]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Train:        {ds.train_path}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Test:         {ds.test_path}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Policy:       {'STRICT' if ds.strict else 'LENIENT'}")

    def _log_strategy_section(self, logger, cfg):
        """Logs network topology and backpropagation hyperparameters."""
        train = cfg.training
        topology = " → ".join(str(w) for w in (16, *train.hidden_layers, 1))

        logger.info("[STRATEGY]")
        if cfg.model_path is not None:
            logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Weights:      {cfg.model_path} (training skipped)")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Topology:     {topology} (sigmoid)")

        logger.info("[HYPERPARAMETERS]")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Iterations:   {train.max_iterations}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Max Error:    {train.max_error}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Learn Rate:   {train.learning_rate:.2e}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Batch Size:   {train.batch_size}")
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Seed:         {train.seed}")
