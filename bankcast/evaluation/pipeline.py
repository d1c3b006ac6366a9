"""
Evaluation Pipeline

Coordinates the final phase of a run: inference on the held-out population,
console summary, raster dashboard and structured summary export.

Only inference failures are fatal. Every artifact write is attempted
independently; an `OSError` while writing one of them is logged and the
remaining artifacts are still produced.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from typing import Optional

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core import Config, LogStyle, RunPaths
from ..core.paths import LOGGER_NAME
from ..data_handler import MarketingDataset
from ..models import Classifier
from ..trainer import TrainingHistory
from .engine import EvaluationResult, evaluate
from .reporting import create_evaluation_report, format_text_report, save_text_report
from .visualization import save_report_image

# =========================================================================== #
#                               EVALUATION PIPELINE                           #
# =========================================================================== #
logger = logging.getLogger(LOGGER_NAME)


def run_final_evaluation(
    classifier: Classifier,
    dataset: MarketingDataset,
    paths: RunPaths,
    cfg: Config,
    history: Optional[TrainingHistory] = None,
) -> EvaluationResult:
    """
    Executes the complete evaluation phase.

    Args:
        classifier: Trained classifier.
        dataset: Held-out population.
        paths: Run workspace receiving the artifacts.
        cfg: Run configuration.
        history: Training curve, when the network was trained in this run.

    Returns:
        EvaluationResult: The computed outcome, independent of artifact writes.
    """
    # --- 1) Inference & Metrics ---
    result = evaluate(classifier, dataset)

    # --- 2) Console Summary ---
    logger.info(LogStyle.HEAVY)
    logger.info("AVALIAÇÃO DO MODELO".center(LogStyle.WIDTH))
    logger.info(LogStyle.HEAVY)
    for line in format_text_report(result).splitlines():
        logger.info(line)
    logger.info(LogStyle.HEAVY)

    try:
        save_text_report(result, paths.text_report_path)
    except OSError as e:
        logger.error(f"Could not write text report: {e}")

    # --- 3) Raster Dashboard ---
    if cfg.evaluation.text_only:
        logger.info("Raster report skipped (text_only)")
    else:
        save_report_image(result, paths.figure_path, dpi=cfg.evaluation.fig_dpi)

    # --- 4) Structured Summary ---
    fmt = cfg.evaluation.report_format
    report = create_evaluation_report(
        result=result,
        cfg=cfg,
        model_path=cfg.model_path or paths.model_path,
        log_path=paths.logs / "run.log",
        history=history,
    )
    try:
        report.save(paths.summary_path(fmt), fmt=fmt)
    except OSError as e:
        logger.error(f"Could not write {fmt} summary: {e}")

    return result
