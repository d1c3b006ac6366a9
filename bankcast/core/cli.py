"""
Argument Parsing Module.

Handles the command-line interface of the campaign pipeline and bridges
terminal inputs with the hierarchical Pydantic configuration.
"""

# =========================================================================== #
#                               Standard Imports                              #
# =========================================================================== #
import argparse
from typing import Sequence

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from .config import (
    DatasetConfig, EvaluationConfig, HardwareConfig, TelemetryConfig, TrainingConfig
)

# =========================================================================== #
#                              Argument Parsing                               #
# =========================================================================== #

def build_parser() -> argparse.ArgumentParser:
    """
    Configures the argument parser. Defaults are read from the schema
    definitions so that the CLI help never drifts from the manifests.
    """
    parser = argparse.ArgumentParser(
        description="Bank marketing campaign prediction: train, evaluate and report.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    data_def = DatasetConfig()
    train_def = TrainingConfig()
    telemetry_fields = TelemetryConfig.model_fields
    eval_def = EvaluationConfig()

    # ===== Global Strategy =====
    strat_group = parser.add_argument_group("Global Strategy")

    strat_group.add_argument(
        '--config',
        type=str,
        default=None,
        help="Path to YAML config file (overrides all CLI arguments)"
    )
    strat_group.add_argument(
        '--model_path',
        type=str,
        default=None,
        help="Saved network weights; skips training when provided"
    )

    # ===== Dataset Configuration =====
    dataset_group = parser.add_argument_group("Dataset Configuration")

    dataset_group.add_argument(
        '--train_path',
        type=str,
        default=str(data_def.train_path),
        help="Training records (';'-delimited, relative to the project root)"
    )
    dataset_group.add_argument(
        '--test_path',
        type=str,
        default=str(data_def.test_path),
        help="Held-out records for evaluation"
    )
    dataset_group.add_argument(
        '--strict',
        action='store_true',
        default=data_def.strict,
        help="Abort on unparsable numeric fields instead of skipping the record"
    )

    # ===== System & Hardware =====
    sys_group = parser.add_argument_group("System & Hardware")

    sys_group.add_argument(
        '--device',
        type=str,
        default=HardwareConfig.model_fields['device'].default,
        choices=['auto', 'cpu', 'cuda', 'mps'],
        help="Computing device"
    )

    # ===== Paths & Logging =====
    path_group = parser.add_argument_group("Paths & Logging")

    path_group.add_argument(
        '--output_dir',
        type=str,
        default=str(telemetry_fields['output_dir'].default),
        help="Base directory for run outputs"
    )
    path_group.add_argument(
        '--log_level',
        type=str,
        default=telemetry_fields['log_level'].default,
        help="Logging verbosity"
    )
    path_group.add_argument(
        '--no_save',
        action='store_false',
        dest='save_model',
        default=telemetry_fields['save_model'].default,
        help="Disable persisting the trained network"
    )

    # ===== Training Hyperparameters =====
    train_group = parser.add_argument_group("Training Hyperparameters")

    train_group.add_argument(
        '--max_iterations',
        type=int,
        default=train_def.max_iterations
    )
    train_group.add_argument(
        '--max_error',
        type=float,
        default=train_def.max_error
    )
    train_group.add_argument(
        '--lr', '--learning_rate',
        type=float,
        dest='learning_rate',
        default=train_def.learning_rate
    )
    train_group.add_argument(
        '--batch_size',
        type=int,
        default=train_def.batch_size
    )
    train_group.add_argument(
        '--seed',
        type=int,
        default=train_def.seed
    )
    train_group.add_argument(
        '--hidden_layers',
        type=int,
        nargs='+',
        default=list(train_def.hidden_layers),
        help="Hidden layer widths"
    )
    train_group.add_argument(
        '--log_interval',
        type=int,
        default=train_def.log_interval,
        help="Epochs between training status logs"
    )
    train_group.add_argument(
        '--no_tqdm',
        action='store_false',
        dest='use_tqdm',
        default=train_def.use_tqdm,
        help="Disable the training progress bar"
    )

    # ===== Evaluation & Reporting =====
    eval_group = parser.add_argument_group("Evaluation & Reporting")

    eval_group.add_argument(
        '--fig_dpi',
        type=int,
        default=eval_def.fig_dpi,
        help="Raster report DPI (canvas stays 1200x800 px)"
    )
    eval_group.add_argument(
        '--report_format',
        type=str,
        default=eval_def.report_format,
        choices=["xlsx", "csv", "json"],
        help="Run summary format"
    )
    eval_group.add_argument(
        '--text_only',
        action='store_true',
        default=eval_def.text_only,
        help="Skip the raster report"
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Configure and parse command-line arguments for the pipeline.

    Args:
        argv: Explicit argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments namespace
    """
    args = build_parser().parse_args(argv)
    if args.hidden_layers is not None:
        args.hidden_layers = tuple(args.hidden_layers)
    return args
