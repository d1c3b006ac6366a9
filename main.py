"""
BankCast: Bank Marketing Campaign Prediction Entry Point.

Orchestrates one complete run:
    1. Load the training population.
    2. Train the multilayer perceptron (or restore it with --model_path).
    3. Persist the network (unless --no_save).
    4. Load the held-out population.
    5. Evaluate at the 0.5 threshold and emit the console summary, the
       raster dashboard and the structured summary.

Usage:
    # Defaults: train on bank_assets/bank.csv, evaluate on bank-full.csv
    python main.py

    # Quick run with a looser stopping criterion and CSV summary
    python main.py --max_iterations 200 --max_error 0.05 --report_format csv

    # Re-evaluate a saved network without training
    python main.py --model_path outputs/<run_id>/models/bank_prediction_network.pth

    # Everything from a YAML recipe
    python main.py --config recipes/bank_default.yaml
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from bankcast.core import Config, LogStyle, RootOrchestrator, parse_args
from bankcast.data_handler import FeatureEncoder, default_codebooks, load_dataset
from bankcast.evaluation import run_final_evaluation
from bankcast.models import Hyperparameters, PerceptronClassifier

# =========================================================================== #
#                               MAIN EXECUTION                                #
# =========================================================================== #

def main() -> None:
    """
    Runs the train → evaluate → report pipeline.
    """
    args = parse_args()
    cfg = Config.from_args(args)

    with RootOrchestrator(cfg) as orchestrator:
        run_logger: logging.Logger = orchestrator.run_logger
        paths = orchestrator.paths
        device = orchestrator.get_device()

        encoder = FeatureEncoder(default_codebooks())

        try:
            # Phase 1: Network (train or restore)
            if cfg.model_path is not None:
                classifier = PerceptronClassifier.load(cfg.model_path, device=device)
            else:
                train_set = load_dataset(cfg.dataset.train_path, encoder, strict=cfg.dataset.strict)
                run_logger.info(f"Training records loaded: {len(train_set)}")

                classifier = PerceptronClassifier(
                    hidden_layers=cfg.training.hidden_layers,
                    device=device,
                )
                classifier.train(
                    train_set,
                    Hyperparameters.from_config(cfg.training),
                    log_interval=cfg.training.log_interval,
                    use_tqdm=cfg.training.use_tqdm,
                )

                if cfg.system.save_model:
                    classifier.save(paths.model_path)

            # Phase 2: Evaluation
            test_set = load_dataset(cfg.dataset.test_path, encoder, strict=cfg.dataset.strict)
            run_logger.info(f"Test records loaded: {len(test_set)}")

            result = run_final_evaluation(
                classifier=classifier,
                dataset=test_set,
                paths=paths,
                cfg=cfg,
                history=classifier.history,
            )

            run_logger.info(
                f"{LogStyle.SUCCESS} PIPELINE COMPLETED → "
                f"Acc: {result.metrics.accuracy:.4f} | "
                f"F1: {result.metrics.f1:.4f} | "
                f"Results saved in: {paths.root}"
            )

        except KeyboardInterrupt:
            run_logger.warning("Interrupted by user.")
            raise SystemExit(1)

        except Exception as e:
            run_logger.error(f"Pipeline failed: {e}", exc_info=True)
            raise


# =========================================================================== #
#                               ENTRY POINT                                   #
# =========================================================================== #

if __name__ == "__main__":
    main()
