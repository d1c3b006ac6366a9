"""
Filesystem Anchors & Run Workspace Layout.

Defines the static project anchors (project root, default output directory,
default dataset files) and the `RunPaths` container that materializes the
per-run directory tree (logs, models, figures, reports).
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from datetime import datetime
from pathlib import Path

# =========================================================================== #
#                                STATIC ANCHORS                               #
# =========================================================================== #

LOGGER_NAME = "bankcast"

PROJECT_ROOT = Path(__file__).resolve().parents[2]
OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
DATASET_DIR = PROJECT_ROOT / "bank_assets"

DEFAULT_TRAIN_FILE = DATASET_DIR / "bank.csv"
DEFAULT_TEST_FILE = DATASET_DIR / "bank-full.csv"


def setup_static_directories() -> None:
    """Creates the project-level output directory shared by every run."""
    OUTPUTS_ROOT.mkdir(parents=True, exist_ok=True)

# =========================================================================== #
#                                RUN PATHS                                    #
# =========================================================================== #

class RunPaths:
    """
    Per-run workspace orchestrator.

    Every run gets its own timestamped directory so that artifacts of
    different experiments never overwrite each other.

    Attributes:
        run_id (str): Unique run identifier (timestamp + slug).
        root (Path): Root directory of the run.
        logs (Path): Log files.
        models (Path): Persisted network weights.
        figures (Path): Raster reports.
        reports (Path): Text and tabular summaries.
    """

    SUB_DIRS = ("logs", "models", "figures", "reports")

    def __init__(self, slug: str, base_dir: Path, run_id: str | None = None):
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.run_id = run_id or f"{stamp}_{slug}"
        self.root = Path(base_dir) / self.run_id

        for name in self.SUB_DIRS:
            path = self.root / name
            path.mkdir(parents=True, exist_ok=True)
            setattr(self, name, path)

    @property
    def model_path(self) -> Path:
        return self.models / "bank_prediction_network.pth"

    @property
    def figure_path(self) -> Path:
        return self.figures / "bank_prediction_visualization.png"

    @property
    def text_report_path(self) -> Path:
        return self.reports / "evaluation_report.txt"

    def summary_path(self, fmt: str) -> Path:
        return self.reports / f"evaluation_summary.{fmt}"

    def get_config_path(self) -> Path:
        return self.root / "config.yaml"

    def __repr__(self) -> str:
        return f"RunPaths(run_id={self.run_id!r}, root={str(self.root)!r})"
