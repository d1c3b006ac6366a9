"""
Evaluation and Reporting Package

Computes confusion-matrix metrics for a trained classifier and renders them
as a console summary, a raster dashboard and a structured summary.
"""

# =========================================================================== #
#                                Evaluation Engine                            #
# =========================================================================== #
from .engine import (
    HISTOGRAM_BINS,
    HISTOGRAM_SAMPLE_CAP,
    THRESHOLD,
    CampaignEfficiency,
    ConfusionCounts,
    EvaluationResult,
    MetricSet,
    ProbabilityHistogram,
    build_histogram,
    compute_confusion,
    compute_efficiency,
    compute_metrics,
    evaluate,
    predict_probabilities,
)

# =========================================================================== #
#                                Visualizations                               #
# =========================================================================== #
from .visualization import metric_color, render_report, save_report_image

# =========================================================================== #
#                                Structured Reporting                         #
# =========================================================================== #
from .reporting import (
    EvaluationReport,
    create_evaluation_report,
    format_histogram_lines,
    format_text_report,
    save_text_report,
)

# =========================================================================== #
#                                Evaluation Pipeline                          #
# =========================================================================== #
from .pipeline import run_final_evaluation

__all__ = [
    "HISTOGRAM_BINS",
    "HISTOGRAM_SAMPLE_CAP",
    "THRESHOLD",
    "CampaignEfficiency",
    "ConfusionCounts",
    "EvaluationResult",
    "MetricSet",
    "ProbabilityHistogram",
    "build_histogram",
    "compute_confusion",
    "compute_efficiency",
    "compute_metrics",
    "evaluate",
    "predict_probabilities",
    "metric_color",
    "render_report",
    "save_report_image",
    "EvaluationReport",
    "create_evaluation_report",
    "format_histogram_lines",
    "format_text_report",
    "save_text_report",
    "run_final_evaluation",
]
