"""
Evaluation Engine

Runs a trained classifier over a held-out population and aggregates, in a
single pass, everything the reporting layer needs:

    * ConfusionCounts at the fixed 0.5 decision threshold (strict '>'),
    * MetricSet (accuracy, precision, recall, F1),
    * CampaignEfficiency (who would be contacted and what that saves),
    * ProbabilityHistogram (20 bins, first 1000 predictions in file order).

Metric computation never raises. Zero denominators follow a fixed policy:
precision and recall are 0.0 whenever TP == 0, F1 is 0.0 when
precision + recall == 0, and accuracy/savings are NaN on an empty
population. Note that the TP == 0 guard reports "no positive predictions"
and "no positive actuals" as a 0.0 score rather than as undefined.

Failures raised by the classifier (e.g., a dimension mismatch) propagate and
abort the evaluation.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from dataclasses import asdict, dataclass

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import numpy as np
from sklearn.metrics import confusion_matrix

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.paths import LOGGER_NAME
from ..data_handler import MarketingDataset
from ..models import Classifier

logger = logging.getLogger(LOGGER_NAME)

THRESHOLD = 0.5
HISTOGRAM_BINS = 20
HISTOGRAM_SAMPLE_CAP = 1000

# =========================================================================== #
#                               RESULT TYPES                                  #
# =========================================================================== #

@dataclass(frozen=True)
class ConfusionCounts:
    """Mutually exclusive outcome counts over one evaluated population."""
    true_positive: int = 0
    false_positive: int = 0
    true_negative: int = 0
    false_negative: int = 0

    def __post_init__(self) -> None:
        if min(self.true_positive, self.false_positive,
               self.true_negative, self.false_negative) < 0:
            raise ValueError("Confusion counts must be non-negative")

    @property
    def total(self) -> int:
        return self.true_positive + self.false_positive + self.true_negative + self.false_negative

    @property
    def predicted_positive(self) -> int:
        return self.true_positive + self.false_positive

    @property
    def actual_positive(self) -> int:
        return self.true_positive + self.false_negative

    def as_matrix(self) -> np.ndarray:
        """[[TN, FP], [FN, TP]]: rows are actual NO/YES, columns predicted NO/YES."""
        return np.array(
            [[self.true_negative, self.false_positive],
             [self.false_negative, self.true_positive]],
            dtype=np.int64,
        )


@dataclass(frozen=True)
class MetricSet:
    accuracy: float
    precision: float
    recall: float
    f1: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class CampaignEfficiency:
    """
    Campaign implications of following the classifier.

    Attributes:
        contacted: Clients the model would call (TP + FP).
        converted: Contacted clients that do subscribe (TP).
        total: Size of the evaluated population.
        efficiency: converted / contacted (0.0 when nobody is contacted).
        savings: Share of the population that no longer needs a call.
    """
    contacted: int
    converted: int
    total: int
    efficiency: float
    savings: float


@dataclass(frozen=True)
class ProbabilityHistogram:
    """Fixed 20-bin distribution of predicted probabilities over [0, 1]."""
    counts: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.counts) != HISTOGRAM_BINS:
            raise ValueError(f"Histogram needs {HISTOGRAM_BINS} bins, got {len(self.counts)}")

    @property
    def bin_width(self) -> float:
        return 1.0 / HISTOGRAM_BINS

    @property
    def sample_count(self) -> int:
        return sum(self.counts)

    @property
    def max_count(self) -> int:
        return max(self.counts)

    def bin_edges(self) -> np.ndarray:
        return np.linspace(0.0, 1.0, HISTOGRAM_BINS + 1)


@dataclass(frozen=True)
class EvaluationResult:
    """Everything the renderers consume; computed once, read-only afterwards."""
    counts: ConfusionCounts
    metrics: MetricSet
    efficiency: CampaignEfficiency
    histogram: ProbabilityHistogram

# =========================================================================== #
#                               COMPUTATION                                   #
# =========================================================================== #

def predict_probabilities(classifier: Classifier, dataset: MarketingDataset) -> np.ndarray:
    """Queries the classifier once per example, in dataset order."""
    return np.array(
        [classifier.predict(example.features) for example in dataset.examples()],
        dtype=np.float64,
    )


def compute_confusion(probabilities: np.ndarray, labels: np.ndarray) -> ConfusionCounts:
    """
    Buckets every example into exactly one confusion cell.

    Raises:
        ValueError: If probabilities and labels are misaligned.
    """
    probabilities = np.asarray(probabilities, dtype=np.float64)
    labels = np.asarray(labels, dtype=np.float64)
    if probabilities.shape != labels.shape:
        raise ValueError(
            f"Got {probabilities.shape[0]} predictions for {labels.shape[0]} labels"
        )
    if probabilities.size == 0:
        return ConfusionCounts()

    predicted = (probabilities > THRESHOLD).astype(int)
    actual = (labels > THRESHOLD).astype(int)

    tn, fp, fn, tp = confusion_matrix(actual, predicted, labels=[0, 1]).ravel()
    return ConfusionCounts(
        true_positive=int(tp),
        false_positive=int(fp),
        true_negative=int(tn),
        false_negative=int(fn),
    )


def compute_metrics(counts: ConfusionCounts) -> MetricSet:
    tp, fp, fn = counts.true_positive, counts.false_positive, counts.false_negative
    total = counts.total

    accuracy = (tp + counts.true_negative) / total if total > 0 else float("nan")
    precision = tp / (tp + fp) if tp > 0 else 0.0
    recall = tp / (tp + fn) if tp > 0 else 0.0
    f1 = 2 * precision * recall / (precision + recall) if (precision + recall) > 0 else 0.0

    return MetricSet(accuracy=accuracy, precision=precision, recall=recall, f1=f1)


def compute_efficiency(counts: ConfusionCounts) -> CampaignEfficiency:
    contacted = counts.predicted_positive
    total = counts.total

    return CampaignEfficiency(
        contacted=contacted,
        converted=counts.true_positive,
        total=total,
        efficiency=counts.true_positive / contacted if contacted > 0 else 0.0,
        savings=1.0 - contacted / total if total > 0 else float("nan"),
    )


def build_histogram(
    probabilities: np.ndarray,
    sample_cap: int = HISTOGRAM_SAMPLE_CAP,
) -> ProbabilityHistogram:
    """
    Bins the first `sample_cap` probabilities with `min(floor(p * 20), 19)`.

    The cap bounds rendering cost; it is a prefix of the population, not a
    random sample.
    """
    sample = np.nan_to_num(np.asarray(probabilities, dtype=np.float64)[:sample_cap])
    sample = np.clip(sample, 0.0, 1.0)
    bins = np.clip(np.floor(sample * HISTOGRAM_BINS).astype(np.int64), 0, HISTOGRAM_BINS - 1)
    counts = np.bincount(bins, minlength=HISTOGRAM_BINS)
    return ProbabilityHistogram(counts=tuple(int(c) for c in counts))


def evaluate(classifier: Classifier, dataset: MarketingDataset) -> EvaluationResult:
    """
    Evaluates a trained classifier on a held-out dataset.

    Args:
        classifier: Anything implementing `predict(features) -> float`.
        dataset: Encoded held-out population.

    Returns:
        EvaluationResult: Counts, metrics, efficiency and histogram.
    """
    probabilities = predict_probabilities(classifier, dataset)

    counts = compute_confusion(probabilities, dataset.labels)
    metrics = compute_metrics(counts)
    efficiency = compute_efficiency(counts)
    histogram = build_histogram(probabilities)

    logger.info(
        f"Evaluated {counts.total} records → "
        f"Acc: {metrics.accuracy:.4f} | P: {metrics.precision:.4f} | "
        f"R: {metrics.recall:.4f} | F1: {metrics.f1:.4f}"
    )
    return EvaluationResult(
        counts=counts,
        metrics=metrics,
        efficiency=efficiency,
        histogram=histogram,
    )
