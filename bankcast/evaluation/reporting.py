"""
Reporting & Experiment Summarization Module

Turns an `EvaluationResult` into human-readable artifacts:

    * format_text_report: the console summary. It carries the same panels
      as the raster dashboard (confusion matrix, probability distribution,
      metrics, campaign efficiency) plus the marketing interpretation, with
      ratios at 4 decimals and percentages at 2 decimals.
    * EvaluationReport: a frozen container aggregating run metadata,
      hyperparameters and final metrics, exported as a vertical table to
      Excel (xlsxwriter styling), CSV or JSON.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import pandas as pd

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core import Config
from ..core.paths import LOGGER_NAME
from ..trainer import TrainingHistory
from .engine import EvaluationResult, ProbabilityHistogram

logger = logging.getLogger(LOGGER_NAME)


# =========================================================================== #
#                               TEXT REPORT                                   #
# =========================================================================== #

def format_histogram_lines(histogram: ProbabilityHistogram) -> list[str]:
    """One line per bin: its probability range and count; the last range is closed."""
    edges = histogram.bin_edges()
    last = len(histogram.counts) - 1
    return [
        f"[{edges[i]:.2f}, {edges[i + 1]:.2f}{']' if i == last else ')'}: {count:5d}"
        for i, count in enumerate(histogram.counts)
    ]


def format_text_report(result: EvaluationResult) -> str:
    """
    Renders the evaluation as the plain-text console summary.

    Args:
        result (EvaluationResult): Computed evaluation outcome.

    Returns:
        str: Multi-line report, sections separated by blank lines.
    """
    c = result.counts
    m = result.metrics
    e = result.efficiency

    lines = [
        "MATRIZ DE CONFUSÃO:",
        "                 Previsto",
        "                NÃO    SIM",
        f"Real    NÃO   {c.true_negative:5d}  {c.false_positive:5d}",
        f"        SIM   {c.false_negative:5d}  {c.true_positive:5d}",
        "",
        f"DISTRIBUIÇÃO DE PROBABILIDADES ({result.histogram.sample_count} amostras):",
        *format_histogram_lines(result.histogram),
        "",
        "MÉTRICAS DE DESEMPENHO:",
        f"Acurácia:  {m.accuracy:.4f} ({m.accuracy * 100:.2f}%)",
        f"Precisão:  {m.precision:.4f} ({m.precision * 100:.2f}%)",
        f"Revocação: {m.recall:.4f} ({m.recall * 100:.2f}%)",
        f"F1 Score:  {m.f1:.4f} ({m.f1 * 100:.2f}%)",
        "",
        "INTERPRETAÇÃO PARA CAMPANHA DE MARKETING:",
        f"- Acurácia: {m.accuracy * 100:.2f}% dos clientes são classificados corretamente",
        f"- Precisão: {m.precision * 100:.2f}% dos clientes identificados como 'SIM' "
        "realmente farão aplicação",
        f"- Revocação: {m.recall * 100:.2f}% dos clientes que farão aplicação "
        "são identificados corretamente",
        f"- F1 Score: {m.f1 * 100:.2f}% - métrica balanceada entre precisão e revocação",
        "",
        "ANÁLISE DE EFICIÊNCIA DA CAMPANHA:",
        f"- Clientes contactados: {e.contacted}",
        f"- Clientes que farão aplicação: {e.converted}",
        f"- Eficiência da campanha: {e.efficiency * 100:.2f}%",
        f"- Economia: Com este modelo, você pode focar em {e.contacted} clientes",
        f"  em vez de contactar todos os {e.total} clientes do dataset",
        f"- Economia de contactos: {e.savings * 100:.2f}%",
    ]
    return "\n".join(lines)


def save_text_report(result: EvaluationResult, path: Path) -> Path:
    """Writes `format_text_report` output as UTF-8 text."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_text_report(result) + "\n", encoding="utf-8")
    logger.info(f"Text report saved → {path.name}")
    return path


# =========================================================================== #
#                               STRUCTURED SUMMARY                            #
# =========================================================================== #

@dataclass(frozen=True)
class EvaluationReport:
    """
    Structured summary of one train/evaluate run.

    Provides a vertical DataFrame representation optimized for readability
    in spreadsheet software.
    """
    timestamp: str
    dataset: str
    train_path: str
    test_path: str
    records_evaluated: int
    true_positive: int
    false_positive: int
    true_negative: int
    false_negative: int
    accuracy: float
    precision: float
    recall: float
    f1: float
    contacted: int
    campaign_efficiency: float
    contact_savings: float
    probability_histogram: str
    iterations_trained: Optional[int]
    converged: Optional[bool]
    final_error: Optional[float]
    learning_rate: float
    max_error: float
    batch_size: int
    hidden_layers: str
    model_path: str
    log_path: str
    seed: int

    def to_vertical_df(self) -> pd.DataFrame:
        """Converts the report dataclass into a vertical pandas DataFrame."""
        data = asdict(self)
        return pd.DataFrame(list(data.items()), columns=["Parameter", "Value"])

    def save(self, path: Path, fmt: str = "xlsx") -> Path:
        """
        Saves the report in the requested format.

        Args:
            path (Path): Destination file.
            fmt (str): One of 'xlsx', 'csv' or 'json'.

        Raises:
            ValueError: For an unsupported format.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        df = self.to_vertical_df()

        if fmt == "xlsx":
            self._save_excel(df, path)
        elif fmt == "csv":
            df.to_csv(path, index=False)
        elif fmt == "json":
            df.to_json(path, orient="records", indent=2, force_ascii=False)
        else:
            raise ValueError(f"Unsupported report format: {fmt}")

        logger.info(f"Summary report saved → {path}")
        return path

    @staticmethod
    def _save_excel(df: pd.DataFrame, path: Path) -> None:
        with pd.ExcelWriter(path, engine="xlsxwriter") as writer:
            df.to_excel(writer, sheet_name="Evaluation", index=False)

            workbook = writer.book
            worksheet = writer.sheets["Evaluation"]

            header_format = workbook.add_format({
                "bold": True, "bg_color": "#D7E4BC", "border": 1, "align": "center"
            })
            base_format = workbook.add_format({
                "border": 1, "align": "left", "valign": "vcenter"
            })
            wrap_format = workbook.add_format({
                "border": 1, "text_wrap": True, "valign": "top", "font_size": 10
            })

            worksheet.set_column("A:A", 25, base_format)
            worksheet.set_column("B:B", 60, wrap_format)

            for col_num, value in enumerate(df.columns.values):
                worksheet.write(0, col_num, value, header_format)


def create_evaluation_report(
    result: EvaluationResult,
    cfg: Config,
    model_path: Path,
    log_path: Path,
    history: Optional[TrainingHistory] = None,
) -> EvaluationReport:
    """
    Constructs an EvaluationReport from the result and the run configuration.

    `history` is None when the network was restored instead of trained.
    """
    c = result.counts
    m = result.metrics
    e = result.efficiency

    return EvaluationReport(
        timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        dataset=cfg.dataset.dataset_name,
        train_path=str(cfg.dataset.train_path),
        test_path=str(cfg.dataset.test_path),
        records_evaluated=c.total,
        true_positive=c.true_positive,
        false_positive=c.false_positive,
        true_negative=c.true_negative,
        false_negative=c.false_negative,
        accuracy=m.accuracy,
        precision=m.precision,
        recall=m.recall,
        f1=m.f1,
        contacted=e.contacted,
        campaign_efficiency=e.efficiency,
        contact_savings=e.savings,
        probability_histogram=", ".join(str(n) for n in result.histogram.counts),
        iterations_trained=history.iterations if history else None,
        converged=history.converged if history else None,
        final_error=history.final_error if history else None,
        learning_rate=cfg.training.learning_rate,
        max_error=cfg.training.max_error,
        batch_size=cfg.training.batch_size,
        hidden_layers=" → ".join(str(w) for w in cfg.training.hidden_layers),
        model_path=str(model_path),
        log_path=str(log_path),
        seed=cfg.training.seed,
    )
