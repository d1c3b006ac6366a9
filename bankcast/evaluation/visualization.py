"""
Visualization Utilities Module

Renders the single-page prediction dashboard for a finished evaluation:

    * title banner,
    * 2×2 confusion matrix (correct cells green, errors pink),
    * 20-bin probability histogram with a red→green gradient,
    * metric panel with progress bars and campaign efficiency lines.

The figure is laid out on a fixed 1200×800 pixel canvas: a single axes spans
the whole figure with an inverted y-axis, so every element is positioned in
pixel coordinates measured from the top-left corner. Font sizes are given in
pixels and converted to points for the requested DPI.

Rendering only reads an `EvaluationResult`; it never queries the classifier.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import math
from pathlib import Path
from typing import Optional, Tuple

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import matplotlib
matplotlib.use("Agg")  # Use non-interactive backend for headless environments
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.paths import LOGGER_NAME
from .engine import HISTOGRAM_BINS, EvaluationResult

logger = logging.getLogger(LOGGER_NAME)

Color = Tuple[float, ...]

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 800

REPORT_TITLE = "ANÁLISE DE PREDIÇÃO - CAMPANHA BANCÁRIA"

CORRECT_CELL = (144 / 255, 238 / 255, 144 / 255)
ERROR_CELL = (255 / 255, 182 / 255, 193 / 255)
METRIC_GOOD = (0.0, 150 / 255, 0.0)
METRIC_FAIR = (1.0, 165 / 255, 0.0)
METRIC_POOR = (200 / 255, 0.0, 0.0)
BAR_BACKGROUND = (192 / 255, 192 / 255, 192 / 255)

MATRIX_ORIGIN = (50, 80)
MATRIX_CELL = 120
HISTOGRAM_ORIGIN = (400, 100)
HISTOGRAM_SIZE = (700, 300)
METRICS_ORIGIN = (50, 450)
METRICS_LINE_HEIGHT = 25
PROGRESS_BAR_SIZE = (200, 15)


# =========================================================================== #
#                               COLOR HELPERS                                 #
# =========================================================================== #

def metric_color(value: float) -> Color:
    """Dark green at >= 0.8, orange at >= 0.6, red otherwise."""
    if value >= 0.8:
        return METRIC_GOOD
    if value >= 0.6:
        return METRIC_FAIR
    return METRIC_POOR


def histogram_bar_color(index: int) -> Color:
    """Linear red→green gradient across the bins, 70% opaque."""
    ratio = index / (HISTOGRAM_BINS - 1)
    return (1.0 - ratio, ratio, 0.0, 0.7)


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


# =========================================================================== #
#                               DRAWING PRIMITIVES                            #
# =========================================================================== #

class _PixelCanvas:
    """Thin wrapper translating pixel units onto a full-figure axes."""

    def __init__(self, ax: Axes, dpi: int):
        self.ax = ax
        self.dpi = dpi

    def text(self, x: float, y: float, label: str, size_px: int,
             bold: bool = False, color: Color = (0.0, 0.0, 0.0), ha: str = "left") -> None:
        self.ax.text(
            x, y, label,
            fontsize=size_px * 72 / self.dpi,
            fontweight="bold" if bold else "normal",
            color=color,
            ha=ha,
            va="baseline",
        )

    def rect(self, x: float, y: float, width: float, height: float,
             fill: Optional[Color] = None, edge: bool = True) -> None:
        if fill is not None:
            self.ax.add_patch(Rectangle((x, y), width, height, facecolor=fill, edgecolor="none"))
        if edge:
            self.ax.add_patch(Rectangle((x, y), width, height, fill=False, edgecolor="black", linewidth=1))

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.ax.plot([x0, x1], [y0, y1], color="black", linewidth=1)


# =========================================================================== #
#                               REPORT SECTIONS                               #
# =========================================================================== #

def _draw_confusion_matrix(canvas: _PixelCanvas, result: EvaluationResult) -> None:
    x, y = MATRIX_ORIGIN
    cell = MATRIX_CELL
    counts = result.counts

    canvas.text(x, y - 20, "MATRIZ DE CONFUSÃO", 16, bold=True)

    canvas.text(x + cell, y - 5, "Previsto", 14, bold=True)
    canvas.text(x + cell / 2, y + 15, "NÃO", 14, bold=True)
    canvas.text(x + cell + cell / 2, y + 15, "SIM", 14, bold=True)
    canvas.text(x - 40, y + cell / 2, "Real", 14, bold=True)
    canvas.text(x - 30, y + cell / 2 + 20, "NÃO", 14, bold=True)
    canvas.text(x - 30, y + cell + cell / 2 + 20, "SIM", 14, bold=True)

    # (row, column, value, fill): rows are actual NO/YES, columns predicted NO/YES
    cells = (
        (0, 0, counts.true_negative, CORRECT_CELL),
        (0, 1, counts.false_positive, ERROR_CELL),
        (1, 0, counts.false_negative, ERROR_CELL),
        (1, 1, counts.true_positive, CORRECT_CELL),
    )
    top = y + 30
    for row, col, value, fill in cells:
        cx, cy = x + col * cell, top + row * cell
        canvas.rect(cx, cy, cell, cell, fill=fill)
        canvas.text(cx + cell / 2 - 20, cy + cell / 2 + 5, str(value), 18, bold=True)


def _draw_histogram(canvas: _PixelCanvas, result: EvaluationResult) -> None:
    x, y = HISTOGRAM_ORIGIN
    width, height = HISTOGRAM_SIZE
    histogram = result.histogram

    canvas.text(x, y - 20, "DISTRIBUIÇÃO DE PROBABILIDADES", 16, bold=True)

    canvas.line(x, y + height, x + width, y + height)
    canvas.line(x, y, x, y + height)
    canvas.text(x + width / 2 - 30, y + height + 20, "Probabilidade", 12)
    canvas.text(x - 60, y + height / 2, "Frequência", 12)

    max_count = histogram.max_count
    bar_width = width // HISTOGRAM_BINS
    for i, count in enumerate(histogram.counts):
        bar_height = int(count / max_count * height) if max_count > 0 else 0
        bar_x = x + i * bar_width
        bar_y = y + height - bar_height
        canvas.rect(bar_x, bar_y, bar_width - 1, bar_height, fill=histogram_bar_color(i))

    for i in range(11):
        tick_x = x + i * (width // 10)
        canvas.line(tick_x, y + height, tick_x, y + height + 5)
        canvas.text(tick_x - 5, y + height + 18, f"{i / 10:.1f}", 12)


def _draw_progress_bar(canvas: _PixelCanvas, x: float, y: float, value: float, color: Color) -> None:
    bar_width, bar_height = PROGRESS_BAR_SIZE
    fill_width = int(min(max(_finite(value), 0.0), 1.0) * bar_width)

    canvas.rect(x, y, bar_width, bar_height, fill=BAR_BACKGROUND, edge=False)
    if fill_width > 0:
        canvas.rect(x, y, fill_width, bar_height, fill=color, edge=False)
    canvas.rect(x, y, bar_width, bar_height)


def _draw_metrics(canvas: _PixelCanvas, result: EvaluationResult) -> None:
    x, y = METRICS_ORIGIN
    metrics = result.metrics
    efficiency = result.efficiency

    canvas.text(x, y, "MÉTRICAS DE DESEMPENHO", 18, bold=True)

    current_y = y + 30
    rows = (
        ("Acurácia:  ", metrics.accuracy),
        ("Precisão:  ", metrics.precision),
        ("Revocação: ", metrics.recall),
        ("F1 Score:  ", metrics.f1),
    )
    for label, value in rows:
        current_y += METRICS_LINE_HEIGHT
        color = metric_color(value)
        canvas.text(x, current_y, f"{label}{value * 100:.2f}%", 14, bold=True, color=color)
        _draw_progress_bar(canvas, x + 200, current_y - 10, value, color)

    current_y += METRICS_LINE_HEIGHT * 2
    canvas.text(x, current_y, "ANÁLISE DE EFICIÊNCIA", 16, bold=True)

    # Conversion rate is the share of contacted clients that subscribe
    lines = (
        f"• Clientes contactados: {efficiency.contacted} (em vez de {efficiency.total})",
        f"• Taxa de conversão: {metrics.precision * 100:.2f}%",
        f"• Economia de contactos: {efficiency.savings * 100:.2f}%",
    )
    current_y += 20
    for line in lines:
        canvas.text(x, current_y, line, 12)
        current_y += 15


# =========================================================================== #
#                               PUBLIC API                                    #
# =========================================================================== #

def render_report(result: EvaluationResult, dpi: int = 100) -> Figure:
    """
    Draws the dashboard for an evaluation result.

    Args:
        result (EvaluationResult): Computed counts, metrics and histogram.
        dpi (int): Resolution used to map the 1200×800 pixel layout.

    Returns:
        Figure: The populated figure. Callers own it and must close it.
    """
    fig = plt.figure(figsize=(CANVAS_WIDTH / dpi, CANVAS_HEIGHT / dpi), dpi=dpi, facecolor="white")
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0, CANVAS_WIDTH)
    ax.set_ylim(CANVAS_HEIGHT, 0)
    ax.axis("off")

    canvas = _PixelCanvas(ax, dpi)
    canvas.text(CANVAS_WIDTH / 2, 30, REPORT_TITLE, 24, bold=True, ha="center")
    _draw_confusion_matrix(canvas, result)
    _draw_histogram(canvas, result)
    _draw_metrics(canvas, result)
    return fig


def save_report_image(result: EvaluationResult, out_path: Path, dpi: int = 100) -> Optional[Path]:
    """
    Renders the dashboard and writes it as a PNG.

    A failed write is logged and reported as `None`; it never invalidates the
    evaluation that was already computed.

    Returns:
        Optional[Path]: The written file, or None if the write failed.
    """
    fig = render_report(result, dpi=dpi)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=dpi, format="png", facecolor="white")
    except OSError as e:
        logger.error(f"Could not save visualization to {out_path}: {e}")
        return None
    finally:
        plt.close(fig)

    logger.info(f"Visualization saved → {out_path.name} (DPI: {dpi})")
    return out_path
