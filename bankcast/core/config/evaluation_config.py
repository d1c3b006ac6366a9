"""
Evaluation & Reporting Manifest.

Controls how the (fixed-layout) diagnostic artifacts are emitted. The decision
threshold and the report canvas geometry are not part of this manifest: they
are design constants of the evaluation protocol.
"""

import argparse

from pydantic import BaseModel, ConfigDict, Field

from .types import Dpi, ReportFormat


class EvaluationConfig(BaseModel):
    """
    Output policy for the evaluation phase.

    Attributes:
        fig_dpi: Rendering DPI. The figure size is derived from it so that
            the saved image is always 1200x800 pixels.
        report_format: Structured summary format ('xlsx', 'csv', 'json').
        text_only: Skip the raster report (headless or minimal environments).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    fig_dpi: Dpi = Field(default=100, description="Raster report DPI")
    report_format: ReportFormat = Field(default="xlsx", description="Summary format")
    text_only: bool = Field(default=False, description="Skip raster rendering")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "EvaluationConfig":
        args_dict = vars(args)
        valid_fields = cls.model_fields.keys()
        params = {k: v for k, v in args_dict.items() if k in valid_fields and v is not None}
        return cls(**params)
