from html_report.config import ReportConfig
from html_report.domain.errors import (
    AlreadyExistsError,
    DuplicateAssetError,
    HtmlReportError,
    InvalidAssetNameError,
    RaggedTableError,
    ShapeMismatchError,
    SourceNotFoundError,
)
from html_report.domain.matrix import Matrix, assert_shape_matches, column_count
from html_report.render.charts import render_chart_png
from html_report.report import HtmlReport

__all__ = [
    "AlreadyExistsError",
    "DuplicateAssetError",
    "HtmlReport",
    "HtmlReportError",
    "InvalidAssetNameError",
    "Matrix",
    "RaggedTableError",
    "ReportConfig",
    "ShapeMismatchError",
    "SourceNotFoundError",
    "assert_shape_matches",
    "column_count",
    "render_chart_png",
]
