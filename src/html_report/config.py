from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportConfig:
    """Layout and rendering knobs for one report.

    Defaults reproduce the classic layout: `<root>/report.html` next to a
    `<root>/data/` folder, blue headings, charts stored 500 px tall.
    """

    data_dir_name: str = "data"
    report_filename: str = "report.html"
    header_color: str = "blue"
    title: str | None = None
    encoding: str = "utf-8"

    # Stored chart resolution, independent of the displayed <img> size.
    chart_base_px: int = 500
    chart_dpi: int = 100

    def __post_init__(self) -> None:
        if self.chart_base_px <= 0:
            raise ValueError(f"chart_base_px must be > 0. Got {self.chart_base_px}")
        if self.chart_dpi <= 0:
            raise ValueError(f"chart_dpi must be > 0. Got {self.chart_dpi}")
        for field_name in ("data_dir_name", "report_filename"):
            value = getattr(self, field_name)
            if not value or "/" in value or "\\" in value:
                raise ValueError(f"{field_name} must be a plain file name. Got {value!r}")
        if self.data_dir_name == self.report_filename:
            raise ValueError(
                f"data_dir_name and report_filename must differ. Got {self.data_dir_name!r} for both"
            )
