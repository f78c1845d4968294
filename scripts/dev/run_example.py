from __future__ import annotations

import argparse
import logging
import sys
import tempfile
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from matplotlib.figure import Figure

sys.path.append(str(Path(__file__).resolve().parents[2] / "src"))

from html_report import HtmlReport, ReportConfig


DEFAULT_OUT = Path("build/dev_reports/spain")


def _pie_chart() -> Figure:
    fig = Figure()
    ax = fig.add_subplot(1, 1, 1)
    ax.pie([40.0, 40.2, 19.8], labels=["2-24", "25-34", "35+"], autopct="%1.1f%%")
    ax.set_title("Demographic Breakdown")
    return fig


def _population_chart() -> Figure:
    years = [1900, 1950, 2000, 2020]
    population_m = [18.6, 28.0, 40.5, 47.4]
    fig = Figure()
    ax = fig.add_subplot(1, 1, 1)
    ax.plot(years, population_m, marker="o")
    ax.set_xlabel("Year")
    ax.set_ylabel("Population (M)")
    ax.set_title("Population")
    ax.grid(True, alpha=0.3)
    return fig


def build_report(out_dir: Path) -> Path:
    report = HtmlReport(out_dir, config=ReportConfig(title="Spain"))

    report.add_header1("Spain")
    report.add_text(
        "Spain, officially the Kingdom of Spain, is a sovereign state largely located "
        "on the Iberian Peninsula in southwestern Europe."
    )
    report.add_bullet_points(["GDP: $1.6T", "Gini: 33.7", "HDI: 0.876"])

    report.add_header2("Cities")
    cities = [
        ["City", "Population"],
        ["Madrid", "3.2M"],
        ["Barcelona", "1.6M"],
        ["Valencia", "814K"],
    ]
    bold = [[True, True], [False, False], [False, False], [False, False]]
    red = [[False, False], [False, False], [False, False], [False, True]]
    green = [[False, False], [False, True], [False, False], [False, False]]
    report.add_table(cities, bold, red, green)

    report.add_header2("Demographics")
    report.add_chart(_pie_chart(), 400, 400, "Demographic Breakdown")
    report.add_chart(_population_chart(), 300, 600, "Population over time")
    report.add_horizontal_line()

    report.add_header2("Links")
    report.add_hyper_link("https://en.wikipedia.org/wiki/Spain", "Wikipedia", as_bullet=True)

    with tempfile.TemporaryDirectory() as tmp:
        notes = Path(tmp) / "notes.txt"
        notes.write_text("Capital: Madrid\n", encoding="utf-8")
        report.add_file_link(notes, "Notes", as_bullet=True)

    report.add_line_break(2)
    return report.finalize()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Write the demo HTML report."
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=DEFAULT_OUT,
        help="Output folder for the report (must not exist)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every element added",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    path = build_report(args.out)
    print(f"Wrote report to: {path}")


if __name__ == "__main__":
    main()
