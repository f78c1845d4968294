# src/html_report/report.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from html_report.assets.naming import chart_asset_name, file_link_asset_name
from html_report.assets.store import AssetStore
from html_report.config import ReportConfig
from html_report.domain.errors import AlreadyExistsError
from html_report.domain.matrix import Matrix, overlay_mask
from html_report.io.filesystem import FileSystem, LocalFileSystem
from html_report.render import html
from html_report.render.charts import ChartRenderer, chart_pixel_size, make_renderer


class HtmlReport:
    """
    Builds one self-contained HTML report folder:

      root_dir/
        report.html   (written by finalize())
        data/
          <charts and linked files>

    Create one object per report. The root folder must not exist yet; it is
    created together with all missing parents and the data subfolder.

    Every add_* call appends one fragment to the document body, in call
    order. Charts and file links are written to data/ immediately. A call
    that raises leaves the document exactly as it was.
    """

    def __init__(
        self,
        root_dir: str | Path,
        *,
        config: ReportConfig | None = None,
        chart_renderer: ChartRenderer | None = None,
        fs: FileSystem | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or ReportConfig()
        self._fs = fs or LocalFileSystem()
        self._log = logger or logging.getLogger(__name__)
        self._render_chart = chart_renderer or make_renderer(dpi=self._config.chart_dpi)

        root = Path(root_dir).absolute()
        if self._fs.exists(root):
            raise AlreadyExistsError(f"{root} already exists. Use a different folder.")

        data_dir = root / self._config.data_dir_name
        created = _topmost_missing(root, self._fs)
        try:
            self._fs.make_dirs(root)
            self._fs.make_dirs(data_dir)
        except OSError:
            # leave no half-built folder behind; remove only what we created
            if self._fs.exists(created):
                self._fs.remove_tree(created)
            raise
        self._log.info("Created report folder %s", root)

        self._root = root
        self._assets = AssetStore(data_dir, fs=self._fs)
        self._fragments: list[str] = []

    # -------------------------
    # Introspection
    # -------------------------

    @property
    def root_dir(self) -> Path:
        return self._root

    @property
    def data_dir(self) -> Path:
        return self._assets.data_dir

    @property
    def report_path(self) -> Path:
        return self._root / self._config.report_filename

    @property
    def config(self) -> ReportConfig:
        return self._config

    @property
    def fragments(self) -> Sequence[str]:
        return tuple(self._fragments)

    @property
    def assets(self) -> frozenset[str]:
        return self._assets.names

    # -------------------------
    # Text
    # -------------------------

    def add_header(self, level: int, text: str) -> None:
        fragment = html.heading(level, text, color=self._config.header_color)
        self._log.debug("Adding header%d.", level)
        self._fragments.append(fragment)

    def add_header1(self, text: str) -> None:
        self.add_header(1, text)

    def add_header2(self, text: str) -> None:
        self.add_header(2, text)

    def add_text(self, text: str) -> None:
        self._log.debug("Adding text.")
        self._fragments.append(html.paragraph(text))

    def add_horizontal_line(self) -> None:
        self._log.debug("Adding horizontal line.")
        self._fragments.append(html.horizontal_line())

    def add_line_break(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Line break count must be >= 0. Got {count}")
        if count == 0:
            return
        self._log.debug("Adding %d line break(s).", count)
        self._fragments.append(html.line_breaks(count))

    def add_bullet_points(self, items: Iterable[str]) -> None:
        self._log.debug("Adding bullet points.")
        self._fragments.append(html.bullet_list(list(items)))

    def add_hyper_link(self, url: str, label: str, as_bullet: bool = False) -> None:
        self._log.debug("Adding hyperlink: %s", label)
        self._fragments.append(html.link(url, label, as_bullet=as_bullet))

    # -------------------------
    # Tables
    # -------------------------

    def add_table(
        self,
        table: Sequence[Sequence[Any]],
        bold: Sequence[Sequence[bool]] | None = None,
        red: Sequence[Sequence[bool]] | None = None,
        green: Sequence[Sequence[bool]] | None = None,
    ) -> None:
        """
        Add a bordered, full-width table.

        bold/red/green are optional matrices of the same shape as `table`
        marking cells to render in bold, or with a red/green background.
        Red wins when a cell is marked both red and green.

        Overlay cells must be booleans (numpy bools and ints are accepted).

        Raises RaggedTableError, ShapeMismatchError or TypeError before
        anything is added.
        """
        self._log.debug("Adding table.")
        cells = Matrix.of(table, "table")
        bold_mask = overlay_mask(cells, bold, "bold")
        red_mask = overlay_mask(cells, red, "red")
        green_mask = overlay_mask(cells, green, "green")

        self._fragments.append(
            html.table(cells, bold=bold_mask, red=red_mask, green=green_mask)
        )

    # -------------------------
    # Assets
    # -------------------------

    def add_chart(self, chart: Any, height: int, width: int, unique_name: str) -> None:
        """
        Add a chart as a PNG image stored in data/.

        `height`/`width` are the displayed size. The stored image is rendered
        at the configured base resolution with the same aspect ratio.
        `unique_name` is used as the alt text; its lowercase alphanumeric
        characters name the file and must not collide with an earlier chart.
        """
        self._log.debug("Adding chart: %s", unique_name)
        name = chart_asset_name(unique_name)
        pixel_w, pixel_h = chart_pixel_size(width, height, self._config.chart_base_px)
        self._assets.ensure_available(name, requested=unique_name)

        png = self._render_chart(chart, pixel_w, pixel_h)
        src = self._assets.write_bytes(name, png, requested=unique_name)
        self._fragments.append(html.image(src, alt=unique_name, height=height, width=width))

    def add_file_link(
        self,
        source_path: str | Path,
        link_name: str,
        as_bullet: bool = False,
    ) -> None:
        """Copy a local file into data/ and link to the copy."""
        self._log.debug("Adding link: %s", link_name)
        source = Path(source_path)
        name = file_link_asset_name(link_name, source)
        href = self._assets.copy_in(source, name, requested=f"{link_name} ({source})")
        self._fragments.append(html.link(href, link_name, as_bullet=as_bullet))

    # -------------------------
    # Output
    # -------------------------

    def to_html(self) -> str:
        return "".join(
            [
                html.document_open(self._config.title),
                *self._fragments,
                html.document_close(),
            ]
        )

    def finalize(self) -> Path:
        """Write report.html and return its absolute path. Safe to call again."""
        path = self.report_path
        self._fs.write_text(path, self.to_html(), encoding=self._config.encoding)
        self._log.info("Wrote report to %s", path)
        return path


def _topmost_missing(path: Path, fs: FileSystem) -> Path:
    """Highest ancestor of `path` (or `path` itself) that does not exist yet."""
    top = path
    for parent in path.parents:
        if fs.exists(parent):
            break
        top = parent
    return top
