from __future__ import annotations

import struct

import pytest
from matplotlib.figure import Figure

from html_report.render.charts import chart_pixel_size, make_renderer, render_chart_png


def _png_size(png: bytes) -> tuple[int, int]:
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    # IHDR chunk: width and height right after the chunk type
    return struct.unpack(">II", png[16:24])


def _line_figure() -> Figure:
    fig = Figure(figsize=(3.0, 2.0))
    ax = fig.add_subplot(1, 1, 1)
    ax.plot([0, 1, 2], [0, 1, 4])
    return fig


def test_pixel_size_keeps_display_aspect_ratio() -> None:
    assert chart_pixel_size(width=800, height=400) == (1000, 500)
    assert chart_pixel_size(width=400, height=400) == (500, 500)
    assert chart_pixel_size(width=200, height=400, base_px=300) == (150, 300)


def test_pixel_size_ignores_display_scale() -> None:
    assert chart_pixel_size(width=40, height=20) == chart_pixel_size(width=4000, height=2000)


@pytest.mark.parametrize("width, height", [(0, 100), (100, 0), (-5, 10)])
def test_pixel_size_rejects_non_positive(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        chart_pixel_size(width=width, height=height)


def test_render_chart_png_exact_pixel_size() -> None:
    png = render_chart_png(_line_figure(), 1000, 500)
    assert _png_size(png) == (1000, 500)


def test_render_chart_png_restores_figure_size() -> None:
    fig = _line_figure()
    render_chart_png(fig, 500, 500)
    assert tuple(fig.get_size_inches()) == (3.0, 2.0)


def test_make_renderer_uses_dpi() -> None:
    render = make_renderer(dpi=50)
    assert _png_size(render(_line_figure(), 200, 100)) == (200, 100)


def test_render_chart_png_rejects_non_figures() -> None:
    with pytest.raises(TypeError):
        render_chart_png(object(), 10, 10)
