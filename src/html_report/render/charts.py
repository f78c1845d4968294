from __future__ import annotations

import io
from typing import Any, Callable

from matplotlib.figure import Figure

ChartRenderer = Callable[[Any, int, int], bytes]


def chart_pixel_size(width: int, height: int, base_px: int = 500) -> tuple[int, int]:
    """Stored pixel size of a chart shown at `width` x `height`.

    The stored image is always `base_px` tall and keeps the display aspect
    ratio, so the file is sharp even when the <img> is shown small.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Chart display size must be > 0. Got {width}x{height}")
    ratio = float(width) / float(height)
    return max(1, int(base_px * ratio)), int(base_px)


def render_chart_png(
    chart: Figure,
    pixel_width: int,
    pixel_height: int,
    *,
    dpi: int = 100,
) -> bytes:
    """Rasterize a matplotlib figure to PNG bytes at an exact pixel size.

    The figure's own size is restored afterwards so callers can keep using it.
    """
    if not hasattr(chart, "savefig") or not hasattr(chart, "set_size_inches"):
        raise TypeError(f"Expected a matplotlib Figure, got {type(chart).__name__}")

    original = tuple(chart.get_size_inches())
    chart.set_size_inches(pixel_width / dpi, pixel_height / dpi)
    try:
        buf = io.BytesIO()
        # no bbox_inches="tight": it would change the pixel size
        chart.savefig(buf, format="png", dpi=dpi)
        return buf.getvalue()
    finally:
        chart.set_size_inches(*original)


def make_renderer(*, dpi: int = 100) -> ChartRenderer:
    def _render(chart: Any, pixel_width: int, pixel_height: int) -> bytes:
        return render_chart_png(chart, pixel_width, pixel_height, dpi=dpi)

    return _render
