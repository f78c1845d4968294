# src/html_report/render/html.py
"""
Markup fragments for the report body.

Text content (headings, paragraphs, bullets, cells, link labels) is inserted
as-is so callers can embed inline markup such as <i> or <code>. Attribute
values are always escaped.
"""

from __future__ import annotations

import html
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from html_report.domain.matrix import Matrix
from html_report.domain.styles import CellColor


def attr(value: Any) -> str:
    return html.escape(str(value), quote=True)


# -------------------------
# Document skeleton
# -------------------------

def document_open(title: str | None = None) -> str:
    title_tag = f" <title>{html.escape(title)}</title>" if title else ""
    return f'<!DOCTYPE html> <html> <head> <meta charset="utf-8">{title_tag} </head> <body>'


def document_close() -> str:
    return "</body> </html>"


# -------------------------
# Block elements
# -------------------------

def heading(level: int, text: str, *, color: str) -> str:
    if level not in (1, 2):
        raise ValueError(f"Header level must be 1 or 2. Got {level}")
    return f'<h{level} style="color:{attr(color)};">{text}</h{level}>'


def paragraph(text: str) -> str:
    return f"<p>{text}</p>"


def horizontal_line() -> str:
    return "<hr>"


def line_breaks(count: int) -> str:
    return "<br>" * count


def bullet_list(items: Iterable[str]) -> str:
    return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"


def link(href: str, label: str, *, as_bullet: bool) -> str:
    anchor = f'<a href="{attr(href)}"> {label} </a>'
    if as_bullet:
        return f"<li>{anchor}</li>"
    return anchor + "<br>"


def image(src: str, *, alt: str, height: int, width: int) -> str:
    return (
        f'<img src="{attr(src)}" alt="{attr(alt)}" '
        f'height="{int(height)}" width="{int(width)}"> <br>'
    )


# -------------------------
# Tables
# -------------------------

def table(
    cells: Matrix[Any],
    *,
    bold: NDArray[np.bool_],
    red: NDArray[np.bool_],
    green: NDArray[np.bool_],
) -> str:
    """Render a validated table; the masks must already have `cells.shape`."""
    parts = ['<table style="width:100%" border="1">']
    for r, row in enumerate(cells.rows):
        parts.append("<tr>")
        for c, value in enumerate(row):
            parts.append(_cell(str(value), bold=bool(bold[r, c]), color=_color(red[r, c], green[r, c])))
        parts.append("</tr>")
    parts.append("</table>")
    return "".join(parts)


def _color(red: bool, green: bool) -> CellColor | None:
    if red:
        return CellColor.RED
    if green:
        return CellColor.GREEN
    return None


def _cell(text: str, *, bold: bool, color: CellColor | None) -> str:
    if bold:
        text = f"<b>{text}</b>"
    if color is None:
        return f"<td>{text}</td>"
    return f'<td bgcolor="{color.value}">{text}</td>'
