from __future__ import annotations

import numpy as np
import pytest

from html_report.domain.matrix import Matrix
from html_report.render import html


def test_heading_levels() -> None:
    assert html.heading(1, "Spain", color="blue") == '<h1 style="color:blue;">Spain</h1>'
    assert html.heading(2, "Cities", color="blue") == '<h2 style="color:blue;">Cities</h2>'


def test_heading_rejects_other_levels() -> None:
    with pytest.raises(ValueError):
        html.heading(3, "x", color="blue")


def test_bullet_list_order_and_empty() -> None:
    assert html.bullet_list(["b", "a"]) == "<ul><li>b</li><li>a</li></ul>"
    assert html.bullet_list([]) == "<ul></ul>"


def test_link_bullet_and_inline() -> None:
    assert html.link("http://x.org", "X", as_bullet=True) == '<li><a href="http://x.org"> X </a></li>'
    assert html.link("http://x.org", "X", as_bullet=False) == '<a href="http://x.org"> X </a><br>'


def test_link_escapes_href() -> None:
    out = html.link('http://x.org/?a=1&b="2"', "X", as_bullet=False)
    assert 'href="http://x.org/?a=1&amp;b=&quot;2&quot;"' in out


def test_image_attributes() -> None:
    out = html.image("data/pie.png", alt='Pie "2024"', height=300, width=400)
    assert out == '<img src="data/pie.png" alt="Pie &quot;2024&quot;" height="300" width="400"> <br>'


def test_table_red_wins_over_green() -> None:
    cells = Matrix.of([["x"]])
    true = np.ones((1, 1), dtype=bool)
    false = np.zeros((1, 1), dtype=bool)
    out = html.table(cells, bold=false, red=true, green=true)
    assert '<td bgcolor="red">x</td>' in out
    assert "green" not in out


def test_table_cells_are_stringified() -> None:
    cells = Matrix.of([[1, 2.5]])
    mask = np.zeros((1, 2), dtype=bool)
    out = html.table(cells, bold=mask, red=mask, green=mask)
    assert out == '<table style="width:100%" border="1"><tr><td>1</td><td>2.5</td></tr></table>'


def test_document_skeleton() -> None:
    assert html.document_open().startswith("<!DOCTYPE html> <html>")
    assert html.document_open().endswith("<body>")
    assert "<title>A &amp; B</title>" in html.document_open("A & B")
    assert html.document_close() == "</body> </html>"
