from __future__ import annotations

from enum import StrEnum


class CellColor(StrEnum):
    """Table cell background colors, in precedence order."""

    RED = "red"
    GREEN = "green"
