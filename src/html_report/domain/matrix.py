from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from html_report.domain.errors import RaggedTableError, ShapeMismatchError

T = TypeVar("T")


def column_count(matrix: Sequence[Sequence[Any]], label: str = "table") -> int:
    """Return the shared row length of `matrix`.

    Raises RaggedTableError if the matrix has no rows or if any two rows
    differ in length.
    """
    lengths = {len(row) for row in matrix}
    if len(lengths) != 1:
        if not lengths:
            raise RaggedTableError(f"{label} has no rows.")
        raise RaggedTableError(
            f"{label} has rows of different lengths: {sorted(lengths)}."
        )
    return lengths.pop()


def assert_shape_matches(
    base: Sequence[Sequence[Any]],
    overlay: Sequence[Sequence[Any]] | None,
    overlay_label: str,
) -> None:
    if overlay is None:
        return
    if len(base) != len(overlay):
        raise ShapeMismatchError(
            f"{overlay_label} has {len(overlay)} rows, table has {len(base)}."
        )
    n_cols = column_count(base, "table")
    overlay_cols = column_count(overlay, overlay_label)
    if n_cols != overlay_cols:
        raise ShapeMismatchError(
            f"{overlay_label} has {overlay_cols} columns, table has {n_cols}."
        )


@dataclass(frozen=True)
class Matrix(Generic[T]):
    """Rectangular matrix; the column count is recorded once and holds for every row."""

    rows: tuple[tuple[T, ...], ...]
    n_cols: int

    @classmethod
    def of(cls, rows: Sequence[Sequence[T]], label: str = "table") -> Matrix[T]:
        n_cols = column_count(rows, label)
        return cls(rows=tuple(tuple(r) for r in rows), n_cols=n_cols)

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_cols)


def overlay_mask(
    base: Matrix[Any],
    overlay: Sequence[Sequence[Any]] | None,
    overlay_label: str,
) -> NDArray[np.bool_]:
    """Validate `overlay` against `base` and return it as a boolean mask.

    A missing overlay becomes an all-False mask of the table's shape.
    """
    if overlay is None:
        return np.zeros(base.shape, dtype=bool)
    assert_shape_matches(base.rows, overlay, overlay_label)
    mask = np.asarray(
        [[_flag(v, overlay_label) for v in row] for row in overlay], dtype=bool
    )
    return mask.reshape(base.shape)


def _flag(value: Any, overlay_label: str) -> bool:
    # Strings such as "False" would otherwise count as set.
    if not isinstance(value, (bool, int, np.bool_, np.integer)):
        raise TypeError(
            f"{overlay_label} cells must be booleans. Got {type(value).__name__} {value!r}"
        )
    return bool(value)
