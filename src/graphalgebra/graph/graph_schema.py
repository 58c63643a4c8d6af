from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import numpy as np

from graphalgebra.errors import ValidationError, WeightOverflowError

# Cell value meaning "no edge". Zero is also the only legal diagonal value.
NO_EDGE = 0

WEIGHT_DTYPE = np.int64
WEIGHT_MIN = int(np.iinfo(WEIGHT_DTYPE).min)
WEIGHT_MAX = int(np.iinfo(WEIGHT_DTYPE).max)

Matrix = List[List[int]]


@dataclass(frozen=True)
class Edge:
    """
    Weighted edge between two vertex indices.
    """

    source: int
    target: int
    weight: int = 1

    def mirrored(self) -> "Edge":
        return Edge(
            source=self.target,
            target=self.source,
            weight=self.weight,
        )


def as_weight(
    value: Any,
    *,
    row: Optional[int] = None,
    column: Optional[int] = None,
) -> int:
    """
    Coerce a cell value to an integer weight.

    Integral floats (``2.0``) are accepted; booleans, fractional
    numbers, non-numeric values and integers outside
    ``[WEIGHT_MIN, WEIGHT_MAX]`` are rejected.
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(
            f"Invalid weight {value!r} at ({row}, {column}): booleans are not weights.",
            row=row,
            column=column,
        )
    if isinstance(value, (int, np.integer)):
        weight = int(value)
    elif isinstance(value, (float, np.floating)) and float(value).is_integer():
        weight = int(value)
    else:
        raise ValidationError(
            f"Invalid weight {value!r} at ({row}, {column}): weights must be integers.",
            row=row,
            column=column,
        )

    if not WEIGHT_MIN <= weight <= WEIGHT_MAX:
        raise ValidationError(
            f"Invalid weight {weight} at ({row}, {column}): weights must lie in "
            f"[{WEIGHT_MIN}, {WEIGHT_MAX}].",
            row=row,
            column=column,
        )
    return weight


def narrow_weights(values: np.ndarray, *, op: str) -> np.ndarray:
    """
    Convert an exact (object dtype) result matrix back to weights.

    Raises WeightOverflowError naming the first cell outside the
    storable range.
    """
    outside = np.argwhere(((values < WEIGHT_MIN) | (values > WEIGHT_MAX)).astype(bool))
    if outside.size:
        i, j = (int(x) for x in outside[0])
        raise WeightOverflowError(
            f"Cannot {op}: the weight at ({i}, {j}) would be {values[i, j]}, "
            f"outside [{WEIGHT_MIN}, {WEIGHT_MAX}].",
            row=i,
            column=j,
        )
    return values.astype(WEIGHT_DTYPE)


def as_matrix(rows: Sequence[Sequence[Any]]) -> np.ndarray:
    """
    Convert a nested sequence into a square integer weight matrix.

    Raises ValidationError naming the first row that breaks squareness
    or the first cell that is not an integer weight.
    """
    try:
        materialized = [list(row) for row in rows]
    except TypeError as exc:
        raise ValidationError(
            "Invalid graph: every row of the matrix must be a sequence."
        ) from exc

    size = len(materialized)
    for i, row in enumerate(materialized):
        if len(row) != size:
            raise ValidationError(
                f"Invalid graph: the matrix is not square "
                f"(row {i} has {len(row)} elements, expected {size}).",
                row=i,
            )

    cells = [
        [as_weight(value, row=i, column=j) for j, value in enumerate(row)]
        for i, row in enumerate(materialized)
    ]
    return np.array(cells, dtype=WEIGHT_DTYPE).reshape(size, size)
