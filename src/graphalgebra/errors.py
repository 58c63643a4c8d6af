from __future__ import annotations

from typing import Optional


class GraphError(Exception):
    """
    Base class for every error raised by the graph algebra engine.
    """


class ValidationError(GraphError, ValueError):
    """
    A matrix or edge violates a structural invariant.

    ``row`` and ``column`` locate the offending cell when one exists.
    """

    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class ShapeMismatchError(GraphError, ValueError):
    """
    Two operands differ in vertex count or directedness.
    """


class IndexOutOfRangeError(GraphError, IndexError):
    """
    A vertex index lies outside ``[0, vertex_count)``.
    """


class DivideByZeroError(GraphError, ZeroDivisionError):
    """
    A graph was divided by a zero scalar.
    """


class WeightOverflowError(GraphError, OverflowError):
    """
    An operation produced a weight outside the storable range.

    ``row`` and ``column`` locate the first cell that overflowed.
    """

    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column
