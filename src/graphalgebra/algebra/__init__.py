"""
Graph algebra.

Pure operators over graphs. Every operator returns a new graph except
the prefix increment/decrement forms, which update their operand in
place and return it.
"""

from graphalgebra.algebra.operators import (
    add,
    subtract,
    identity,
    negate,
    increment,
    decrement,
    post_increment,
    post_decrement,
    multiply_by_scalar,
    divide_by_scalar,
)
from graphalgebra.algebra.product import multiply

__all__ = [
    "add",
    "subtract",
    "multiply",
    "identity",
    "negate",
    "increment",
    "decrement",
    "post_increment",
    "post_decrement",
    "multiply_by_scalar",
    "divide_by_scalar",
]
