from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


def matrices_equal(a: np.ndarray, b: np.ndarray) -> bool:
    return a.shape == b.shape and bool(np.array_equal(a, b))


def is_submatrix(sub: np.ndarray, matrix: np.ndarray) -> bool:
    """
    True when ``sub`` appears as a contiguous, aligned square block of
    ``matrix``.

    Brute force over every offset; fine for the small matrices this
    library targets.
    """
    n = sub.shape[0]
    if n > matrix.shape[0]:
        return False
    if n == 0:
        return True

    windows = sliding_window_view(matrix, (n, n))
    return bool(np.any(np.all(windows == sub, axis=(2, 3))))
